# fieldhash/render/sampling.py
from __future__ import annotations
from typing import List

import numpy as np

from ..core.preset.model import PreviewPreset


def coordinate_grid(preset: PreviewPreset) -> List[np.ndarray]:
    """Координаты пикселей для хеша: [x, y] плюс константные z, t по preset.dimensions.

    Массивы float64 формы (height, width); x растет вправо, y вниз.
    """
    xs = preset.origin_x + np.arange(preset.width, dtype=np.float64) * preset.scale
    ys = preset.origin_y + np.arange(preset.height, dtype=np.float64) * preset.scale
    coords_x, coords_y = np.meshgrid(xs, ys)

    coords = [coords_x, coords_y]
    if preset.dimensions >= 3:
        coords.append(np.full_like(coords_x, preset.z))
    if preset.dimensions == 4:
        coords.append(np.full_like(coords_x, preset.t))
    return coords[:preset.dimensions]
