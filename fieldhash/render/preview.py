# ==============================================================================
# Файл: fieldhash/render/preview.py
# Назначение: Простейший потребитель ядра: хеш координат -> HSL -> ARGB -> PNG.
# ==============================================================================
from __future__ import annotations
import logging
import time

import numpy as np

from ..core.export.image_exporters import write_argb_png
from ..core.preset.model import PreviewPreset
from ..numerics.color import hsl_to_rgb_grid, pack_argb_grid
from ..numerics.fast_hash import unit_hash_grid
from .sampling import coordinate_grid

logger = logging.getLogger(__name__)
if not logger.handlers:
    logging.basicConfig(level=logging.INFO, format='  -> [%(levelname)s] %(message)s')


def render_hash_preview(preset: PreviewPreset) -> np.ndarray:
    """Рендерит поле хеш-шума в буфер uint32 ARGB8888 формы (height, width)."""
    t_start = time.perf_counter()

    values = unit_hash_grid(*coordinate_grid(preset))
    if preset.channel == "lightness":
        h = preset.hue_shift
        l = values
    else:
        h = values + preset.hue_shift
        l = preset.lightness

    r, g, b = hsl_to_rgb_grid(h, preset.saturation, l)
    buffer = pack_argb_grid(r, g, b, preset.alpha)

    logger.info(
        f"Превью '{preset.id}' {preset.width}x{preset.height} "
        f"({preset.dimensions}D, канал {preset.channel}) "
        f"за {(time.perf_counter() - t_start) * 1000:.1f} мс."
    )
    return buffer


def save_hash_preview(preset: PreviewPreset, path: str) -> np.ndarray:
    buffer = render_hash_preview(preset)
    write_argb_png(path, buffer, verbose=True)
    return buffer
