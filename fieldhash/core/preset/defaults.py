# ========================
# file: fieldhash/core/preset/defaults.py
# ========================
from __future__ import annotations
from typing import Any, Dict

CURRENT_PRESET_VERSION = 1

DEFAULT_PREVIEW_PRESET: Dict[str, Any] = {
    "id": "preview/base_default",
    "version": CURRENT_PRESET_VERSION,
    "width": 256,
    "height": 256,
    # координата центра левого верхнего пикселя и шаг сетки
    "origin_x": 0.0,
    "origin_y": 0.0,
    "scale": 1.0,
    # сколько осей уходит в хеш: x, y, затем константы z и t
    "dimensions": 2,
    "z": 0.0,
    "t": 0.0,
    "saturation": 1.0,
    "lightness": 0.5,
    "alpha": 1.0,
    "hue_shift": 0.0,
    # какой канал HSL получает значение хеша: "hue" или "lightness"
    "channel": "hue",
}
