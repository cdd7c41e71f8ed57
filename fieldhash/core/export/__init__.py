# ==============================================================================
# Файл: fieldhash/core/export/__init__.py
# Назначение: Точка входа в пакет для экспорта изображений.
# ==============================================================================
from __future__ import annotations

from .image_exporters import argb_to_image, image_to_argb, new_image, write_argb_png

__all__ = [
    "new_image",
    "argb_to_image",
    "image_to_argb",
    "write_argb_png",
]
