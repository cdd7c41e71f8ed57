# ==============================================================================
# Файл: fieldhash/core/export/image_exporters.py
# Назначение: Буферы ARGB8888 <-> изображения Pillow, сохранение PNG.
# ==============================================================================
from __future__ import annotations
import logging
import os
import time
from pathlib import Path

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)
if not logger.handlers:
    logging.basicConfig(level=logging.INFO, format='  -> [%(levelname)s] %(message)s')


def _ensure_path_exists(path: str) -> None:
    """Убеждается, что директория для файла существует."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)


def new_image(width: int, height: int) -> np.ndarray:
    """Create a new blank (fully transparent) ARGB buffer of shape (height, width)."""
    return np.zeros((height, width), dtype=np.uint32)


def argb_to_image(buffer: np.ndarray) -> Image.Image:
    """Конвертирует 2D-буфер uint32 ARGB8888 в RGBA-изображение Pillow."""
    argb = np.asarray(buffer, dtype=np.uint32)
    if argb.ndim != 2:
        raise ValueError(f"ARGB buffer must be 2D, got shape {argb.shape}")
    rgba = np.empty(argb.shape + (4,), dtype=np.uint8)
    rgba[..., 0] = (argb >> 16) & 0xFF
    rgba[..., 1] = (argb >> 8) & 0xFF
    rgba[..., 2] = argb & 0xFF
    rgba[..., 3] = (argb >> 24) & 0xFF
    return Image.fromarray(rgba)  # (H, W, 4) uint8 -> RGBA


def image_to_argb(img: Image.Image) -> np.ndarray:
    """Обратная операция: любое изображение Pillow -> буфер uint32 ARGB8888."""
    rgba = np.asarray(img.convert("RGBA"), dtype=np.uint32)
    return (
        (rgba[..., 3] << 24)
        | (rgba[..., 0] << 16)
        | (rgba[..., 1] << 8)
        | rgba[..., 2]
    ).astype(np.uint32)


def write_argb_png(path: str, buffer: np.ndarray, verbose: bool = False) -> None:
    """Сохраняет ARGB-буфер в PNG (через временный файл, затем атомарная замена)."""
    t_start = time.perf_counter()
    img = argb_to_image(buffer)

    _ensure_path_exists(path)
    tmp_path = path + ".tmp"
    img.save(tmp_path, format="PNG")
    os.replace(tmp_path, path)

    if verbose:
        logger.info(
            f"PNG {img.width}x{img.height} сохранен: {path} "
            f"({(time.perf_counter() - t_start) * 1000:.1f} мс)"
        )
