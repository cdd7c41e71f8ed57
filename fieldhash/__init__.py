from .numerics import (
    blue_from_hsl,
    coord_hash,
    green_from_hsl,
    hash_grid,
    pack_argb_grid,
    red_from_hsl,
    to_argb,
    unit_hash,
    unit_hash_grid,
    hsl_to_rgb_grid,
)
from .core.export import new_image, write_argb_png
from .core.preset import load_preset

__all__ = [
    "coord_hash",
    "unit_hash",
    "hash_grid",
    "unit_hash_grid",
    "red_from_hsl",
    "green_from_hsl",
    "blue_from_hsl",
    "hsl_to_rgb_grid",
    "to_argb",
    "pack_argb_grid",
    "new_image",
    "write_argb_png",
    "load_preset",
]
