# ==============================================================================
# Файл: fieldhash/numerics/__init__.py
# Назначение: Хеширование координат, HSL и упаковка ARGB.
# ==============================================================================
from __future__ import annotations

from .bit_mixing import (
    coord_hash, hash1, hash2, hash3, hash4, hash_to_unit, mix, raw_bits,
    rotate_left, unit1, unit2, unit3, unit4, unit_hash,
)
from .color import (
    blue_from_hsl, clamp_to_byte, get_argb_quick, green_from_hsl,
    hsl_to_rgb_grid, pack_argb_grid, red_from_hsl, to_argb,
)
from .fast_hash import hash_grid, unit_hash_grid

__all__ = [
    "mix", "raw_bits", "rotate_left",
    "hash1", "hash2", "hash3", "hash4", "coord_hash",
    "unit1", "unit2", "unit3", "unit4", "unit_hash", "hash_to_unit",
    "hash_grid", "unit_hash_grid",
    "red_from_hsl", "green_from_hsl", "blue_from_hsl", "hsl_to_rgb_grid",
    "clamp_to_byte", "get_argb_quick", "to_argb", "pack_argb_grid",
]
