# ==============================================================================
# Файл: fieldhash/numerics/bit_mixing.py
# Назначение: Детерминированный хеш координат (1-4 измерения) по сырым битам
#             float64 и отображение хеша в [0, 1).
# ==============================================================================
"""Scalar coordinate hashing.

All arithmetic is done on unsigned 64-bit words (Python ints masked to
64 bits), so the right shift inside :func:`mix` is a logical one. Public
results are returned as signed 64-bit ints in ``[-2**63, 2**63)``.
"""
from __future__ import annotations
import math
import struct

MASK64 = 0xFFFFFFFFFFFFFFFF
SIGN_MASK = 0x7FFFFFFFFFFFFFFF
HASH_SEED = 0x8000
ROTATE_BITS = 17

# 1 / 2^63, computed once
LONG_SCALE_FACTOR = 1.0 / (2 ** 63)
# (2^63 - 1) rounds up to 2^63 as a double, cap to stay strictly below 1.0
UNIT_CEIL = math.nextafter(1.0, 0.0)

_F64 = struct.Struct("<d")
_U64 = struct.Struct("<Q")


def to_signed64(a: int) -> int:
    a &= MASK64
    return a - (1 << 64) if a & (1 << 63) else a


def _raw_bits_u64(x: float) -> int:
    return _U64.unpack(_F64.pack(x))[0]


def raw_bits(x: float) -> int:
    """Exact IEEE-754 binary64 bit pattern of ``x`` as a signed 64-bit int.

    ``-0.0`` and ``+0.0`` differ, NaN payload bits are kept as they are.
    """
    return to_signed64(_raw_bits_u64(x))


def _mix_u64(a: int) -> int:
    a ^= (a << 21) & MASK64
    a ^= a >> 35
    a ^= (a << 4) & MASK64
    return a


def mix(a: int) -> int:
    """64-bit xorshift avalanche step (left 21, logical right 35, left 4)."""
    return to_signed64(_mix_u64(a & MASK64))


def _rotl_u64(a: int, n: int) -> int:
    n &= 63
    return ((a << n) | (a >> (64 - n))) & MASK64


def rotate_left(a: int, n: int) -> int:
    return to_signed64(_rotl_u64(a & MASK64, n))


def _fold_u64(acc: int, x: float) -> int:
    # mix(mix(acc + rotl(mix(bits(x)), 17)))
    folded = (acc + _rotl_u64(_mix_u64(_raw_bits_u64(x)), ROTATE_BITS)) & MASK64
    return _mix_u64(_mix_u64(folded))


def _hash1_u64(x):
    return _fold_u64(HASH_SEED, x)


def _hash2_u64(x, y):
    return _fold_u64(_hash1_u64(x), y)


def _hash3_u64(x, y, z):
    return _fold_u64(_hash2_u64(x, y), z)


def _hash4_u64(x, y, z, t):
    return _fold_u64(_hash3_u64(x, y, z), t)


def hash1(x: float) -> int:
    return to_signed64(_hash1_u64(x))


def hash2(x: float, y: float) -> int:
    return to_signed64(_hash2_u64(x, y))


def hash3(x: float, y: float, z: float) -> int:
    return to_signed64(_hash3_u64(x, y, z))


def hash4(x: float, y: float, z: float, t: float) -> int:
    return to_signed64(_hash4_u64(x, y, z, t))


_HASHERS = {1: _hash1_u64, 2: _hash2_u64, 3: _hash3_u64, 4: _hash4_u64}


def _hash_any_u64(coords) -> int:
    fn = _HASHERS.get(len(coords))
    if fn is None:
        raise TypeError(f"expected 1 to 4 coordinates, got {len(coords)}")
    return fn(*coords)


def coord_hash(*coords: float) -> int:
    """Hash of 1-4 coordinates. Order matters: ``coord_hash(x, y) != coord_hash(y, x)``."""
    return to_signed64(_hash_any_u64(coords))


def hash_to_unit(h: int) -> float:
    """Map a 64-bit hash to ``[0, 1)`` using its 63 non-sign bits."""
    return min((h & SIGN_MASK) * LONG_SCALE_FACTOR, UNIT_CEIL)


def unit1(x: float) -> float:
    return hash_to_unit(_hash1_u64(x))


def unit2(x: float, y: float) -> float:
    return hash_to_unit(_hash2_u64(x, y))


def unit3(x: float, y: float, z: float) -> float:
    return hash_to_unit(_hash3_u64(x, y, z))


def unit4(x: float, y: float, z: float, t: float) -> float:
    return hash_to_unit(_hash4_u64(x, y, z, t))


def unit_hash(*coords: float) -> float:
    return hash_to_unit(_hash_any_u64(coords))
