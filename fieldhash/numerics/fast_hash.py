# ==============================================================================
# Файл: fieldhash/numerics/fast_hash.py
# Назначение: Numba-ядра для хеширования целых сеток координат.
#             Результаты побитно совпадают со скалярными функциями из bit_mixing.
# ==============================================================================
from __future__ import annotations
from typing import List

import numpy as np
from numba import njit, prange

from ..core.errors import GridShapeError
from .bit_mixing import HASH_SEED, LONG_SCALE_FACTOR, ROTATE_BITS, SIGN_MASK, UNIT_CEIL

U64 = np.uint64

# Все константы - uint64, иначе numba уводит смешанную арифметику во float64
_SEED = U64(HASH_SEED)
_SIGN = U64(SIGN_MASK)
_S4 = U64(4)
_S21 = U64(21)
_S35 = U64(35)
_ROT = U64(ROTATE_BITS)
_ROT_BACK = U64(64 - ROTATE_BITS)
_SCALE = np.float64(LONG_SCALE_FACTOR)
_CEIL = np.float64(UNIT_CEIL)


@njit(inline='always', cache=True)
def _mix(a):
    a ^= a << _S21
    a ^= a >> _S35
    a ^= a << _S4
    return a


@njit(inline='always', cache=True)
def _rotl(a):
    return (a << _ROT) | (a >> _ROT_BACK)


@njit(inline='always', cache=True)
def _fold(acc, bits):
    return _mix(_mix(acc + _rotl(_mix(bits))))


@njit(cache=True, parallel=True)
def _hash_bits_kernel(bits: np.ndarray) -> np.ndarray:
    n_dims, n = bits.shape
    out = np.empty(n, dtype=np.uint64)
    for i in prange(n):
        acc = _SEED
        for d in range(n_dims):
            acc = _fold(acc, bits[d, i])
        out[i] = acc
    return out


@njit(cache=True, parallel=True)
def _unit_kernel(hashes: np.ndarray) -> np.ndarray:
    n = hashes.shape[0]
    out = np.empty(n, dtype=np.float64)
    for i in prange(n):
        v = np.float64(hashes[i] & _SIGN) * _SCALE
        out[i] = min(v, _CEIL)
    return out


def _coords_to_bits(coord_arrays) -> tuple[np.ndarray, tuple]:
    """Broadcasts 1-4 coordinate arrays and stacks their raw float64 bits as (dims, N) uint64."""
    if not 1 <= len(coord_arrays) <= 4:
        raise TypeError(f"expected 1 to 4 coordinate arrays, got {len(coord_arrays)}")
    arrays: List[np.ndarray] = [np.asarray(a, dtype=np.float64) for a in coord_arrays]
    try:
        arrays = np.broadcast_arrays(*arrays)
    except ValueError as e:
        raise GridShapeError(f"coordinate arrays are not broadcastable: {e}") from e
    shape = arrays[0].shape
    stacked = np.empty((len(arrays), arrays[0].size), dtype=np.float64)
    for d, a in enumerate(arrays):
        stacked[d] = a.ravel()
    # Побитовая реинтерпретация, без числового преобразования
    return stacked.view(np.uint64), shape


def hash_grid(*coord_arrays) -> np.ndarray:
    """Vectorised ``coord_hash`` over broadcastable arrays, returns int64 of the broadcast shape."""
    bits, shape = _coords_to_bits(coord_arrays)
    return _hash_bits_kernel(bits).view(np.int64).reshape(shape)


def unit_hash_grid(*coord_arrays) -> np.ndarray:
    """Vectorised ``unit_hash``, returns float64 values in [0, 1)."""
    bits, shape = _coords_to_bits(coord_arrays)
    return _unit_kernel(_hash_bits_kernel(bits)).reshape(shape)
