# ==============================================================================
# Файл: fieldhash/numerics/color.py
# Назначение: HSL -> RGB по каналам и упаковка RGBA в 32-битное ARGB8888.
#             Скалярные функции скомпилированы numba и переиспользуются
#             сеточными ядрами.
# ==============================================================================
from __future__ import annotations

import numpy as np
from numba import njit, prange

from ..core.errors import GridShapeError

ONE_THIRD = 1.0 / 3.0
ONE_SIXTH = 1.0 / 6.0
TWO_THIRDS = 2.0 / 3.0


# --- HSL -> RGB ---

@njit(inline='always', cache=True)
def _component_from_pqt(p: float, q: float, h: float) -> float:
    h = h % 1.0  # floored modulo, результат в [0, 1)
    if h < ONE_SIXTH:
        return p + (q - p) * 6.0 * h
    if h < 0.5:
        return q
    if h < TWO_THIRDS:
        return p + (q - p) * (TWO_THIRDS - h) * 6.0
    return p


@njit(inline='always', cache=True)
def _pq(s: float, l: float):
    q = l * (1.0 + s) if l < 0.5 else l + s - l * s
    return 2.0 * l - q, q


@njit(cache=True)
def red_from_hsl(h: float, s: float, l: float) -> float:
    if s == 0.0:
        return l
    p, q = _pq(s, l)
    return _component_from_pqt(p, q, h + ONE_THIRD)


@njit(cache=True)
def green_from_hsl(h: float, s: float, l: float) -> float:
    if s == 0.0:
        return l
    p, q = _pq(s, l)
    return _component_from_pqt(p, q, h)


@njit(cache=True)
def blue_from_hsl(h: float, s: float, l: float) -> float:
    if s == 0.0:
        return l
    p, q = _pq(s, l)
    return _component_from_pqt(p, q, h - ONE_THIRD)


# --- Упаковка ARGB ---

@njit(cache=True)
def clamp_to_byte(v: int) -> int:
    """Clamp an integer to byte range."""
    if v < 0:
        return 0
    if v > 255:
        return 255
    return v


@njit(inline='always', cache=True)
def _channel_to_byte(c: float) -> int:
    # trunc(c * 256) с насыщением; NaN -> 0, +inf -> 255
    v = c * 256.0
    if not v >= 0.0:
        return 0
    if v >= 255.0:
        return 255
    return int(v)


@njit(cache=True)
def get_argb_quick(r: int, g: int, b: int, a: int) -> int:
    """Packs already clamped bytes, alpha in the most significant byte."""
    return (a << 24) | (r << 16) | (g << 8) | b


@njit(cache=True)
def to_argb(r: float, g: float, b: float, a: float = 1.0) -> int:
    """Quantises RGBA channels (nominally [0, 1]) into an unsigned ARGB8888 int."""
    return get_argb_quick(
        _channel_to_byte(r),
        _channel_to_byte(g),
        _channel_to_byte(b),
        _channel_to_byte(a),
    )


# --- Сеточные ядра ---

@njit(cache=True, parallel=True)
def _hsl_kernel(h, s, l, r_out, g_out, b_out):
    for i in prange(h.shape[0]):
        r_out[i] = red_from_hsl(h[i], s[i], l[i])
        g_out[i] = green_from_hsl(h[i], s[i], l[i])
        b_out[i] = blue_from_hsl(h[i], s[i], l[i])


@njit(cache=True, parallel=True)
def _pack_kernel(r, g, b, a, out):
    for i in prange(r.shape[0]):
        out[i] = to_argb(r[i], g[i], b[i], a[i])


def _flatten_channels(*channels):
    arrays = [np.asarray(c, dtype=np.float64) for c in channels]
    try:
        arrays = np.broadcast_arrays(*arrays)
    except ValueError as e:
        raise GridShapeError(f"channel arrays are not broadcastable: {e}") from e
    shape = arrays[0].shape
    return [np.ascontiguousarray(a).ravel() for a in arrays], shape


def hsl_to_rgb_grid(h, s, l):
    """HSL -> (r, g, b) float64 arrays of the broadcast shape."""
    (hf, sf, lf), shape = _flatten_channels(h, s, l)
    r = np.empty_like(hf)
    g = np.empty_like(hf)
    b = np.empty_like(hf)
    _hsl_kernel(hf, sf, lf, r, g, b)
    return r.reshape(shape), g.reshape(shape), b.reshape(shape)


def pack_argb_grid(r, g, b, a=None) -> np.ndarray:
    """Packs channel arrays into a uint32 ARGB8888 buffer; missing alpha means opaque."""
    if a is None:
        a = 1.0
    (rf, gf, bf, af), shape = _flatten_channels(r, g, b, a)
    out = np.empty(rf.shape[0], dtype=np.uint32)
    _pack_kernel(rf, gf, bf, af, out)
    return out.reshape(shape)
