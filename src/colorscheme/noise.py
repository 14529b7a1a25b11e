from __future__ import annotations

"""Deterministic hashing and coherent noise for the procedural schemes.

Both functions are pure: the same inputs always give the same output,
independent of process, platform or ambient random state.
"""

from typing import Union

import numpy as np


ArrayLike = Union[float, np.ndarray]

_MASK32 = 0xFFFFFFFF

# Lattice mixing constants (xxHash-style primes).
_PX = np.uint64(374761393)
_PY = np.uint64(668265263)
_PS = np.uint64(2246822519)
_MIX = np.uint64(1274126177)


def string_hash(*parts: object) -> int:
    """32-bit order-sensitive string hash of ``parts`` joined by ``":"``.

    Uses the ``h = h * 31 + ord(ch)`` recurrence over the decimal forms of
    the parts, so ``string_hash(1, 2) != string_hash(2, 1)``. Not
    cryptographic. Returns an unsigned value in ``[0, 2**32)``.
    """
    text = ":".join(str(p) for p in parts)
    h = 0
    for ch in text:
        h = (h * 31 + ord(ch)) & _MASK32
    return h


def _to_u32(a: np.ndarray) -> np.ndarray:
    return (a.astype(np.int64) & _MASK32).astype(np.uint64)


def _lattice(ix: np.ndarray, iy: np.ndarray, seed32: np.uint64) -> np.ndarray:
    """Pseudo-random value in [-1, 1) for each integer lattice point."""
    m = np.uint64(_MASK32)
    h = (_to_u32(ix) * _PX + _to_u32(iy) * _PY + seed32 * _PS) & m
    h = ((h ^ (h >> np.uint64(13))) * _MIX) & m
    h = h ^ (h >> np.uint64(16))
    return h.astype(np.float64) / 2147483648.0 - 1.0


def _fade(t: np.ndarray) -> np.ndarray:
    return t * t * (3.0 - 2.0 * t)


def value_noise_2d(x: ArrayLike, y: ArrayLike, seed: object = 0) -> ArrayLike:
    """Sample 2-D value noise at ``(x, y)``.

    The integer lattice carries hashed pseudo-random values; samples are
    bilinearly interpolated between the four surrounding lattice points
    (with a smoothstep fade on the fractional coordinates). Output lies in
    [-1, 1]. ``x`` and ``y`` may be scalars or broadcastable arrays; a
    scalar input returns a Python float.

    Parameters
    ----------
    x, y:
        Sample coordinates.
    seed:
        Any value with a stable ``str()``; it is reduced to 32 bits with
        :func:`string_hash`.
    """
    scalar = np.ndim(x) == 0 and np.ndim(y) == 0
    xa = np.asarray(x, dtype=np.float64)
    ya = np.asarray(y, dtype=np.float64)
    xa, ya = np.broadcast_arrays(xa, ya)
    seed32 = np.uint64(string_hash(seed))

    x0 = np.floor(xa)
    y0 = np.floor(ya)
    tx = _fade(xa - x0)
    ty = _fade(ya - y0)
    ix = x0.astype(np.int64)
    iy = y0.astype(np.int64)

    v00 = _lattice(ix, iy, seed32)
    v10 = _lattice(ix + 1, iy, seed32)
    v01 = _lattice(ix, iy + 1, seed32)
    v11 = _lattice(ix + 1, iy + 1, seed32)

    top = v00 + (v10 - v00) * tx
    bottom = v01 + (v11 - v01) * tx
    out = np.clip(top + (bottom - top) * ty, -1.0, 1.0)
    if scalar:
        return float(out)
    return out


__all__ = ["string_hash", "value_noise_2d"]
