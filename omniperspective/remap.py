"""Generic image remapping with a constant black border."""

from __future__ import annotations

from enum import IntEnum

import numpy as np

_CUBIC_A = -0.75


class Interpolation(IntEnum):
    """Pixel interpolation methods."""

    NEAREST = 0
    LINEAR = 1
    CUBIC = 2


def _cubic_weights(fx: np.ndarray) -> list[np.ndarray]:
    a = _CUBIC_A
    x1 = fx + 1.0
    c0 = ((a * x1 - 5.0 * a) * x1 + 8.0 * a) * x1 - 4.0 * a
    c1 = ((a + 2.0) * fx - (a + 3.0)) * fx * fx + 1.0
    g = 1.0 - fx
    c2 = ((a + 2.0) * g - (a + 3.0)) * g * g + 1.0
    c3 = 1.0 - c0 - c1 - c2
    return [c0, c1, c2, c3]


def _taps(coord: np.ndarray, size: int, interpolation: Interpolation):
    """Return the base index and (offset, weight) taps along one axis."""
    coord = np.where(np.isfinite(coord), coord, -8.0)
    coord = np.clip(coord, -8.0, size + 8.0)
    if interpolation is Interpolation.NEAREST:
        base = np.rint(coord).astype(np.int64)
        return base, [(0, np.ones_like(coord))]
    base_f = np.floor(coord)
    frac = coord - base_f
    base = base_f.astype(np.int64)
    if interpolation is Interpolation.LINEAR:
        return base, [(0, 1.0 - frac), (1, frac)]
    return base, list(zip((-1, 0, 1, 2), _cubic_weights(frac)))


def remap(src, map_u, map_v, interpolation=Interpolation.LINEAR) -> np.ndarray:
    """Sample ``src`` at (``map_u``, ``map_v``) for every output pixel.

    Samples that fall outside the source image read as zero. The result has
    the shape of the maps (plus the source channels) and the source dtype.
    """
    src = np.asarray(src)
    map_u = np.asarray(map_u, dtype=np.float64)
    map_v = np.asarray(map_v, dtype=np.float64)
    if map_u.shape != map_v.shape:
        raise ValueError("map_u and map_v must have the same shape")
    if map_u.ndim != 2:
        raise ValueError("maps must be two-dimensional")
    if src.ndim not in (2, 3):
        raise ValueError("source image must be two- or three-dimensional")
    interpolation = Interpolation(interpolation)

    height, width = src.shape[:2]
    channels = src.shape[2:]
    bx, xtaps = _taps(map_u, width, interpolation)
    by, ytaps = _taps(map_v, height, interpolation)

    out = np.zeros(map_u.shape + channels, dtype=np.float64)
    expand = (slice(None), slice(None)) + (None,) * len(channels)
    for dy, wy in ytaps:
        yi = by + dy
        valid_y = (yi >= 0) & (yi < height)
        for dx, wx in xtaps:
            xi = bx + dx
            valid = valid_y & (xi >= 0) & (xi < width)
            values = np.zeros(map_u.shape + channels, dtype=np.float64)
            values[valid] = src[yi[valid], xi[valid]]
            out += values * (wx * wy)[expand]

    dtype = src.dtype
    if np.issubdtype(dtype, np.integer):
        info = np.iinfo(dtype)
        return np.clip(np.rint(out), info.min, info.max).astype(dtype)
    if dtype == np.bool_:
        return out >= 0.5
    return out.astype(dtype)