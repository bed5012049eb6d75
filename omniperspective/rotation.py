"""Rotation matrices and angle helpers."""

from __future__ import annotations

import math

import numpy as np


def deg2rad(deg: float) -> float:
    """Convert an angle in degrees to radians."""
    return deg * math.pi / 180.0


def rotation_by_axis(n, angle: float) -> np.ndarray:
    """Return the 3x3 matrix rotating by ``angle`` radians about axis ``n``.

    The axis is used as given; it is expected to be a unit vector.
    """
    nx, ny, nz = (float(c) for c in np.asarray(n, dtype=np.float64).reshape(3))
    c = math.cos(angle)
    s = math.sin(angle)
    k = 1.0 - c
    return np.array(
        [
            [c + nx * nx * k, nx * ny * k - nz * s, nz * nx * k + ny * s],
            [nx * ny * k + nz * s, c + ny * ny * k, ny * nz * k - nx * s],
            [nz * nx * k - ny * s, ny * nz * k + nx * s, c + nz * nz * k],
        ],
        dtype=np.float64,
    )


def rotation_x(angle: float) -> np.ndarray:
    """Return the rotation matrix about the X axis."""
    c, s = math.cos(angle), math.sin(angle)
    return np.array(
        [[1.0, 0.0, 0.0], [0.0, c, -s], [0.0, s, c]], dtype=np.float64
    )


def rotation_y(angle: float) -> np.ndarray:
    """Return the rotation matrix about the Y axis."""
    c, s = math.cos(angle), math.sin(angle)
    return np.array(
        [[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]], dtype=np.float64
    )


def rotation_z(angle: float) -> np.ndarray:
    """Return the rotation matrix about the Z axis."""
    c, s = math.cos(angle), math.sin(angle)
    return np.array(
        [[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]], dtype=np.float64
    )