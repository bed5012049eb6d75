"""Perspective views from equirectangular panoramas."""

from __future__ import annotations

import math

import numpy as np

from omniperspective.remap import Interpolation, remap
from omniperspective.rotation import rotation_by_axis, rotation_x, rotation_y


def _view_rotation(angle_u: float, angle_v: float, angle_z: float) -> np.ndarray:
    r = rotation_y(angle_u) @ rotation_x(angle_v)
    ri = rotation_by_axis(r @ np.array([0.0, 0.0, 1.0]), angle_z)
    return ri @ r


def view_rays(ow: int, oh: int, f: float, angle_u, angle_v, angle_z) -> np.ndarray:
    """Return rotated viewing rays, shape (3, oh, ow), for each output pixel."""
    v, u = np.mgrid[0:oh, 0:ow].astype(np.float64)
    xc = np.stack([u - ow // 2, v - oh // 2, np.full_like(u, f)])
    m = _view_rotation(angle_u, angle_v, angle_z)
    return np.tensordot(m, xc, axes=1)


class E2P:
    """Generates a perspective image from an equirectangular image."""

    def __init__(self, iw, ih, ow, oh, interp_type):
        self.iw = int(iw)
        self.ih = int(ih)
        self.ow = int(ow)
        self.oh = int(oh)
        self.interp_type = Interpolation(interp_type)
        self.f = self.ih / math.pi
        self.map_u: np.ndarray | None = None
        self.map_v: np.ndarray | None = None

    def generate_map(self, angle_u, angle_v, angle_z, scale):
        """Compute the sampling maps for the given view angles (radians).

        ``scale`` is accepted for symmetry with the fisheye converter and
        has no effect here.
        """
        x = view_rays(self.ow, self.oh, self.f, angle_u, angle_v, angle_z)
        theta = np.arctan2(x[0], x[2])
        phi = np.arctan2(np.hypot(x[0], x[2]), x[1])
        self.map_u = ((theta + math.pi) * self.iw / (2.0 * math.pi) - 0.5).astype(
            np.float32
        )
        self.map_v = ((math.pi - phi) * self.ih / math.pi - 0.5).astype(np.float32)

    def generate_image(self, src) -> np.ndarray:
        """Resample ``src`` into the perspective view."""
        if self.map_u is None or self.map_v is None:
            raise RuntimeError("generate_map must be called before generate_image")
        return remap(src, self.map_u, self.map_v, self.interp_type)