"""Perspective views from fisheye images."""

from __future__ import annotations

import math

import numpy as np

from omniperspective.equirect import view_rays
from omniperspective.remap import Interpolation, remap


class F2P:
    """Generates a perspective image from an equidistant fisheye image."""

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

        ``scale`` divides the fisheye focal length.
        """
        x = view_rays(self.ow, self.oh, self.f, angle_u, angle_v, angle_z)
        theta = np.arctan2(x[1], x[0])
        phi = np.arctan2(np.hypot(x[0], x[1]), x[2])
        r = (self.f / scale) * phi
        iwh = self.iw // 2
        self.map_u = (r * np.cos(theta) + iwh - 0.5).astype(np.float32)
        self.map_v = (r * np.sin(theta) + iwh - 0.5).astype(np.float32)

    def generate_image(self, src) -> np.ndarray:
        """Resample ``src`` into the perspective view."""
        if self.map_u is None or self.map_v is None:
            raise RuntimeError("generate_map must be called before generate_image")
        return remap(src, self.map_u, self.map_v, self.interp_type)