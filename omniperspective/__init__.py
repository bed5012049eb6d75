"""Perspective views from equirectangular and fisheye omnidirectional images."""

__version__ = "1.0.0"
__all__ = ["cli", "equirect", "fisheye", "remap", "rotation"]