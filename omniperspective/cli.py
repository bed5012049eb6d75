"""Command-line front end: parse arguments, convert an image, write the result."""

from __future__ import annotations

import math
import re
import sys
from dataclasses import dataclass

import numpy as np
from PIL import Image

from omniperspective.equirect import E2P
from omniperspective.fisheye import F2P
from omniperspective.rotation import deg2rad

PROGRAM = "360convert"
VERSION = "1.0.0"
DEFAULT_UA = 0.0
DEFAULT_VA = 0.0
DEFAULT_ZA = 0.0
DEFAULT_SCALE = 1.0

_RULE = "* " + "*" * 73 + " *\n"

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class UsageError(Exception):
    """Raised when the command line cannot be used as given.

    ``version_requested`` is true when the version was asked for instead of
    a conversion.
    """

    def __init__(self, message: str = "", version_requested: bool = False):
        super().__init__(message)
        self.version_requested = version_requested


@dataclass
class Arguments:
    """Settings gathered from the command line."""

    input_filename: str
    output_filename: str
    fov_u: float
    fov_v: float
    output_width: int = 0
    output_height: int = 0
    image_type: int = 0
    interp_type: int = 1
    angle_u: float = DEFAULT_UA
    angle_v: float = DEFAULT_VA
    angle_z: float = DEFAULT_ZA
    scale: float = DEFAULT_SCALE


def _to_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group()) if match else 0


def _to_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group()) if match else 0.0


_INT_OPTIONS = {"-image-type": "image_type", "-interp-type": "interp_type"}
_FLOAT_OPTIONS = {"-ua": "angle_u", "-va": "angle_v", "-za": "angle_z", "s": "scale"}


def parse_args(argv) -> Arguments:
    """Parse the arguments that follow the program name.

    Unknown options are ignored. Raises :class:`UsageError` for ``-h``, for
    ``-v`` (with ``version_requested`` set), for an option missing its value,
    and for missing or surplus positional arguments.
    """
    options: dict[str, float | int] = {}
    positional: list[str] = []
    tokens = iter(argv)
    for token in tokens:
        if token.startswith("-") and len(token) > 1:
            name = token[1:]
            if name == "h":
                raise UsageError("usage requested")
            if name == "v":
                raise UsageError("version requested", version_requested=True)
            if name in _INT_OPTIONS or name in _FLOAT_OPTIONS:
                value = next(tokens, None)
                if value is None:
                    raise UsageError(f"option {token} needs a value")
                if name in _INT_OPTIONS:
                    options[_INT_OPTIONS[name]] = _to_int(value)
                else:
                    options[_FLOAT_OPTIONS[name]] = _to_float(value)
        else:
            if len(positional) >= 4:
                raise UsageError(f"unexpected argument: {token}")
            positional.append(token)
    if len(positional) < 4:
        raise UsageError("input, output, fov_u and fov_v are required")
    input_filename, output_filename, fov_u, fov_v = positional
    return Arguments(
        input_filename=input_filename,
        output_filename=output_filename,
        fov_u=_to_float(fov_u),
        fov_v=_to_float(fov_v),
        **options,
    )


def usage_text(cmd: str) -> str:
    """Return the usage message for the command named ``cmd``."""
    return (
        "\n"
        + _RULE
        + "* This program generates a perspective view from an omnidirectional image.\n"
        + _RULE
        + f"Usage:{cmd} input output #fov_u #fov_v\n"
        + "\t --image-type #: 0: Equirectangular, 1: Fisheye (Default 0)\n"
        + "\t --interp-type #: 0: Nearest, 1: Linear, 2: Qubic (Default 1)\n"
        + "\t --ow #: Output image width (Default 0 pixel)\n"
        + "\t --oh #: Output image height (Default 0 pixel)\n"
        + "\t --ua #: Angles of horizontal view point (Default 0 deg)\n"
        + "\t --va #: Angles of vertical view point (Default 0 deg)\n"
        + "\t --za #: Angles of image rotation (Default 0 deg)\n"
        + "\t -s #: Scale parameter (Default 1)\n"
        + "\t -h\t: Show Usage.\n"
        + "\t -v\t: Show Version.\n"
        + _RULE
    )


def version_text() -> str:
    """Return the program name and version."""
    return f"{PROGRAM} Ver.{VERSION}\n"


def output_size(src_rows: int, fov_u: float, fov_v: float) -> tuple[int, int]:
    """Return the (width, height) of the view for the given fields of view in degrees."""
    f = src_rows / math.pi
    width = int(2.0 * math.tan(deg2rad(fov_u) / 2.0) * f)
    height = int(2.0 * math.tan(deg2rad(fov_v) / 2.0) * f)
    return width, height


def convert(src, args: Arguments) -> np.ndarray:
    """Produce the perspective view of ``src`` described by ``args``."""
    src = np.asarray(src)
    rows, cols = src.shape[:2]
    width, height = args.output_width, args.output_height
    if width == 0 and height == 0:
        width, height = output_size(rows, args.fov_u, args.fov_v)
    if width <= 0 or height <= 0:
        raise ValueError(f"output size {width}x{height} is not positive")
    converter_cls = E2P if args.image_type == 0 else F2P
    converter = converter_cls(cols, rows, width, height, args.interp_type)
    converter.generate_map(
        deg2rad(args.angle_u),
        deg2rad(args.angle_v),
        deg2rad(args.angle_z),
        args.scale,
    )
    return converter.generate_image(src)


def main(argv=None) -> int:
    """Run the command; return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        args = parse_args(argv)
    except UsageError as exc:
        text = version_text() if exc.version_requested else usage_text(PROGRAM)
        sys.stderr.write(text)
        return 1
    try:
        with Image.open(args.input_filename) as image:
            src = np.asarray(image.convert("RGB"))
        dst = convert(src, args)
        Image.fromarray(dst).save(args.output_filename)
    except (OSError, ValueError) as exc:
        sys.stderr.write(f"{PROGRAM}: {exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())