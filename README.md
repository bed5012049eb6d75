# omniperspective

Cut ordinary perspective (pinhole-camera) views out of omnidirectional images.
The input can be an equirectangular (360°) panorama or an equidistant fisheye
image. You choose the field of view and the viewing direction, and the package
resamples that part of the scene into a flat image.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install .[test]
```

## Command line

```
360convert input output FOV_U FOV_V [options]
```

`FOV_U` and `FOV_V` are the horizontal and vertical fields of view in degrees.
The input is read with Pillow and converted to RGB. The result is written in
the format that the output file name's extension selects.

| Option | Meaning | Default |
| --- | --- | --- |
| `--image-type N` | `0` equirectangular, any other value fisheye | `0` |
| `--interp-type N` | `0` nearest, `1` linear, `2` cubic | `1` |
| `--ua DEG` | horizontal viewing angle | `0` |
| `--va DEG` | vertical viewing angle | `0` |
| `--za DEG` | rotation of the image about the viewing axis | `0` |
| `-s X` | scale parameter (fisheye only) | `1` |
| `-h` | print usage and exit | |
| `-v` | print the version and exit | |

Integer and number values are read from their leading digits, so `45deg`
counts as `45` and text that does not start with a number counts as `0`.
Options the command does not know are skipped. `-h`, `-v`, a missing option
value, or too few or too many positional arguments print a message to
standard error and exit with status 1. Read, write and size errors and an
unknown interpolation number also exit with status 1.

The output size is worked out from the fields of view and the height of the
input image: with focal length `f = rows / π`, the width is
`int(2·tan(FOV_U/2)·f)` and the height is `int(2·tan(FOV_V/2)·f)`. A field of
view that gives a size of zero or less is an error.

Example: a 90°×60° view, turned 45° horizontally and −10° vertically:

```
360convert pano.jpg view.png 90 60 --ua 45 --va -10
```

## Library use

```python
import numpy as np
from PIL import Image

from omniperspective.equirect import E2P
from omniperspective.remap import Interpolation
from omniperspective.rotation import deg2rad

src = np.asarray(Image.open("pano.jpg").convert("RGB"))
rows, cols = src.shape[:2]

converter = E2P(cols, rows, 640, 480, Interpolation.LINEAR)
converter.generate_map(deg2rad(45), deg2rad(-10), 0.0, 1.0)
view = converter.generate_image(src)
Image.fromarray(view).save("view.png")
```

The angles passed to `generate_map` are in radians. `generate_image` raises
`RuntimeError` if `generate_map` has not been called first.

`omniperspective.fisheye.F2P` has the same interface for fisheye input. The
image circle is centred at `(iw // 2, iw // 2)`, and a ray at angle `φ` from
the optical axis maps to radius `(f / scale) · φ`. `E2P` accepts `scale` but
does not use it.

The lower-level pieces can be used on their own:

- `omniperspective.rotation`: `deg2rad`, and `rotation_x`, `rotation_y`,
  `rotation_z` and `rotation_by_axis`, which return 3×3 NumPy rotation
  matrices.
- `omniperspective.equirect.view_rays(ow, oh, f, angle_u, angle_v, angle_z)`:
  the rotated viewing ray of every output pixel, shape `(3, oh, ow)`.
- `omniperspective.remap`: `remap(src, map_u, map_v, interpolation)` samples a
  2-D or 3-D image array at floating-point coordinates with the
  `Interpolation` method `NEAREST`, `LINEAR` or `CUBIC`. Samples outside the
  image read as zero (black). The result keeps the source dtype.
- `omniperspective.cli`: `parse_args`, `Arguments`, `UsageError`,
  `usage_text`, `version_text`, `output_size`, `convert` and `main`.

## Limitations

- The output size cannot be set on the command line. The usage text lists
  `--ow` and `--oh`, but the command ignores them, and the value after them is
  taken as a positional argument. To choose a size, set `output_width` and
  `output_height` on an `Arguments` object and pass it to `cli.convert`, or
  construct `E2P` or `F2P` yourself.
- Output is always RGB when run from the command line. Alpha channels are
  dropped.