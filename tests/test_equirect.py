import math

import numpy as np
import pytest

from omniperspective.equirect import E2P


def _converter(interp=1):
    return E2P(80, 40, 20, 16, interp)


def test_focal_length_from_height():
    conv = _converter()
    assert conv.f == pytest.approx(40 / math.pi)


def test_map_shape_and_dtype():
    conv = _converter()
    conv.generate_map(0.0, 0.0, 0.0, 1.0)
    assert conv.map_u.shape == (16, 20)
    assert conv.map_v.shape == (16, 20)
    assert conv.map_u.dtype == np.float32


def test_center_pixel_looks_at_panorama_center():
    conv = _converter()
    conv.generate_map(0.0, 0.0, 0.0, 1.0)
    assert conv.map_u[8, 10] == pytest.approx(80 / 2 - 0.5, abs=1e-4)
    assert conv.map_v[8, 10] == pytest.approx(40 / 2 - 0.5, abs=1e-4)


def test_maps_stay_within_panorama_range():
    conv = _converter()
    conv.generate_map(0.4, -0.3, 0.2, 1.0)
    assert conv.map_u.min() >= -0.5 - 1e-4
    assert conv.map_u.max() <= 80 - 0.5 + 1e-4
    assert conv.map_v.min() >= -0.5 - 1e-4
    assert conv.map_v.max() <= 40 - 0.5 + 1e-4


def test_yaw_quarter_turn_shifts_quarter_width():
    base = _converter()
    base.generate_map(0.0, 0.0, 0.0, 1.0)
    turned = _converter()
    turned.generate_map(math.pi / 2, 0.0, 0.0, 1.0)
    shift = turned.map_u[8, 10] - base.map_u[8, 10]
    assert shift == pytest.approx(80 / 4, abs=1e-3)
    assert turned.map_v[8, 10] == pytest.approx(base.map_v[8, 10], abs=1e-4)


def test_scale_has_no_effect():
    a = _converter()
    a.generate_map(0.1, 0.2, 0.3, 1.0)
    b = _converter()
    b.generate_map(0.1, 0.2, 0.3, 3.0)
    np.testing.assert_array_equal(a.map_u, b.map_u)
    np.testing.assert_array_equal(a.map_v, b.map_v)


def test_generated_image_shape_and_center_colour():
    src = np.zeros((40, 80, 3), dtype=np.uint8)
    src[:, :] = (10, 20, 30)
    conv = _converter(0)
    conv.generate_map(0.0, 0.0, 0.0, 1.0)
    out = conv.generate_image(src)
    assert out.shape == (16, 20, 3)
    assert out.dtype == np.uint8
    np.testing.assert_array_equal(out[8, 10], [10, 20, 30])


def test_image_before_map_raises():
    conv = _converter()
    with pytest.raises(RuntimeError):
        conv.generate_image(np.zeros((40, 80, 3), dtype=np.uint8))


def test_invalid_interpolation_raises():
    with pytest.raises(ValueError):
        E2P(80, 40, 20, 16, 9)