import math

import numpy as np
import pytest

from omniperspective.fisheye import F2P


def _converter(interp=1):
    return F2P(60, 60, 21, 15, interp)


def test_focal_length_from_height():
    assert _converter().f == pytest.approx(60 / math.pi)


def test_center_pixel_maps_to_image_center():
    conv = _converter()
    conv.generate_map(0.0, 0.0, 0.0, 1.0)
    assert conv.map_u.shape == (15, 21)
    assert conv.map_u[7, 10] == pytest.approx(60 // 2 - 0.5, abs=1e-4)
    assert conv.map_v[7, 10] == pytest.approx(60 // 2 - 0.5, abs=1e-4)


def test_vertical_center_uses_half_width():
    conv = F2P(80, 60, 9, 9, 1)
    conv.generate_map(0.0, 0.0, 0.0, 1.0)
    assert conv.map_v[4, 4] == pytest.approx(80 // 2 - 0.5, abs=1e-4)


def test_scale_shrinks_radius():
    a = _converter()
    a.generate_map(0.2, 0.1, 0.0, 1.0)
    b = _converter()
    b.generate_map(0.2, 0.1, 0.0, 2.0)
    c = 30 - 0.5
    np.testing.assert_allclose(b.map_u - c, (a.map_u - c) / 2.0, atol=1e-3)
    np.testing.assert_allclose(b.map_v - c, (a.map_v - c) / 2.0, atol=1e-3)


def test_radius_grows_away_from_center():
    conv = _converter()
    conv.generate_map(0.0, 0.0, 0.0, 1.0)
    c = 30 - 0.5
    radius = np.hypot(conv.map_u - c, conv.map_v - c)
    row = radius[7, 10:]
    assert row[0] == pytest.approx(0.0, abs=1e-3)
    assert float(np.diff(row).min()) > 0.0
    assert np.argsort(row).tolist() == list(range(row.size))


def test_roll_preserves_radius():
    a = _converter()
    a.generate_map(0.0, 0.0, 0.0, 1.0)
    b = _converter()
    b.generate_map(0.0, 0.0, 0.6, 1.0)
    c = 30 - 0.5
    np.testing.assert_allclose(
        np.hypot(a.map_u - c, a.map_v - c),
        np.hypot(b.map_u - c, b.map_v - c),
        atol=1e-3,
    )


def test_generated_image_center_colour():
    src = np.zeros((60, 60, 3), dtype=np.uint8)
    src[:, :] = (5, 6, 7)
    conv = _converter(2)
    conv.generate_map(0.0, 0.0, 0.0, 1.0)
    out = conv.generate_image(src)
    assert out.shape == (15, 21, 3)
    np.testing.assert_array_equal(out[7, 10], [5, 6, 7])


def test_image_before_map_raises():
    with pytest.raises(RuntimeError):
        _converter().generate_image(np.zeros((60, 60, 3), dtype=np.uint8))