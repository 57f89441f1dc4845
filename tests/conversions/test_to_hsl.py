from chromatone.conversions.to_hsl import hsv_to_hsl, unit_rgb_to_hsl, np_unit_rgb_to_hsl
import numpy as np
from ..samples import samples_hsv_hsl, samples_rgb_hsl, hue_distance

def test_hsv_to_hsl():
    for (h, s, v), (h_exp, s_exp, l_exp) in samples_hsv_hsl.items():
        h_out, s_out, l_out = hsv_to_hsl(h, s, v)

        assert abs(h_out - h_exp) < 1/360
        assert abs(s_out - s_exp) < 1e-9
        assert abs(l_out - l_exp) < 1e-9

def test_unit_rgb_to_hsl():
    for (r, g, b), (h_exp, s_exp, l_exp) in samples_rgb_hsl.items():
        h_out, s_out, l_out = unit_rgb_to_hsl(r, g, b)

        assert hue_distance(h_out, h_exp) < 1e-9
        assert abs(s_out - s_exp) < 1e-9
        assert abs(l_out - l_exp) < 1e-9

def test_unit_rgb_to_hsl_numpy():
    the_matrix = np.array(list(samples_rgb_hsl.keys()))
    expected = np.array(list(samples_rgb_hsl.values()))
    r, g, b = the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2]
    hsl = np_unit_rgb_to_hsl(r, g, b)

    assert hsl.shape == expected.shape
    assert np.allclose(hsl, expected, atol=1e-9)

def test_achromatic_hue_is_zero():
    for v in (0.0, 0.25, 0.5, 1.0):
        h, s, l = unit_rgb_to_hsl(v, v, v)
        assert h == 0.0
        assert s == 0.0
        assert l == v

def test_hue_stays_below_360():
    # Slightly below pure red on the magenta side
    h, _, _ = unit_rgb_to_hsl(1.0, 0.0, 1e-12)
    assert 0.0 <= h < 360.0

def test_lightness_rounded_to_bounds():
    # delta > 0 but lightness rounds to exactly 1.0 or 0.0
    near_white = (1.0, 0.9999999999999999, 0.9999999999999999)
    near_black = (5e-324, 0.0, 0.0)
    for rgb in (near_white, near_black):
        h, s, l = unit_rgb_to_hsl(*rgb)
        assert 0.0 <= h < 360.0
        assert 0.0 <= s <= 1.0
        assert 0.0 <= l <= 1.0
        with np.errstate(divide="raise", invalid="raise"):
            out = np_unit_rgb_to_hsl(*(np.array(c) for c in rgb))
        assert np.all((out[..., 1] >= 0.0) & (out[..., 1] <= 1.0))
    assert unit_rgb_to_hsl(*near_white)[2] == 1.0
