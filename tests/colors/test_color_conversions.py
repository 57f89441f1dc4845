import pytest

from chromatone.colors import Color, HSL, HSV, LAB, LCH, RED, BLUE, WHITE
from ..samples import (
    samples_rgb_hsl, samples_rgb_hsv, samples_rgb_lab, samples_rgb_lch,
    LAB_TOLERANCE, hue_distance, assert_rgb_close,
)


def test_hsl_property():
    for rgb, (h_exp, s_exp, l_exp) in samples_rgb_hsl.items():
        hsl = Color(*rgb).hsl
        assert isinstance(hsl, HSL)
        assert hue_distance(hsl.hue, h_exp) < 1e-9
        assert abs(hsl.saturation - s_exp) < 1e-9
        assert abs(hsl.lightness - l_exp) < 1e-9


def test_from_hsl():
    for rgb, hsl in samples_rgb_hsl.items():
        assert_rgb_close(Color.from_hsl(*hsl), (*rgb, 1.0), tol=1e-9)
    assert Color.from_hsl(0.0, 1.0, 0.5, 0.3).alpha == 0.3


def test_hsv_property_and_back():
    for rgb, (h_exp, s_exp, v_exp) in samples_rgb_hsv.items():
        hsv = Color(*rgb).hsv
        assert isinstance(hsv, HSV)
        assert hue_distance(hsv.hue, h_exp) < 1e-9
        assert abs(hsv.saturation - s_exp) < 1e-9
        assert abs(hsv.value - v_exp) < 1e-9
        assert_rgb_close(Color.from_hsv(*hsv), (*rgb, 1.0), tol=1e-9)


def test_lab_property():
    for rgb, (l_exp, a_exp, b_exp) in samples_rgb_lab.items():
        lab = Color(*rgb).lab
        assert isinstance(lab, LAB)
        assert abs(lab.lightness - l_exp) < LAB_TOLERANCE
        assert abs(lab.a - a_exp) < LAB_TOLERANCE
        assert abs(lab.b - b_exp) < LAB_TOLERANCE


def test_lab_round_trip():
    for rgb in samples_rgb_lab:
        c = Color(*rgb, 0.7)
        lab = c.lab
        back = Color.from_lab(lab.lightness, lab.a, lab.b, alpha=0.7)
        assert_rgb_close(back, c.values, tol=1e-5)


def test_lch_of_blue():
    lch = BLUE.lch
    assert isinstance(lch, LCH)
    l_exp, c_exp, h_exp = samples_rgb_lch[(0.0, 0.0, 1.0)]
    assert abs(lch.lightness - l_exp) < LAB_TOLERANCE
    assert abs(lch.chroma - c_exp) < LAB_TOLERANCE
    assert hue_distance(lch.hue, h_exp) < LAB_TOLERANCE


def test_from_lch():
    for rgb, lch in samples_rgb_lch.items():
        assert_rgb_close(Color.from_lch(*lch), (*rgb, 1.0), tol=1e-3)


def test_white_lab():
    lab = WHITE.lab
    assert abs(lab.lightness - 100.0) < 1e-3
    assert abs(lab.a) < 1e-3
    assert abs(lab.b) < 1e-3


class TestConvertMethod:
    def test_same_space_returns_self(self):
        c = RED.with_alpha(0.5)
        assert c.convert("rgb") is c
        assert c.convert() is c

    def test_to_other_spaces(self):
        c = Color(0.2, 0.4, 0.6)
        assert c.convert("hsl") == c.hsl
        assert c.convert("hsv") == c.hsv
        assert c.convert("lab") == c.lab
        assert c.convert("lch") == c.lch

    def test_between_value_types(self):
        hsl = HSL(210.0, 0.5, 0.4)
        hsv = hsl.convert("hsv")
        assert isinstance(hsv, HSV)
        assert abs(hsv.saturation - 2 / 3) < 1e-9
        assert abs(hsv.value - 0.6) < 1e-9

        lch = hsl.convert("lab").convert("lch")
        assert isinstance(lch, LCH)
        back = lch.convert("hsl")
        assert hue_distance(back.hue, 210.0) < 1e-4
        assert abs(back.saturation - 0.5) < 1e-4

    def test_back_to_rgb_is_opaque(self):
        hsl = RED.with_alpha(0.2).convert("hsl")
        rgb = hsl.convert("rgb")
        assert isinstance(rgb, Color)
        assert rgb.alpha == 1.0
        assert_rgb_close(rgb, (1.0, 0.0, 0.0, 1.0))

    def test_unknown_space(self):
        with pytest.raises(ValueError):
            RED.convert("xyz")
