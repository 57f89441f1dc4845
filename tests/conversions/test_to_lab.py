from chromatone.conversions.to_lab import (
    unit_rgb_to_xyz, unit_rgb_to_lab, np_unit_rgb_to_lab, lab_to_lch, lch_to_lab, unit_rgb_to_lch,
    xyz_to_lab, lab_to_xyz,
)
from chromatone.conversions.constants import D65_WHITE
import numpy as np
from ..samples import samples_rgb_lab, samples_rgb_lch, LAB_TOLERANCE, hue_distance

def test_white_maps_to_reference_white():
    x, y, z = unit_rgb_to_xyz(1.0, 1.0, 1.0)
    xn, yn, zn = D65_WHITE
    assert abs(x - xn) < 1e-3
    assert abs(y - yn) < 1e-3
    assert abs(z - zn) < 1e-3

def test_unit_rgb_to_lab():
    for (r, g, b), (l_exp, a_exp, b_exp) in samples_rgb_lab.items():
        l_out, a_out, b_out = unit_rgb_to_lab(r, g, b)

        assert abs(l_out - l_exp) < LAB_TOLERANCE
        assert abs(a_out - a_exp) < LAB_TOLERANCE
        assert abs(b_out - b_exp) < LAB_TOLERANCE

def test_unit_rgb_to_lab_numpy():
    the_matrix = np.array(list(samples_rgb_lab.keys()))
    expected = np.array(list(samples_rgb_lab.values()))
    lab = np_unit_rgb_to_lab(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.allclose(lab, expected, atol=LAB_TOLERANCE)

    scalar = np.array([unit_rgb_to_lab(*rgb) for rgb in samples_rgb_lab])
    assert np.allclose(lab, scalar, atol=1e-9)

def test_unit_rgb_to_lch():
    for rgb, (l_exp, c_exp, h_exp) in samples_rgb_lch.items():
        l_out, c_out, h_out = unit_rgb_to_lch(*rgb)

        assert abs(l_out - l_exp) < LAB_TOLERANCE
        assert abs(c_out - c_exp) < LAB_TOLERANCE
        assert hue_distance(h_out, h_exp) < LAB_TOLERANCE

def test_lab_lch_inverse():
    for lab in samples_rgb_lab.values():
        back = lch_to_lab(*lab_to_lch(*lab))
        assert np.allclose(back, lab, atol=1e-9)

def test_lab_xyz_inverse():
    for rgb in samples_rgb_lab:
        xyz = unit_rgb_to_xyz(*rgb)
        assert np.allclose(lab_to_xyz(*xyz_to_lab(*xyz)), xyz, atol=1e-9)

def test_lch_hue_range():
    # a == b == 0 must give a hue inside [0, 360)
    _, c, h = lab_to_lch(50.0, 0.0, 0.0)
    assert c == 0.0
    assert 0.0 <= h < 360.0

    _, _, h = lab_to_lch(50.0, 10.0, -10.0)
    assert abs(h - 315.0) < 1e-9
