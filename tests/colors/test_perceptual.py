from chromatone.colors import Color, BLACK, WHITE, RED, BLUE, delta_e, mix_lab
from ..samples import assert_rgb_close


def test_delta_e():
    c = Color(0.2, 0.4, 0.6)
    assert delta_e(c, c) == 0.0
    assert abs(delta_e(BLACK, WHITE) - 100.0) < 0.01
    assert abs(RED.delta_e(BLUE) - BLUE.delta_e(RED)) < 1e-12
    assert RED.delta_e(Color(0.99, 0.0, 0.0)) < RED.delta_e(Color(0.8, 0.0, 0.0))


def test_mix_lab_endpoints():
    assert_rgb_close(mix_lab(RED, BLUE, 0.0), RED.values, tol=1e-5)
    assert_rgb_close(mix_lab(RED, BLUE, 1.0), BLUE.values, tol=1e-5)
    assert_rgb_close(RED.mix_lab(BLUE, -1.0), RED.values, tol=1e-5)
    assert_rgb_close(RED.mix_lab(BLUE, 2.0), BLUE.values, tol=1e-5)


def test_mix_lab_midpoint():
    mid = RED.mix_lab(BLUE)
    # Not the same as mixing in RGB
    assert RED.mix(BLUE).delta_e(mid) > 1.0


def test_mix_lab_black_white_is_mid_gray():
    mid = BLACK.mix_lab(WHITE)
    assert abs(mid.lab.lightness - 50.0) < 0.01
    assert abs(mid.red - mid.green) < 1e-3
    assert abs(mid.green - mid.blue) < 1e-3


def test_mix_lab_alpha_is_linear():
    assert abs(RED.mix_lab(BLUE.with_alpha(0.0), 0.5).alpha - 0.5) < 1e-12
    assert abs(RED.with_alpha(0.2).mix_lab(BLUE, 0.25).alpha - 0.4) < 1e-12
