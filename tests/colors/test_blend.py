from chromatone.colors import Color, BLACK, WHITE, RED, BLUE, multiply, screen, overlay
from ..samples import assert_rgb_close


def test_multiply():
    c = Color(0.2, 0.4, 0.6)
    assert multiply(WHITE, c) == c
    assert multiply(BLACK, c) == BLACK
    assert_rgb_close(Color(0.5, 0.5, 0.5).multiply(Color(0.5, 1.0, 0.0)), (0.25, 0.5, 0.0, 1.0))


def test_screen():
    c = Color(0.2, 0.4, 0.6)
    assert_rgb_close(screen(BLACK, c), c.values)
    assert screen(WHITE, c) == WHITE
    assert_rgb_close(Color(0.5, 0.5, 0.5).screen(Color(0.5, 0.5, 0.5)), (0.75, 0.75, 0.75, 1.0))


def test_overlay():
    assert_rgb_close(overlay(Color(0.25, 0.75, 0.5), Color(0.5, 0.5, 0.2)), (0.25, 0.75, 0.2, 1.0))
    assert overlay(BLACK, RED) == BLACK
    assert overlay(WHITE, BLUE) == WHITE


def test_base_alpha_is_kept():
    base = RED.with_alpha(0.3)
    other = BLUE.with_alpha(0.9)
    assert base.multiply(other).alpha == 0.3
    assert base.screen(other).alpha == 0.3
    assert base.overlay(other).alpha == 0.3


def test_multiply_and_screen_commute():
    a = Color(0.3, 0.7, 0.1)
    b = Color(0.9, 0.2, 0.6)
    assert multiply(a, b) == multiply(b, a)
    assert screen(a, b) == screen(b, a)
    assert RED.multiply(BLUE) == BLUE.multiply(RED)
