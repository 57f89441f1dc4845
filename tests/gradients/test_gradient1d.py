import pytest

from chromatone.colors import Color, BLACK, WHITE, RED, GREEN, BLUE, mix_lab
from chromatone.gradients import gradient, multi_gradient
from ..samples import assert_rgb_close


def test_linear_gradient():
    colors = gradient(RED, BLUE, 5, perceptual=False)
    assert len(colors) == 5
    assert colors[0] == RED
    assert colors[-1] == BLUE
    assert_rgb_close(colors[1], (0.75, 0.0, 0.25, 1.0))
    assert_rgb_close(colors[2], (0.5, 0.0, 0.5, 1.0))


def test_perceptual_gradient_matches_mix_lab():
    colors = RED.gradient(BLUE, 6)
    assert len(colors) == 6
    for i, c in enumerate(colors):
        assert_rgb_close(c, mix_lab(RED, BLUE, i / 5).values, tol=1e-6)


def test_perceptual_endpoints():
    colors = gradient(Color(0.2, 0.4, 0.6), Color(0.9, 0.1, 0.3), 3)
    assert_rgb_close(colors[0], (0.2, 0.4, 0.6, 1.0), tol=1e-5)
    assert_rgb_close(colors[-1], (0.9, 0.1, 0.3, 1.0), tol=1e-5)


@pytest.mark.parametrize("steps", [1, 0, -3])
def test_short_gradient_is_start(steps):
    assert gradient(RED, BLUE, steps) == [RED]
    assert gradient(RED, BLUE, steps, perceptual=False) == [RED]


def test_two_steps():
    assert gradient(BLACK, WHITE, 2, perceptual=False) == [BLACK, WHITE]


def test_alpha_is_linear():
    for perceptual in (True, False):
        colors = gradient(RED, RED.with_alpha(0.0), 5, perceptual=perceptual)
        assert [c.alpha for c in colors] == [1.0, 0.75, 0.5, 0.25, 0.0]


def test_multi_gradient():
    colors = multi_gradient(RED, [GREEN, BLUE], steps_per_segment=5, perceptual=False)
    assert len(colors) == 9
    assert colors[0] == RED
    assert colors[4] == GREEN
    assert colors[8] == BLUE
    assert_rgb_close(colors[2], (0.5, 0.5, 0.0, 1.0))


def test_multi_gradient_defaults():
    colors = RED.multi_gradient([GREEN, BLUE])
    assert len(colors) == 19
    assert_rgb_close(colors[9], GREEN.values, tol=1e-5)


def test_multi_gradient_single_stop():
    assert multi_gradient(RED, [BLUE], 4) == gradient(RED, BLUE, 4)


def test_multi_gradient_without_stops_is_empty():
    assert multi_gradient(RED, []) == []
