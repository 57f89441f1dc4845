from chromatone.colors import Color, RED, CYAN
from chromatone.palettes import complementary, triadic, tetradic, split_complementary, analogous
from ..samples import hue_distance, assert_rgb_close


def _hues(colors):
    return [c.hsl.hue for c in colors]


def _assert_hues(colors, expected):
    assert len(colors) == len(expected)
    for actual, exp in zip(_hues(colors), expected):
        assert hue_distance(actual, exp) < 1e-6


def test_complementary():
    colors = complementary(RED)
    assert colors[0] is RED
    assert_rgb_close(colors[1], CYAN.values)


def test_triadic():
    _assert_hues(triadic(RED), [0, 120, 240])
    _assert_hues(Color(0.2, 0.4, 0.6).triadic(), [210, 330, 90])


def test_tetradic():
    _assert_hues(RED.tetradic(), [0, 90, 180, 270])


def test_split_complementary():
    _assert_hues(split_complementary(RED), [0, 150, 210])


def test_analogous():
    _assert_hues(analogous(RED), [330, 0, 30])
    _assert_hues(RED.analogous(count=4, angle=20), [320, 340, 0, 20])
    _assert_hues(RED.analogous(count=5, angle=10), [340, 350, 0, 10, 20])
    assert analogous(RED, count=0) == []


def test_harmonies_keep_saturation_lightness_alpha():
    base = Color.from_hsl(45, 0.6, 0.3, 0.8)
    for c in base.tetradic():
        hsl = c.hsl
        assert abs(hsl.saturation - 0.6) < 1e-9
        assert abs(hsl.lightness - 0.3) < 1e-9
        assert c.alpha == 0.8
