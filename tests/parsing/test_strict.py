import pytest

from chromaparse.colors.color import Color
from chromaparse.parsing.strict import (
    FUNCTION_NAMES,
    parse_color,
    parse_functional,
    parse_hex3,
    parse_hex6,
    parse_rgb_string,
)


def test_parse_hex6():
    assert parse_hex6("#6495ed") == Color(100, 149, 237)
    assert parse_hex6("#6495ED") == Color(100, 149, 237)
    assert parse_hex6("6495ed") is None
    assert parse_hex6("#abc") is None


def test_parse_hex3_doubles_digits():
    assert parse_hex3("#abc") == Color(170, 187, 204)
    assert parse_hex3("#ABC") == Color(170, 187, 204)
    assert parse_hex3("#f0a") == Color(255, 0, 170)
    assert parse_hex3("#abcd") is None
    assert parse_hex3("#aabbcc") is None


class TestRgbFunctions:
    def test_integers(self):
        assert parse_functional("rgb(255, 0, 0)") == Color(255, 0, 0)

    def test_percentages_are_floored(self):
        assert parse_functional("rgb(100%, 50%, 0%)") == Color(255, 127, 0)

    def test_out_of_range_is_clamped(self):
        assert parse_functional("rgb(300, -20, 12.7)") == Color(255, 0, 12)

    def test_alpha(self):
        assert parse_functional("rgba(1, 2, 3, 0.5)") == Color(1, 2, 3, 0.5)
        assert parse_functional("rgba(1, 2, 3, 50%)") == Color(1, 2, 3, 0.5)
        assert parse_functional("rgba(1, 2, 3, 2)") == Color(1, 2, 3, 1)
        assert parse_functional("RGBA(1,2,3,-1)") == Color(1, 2, 3, 0)

    def test_argument_count_must_match(self):
        assert parse_functional("rgb(1, 2, 3, 0.5)") is None
        assert parse_functional("rgba(1, 2, 3)") is None
        assert parse_functional("rgb(1, 2)") is None


class TestHueFunctions:
    def test_hsl(self):
        assert parse_functional("hsl(120, 100%, 50%)") == Color(0, 255, 0)
        assert parse_functional("hsl(120, 100, 50)") == Color(0, 255, 0)

    def test_hsla(self):
        assert parse_functional("hsla(0, 100%, 50%, 0.25)") == Color(255, 0, 0, 0.25)

    def test_negative_hue(self):
        assert parse_functional("hsl(-30, 100%, 50%)") == parse_functional("hsl(330, 100%, 50%)")

    def test_percentage_hue_is_rejected(self):
        assert parse_functional("hsl(10%, 100%, 50%)") is None

    def test_zero_saturation_is_black(self):
        assert parse_functional("hsl(0, 0%, 50%)") == Color(0, 0, 0)

    def test_hsv(self):
        assert parse_functional("hsv(0, 100%, 100%)") == Color(255, 0, 0)
        assert parse_functional("hsva(120, 100%, 50%, 1)") == Color(0, 128, 0)


def test_unknown_function():
    assert parse_functional("cmyk(1, 2, 3, 4)") is None
    assert parse_functional("foo(1, 2, 3)") is None


def test_allowed_functions():
    assert parse_functional("hsl(0, 100%, 50%)", allowed=("rgb",)) is None
    assert parse_functional("rgb(0, 0, 0)", allowed=("rgb",)) == Color(0, 0, 0)


def test_function_names():
    assert FUNCTION_NAMES == {"rgb", "rgba", "hsl", "hsla", "hsv", "hsva"}


def test_parse_rgb_string():
    assert parse_rgb_string("rgb(1, 2, 3)") == Color(1, 2, 3)
    assert parse_rgb_string("rgba(1, 2, 3, 0)") == Color(1, 2, 3, 0)
    assert parse_rgb_string("hsl(0, 100%, 50%)") is None


def test_parse_color():
    assert parse_color("  CornflowerBlue ") == Color(100, 149, 237)
    assert parse_color("#abc") == Color(170, 187, 204)
    assert parse_color("#aabbcc") == Color(170, 187, 204)
    assert parse_color("rgb(1, 2, 3)") == Color(1, 2, 3)
    assert parse_color("hsv(0, 100%, 100%)") == Color(255, 0, 0)
    assert parse_color("transparent") is None
    assert parse_color("chucknorris") is None


@pytest.mark.parametrize(
    "text",
    ["", " ", "rgb(", "rgb(1,2,3", "#", "##abc", "rgb(1, 2, x)", "hsl()", "\x00", "😀", "rgb(1e999, 2, 3)"],
)
def test_strict_parsers_never_raise(text):
    for parser in (parse_hex6, parse_hex3, parse_functional, parse_color):
        assert parser(text) is None


def test_non_string_raises_type_error():
    with pytest.raises(TypeError):
        parse_functional(123)
    with pytest.raises(TypeError):
        parse_color(None)
