import pytest

from chromaparse.parsing.matchers import (
    FunctionMatch,
    infer_format,
    match_function,
    match_hex3,
    match_hex6,
)


def test_match_hex3():
    assert match_hex3("#abc") == ("a", "b", "c")
    assert match_hex3("#A1f") == ("A", "1", "f")


@pytest.mark.parametrize("text", ["abc", "#abcd", "#ab", " #abc", "#abc\n", "#ggg", "#a bc", ""])
def test_match_hex3_rejects(text):
    assert match_hex3(text) is None


def test_match_hex6():
    assert match_hex6("#A1b2C3") == ("A1", "b2", "C3")


@pytest.mark.parametrize("text", ["#12345", "#1234567", "#12345g", "123456", "#123456 ", "#١٢٣٤٥٦"])
def test_match_hex6_rejects(text):
    assert match_hex6(text) is None


@pytest.mark.parametrize(
    "text,expected",
    [
        ("rgb(1, 2, 3)", FunctionMatch("rgb", ["1", "2", "3"])),
        ("RGBA( 10%,\t20%\n, 3.5e1 ,0.5 )", FunctionMatch("rgba", ["10%", "20%", "3.5e1", "0.5"])),
        ("hsl(-30, +50%, .5%)", FunctionMatch("hsl", ["-30", "+50%", ".5%"])),
        ("  hsv(1,2,3)\r\n", FunctionMatch("hsv", ["1", "2", "3"])),
        ("foo(1)", FunctionMatch("foo", ["1"])),
        ("Gray(50%,1E-2)", FunctionMatch("gray", ["50%", "1E-2"])),
    ],
)
def test_match_function(text, expected):
    assert match_function(text) == expected


@pytest.mark.parametrize(
    "text",
    [
        "",
        "#fff",
        "red",
        "rgb()",
        "rgb(1 2 3)",
        "rgb(1,2,)",
        "rgb(,1,2)",
        "rgb(a,b,c)",
        "rgb 1,2,3",
        "rgb (1,2,3)",
        "rgb(1,2,3",
        "rgb(1,2,3) x",
        "x rgb(1,2,3)",
        "rgb(1\v,2,3)",
        "rgb(1.,2,3)",
        "rgb(1%%,2,3)",
        "rgb(١,2,3)",
        "rgb2(1,2,3)",
    ],
)
def test_match_function_rejects(text):
    assert match_function(text) is None


def test_match_function_keeps_raw_tokens():
    match = match_function("rgb(300, -4, 1e5%)")
    assert match.name == "rgb"
    assert match.args == ["300", "-4", "1e5%"]


@pytest.mark.parametrize(
    "text,expected",
    [
        ("#abc", "hex3"),
        ("#aabbcc", "hex6"),
        ("HSLA(1, 2%, 3%, 0.5)", "hsla"),
        ("cmyk(1,2,3,4)", "cmyk"),
        ("red", None),
        ("#abcd", None),
    ],
)
def test_infer_format(text, expected):
    assert infer_format(text) == expected


@pytest.mark.parametrize("matcher", [match_hex3, match_hex6, match_function, infer_format])
def test_non_string_raises_type_error(matcher):
    with pytest.raises(TypeError):
        matcher(None)
