import re

import pytest
import webcolors

from chromaparse.parsing.keywords import (
    BASIC_COLORS,
    EXTENDED_COLORS,
    SYSTEM_COLORS,
    is_system_color,
    lookup_keyword,
)

HEX6 = re.compile("#[0-9a-f]{6}")


def test_table_sizes():
    assert len(BASIC_COLORS) == 16
    assert len(EXTENDED_COLORS) == 148
    assert len(SYSTEM_COLORS) == 28


def test_values_are_lowercase_hex6():
    for table in (BASIC_COLORS, EXTENDED_COLORS):
        for name, value in table.items():
            assert name == name.lower()
            assert HEX6.fullmatch(value), name


def test_basic_colors_agree_with_extended():
    for name, value in BASIC_COLORS.items():
        assert EXTENDED_COLORS[name] == value


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        EXTENDED_COLORS["mycolor"] = "#123456"
    with pytest.raises(TypeError):
        BASIC_COLORS["red"] = "#000000"


def test_lookup_is_case_insensitive():
    assert lookup_keyword("CornflowerBlue") == "#6495ed"
    assert lookup_keyword("REBECCAPURPLE") == "#663399"
    assert lookup_keyword("orange", BASIC_COLORS) is None
    assert lookup_keyword("orange") == "#ffa500"
    assert lookup_keyword("notacolor") is None


def test_system_colors():
    assert is_system_color("ThreeDFace")
    assert is_system_color("buttonface")
    assert is_system_color("WINDOWTEXT")
    assert not is_system_color("red")


def test_tables_follow_webcolors():
    assert set(BASIC_COLORS) == set(webcolors.names(webcolors.HTML4))
    assert set(EXTENDED_COLORS) == set(webcolors.names(webcolors.CSS3)) | {"rebeccapurple"}
    assert EXTENDED_COLORS["goldenrod"] == webcolors.name_to_hex("goldenrod")
