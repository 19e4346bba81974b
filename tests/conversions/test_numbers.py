import math

import pytest

from chromaparse.conversions.numbers import (
    bound01,
    clamp_byte,
    clamp_unit,
    mod,
    normalize_angle,
    normalize_hue,
    parse_angle_token,
    parse_channel_token,
)


def test_clamp_byte_rounds_halves_up():
    assert clamp_byte(0.5) == 1
    assert clamp_byte(2.5) == 3
    assert clamp_byte(127.5) == 128
    assert clamp_byte(1.4) == 1
    assert isinstance(clamp_byte(10.2), int)


def test_clamp_byte_bounds():
    assert clamp_byte(-3) == 0
    assert clamp_byte(-0.4) == 0
    assert clamp_byte(255.4) == 255
    assert clamp_byte(300) == 255
    assert clamp_byte(math.inf) == 255
    assert clamp_byte(-math.inf) == 0
    assert clamp_byte(10**400) == 255
    assert clamp_byte(-10**400) == 0


def test_clamp_unit_does_not_round():
    assert clamp_unit(0.42) == 0.42
    assert clamp_unit(1.5) == 1.0
    assert clamp_unit(-0.1) == 0.0
    assert clamp_unit(10**400) == 1.0
    assert clamp_unit(0) == 0.0


def test_mod_is_never_negative():
    assert mod(-30, 360) == 330
    assert mod(-360, 360) == 0
    assert mod(725, 360) == 5
    assert normalize_hue(-30) == 330.0


def test_normalize_angle():
    assert normalize_angle(0) == 0.0
    assert normalize_angle(360) == 0.0
    assert normalize_angle(720.0) == 0.0
    assert normalize_angle(-90) == 0.75
    assert normalize_angle(180) == 0.5
    assert normalize_angle(-30) == normalize_angle(330)


def test_bound01():
    assert bound01(50, 100) == 0.5
    assert bound01(150, 100) == 1.0
    assert bound01(-10, 100) == 0.0


@pytest.mark.parametrize(
    "token,maximum,expected",
    [
        ("128", 255, 128.0),
        ("50%", 255, 127.5),
        ("100%", 255, 255.0),
        ("300", 255, 255.0),
        ("-1", 255, 0.0),
        ("+12", 255, 12.0),
        ("1.5e2", 255, 150.0),
        ("150%", 255, 255.0),
        (".5", 1, 0.5),
        ("50%", 1, 0.5),
        ("2", 1, 1.0),
        (" 20 ", 100, 20.0),
        ("20%", 100, 20.0),
    ],
)
def test_parse_channel_token(token, maximum, expected):
    assert parse_channel_token(token, maximum) == expected


@pytest.mark.parametrize("token", ["", "%", "abc", "50%%", "1_0", "nan", "inf", "1e999", "1.", "0x10", "١٢"])
def test_parse_channel_token_malformed(token):
    assert parse_channel_token(token, 255) is None


def test_parse_angle_token():
    assert parse_angle_token("-30") == -30.0
    assert parse_angle_token("400.5") == 400.5
    assert parse_angle_token("30%") is None
    assert parse_angle_token("deg") is None
