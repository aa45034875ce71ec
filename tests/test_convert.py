from __future__ import annotations

import logging

import pytest

from namedcolor.color.convert import (
    hex_to_rgb,
    normalize_hex,
    parse_hex,
    rgb_fraction_to_hex,
    rgb_to_hex,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("#ff0000", (255, 0, 0)),
        ("ff0000", (255, 0, 0)),
        ("#A1B2C3", (161, 178, 195)),
        ("a1b2c3", (161, 178, 195)),
        ("#000000", (0, 0, 0)),
        ("#ffffff", (255, 255, 255)),
    ],
)
def test_hex_to_rgb_parses_digit_pairs(value, expected):
    rgb = hex_to_rgb(value)
    assert rgb == expected
    assert (rgb.r, rgb.g, rgb.b) == expected


@pytest.mark.parametrize(
    "value",
    ["xyz", "#fff", "12345", "", "#1234567", "##ff0000", " #ff0000", "#ff0000 ", "#gg0000", "#ff0000\n"],
)
def test_hex_to_rgb_falls_back_to_black(value):
    assert hex_to_rgb(value) == (0, 0, 0)


def test_parse_hex_reports_fallback():
    assert parse_hex("#102030") == ((16, 32, 48), True)
    assert parse_hex("#123") == ((0, 0, 0), False)
    # black parsed from a real value is still "parsed"
    assert parse_hex("000000") == ((0, 0, 0), True)


def test_rgb_fraction_to_hex_reference_values():
    assert rgb_fraction_to_hex(1, 0, 0) == "#ff0000"
    assert rgb_fraction_to_hex(0, 0, 0) == "#000000"
    assert rgb_fraction_to_hex(1, 1, 1) == "#ffffff"
    # 0.5 * 255 = 127.5 rounds up to 128
    assert rgb_fraction_to_hex(0.5, 0.5, 0.5) == "#808080"
    assert rgb_fraction_to_hex(0.5, 0, 0) == "#800000"


def test_rgb_fraction_to_hex_output_shape():
    value = rgb_fraction_to_hex(0.01, 0.2, 0.99)
    assert len(value) == 7
    assert value == value.lower()
    assert value.startswith("#")


def test_rgb_fraction_to_hex_clamps_out_of_range():
    assert rgb_fraction_to_hex(-0.5, 1.5, 2) == "#00ffff"


def test_rgb_fraction_to_hex_rejects_nan():
    with pytest.raises(ValueError):
        rgb_fraction_to_hex(float("nan"), 0, 0)


def test_fraction_round_trip_within_one():
    steps = [k / 5 for k in range(6)]
    for r in steps:
        for g in steps:
            for b in steps:
                rgb = hex_to_rgb(rgb_fraction_to_hex(r, g, b))
                for got, frac in zip(rgb, (r, g, b)):
                    assert abs(got - frac * 255) <= 1


def test_rgb_to_hex_and_normalize():
    assert rgb_to_hex((255, 128, 0)) == "#ff8000"
    assert normalize_hex("AABBCC") == "#aabbcc"
    assert normalize_hex("nope") == "#000000"


def test_fallback_to_black_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="namedcolor.color.convert"):
        hex_to_rgb("#12")
    assert any("defaulting to black" in rec.getMessage() for rec in caplog.records)
    assert all(rec.levelno == logging.DEBUG for rec in caplog.records)


def test_valid_hex_is_not_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="namedcolor.color.convert"):
        hex_to_rgb("#123456")
    assert not caplog.records
