# -*- coding: utf-8 -*-
"""Test CSS colour parsing and formatting.

Test cases:
    - hex in 3/4/6/8 digit forms
    - legacy comma and modern space/slash functional syntax
    - percentage and angle units per colour family
    - color(<profile> ...) aliases and unknown profiles
    - malformed input raises ColorParseError
    - parse(format(c)) closes within 1e-2

Run:
    pytest tests/test_css.py -v
"""

import numpy as np
import pytest

from tint_color import ColorSpace, create_color
from tint_css import ColorParseError, format_css, hex_to_rgb, parse_color, rgb_to_hex

CS = ColorSpace


def assert_color(color, space, values, alpha=1.0, atol=1e-4):
    assert color.space == space
    np.testing.assert_allclose(color.value, values, atol=atol)
    assert color.alpha == pytest.approx(alpha, abs=1e-6)


# =============================================================================
# HEX
# =============================================================================

@pytest.mark.parametrize("text, values, alpha", [
    ("#f00", (1.0, 0.0, 0.0), 1.0),
    ("#F80", (1.0, 136 / 255, 0.0), 1.0),
    ("#00f8", (0.0, 0.0, 1.0), 136 / 255),
    ("#336699", (0.2, 0.4, 0.6), 1.0),
    ("#ff000080", (1.0, 0.0, 0.0), 128 / 255),
    ("  #FFFFFF  ", (1.0, 1.0, 1.0), 1.0),
])
def test_parse_hex(text, values, alpha):
    assert_color(parse_color(text), CS.RGB, values, alpha)


@pytest.mark.parametrize("text", ["#12345", "#1", "#ggg", "#12345z", "#"])
def test_parse_bad_hex(text):
    with pytest.raises(ColorParseError) as info:
        parse_color(text)
    assert info.value.text == text


def test_hex_helpers():
    out = np.zeros(3, dtype=np.float32)
    alpha = hex_to_rgb("336699cc", out)
    np.testing.assert_allclose(out, [0.2, 0.4, 0.6], atol=1e-6)
    assert alpha == pytest.approx(0.8)
    assert rgb_to_hex(out) == "336699"
    assert rgb_to_hex(np.array([1.5, -0.2, 0.5], dtype=np.float32), denote=True) == "#ff0080"


# =============================================================================
# FUNCTIONAL NOTATION
# =============================================================================

@pytest.mark.parametrize("text, space, values, alpha", [
    ("rgb(255, 0, 0)", CS.RGB, (1.0, 0.0, 0.0), 1.0),
    ("rgb(255 128 0)", CS.RGB, (1.0, 128 / 255, 0.0), 1.0),
    ("rgb(100% 0% 50% / 50%)", CS.RGB, (1.0, 0.0, 0.5), 0.5),
    ("rgba(0, 0, 255, 0.25)", CS.RGB, (0.0, 0.0, 1.0), 0.25),
    ("RGB(none 0 0)", CS.RGB, (0.0, 0.0, 0.0), 1.0),
    ("hsl(120deg 100% 50%)", CS.HSL, (120.0, 1.0, 0.5), 1.0),
    ("hsla(120, 100%, 50%, 0.3)", CS.HSL, (120.0, 1.0, 0.5), 0.3),
    ("hsl(0.5turn 50% 25%)", CS.HSL, (180.0, 0.5, 0.25), 1.0),
    ("hsl(200grad 50% 25%)", CS.HSL, (180.0, 0.5, 0.25), 1.0),
    ("hsl(3.14159265rad 50% 25%)", CS.HSL, (180.0, 0.5, 0.25), 1.0),
    ("hwb(90 10% 20%)", CS.HWB, (90.0, 0.1, 0.2), 1.0),
    ("lab(50% 20 -30)", CS.LAB, (50.0, 20.0, -30.0), 1.0),
    ("lab(50 100% -100%)", CS.LAB, (50.0, 125.0, -125.0), 1.0),
    ("lch(60 50% 270deg)", CS.LCH, (60.0, 75.0, 270.0), 1.0),
    ("oklab(60% 0.1 -0.1)", CS.OKLAB, (0.6, 0.1, -0.1), 1.0),
    ("oklch(70% 0.1 200 / 0.8)", CS.OKLCH, (0.7, 0.1, 200.0), 0.8),
    ("oklch(0.7 50% 200)", CS.OKLCH, (0.7, 0.2, 200.0), 1.0),
    ("rgb(0 0 0 / 150%)", CS.RGB, (0.0, 0.0, 0.0), 1.0),
    ("rgb(0 0 0 / -1)", CS.RGB, (0.0, 0.0, 0.0), 0.0),
])
def test_parse_functional(text, space, values, alpha):
    assert_color(parse_color(text), space, values, alpha)


@pytest.mark.parametrize("text, space, values", [
    ("color(srgb 1 0.5 0)", CS.RGB, (1.0, 0.5, 0.0)),
    ("color(srgb-linear 0.5 0.5 0.5)", CS.LRGB, (0.5, 0.5, 0.5)),
    ("color(xyz 0.95 1 1.09)", CS.XYZ65, (0.95, 1.0, 1.09)),
    ("color(xyz-d65 0.1 0.2 0.3)", CS.XYZ65, (0.1, 0.2, 0.3)),
    ("color(xyz-d50 0.1 0.2 0.3)", CS.XYZ50, (0.1, 0.2, 0.3)),
    ("color(display-p3 1 0 0)", "display-p3", (1.0, 0.0, 0.0)),
])
def test_parse_color_profiles(text, space, values):
    assert_color(parse_color(text), space, values)


def test_parse_named_colors():
    assert_color(parse_color("Red"), CS.RGB, (1.0, 0.0, 0.0))
    assert_color(parse_color("transparent"), CS.RGB, (0.0, 0.0, 0.0), alpha=0.0)


@pytest.mark.parametrize("text", [
    "",
    "   ",
    "notacolor",
    "rgb(1 2)",
    "rgb(1 2 3",
    "rgb 1 2 3)",
    "rgb(1 2 3) extra",
    "rgb(1 2 3 4 5)",
    "rgb(a b c)",
    "rgb(10deg 0 0)",
    "rgb(0 0 0 / 10deg)",
    "cmyk(1 2 3)",
    "color()",
])
def test_parse_errors(text):
    with pytest.raises(ColorParseError):
        parse_color(text)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_color("nope")


# =============================================================================
# FORMATTING
# =============================================================================

@pytest.mark.parametrize("space, values, alpha, expected", [
    ("rgb", (1.0, 0.0, 0.0), 1.0, "rgb(255 0 0)"),
    ("rgb", (1.0, 0.0, 0.0), 0.5, "rgb(255 0 0 / 0.5)"),
    ("hsl", (120.0, 1.0, 0.5), 1.0, "hsl(120deg 100% 50%)"),
    ("hwb", (90.0, 0.1, 0.2), 1.0, "hwb(90deg 10% 20%)"),
    ("lab", (50.0, 20.0, -30.0), 1.0, "lab(50% 20 -30)"),
    ("lch", (60.0, 75.0, 270.0), 1.0, "lch(60% 75 270deg)"),
    ("oklab", (0.6, 0.1, -0.1), 1.0, "oklab(60% 0.1 -0.1)"),
    ("oklch", (0.7, 0.1, 200.0), 0.25, "oklch(70% 0.1 200deg / 0.25)"),
    ("lrgb", (0.5, 0.25, 0.0), 1.0, "color(srgb-linear 0.5 0.25 0)"),
    ("xyz65", (0.5, 0.25, 0.0), 1.0, "color(xyz-d65 0.5 0.25 0)"),
    ("xyz50", (0.5, 0.25, 0.0), 1.0, "color(xyz-d50 0.5 0.25 0)"),
    ("hsv", (10.0, 0.5, 0.5), 1.0, "color(hsv 10 0.5 0.5)"),
    ("display-p3", (1.0, 0.0, 0.0), 1.0, "color(display-p3 1 0 0)"),
])
def test_format_css(space, values, alpha, expected):
    assert format_css(create_color(space, values, alpha)) == expected


def test_format_precision():
    color = create_color("lab", [50.123456, 0.0, -0.004], 1.0)
    assert format_css(color) == "lab(50.12% 0 0)"
    assert format_css(color, precision=4) == "lab(50.1235% 0 -0.004)"


def test_format_alpha_override():
    color = create_color("rgb", [0.0, 0.0, 0.0], 0.5)
    assert format_css(color, alpha=1.0) == "rgb(0 0 0)"
    assert format_css(create_color("rgb", [0.0, 0.0, 0.0]), alpha=0.2) == "rgb(0 0 0 / 0.2)"


def test_format_hex():
    assert format_css(create_color("rgb", [1.0, 0.0, 0.0]), as_hex=True) == "#ff0000"
    assert format_css(create_color("rgb", [1.0, 0.0, 0.0], 0.5), as_hex=True) == "#ff000080"
    assert format_css(create_color("lab", [100.0, 0.0, 0.0]), as_hex=True) == "#ffffff"
    assert format_css(create_color("hsl", [240.0, 1.0, 0.5]), as_hex=True) == "#0000ff"


@pytest.mark.parametrize("space, values, alpha", [
    ("rgb", (0.2, 0.4, 0.6), 1.0),
    ("hsl", (210.0, 0.5, 0.4), 0.75),
    ("hwb", (33.0, 0.2, 0.3), 1.0),
    ("lab", (54.3, 80.8, 69.9), 1.0),
    ("lch", (54.3, 106.8, 40.9), 0.5),
    ("oklab", (0.628, 0.225, 0.126), 1.0),
    ("oklch", (0.628, 0.258, 29.2), 1.0),
    ("lrgb", (0.1, 0.2, 0.3), 1.0),
    ("xyz65", (0.4, 0.2, 0.05), 0.9),
])
def test_parse_format_round_trip(space, values, alpha):
    color = create_color(space, values, alpha)
    back = parse_color(format_css(color))
    assert back.space == color.space
    np.testing.assert_allclose(back.value, color.value, atol=1e-2)
    assert back.alpha == pytest.approx(alpha, abs=1e-2)
