# -*- coding: utf-8 -*-
"""
Tint: Routing colour through the spaces between
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tint_css.py — CSS Color 4 text interchange.

Grammar accepted by ``parse_color``:
  #RGB  #RGBA  #RRGGBB  #RRGGBBAA
  rgb(r g b [/ a])        rgb(r, g, b[, a])        (also rgba)
  hsl(h s l [/ a])        hsl(h, s, l[, a])        (also hsla)
  hwb | lab | lch | oklab | oklch  in either separator style
  color(<profile> v0 v1 v2 [/ a])
  a small table of named colours, plus ``transparent``

Channel normalisation (stored value ← CSS token):
  rgb          bare 0..255 → /255,   percentage → /100
  hsl / hwb    hue in degrees (deg|rad|grad|turn), s/l and w/b → /100
  lab / lch    L on the CIE 0..100 scale; ``50%`` and ``50`` both give 50
  oklab/oklch  L on 0..1; ``50%`` gives 0.5, bare numbers are taken as is
  a/b, C       percentage references: lab 125, lch 150, oklab/oklch 0.4
  alpha        float or percentage, clamped to [0, 1]
  ``none``     0

``format_css`` mirrors the grammar exactly, so ``parse_color(format_css(c))``
reproduces ``c`` to the requested rounding precision.
"""

from __future__ import annotations

import math
import re
from typing import Dict, Final, List, Optional, Tuple

import tint_pool
from tint_color import ColorValue, create_color
from tint_engine import convert, lookup_space
from tint_pool import ColorBuffer
from tint_routing import ColorSpace

__all__ = [
    "ColorParseError",
    "NAMED_COLORS",
    "PROFILE_ALIASES",
    "parse_color",
    "format_css",
    "rgb_to_hex",
    "hex_to_rgb",
]

CS = ColorSpace

INV_255: Final[float] = 1.0 / 255.0
INV_100: Final[float] = 1.0 / 100.0

# CSS keywords resolved after hex and functional forms; not the full CSS Color 4 list
NAMED_COLORS: Final[Dict[str, str]] = {
    "black": "#000000",
    "silver": "#c0c0c0",
    "gray": "#808080",
    "grey": "#808080",
    "white": "#ffffff",
    "maroon": "#800000",
    "red": "#ff0000",
    "purple": "#800080",
    "fuchsia": "#ff00ff",
    "green": "#008000",
    "lime": "#00ff00",
    "olive": "#808000",
    "yellow": "#ffff00",
    "navy": "#000080",
    "blue": "#0000ff",
    "teal": "#008080",
    "aqua": "#00ffff",
    "orange": "#ffa500",
    "rebeccapurple": "#663399",
    "transparent": "#00000000",
}

# color(<profile> ...) names that map onto registered spaces.
PROFILE_ALIASES: Final[Dict[str, str]] = {
    "srgb": "rgb",
    "srgb-linear": "lrgb",
    "xyz": "xyz65",
    "xyz-d65": "xyz65",
    "xyz-d50": "xyz50",
}

# Profile keyword written by format_css for spaces without a CSS function.
_PROFILE_NAMES: Final[Dict[ColorSpace, str]] = {
    CS.LRGB: "srgb-linear",
    CS.XYZ65: "xyz-d65",
    CS.XYZ50: "xyz-d50",
}

_FUNCTIONS: Final[frozenset] = frozenset({
    CS.RGB, CS.HSL, CS.HWB, CS.LAB, CS.LCH, CS.OKLAB, CS.OKLCH,
})

_HEX_DIGITS_RE = re.compile(r"^[0-9a-fA-F]+$")
_TOKEN_SPLIT_RE = re.compile(r"[,\s/]+")
_NUMBER_RE = re.compile(
    r"^([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)(%|deg|grad|rad|turn)?$",
    re.IGNORECASE,
)

# Angle unit → degrees
_ANGLE_FACTORS: Final[Dict[str, float]] = {
    "deg": 1.0,
    "grad": 0.9,
    "rad": 180.0 / math.pi,
    "turn": 360.0,
}

# Value that 100% stands for, per (space, channel). Missing → 1.
_PERCENT_REFERENCE: Final[Dict[Tuple[ColorSpace, int], float]] = {
    (CS.LAB, 0): 100.0,
    (CS.LAB, 1): 125.0,
    (CS.LAB, 2): 125.0,
    (CS.LCH, 0): 100.0,
    (CS.LCH, 1): 150.0,
    (CS.OKLAB, 1): 0.4,
    (CS.OKLAB, 2): 0.4,
    (CS.OKLCH, 1): 0.4,
}

_HUE_CHANNELS: Final[frozenset] = frozenset({
    (CS.HSL, 0), (CS.HWB, 0), (CS.LCH, 2), (CS.OKLCH, 2),
})


class ColorParseError(ValueError):
    """Raised for CSS text that is not a recognisable colour."""

    def __init__(self, message: str, text: str) -> None:
        self.text = text
        super().__init__(f"{message}: {text!r}")


# =============================================================================
# 1. HEX
# =============================================================================

def _parse_hex_digits(digits: str, source: str) -> Tuple[int, int, int, int]:
    n = len(digits)
    if n not in (3, 4, 6, 8):
        raise ColorParseError(f"Invalid hex length {n}", source)
    if not _HEX_DIGITS_RE.match(digits):
        raise ColorParseError("Invalid hex digits", source)

    if n in (3, 4):
        # Each nibble doubles: #f80 == #ff8800
        vals = [int(ch, 16) * 17 for ch in digits]
    else:
        vals = [int(digits[i:i + 2], 16) for i in range(0, n, 2)]
    if len(vals) == 3:
        vals.append(255)
    return vals[0], vals[1], vals[2], vals[3]


def hex_to_rgb(text: str, out: ColorBuffer) -> float:
    """
    Decode ``#rgb``/``#rrggbb`` (leading ``#`` optional) into ``out``.

    Returns:
        The alpha encoded in the string, 1.0 when absent.
    """
    digits = text.strip()
    if digits.startswith("#"):
        digits = digits[1:]
    r, g, b, a = _parse_hex_digits(digits, text)
    out[0] = r * INV_255
    out[1] = g * INV_255
    out[2] = b * INV_255
    return a * INV_255


def _to_byte(v: float) -> int:
    byte = int(math.floor(float(v) * 255.0 + 0.5))
    return 0 if byte < 0 else 255 if byte > 255 else byte


def rgb_to_hex(buf: ColorBuffer, denote: bool = False) -> str:
    """Encode rgb channels in 0..1 as ``rrggbb``; channels are clamped."""
    hex_str = f"{_to_byte(buf[0]):02x}{_to_byte(buf[1]):02x}{_to_byte(buf[2]):02x}"
    return f"#{hex_str}" if denote else hex_str


# =============================================================================
# 2. FUNCTIONAL NOTATION
# =============================================================================

def _parse_token(token: str, space: Optional[ColorSpace], index: int, source: str) -> float:
    if token.lower() == "none":
        return 0.0
    m = _NUMBER_RE.match(token)
    if not m:
        raise ColorParseError(f"Invalid channel value {token!r}", source)
    num = float(m.group(1))
    unit = (m.group(2) or "").lower()

    if unit in _ANGLE_FACTORS:
        if (space, index) not in _HUE_CHANNELS:
            raise ColorParseError(f"Angle unit on non-hue channel {token!r}", source)
        return num * _ANGLE_FACTORS[unit]

    if space is CS.RGB:
        return num * INV_100 if unit == "%" else num * INV_255
    if space in (CS.HSL, CS.HWB) and index > 0:
        return num * INV_100
    if unit == "%":
        return num * INV_100 * _PERCENT_REFERENCE.get((space, index), 1.0)
    return num


def _parse_alpha(token: str, source: str) -> float:
    if token.lower() == "none":
        return 0.0
    m = _NUMBER_RE.match(token)
    if not m or (m.group(2) and m.group(2) != "%"):
        raise ColorParseError(f"Invalid alpha value {token!r}", source)
    alpha = float(m.group(1))
    if m.group(2) == "%":
        alpha *= INV_100
    return min(1.0, max(0.0, alpha))


def _parse_functional(text: str, source: str) -> ColorValue:
    open_paren = text.find("(")
    close_paren = text.rfind(")")
    if open_paren == -1 or close_paren == -1 or close_paren < open_paren:
        raise ColorParseError("Unmatched parentheses", source)
    if text[close_paren + 1:].strip():
        raise ColorParseError("Unexpected text after ')'", source)

    name = text[:open_paren].strip().lower()
    parts: List[str] = [p for p in _TOKEN_SPLIT_RE.split(text[open_paren + 1:close_paren]) if p]

    tag: str
    if name == "color":
        if not parts:
            raise ColorParseError("Missing color() profile", source)
        profile = parts.pop(0).lower()
        tag = PROFILE_ALIASES.get(profile, profile)
        space = lookup_space(tag)
        # color() channels are raw numbers in every profile
        channel_space = None
    else:
        if len(name) > 3 and name.endswith("a"):
            name = name[:-1]
        space = lookup_space(name)
        if space is None or space not in _FUNCTIONS:
            raise ColorParseError(f"Unknown color function {name!r}", source)
        tag = space.value
        channel_space = space

    if len(parts) < 3:
        raise ColorParseError(f"Expected 3 channels, got {len(parts)}", source)
    if len(parts) > 4:
        raise ColorParseError(f"Too many channel values ({len(parts)})", source)

    values = [_parse_token(parts[i], channel_space, i, source) for i in range(3)]
    alpha = _parse_alpha(parts[3], source) if len(parts) == 4 else 1.0
    return create_color(space if space is not None else tag, values, alpha)


def parse_color(text: str) -> ColorValue:
    """
    Parse CSS colour text into a pooled ColorValue.

    Raises:
        ColorParseError: For malformed hex, unmatched parentheses, bad
            channel tokens, or text of neither hex nor functional shape.
    """
    source = text
    trimmed = text.strip()
    if not trimmed:
        raise ColorParseError("Empty color string", source)

    if trimmed[0] == "#":
        r, g, b, a = _parse_hex_digits(trimmed[1:], source)
        return create_color(CS.RGB, [r * INV_255, g * INV_255, b * INV_255], a * INV_255)

    if "(" in trimmed or ")" in trimmed:
        return _parse_functional(trimmed, source)

    named = NAMED_COLORS.get(trimmed.lower())
    if named is not None:
        return parse_color(named)

    raise ColorParseError("Invalid color format", source)


# =============================================================================
# 3. FORMATTING
# =============================================================================

def _num(value: float, precision: int) -> str:
    """Round and render without trailing zeros: 50.0 → '50', 0.125 → '0.13'."""
    rounded = round(float(value), precision)
    if rounded == 0.0:
        return "0"
    if rounded == int(rounded):
        return str(int(rounded))
    return f"{rounded:.{precision}f}".rstrip("0").rstrip(".")


def format_css(
    color: ColorValue,
    alpha: Optional[float] = None,
    as_hex: bool = False,
    precision: int = 2,
) -> str:
    """
    Render ``color`` as CSS text.

    Args:
        color: Value to format.
        alpha: Alpha override. Defaults to ``color.alpha``. Written only when < 1.
        as_hex: Emit ``#rrggbb[aa]``. Registered non-rgb spaces are converted
            to rgb first.
        precision: Decimal places kept for every non-integer channel.
    """
    a = color.alpha if alpha is None else float(alpha)
    space = lookup_space(color.space)
    value = color.value

    if as_hex and space is not None:
        if space is CS.RGB:
            hex_str = rgb_to_hex(value, denote=True)
        else:
            with tint_pool.scratch() as rgb:
                convert(value, rgb, space, CS.RGB)
                hex_str = rgb_to_hex(rgb, denote=True)
        if a < 1.0:
            return f"{hex_str}{_to_byte(a):02x}"
        return hex_str

    suffix = f" / {_num(a, precision)}" if a < 1.0 else ""
    n1 = _num(value[0], precision)
    n2 = _num(value[1], precision)
    n3 = _num(value[2], precision)

    if space is CS.RGB:
        r = int(math.floor(float(value[0]) * 255.0 + 0.5))
        g = int(math.floor(float(value[1]) * 255.0 + 0.5))
        b = int(math.floor(float(value[2]) * 255.0 + 0.5))
        return f"rgb({r} {g} {b}{suffix})"
    if space in (CS.HSL, CS.HWB):
        s = _num(value[1] * 100.0, precision)
        lv = _num(value[2] * 100.0, precision)
        return f"{space.value}({n1}deg {s}% {lv}%{suffix})"
    if space is CS.LAB:
        return f"lab({n1}% {n2} {n3}{suffix})"
    if space is CS.LCH:
        return f"lch({n1}% {n2} {n3}deg{suffix})"
    if space is CS.OKLAB:
        return f"oklab({_num(value[0] * 100.0, precision)}% {n2} {n3}{suffix})"
    if space is CS.OKLCH:
        return f"oklch({_num(value[0] * 100.0, precision)}% {n2} {n3}deg{suffix})"
    if space in _PROFILE_NAMES:
        return f"color({_PROFILE_NAMES[space]} {n1} {n2} {n3}{suffix})"

    tag = space.value if space is not None else str(color.space)
    return f"color({tag} {n1} {n2} {n3}{suffix})"
