# -*- coding: utf-8 -*-
"""
Tint: Routing colour through the spaces between
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: contrast.py — APCA lightness contrast and contrast matching.

Sign convention:
    ``check_contrast(text, background)`` is positive for dark text on a light
    background and negative for light text on a dark background. Black on
    white scores a little over +100, white on black a little under -100.

Readability tiers (absolute Lc):
    >= 90 platinum, >= 75 gold, >= 60 silver, >= 45 bronze, >= 30 ui, else fail

References:
    - Somers, A. "APCA: Accessible Perceptual Contrast Algorithm", 0.0.98G.
"""

from __future__ import annotations

from typing import Final, List, NamedTuple, Sequence

import tint_pool
from tint_color import ColorValue
from tint_engine import convert, resolve_space
from tint_routing import ColorSpace
from tint_utils.palette import create_scales

__all__ = [
    "ContrastResult",
    "get_luminance",
    "soft_clamp",
    "calculate_lc",
    "check_contrast",
    "get_contrast_rating",
    "match_contrast",
    "check_contrast_bulk",
    "match_scales",
]

APCA_SCALE: Final[float] = 1.14
DARK_THRESH: Final[float] = 0.022
DARK_CLAMP: Final[float] = 1.414
LC_EPSILON: Final[float] = 0.001
MATCH_ITERATIONS: Final[int] = 12

# Exponents: (background, text) for normal and reverse polarity
_NORMAL_EXP: Final[tuple] = (0.56, 0.57)
_REVERSE_EXP: Final[tuple] = (0.65, 0.62)

_RATING_TIERS: Final[tuple] = (
    (90.0, "platinum"),
    (75.0, "gold"),
    (60.0, "silver"),
    (45.0, "bronze"),
    (30.0, "ui"),
)


class ContrastResult(NamedTuple):
    color: ColorValue
    contrast: float
    rating: str


def get_luminance(color: ColorValue) -> float:
    """Y channel of ``color`` in XYZ (D65)."""
    with tint_pool.scratch() as xyz:
        convert(color.value, xyz, color.space, ColorSpace.XYZ65)
        return float(xyz[1])


def soft_clamp(y: float) -> float:
    """Lift near-black luminance so it cannot produce runaway contrast."""
    if y > DARK_THRESH:
        return y
    return y + (DARK_THRESH - y) ** DARK_CLAMP


def calculate_lc(v_text: float, v_bg: float) -> float:
    """Raw Lc from soft-clamped luminances (unscaled, ~[-1.1, 1.1])."""
    if v_bg > v_text:
        return (v_bg ** _NORMAL_EXP[0] - v_text ** _NORMAL_EXP[1]) * APCA_SCALE
    return (v_bg ** _REVERSE_EXP[0] - v_text ** _REVERSE_EXP[1]) * APCA_SCALE


def _to_percent(lc: float) -> float:
    if abs(lc) < LC_EPSILON:
        return 0.0
    return round(lc * 100.0, 2)


def check_contrast(text: ColorValue, background: ColorValue) -> float:
    """Signed APCA contrast in percent, rounded to 2 decimals."""
    vt = soft_clamp(get_luminance(text))
    vb = soft_clamp(get_luminance(background))
    return _to_percent(calculate_lc(vt, vb))


def get_contrast_rating(contrast: float) -> str:
    rate = abs(contrast)
    for threshold, name in _RATING_TIERS:
        if rate >= threshold:
            return name
    return "fail"


def match_contrast(color: ColorValue, background: ColorValue, target: float) -> ColorValue:
    """
    Adjust Oklch lightness of ``color`` until |Lc| >= ``target`` against ``background``.

    Chroma and hue are held fixed. A fixed 12-step bisection searches toward
    white on dark backgrounds and toward black on light ones; the lightness
    closest to the original that meets the target wins. If no lightness in
    the search interval meets it, the original lightness is kept.

    Returns:
        A new ColorValue in ``color``'s space.
    """
    space = resolve_space(color.space)
    yb = get_luminance(background)
    vb = soft_clamp(yb)
    is_dark_bg = yb < 0.5

    test = tint_pool.acquire()
    xyz = tint_pool.acquire()
    convert(color.value, test, space, ColorSpace.OKLCH)

    start_l = float(test[0])
    low, high = (start_l, 1.0) if is_dark_bg else (0.0, start_l)
    best_l = start_l

    for _ in range(MATCH_ITERATIONS):
        mid = (low + high) * 0.5
        test[0] = mid
        convert(test, xyz, ColorSpace.OKLCH, ColorSpace.XYZ65)
        lc = calculate_lc(soft_clamp(float(xyz[1])), vb)

        if abs(lc * 100.0) < target:
            if is_dark_bg:
                low = mid
            else:
                high = mid
        else:
            best_l = mid
            if is_dark_bg:
                high = mid
            else:
                low = mid

    test[0] = best_l
    out = tint_pool.acquire()
    convert(test, out, ColorSpace.OKLCH, space)

    tint_pool.release(xyz)
    tint_pool.release(test)
    return ColorValue(space, out, color.alpha)


def check_contrast_bulk(background: ColorValue, colors: Sequence[ColorValue]) -> List[ContrastResult]:
    """Contrast and rating of every colour against one background."""
    vb = soft_clamp(get_luminance(background))
    results: List[ContrastResult] = []
    for color in colors:
        contrast = _to_percent(calculate_lc(soft_clamp(get_luminance(color)), vb))
        results.append(ContrastResult(color, contrast, get_contrast_rating(contrast)))
    return results


def match_scales(
    stops: Sequence[ColorValue],
    background: ColorValue,
    target: float,
    steps: int,
) -> List[ColorValue]:
    """Build a scale through ``stops`` and contrast-match every step."""
    matched: List[ColorValue] = []
    for step in create_scales(stops, steps):
        matched.append(match_contrast(step, background, target))
        tint_pool.release(step.value)
    return matched
