# -*- coding: utf-8 -*-
"""
Tint: Routing colour through the spaces between
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: palette.py — Harmonies, mixing, shades and multi-stop scales.

Hue handling:
  Harmonies rotate hue on the input's natural polar face (oklch for the
  Oklab family, lch for CIELAB, hsl for everything else) and convert each
  result back into the input's own space.

  ``mix_color`` interpolates the hue channel along the shortest arc, so
  350° → 10° passes through 0°, not 180°. Every other channel, alpha
  included, interpolates linearly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Final, List, Sequence, Tuple

import tint_pool
from tint_color import ColorValue, clone_color, derive_color, drop_color
from tint_engine import convert, lookup_space, resolve_space
from tint_routing import HUE_INDEX, ColorSpace

__all__ = [
    "HarmonyVariant",
    "Harmony",
    "HARMONY_PRESETS",
    "create_harmony",
    "mix_color",
    "create_shades",
    "create_scales",
]

CS = ColorSpace


@dataclass(slots=True, frozen=True)
class HarmonyVariant:
    """A named set of hue rotations in degrees."""
    name: str
    ratios: Tuple[float, ...]


@dataclass(slots=True)
class Harmony:
    name: str
    colors: List[ColorValue] = field(default_factory=list)


HARMONY_PRESETS: Final[Dict[str, HarmonyVariant]] = {
    "complementary": HarmonyVariant("complementary", (0.0, 180.0)),
    "analogous": HarmonyVariant("analogous", (-30.0, 0.0, 30.0)),
    "triadic": HarmonyVariant("triadic", (0.0, 120.0, 240.0)),
    "split-complementary": HarmonyVariant("split-complementary", (0.0, 150.0, 210.0)),
    "tetradic": HarmonyVariant("tetradic", (0.0, 90.0, 180.0, 270.0)),
}


def _polar_face(space: ColorSpace) -> ColorSpace:
    if space in (CS.OKLCH, CS.OKLAB):
        return CS.OKLCH
    if space in (CS.LCH, CS.LAB):
        return CS.LCH
    return CS.HSL


def create_harmony(color: ColorValue, variants: Sequence[HarmonyVariant]) -> List[Harmony]:
    """
    Generate hue-rotated variants of ``color``.

    Args:
        color: Base colour.
        variants: Name plus hue offsets (degrees) for each harmony.

    Returns:
        One Harmony per variant, each colour in ``color``'s space.
    """
    space = resolve_space(color.space)
    polar = _polar_face(space)
    h_idx = HUE_INDEX[polar]

    base = tint_pool.acquire()
    convert(color.value, base, space, polar)
    base_hue = float(base[h_idx])

    results: List[Harmony] = []
    for variant in variants:
        harmony = Harmony(variant.name)
        for ratio in variant.ratios:
            h = (base_hue + ratio) % 360.0
            if h < 0.0:
                h += 360.0
            base[h_idx] = h
            out = tint_pool.acquire()
            convert(base, out, polar, space)
            harmony.colors.append(ColorValue(space, out, color.alpha))
        results.append(harmony)
        base[h_idx] = base_hue

    tint_pool.release(base)
    return results


def mix_color(start: ColorValue, end: ColorValue, t: float) -> ColorValue:
    """
    Interpolate from ``start`` to ``end`` by ``t`` (clamped to [0, 1]).

    The result is in ``start``'s space; ``end`` is converted first if needed.
    The hue channel of hsl, hsv, hwb, lch and oklch takes the shortest arc;
    hsv is included so mixes inside the picker's own space stay on the wheel.
    """
    space = start.space
    w = 0.0 if t < 0.0 else 1.0 if t > 1.0 else float(t)
    known = lookup_space(space)
    h_idx = HUE_INDEX.get(known, -1) if known is not None else -1

    converted = None
    end_value = end.value
    if end.space != space:
        converted = derive_color(end, space)
        end_value = converted.value

    res = tint_pool.acquire()
    for c in range(3):
        s_val = float(start.value[c])
        e_val = float(end_value[c])
        if c == h_idx:
            diff = e_val - s_val
            if diff > 180.0:
                e_val -= 360.0
            elif diff < -180.0:
                e_val += 360.0
            h = (s_val + (e_val - s_val) * w) % 360.0
            if h < 0.0:
                h += 360.0
            res[c] = h
        else:
            res[c] = s_val + (e_val - s_val) * w

    if converted is not None:
        drop_color(converted)

    alpha = start.alpha + (end.alpha - start.alpha) * w
    return ColorValue(space, res, alpha)


def create_shades(start: ColorValue, end: ColorValue, steps: int) -> List[ColorValue]:
    """``steps`` evenly spaced mixes from ``start`` to ``end`` inclusive."""
    if steps <= 0:
        return []
    if steps == 1:
        return [clone_color(start)]
    inv_total = 1.0 / (steps - 1)
    return [mix_color(start, end, i * inv_total) for i in range(steps)]


def create_scales(stops: Sequence[ColorValue], steps: int) -> List[ColorValue]:
    """
    Sample ``steps`` colours along a piecewise path through ``stops``.

    Each step maps to a fractional position over ``len(stops) - 1`` segments
    and mixes the two stops that enclose it.
    """
    if steps <= 0:
        return []
    if len(stops) < 2:
        return [clone_color(s) for s in stops]
    if steps == 1:
        return [clone_color(stops[0])]

    segments = len(stops) - 1
    step_interval = 1.0 / (steps - 1)
    scale: List[ColorValue] = []
    for i in range(steps):
        pos = i * step_interval * segments
        idx = int(pos)
        if idx >= segments:
            idx = segments - 1
        scale.append(mix_color(stops[idx], stops[idx + 1], pos - idx))
    return scale
