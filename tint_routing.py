# -*- coding: utf-8 -*-
"""
Tint: Routing colour through the spaces between
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tint_routing.py — Static routing graph between the eleven colour spaces.

Topology:
  Two hubs, CIE XYZ at D65 (``xyz65``) and at D50 (``xyz50``). Every other
  space has a native hub (the white point it is defined against) and two
  adapter chains: one leading into that hub and one leading out of it.

      rgb ─┐                              ┌─ lab ── lch
      hsv ─┤                              │
      hsl ─┼─ lrgb ── xyz65 ══ CAT ══ xyz50
      hwb ─┘            │
                     oklab ── oklch

  Same-model pairs (the sRGB cylindrical family, lab/lch, oklab/oklch) also
  have DIRECT shortcuts that skip the hub entirely.

The tables are plain dictionaries keyed by ``ColorSpace``. ``_check_tables``
runs at import and raises if any enum member lacks a row.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Final, Tuple, TypeAlias

import tint_adapters as ad
from tint_pool import ColorBuffer

__all__ = [
    "ColorSpace",
    "Adapter",
    "Chain",
    "HUBS",
    "NATIVE_HUB",
    "TO_HUB",
    "FROM_HUB",
    "DIRECT",
    "BRIDGE",
    "TO_POLAR",
    "HUE_INDEX",
]


class ColorSpace(str, Enum):
    """Closed set of supported colour spaces. Values are the CSS-ish tags."""

    RGB = "rgb"
    HSL = "hsl"
    HSV = "hsv"
    HWB = "hwb"
    LAB = "lab"
    LCH = "lch"
    LRGB = "lrgb"
    OKLAB = "oklab"
    OKLCH = "oklch"
    XYZ50 = "xyz50"
    XYZ65 = "xyz65"

    def __str__(self) -> str:
        return self.value


Adapter: TypeAlias = Callable[[ColorBuffer, ColorBuffer], None]
Chain: TypeAlias = Tuple[Adapter, ...]

CS = ColorSpace

HUBS: Final[frozenset] = frozenset({CS.XYZ65, CS.XYZ50})

# Reference white each space is defined against. Hubs map to themselves.
NATIVE_HUB: Final[Dict[ColorSpace, ColorSpace]] = {
    CS.RGB: CS.XYZ65,
    CS.HSL: CS.XYZ65,
    CS.HSV: CS.XYZ65,
    CS.HWB: CS.XYZ65,
    CS.LRGB: CS.XYZ65,
    CS.OKLAB: CS.XYZ65,
    CS.OKLCH: CS.XYZ65,
    CS.LAB: CS.XYZ50,
    CS.LCH: CS.XYZ50,
    CS.XYZ65: CS.XYZ65,
    CS.XYZ50: CS.XYZ50,
}

TO_HUB: Final[Dict[ColorSpace, Chain]] = {
    CS.RGB: (ad.rgb_to_lrgb, ad.lrgb_to_xyz65),
    CS.HSL: (ad.hsl_to_hsv, ad.hsv_to_rgb, ad.rgb_to_lrgb, ad.lrgb_to_xyz65),
    CS.HSV: (ad.hsv_to_rgb, ad.rgb_to_lrgb, ad.lrgb_to_xyz65),
    CS.HWB: (ad.hwb_to_hsv, ad.hsv_to_rgb, ad.rgb_to_lrgb, ad.lrgb_to_xyz65),
    CS.LRGB: (ad.lrgb_to_xyz65,),
    CS.OKLAB: (ad.oklab_to_xyz65,),
    CS.OKLCH: (ad.oklch_to_oklab, ad.oklab_to_xyz65),
    CS.LAB: (ad.lab_to_xyz50,),
    CS.LCH: (ad.lch_to_lab, ad.lab_to_xyz50),
    CS.XYZ65: (),
    CS.XYZ50: (),
}

FROM_HUB: Final[Dict[ColorSpace, Chain]] = {
    CS.RGB: (ad.xyz65_to_lrgb, ad.lrgb_to_rgb),
    CS.HSL: (ad.xyz65_to_lrgb, ad.lrgb_to_rgb, ad.rgb_to_hsv, ad.hsv_to_hsl),
    CS.HSV: (ad.xyz65_to_lrgb, ad.lrgb_to_rgb, ad.rgb_to_hsv),
    CS.HWB: (ad.xyz65_to_lrgb, ad.lrgb_to_rgb, ad.rgb_to_hsv, ad.hsv_to_hwb),
    CS.LRGB: (ad.xyz65_to_lrgb,),
    CS.OKLAB: (ad.xyz65_to_oklab,),
    CS.OKLCH: (ad.xyz65_to_oklab, ad.oklab_to_oklch),
    CS.LAB: (ad.xyz50_to_lab,),
    CS.LCH: (ad.xyz50_to_lab, ad.lab_to_lch),
    CS.XYZ65: (),
    CS.XYZ50: (),
}

# Same-model shortcuts that bypass the hub.
DIRECT: Final[Dict[Tuple[ColorSpace, ColorSpace], Chain]] = {
    (CS.RGB, CS.HSL): (ad.rgb_to_hsv, ad.hsv_to_hsl),
    (CS.RGB, CS.HSV): (ad.rgb_to_hsv,),
    (CS.RGB, CS.HWB): (ad.rgb_to_hsv, ad.hsv_to_hwb),
    (CS.RGB, CS.LRGB): (ad.rgb_to_lrgb,),
    (CS.HSL, CS.RGB): (ad.hsl_to_hsv, ad.hsv_to_rgb),
    (CS.HSL, CS.HSV): (ad.hsl_to_hsv,),
    (CS.HSL, CS.HWB): (ad.hsl_to_hsv, ad.hsv_to_hwb),
    (CS.HSV, CS.RGB): (ad.hsv_to_rgb,),
    (CS.HSV, CS.HSL): (ad.hsv_to_hsl,),
    (CS.HSV, CS.HWB): (ad.hsv_to_hwb,),
    (CS.HWB, CS.RGB): (ad.hwb_to_hsv, ad.hsv_to_rgb),
    (CS.HWB, CS.HSV): (ad.hwb_to_hsv,),
    (CS.HWB, CS.HSL): (ad.hwb_to_hsv, ad.hsv_to_hsl),
    (CS.LRGB, CS.RGB): (ad.lrgb_to_rgb,),
    (CS.LAB, CS.LCH): (ad.lab_to_lch,),
    (CS.LCH, CS.LAB): (ad.lch_to_lab,),
    (CS.OKLAB, CS.OKLCH): (ad.oklab_to_oklch,),
    (CS.OKLCH, CS.OKLAB): (ad.oklch_to_oklab,),
}

# Bradford bridge keyed by (source hub, target hub).
BRIDGE: Final[Dict[Tuple[ColorSpace, ColorSpace], Adapter]] = {
    (CS.XYZ65, CS.XYZ50): ad.xyz65_to_xyz50,
    (CS.XYZ50, CS.XYZ65): ad.xyz50_to_xyz65,
}

# Natural cylindrical / polar face of a rectangular space.
TO_POLAR: Final[Dict[ColorSpace, ColorSpace]] = {
    CS.RGB: CS.HSL,
    CS.LRGB: CS.HSL,
    CS.LAB: CS.LCH,
    CS.OKLAB: CS.OKLCH,
}

# Channel holding the hue angle, for spaces that have one.
HUE_INDEX: Final[Dict[ColorSpace, int]] = {
    CS.HSL: 0,
    CS.HSV: 0,
    CS.HWB: 0,
    CS.LCH: 2,
    CS.OKLCH: 2,
}


def _check_tables() -> None:
    """Fail at import if a ColorSpace member is missing from a routing table."""
    for table_name, table in (
        ("NATIVE_HUB", NATIVE_HUB),
        ("TO_HUB", TO_HUB),
        ("FROM_HUB", FROM_HUB),
    ):
        missing = [cs.value for cs in ColorSpace if cs not in table]
        if missing:
            raise RuntimeError(f"Routing table {table_name} has no row for: {', '.join(missing)}")
    for hub in HUBS:
        if NATIVE_HUB[hub] is not hub or TO_HUB[hub] or FROM_HUB[hub]:
            raise RuntimeError(f"Hub {hub.value} must route to itself with empty chains.")


_check_tables()
