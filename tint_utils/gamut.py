# -*- coding: utf-8 -*-
"""
Tint: Routing colour through the spaces between
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: gamut.py — Per-space channel bounds, clamping and gamut checks.
"""

from __future__ import annotations

from typing import Dict, Final, Tuple

import numpy as np

import tint_pool
from tint_color import ColorValue
from tint_engine import lookup_space
from tint_routing import ColorSpace

__all__ = ["CLAMP_BOUNDS", "HUE_WRAP", "clamp_color", "check_gamut"]

CS = ColorSpace

# Sentinel upper bound that marks a circular (hue) channel.
HUE_WRAP: Final[float] = 360.0

Bounds = Tuple[Tuple[float, float], Tuple[float, float], Tuple[float, float]]

CLAMP_BOUNDS: Final[Dict[ColorSpace, Bounds]] = {
    CS.RGB:   ((0.0, 1.0), (0.0, 1.0), (0.0, 1.0)),
    CS.LRGB:  ((0.0, 1.0), (0.0, 1.0), (0.0, 1.0)),
    CS.HSL:   ((0.0, HUE_WRAP), (0.0, 1.0), (0.0, 1.0)),
    CS.HSV:   ((0.0, HUE_WRAP), (0.0, 1.0), (0.0, 1.0)),
    CS.HWB:   ((0.0, HUE_WRAP), (0.0, 1.0), (0.0, 1.0)),
    CS.LAB:   ((0.0, 100.0), (-128.0, 128.0), (-128.0, 128.0)),
    CS.LCH:   ((0.0, 100.0), (0.0, 150.0), (0.0, HUE_WRAP)),
    CS.OKLAB: ((0.0, 1.0), (-0.4, 0.4), (-0.4, 0.4)),
    CS.OKLCH: ((0.0, 1.0), (0.0, 0.4), (0.0, HUE_WRAP)),
    CS.XYZ50: ((0.0, 1.0), (0.0, 1.0), (0.0, 1.0)),
    CS.XYZ65: ((0.0, 1.0), (0.0, 1.0), (0.0, 1.0)),
}


def clamp_color(color: ColorValue, mutate: bool = True) -> ColorValue:
    """
    Force ``color`` into its space's bounds.

    Circular channels wrap modulo 360 into [0, 360); bounded channels are
    clamped to [min, max]. Spaces without bounds pass through unchanged.

    Args:
        color: Colour to clamp.
        mutate: If True (default), write into ``color.value`` and return
            ``color``. Otherwise return a new ColorValue with a fresh buffer.
    """
    space = lookup_space(color.space)
    bounds = CLAMP_BOUNDS.get(space) if space is not None else None

    if mutate:
        out = color
    else:
        buf = tint_pool.acquire()
        buf[:] = color.value
        out = ColorValue(color.space, buf, color.alpha)

    if bounds is None:
        return out

    value = out.value
    for i, (lo, hi) in enumerate(bounds):
        v = float(value[i])
        if hi == HUE_WRAP:
            v %= HUE_WRAP
            # float32 storage can round 359.99999 up to 360
            if np.float32(v) >= HUE_WRAP:
                v = 0.0
        elif v < lo:
            v = lo
        elif v > hi:
            v = hi
        value[i] = v
    return out


def check_gamut(color: ColorValue, tolerance: float = 1e-4) -> bool:
    """
    True if every non-circular channel lies within [min - tol, max + tol].

    Spaces without bounds are always in gamut.
    """
    space = lookup_space(color.space)
    bounds = CLAMP_BOUNDS.get(space) if space is not None else None
    if bounds is None:
        return True

    for i, (lo, hi) in enumerate(bounds):
        if hi == HUE_WRAP:
            continue
        v = float(color.value[i])
        if v < lo - tolerance or v > hi + tolerance:
            return False
    return True
