# -*- coding: utf-8 -*-
"""
Tint: Routing colour through the spaces between
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: compare.py — Tolerance equality and perceptual distance.
"""

from __future__ import annotations

import math

import tint_pool
from tint_color import ColorValue
from tint_engine import convert, resolve_space
from tint_pool import ColorBuffer
from tint_routing import ColorSpace

__all__ = ["is_equal", "get_distance"]


def _channels_close(a: ColorBuffer, b: ColorBuffer, tolerance: float) -> bool:
    return (
        abs(float(a[0]) - float(b[0])) <= tolerance
        and abs(float(a[1]) - float(b[1])) <= tolerance
        and abs(float(a[2]) - float(b[2])) <= tolerance
    )


def is_equal(a: ColorValue, b: ColorValue, tolerance: float = 1e-4) -> bool:
    """
    Channel-wise equality within ``tolerance``.

    Colours in different spaces are compared in ``a``'s space; ``b`` is
    converted through one scratch buffer.
    """
    if a is b:
        return True
    if abs(a.alpha - b.alpha) > tolerance:
        return False
    if a.space == b.space:
        return _channels_close(a.value, b.value, tolerance)

    with tint_pool.scratch() as tmp:
        convert(b.value, tmp, b.space, a.space)
        return _channels_close(a.value, tmp, tolerance)


def get_distance(a: ColorValue, b: ColorValue) -> float:
    """Euclidean distance in Oklab (a perceptual Delta E)."""
    oklab = ColorSpace.OKLAB
    space_a = resolve_space(a.space)
    space_b = resolve_space(b.space)
    tmp_a = None if space_a is oklab else tint_pool.acquire()
    tmp_b = None if space_b is oklab else tint_pool.acquire()

    va = a.value
    vb = b.value
    if tmp_a is not None:
        convert(a.value, tmp_a, space_a, oklab)
        va = tmp_a
    if tmp_b is not None:
        convert(b.value, tmp_b, space_b, oklab)
        vb = tmp_b

    dl = float(va[0]) - float(vb[0])
    da = float(va[1]) - float(vb[1])
    db = float(va[2]) - float(vb[2])
    distance = math.sqrt(dl * dl + da * da + db * db)

    if tmp_a is not None:
        tint_pool.release(tmp_a)
    if tmp_b is not None:
        tint_pool.release(tmp_b)
    return distance
