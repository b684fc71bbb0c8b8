# -*- coding: utf-8 -*-
"""
Tint: Routing colour through the spaces between
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: simulate.py — Colour-vision deficiency simulation.

Fixed 3x3 projections applied in linear sRGB. Achromatopsia collapses each
colour onto its Rec. 709 luminance.
"""

from __future__ import annotations

from typing import Dict, Final

import numpy as np
from numpy.typing import NDArray

import tint_pool
from tint_color import ColorValue
from tint_engine import convert, resolve_space
from tint_routing import ColorSpace
from tint_utils.gamut import clamp_color

__all__ = ["DEFICIENCY_MATRICES", "DEFICIENCY_TYPES", "simulate_deficiency"]

_LUMA: Final[NDArray[np.float64]] = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)

DEFICIENCY_MATRICES: Final[Dict[str, NDArray[np.float64]]] = {
    "protanopia": np.array([
        [0.56667, 0.43333, 0.0],
        [0.55833, 0.44167, 0.0],
        [0.0,     0.24167, 0.75833],
    ], dtype=np.float64),
    "deuteranopia": np.array([
        [0.625, 0.375, 0.0],
        [0.7,   0.3,   0.0],
        [0.0,   0.3,   0.7],
    ], dtype=np.float64),
    "tritanopia": np.array([
        [0.95, 0.05,    0.0],
        [0.0,  0.43333, 0.56667],
        [0.0,  0.475,   0.525],
    ], dtype=np.float64),
    "achromatopsia": np.tile(_LUMA, (3, 1)),
}

DEFICIENCY_TYPES: Final[tuple] = tuple(DEFICIENCY_MATRICES)


def simulate_deficiency(color: ColorValue, kind: str) -> ColorValue:
    """
    Approximate how ``color`` appears under a colour-vision deficiency.

    Args:
        color: Source colour; left untouched.
        kind: One of ``DEFICIENCY_TYPES``.

    Returns:
        A new, clamped ColorValue in ``color``'s space with the same alpha.

    Raises:
        ValueError: If ``kind`` is not a known deficiency.
    """
    matrix = DEFICIENCY_MATRICES.get(kind)
    if matrix is None:
        raise ValueError(
            f"Unknown deficiency type: {kind!r}. Expected one of {', '.join(DEFICIENCY_TYPES)}."
        )

    space = resolve_space(color.space)
    out = tint_pool.acquire()
    with tint_pool.scratch() as lrgb:
        convert(color.value, lrgb, space, ColorSpace.LRGB)
        lrgb[:] = matrix @ lrgb.astype(np.float64)
        convert(lrgb, out, ColorSpace.LRGB, space)

    return clamp_color(ColorValue(space, out, color.alpha))
