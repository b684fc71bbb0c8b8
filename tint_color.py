# -*- coding: utf-8 -*-
"""
Tint: Routing colour through the spaces between
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tint_color.py — ColorValue and its lifecycle.

A ColorValue is a space tag, a pool-borrowed (3,) float32 buffer and an alpha.

Lifecycle:
  create_color  → borrow a buffer from the pool and fill it
  clone_color   → new buffer, same space and channels
  mutate_color  → convert in place; same buffer, new tag. The retagged value
                  is returned so call-sites can rebind: ``c = mutate_color(c, "lab")``
  derive_color  → new buffer in the target space, original untouched
  drop_color    → give the buffer back to the pool; the value is dead afterwards

There is no automatic reclamation. A ColorValue that is never dropped simply
leaves its buffer to the garbage collector, which is safe but forfeits reuse.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple, Union

import numpy as np

import tint_pool
from tint_engine import SpaceLike, convert, lookup_space, polar_space, resolve_space
from tint_pool import ColorBuffer
from tint_routing import ColorSpace

__all__ = [
    "ColorSpace",
    "ColorValue",
    "create_color",
    "clone_color",
    "mutate_color",
    "derive_color",
    "drop_color",
    "convert_color",
    "convert_color_hue",
]

ChannelValues = Union[Sequence[float], np.ndarray]


@dataclass(slots=True, eq=False)
class ColorValue:
    """
    A colour in one space.

    ``space`` is a ColorSpace for every registered space. Values parsed from
    ``color(<profile> ...)`` with an unknown profile keep the profile name as
    a plain string; such values format and clamp as pass-through but cannot
    be converted.
    """
    space: Union[ColorSpace, str]
    value: ColorBuffer
    alpha: float = 1.0

    def to_tuple(self) -> Tuple[float, float, float]:
        return (float(self.value[0]), float(self.value[1]), float(self.value[2]))

    def __repr__(self) -> str:
        v0, v1, v2 = self.to_tuple()
        return f"ColorValue({self.space!s}, [{v0:.6g}, {v1:.6g}, {v2:.6g}], alpha={self.alpha:.6g})"


def _coerce_tag(space: SpaceLike) -> Union[ColorSpace, str]:
    known = lookup_space(space)
    return known if known is not None else str(space)


def create_color(space: SpaceLike, values: ChannelValues, alpha: float = 1.0) -> ColorValue:
    """
    Construct a ColorValue backed by a pooled buffer.

    Args:
        space: Space tag. Unregistered names are kept verbatim.
        values: Exactly three channel values.
        alpha: Opacity in [0, 1].

    Raises:
        ValueError: If ``values`` does not hold exactly three channels.
    """
    arr = np.asarray(values, dtype=np.float64).ravel()
    if arr.shape[0] != 3:
        raise ValueError(f"Expected 3 channel values, got {arr.shape[0]}")
    buf = tint_pool.acquire()
    buf[:] = arr
    return ColorValue(_coerce_tag(space), buf, float(alpha))


def clone_color(color: ColorValue) -> ColorValue:
    buf = tint_pool.acquire()
    np.copyto(buf, color.value)
    return ColorValue(color.space, buf, color.alpha)


def mutate_color(color: ColorValue, to: SpaceLike) -> ColorValue:
    """Convert ``color`` in place and retag it. Returns the same object."""
    target = resolve_space(to)
    if color.space == target:
        color.space = target
        return color
    convert(color.value, color.value, color.space, target)
    color.space = target
    return color


def derive_color(color: ColorValue, to: SpaceLike) -> ColorValue:
    """Return a new ColorValue in ``to``; ``color`` is left untouched."""
    target = resolve_space(to)
    if color.space == target:
        copy = clone_color(color)
        copy.space = target
        return copy
    # Unknown tags must raise before a buffer is borrowed
    source = resolve_space(color.space)
    buf = tint_pool.acquire()
    convert(color.value, buf, source, target)
    return ColorValue(target, buf, color.alpha)


def drop_color(color: ColorValue) -> None:
    """Release the colour's buffer. ``color`` must not be used afterwards."""
    tint_pool.release(color.value)


def convert_color(color: ColorValue, to: SpaceLike) -> ColorValue:
    """Public ``convert(value, from, to)`` surface: non-destructive conversion."""
    return derive_color(color, to)


def convert_color_hue(color: ColorValue) -> ColorValue:
    """Derive ``color`` into its polar face, or clone it if it has none."""
    target = polar_space(color.space)
    if target is None:
        return clone_color(color)
    return derive_color(color, target)
