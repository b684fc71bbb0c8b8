# -*- coding: utf-8 -*-
"""
Tint: Routing colour through the spaces between
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Conversion Engine
=================
Composes the routing tables into executable adapter chains and runs them
against (3,) float32 buffers.

Algorithm for ``convert(inp, out, src, dst)``:
    1. ``src == dst``: copy, or nothing at all if ``inp is out``.
    2. A DIRECT shortcut exists for ``(src, dst)``: run it and stop.
    3. Otherwise walk the hub path:
         inp --TO_HUB[src]--> out
             --BRIDGE (only if the native hubs differ)--> out
             --FROM_HUB[dst]--> out

Memory:
    ``apply_adapter`` borrows at most ONE scratch buffer from ``tint_pool``
    regardless of chain length, and returns it before leaving. Every adapter
    is alias-safe, so all later stages run in place on ``out``.

Values are never clamped here. Unregistered space tags raise
``UnknownColorSpaceError`` rather than passing the input through unchanged.
"""

from __future__ import annotations

from typing import Optional, Union

import numpy as np

import tint_pool
from tint_pool import ColorBuffer
from tint_routing import (
    BRIDGE,
    DIRECT,
    FROM_HUB,
    NATIVE_HUB,
    TO_HUB,
    TO_POLAR,
    Chain,
    ColorSpace,
)

__all__ = [
    "SpaceLike",
    "UnknownColorSpaceError",
    "resolve_space",
    "lookup_space",
    "apply_adapter",
    "convert",
    "convert_hue",
    "polar_space",
]

SpaceLike = Union[ColorSpace, str]


class UnknownColorSpaceError(ValueError):
    """Raised when a space tag has no row in the routing tables."""

    def __init__(self, tag: object) -> None:
        self.tag = tag
        known = ", ".join(cs.value for cs in ColorSpace)
        super().__init__(f"Unknown color space '{tag}'. Expected one of: {known}.")


def lookup_space(tag: SpaceLike) -> Optional[ColorSpace]:
    """Return the ColorSpace for ``tag``, or None if it is not registered."""
    if isinstance(tag, ColorSpace):
        return tag
    try:
        return ColorSpace(str(tag).strip().lower())
    except ValueError:
        return None


def resolve_space(tag: SpaceLike) -> ColorSpace:
    """Like ``lookup_space`` but raises ``UnknownColorSpaceError``."""
    space = lookup_space(tag)
    if space is None:
        raise UnknownColorSpaceError(tag)
    return space


def apply_adapter(chain: Chain, inp: ColorBuffer, out: ColorBuffer) -> None:
    """
    Execute an ordered adapter chain from ``inp`` into ``out``.

    Args:
        chain: Adapters to run, first to last.
        inp: Source buffer.
        out: Destination buffer. May be ``inp`` itself.
    """
    n = len(chain)
    if n == 0:
        if inp is not out:
            np.copyto(out, inp)
        return

    if n == 1:
        chain[0](inp, out)
        return

    buf = tint_pool.acquire()
    chain[0](inp, buf)
    for step in chain[1:-1]:
        step(buf, buf)
    chain[-1](buf, out)
    tint_pool.release(buf)


def convert(inp: ColorBuffer, out: ColorBuffer, from_space: SpaceLike, to_space: SpaceLike) -> None:
    """
    Write the value of ``inp`` (in ``from_space``) into ``out`` (in ``to_space``).

    ``inp`` and ``out`` may be the same buffer.

    Raises:
        UnknownColorSpaceError: If either tag is not a registered space.
    """
    src = resolve_space(from_space)
    dst = resolve_space(to_space)

    if src is dst:
        if inp is not out:
            np.copyto(out, inp)
        return

    direct = DIRECT.get((src, dst))
    if direct is not None:
        apply_adapter(direct, inp, out)
        return

    source_hub = NATIVE_HUB[src]
    target_hub = NATIVE_HUB[dst]

    apply_adapter(TO_HUB[src], inp, out)

    if source_hub is not target_hub:
        BRIDGE[(source_hub, target_hub)](out, out)

    apply_adapter(FROM_HUB[dst], out, out)


def polar_space(space: SpaceLike) -> Optional[ColorSpace]:
    """Polar face of ``space`` (rgb -> hsl, lab -> lch, ...), or None."""
    return TO_POLAR.get(resolve_space(space))


def convert_hue(inp: ColorBuffer, out: ColorBuffer, space: SpaceLike) -> None:
    """
    Convert into the natural cylindrical face of ``space``.

    Spaces that are already polar, or have no polar counterpart, are copied.
    """
    target = polar_space(space)
    if target is None:
        if inp is not out:
            np.copyto(out, inp)
        return
    convert(inp, out, space, target)
