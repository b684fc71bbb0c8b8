# -*- coding: utf-8 -*-
"""
Tint: Routing colour through the spaces between
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: picker.py — HSV state model for 2D colour pickers.

The picker keeps hue, saturation, value and alpha, and maps pointer input
onto them:

    'sv' : x → saturation, y → 1 - value (top of the square is bright)
    'h'  : x → hue * 360
    'a'  : x → alpha

Subscribers are called with a snapshot of the state and a colour in the
picker's target space. That colour's buffer goes back to the pool once every
subscriber has returned, so subscribers must copy it if they keep it.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Dict, Final, Optional

import tint_pool
from tint_color import ColorValue
from tint_engine import SpaceLike, convert, resolve_space
from tint_routing import ColorSpace

__all__ = [
    "PickerValue",
    "PickerSubscriber",
    "PICKER_KINDS",
    "to_picker",
    "from_picker",
    "ColorPicker",
    "create_picker",
]

PICKER_KINDS: Final[frozenset] = frozenset({"sv", "h", "a"})


@dataclass(slots=True)
class PickerValue:
    h: float
    s: float
    v: float
    a: float = 1.0


PickerSubscriber = Callable[[PickerValue, ColorValue], None]


def to_picker(color: ColorValue) -> PickerValue:
    """Read ``color`` as picker state (HSV plus alpha)."""
    with tint_pool.scratch() as hsv:
        convert(color.value, hsv, color.space, ColorSpace.HSV)
        return PickerValue(float(hsv[0]), float(hsv[1]), float(hsv[2]), color.alpha)


def from_picker(value: PickerValue, space: SpaceLike) -> ColorValue:
    """Build a new ColorValue in ``space`` from picker state."""
    target = resolve_space(space)
    out = tint_pool.acquire()
    with tint_pool.scratch() as hsv:
        hsv[0] = value.h
        hsv[1] = value.s
        hsv[2] = value.v
        convert(hsv, out, ColorSpace.HSV, target)
    return ColorValue(target, out, value.a)


class ColorPicker:
    """
    Mutable picker state with change notification.

    Args:
        init: Initial colour.
        target: Space of the colours handed to subscribers. Defaults to
            ``init``'s space.
    """

    __slots__ = ("_value", "_space", "_subs", "_next_id")

    def __init__(self, init: ColorValue, target: Optional[SpaceLike] = None) -> None:
        self._value = to_picker(init)
        self._space = resolve_space(target if target is not None else init.space)
        self._subs: Dict[int, PickerSubscriber] = {}
        self._next_id = 0

    def _notify(self) -> None:
        color = from_picker(self._value, self._space)
        snap = replace(self._value)
        try:
            for fn in list(self._subs.values()):
                fn(snap, color)
        finally:
            tint_pool.release(color.value)

    def update(self, x: float, y: float, kind: str) -> None:
        """Apply pointer input of ``kind`` ('sv', 'h' or 'a') and notify."""
        if kind == "sv":
            self._value.s = x
            self._value.v = 1.0 - y
        elif kind == "h":
            self._value.h = x * 360.0
        elif kind == "a":
            self._value.a = x
        else:
            raise ValueError(f"Unknown picker update kind: {kind!r}. Expected 'sv', 'h' or 'a'.")
        self._notify()

    def assign(self, color: ColorValue) -> None:
        """Replace the state from ``color``; no notification if nothing changed."""
        nxt = to_picker(color)
        if nxt == self._value:
            return
        self._value = nxt
        self._notify()

    def subscribe(self, fn: PickerSubscriber) -> Callable[[], None]:
        """Register ``fn``. Returns a callable that unregisters it."""
        key = self._next_id
        self._next_id += 1
        self._subs[key] = fn

        def unsubscribe() -> None:
            self._subs.pop(key, None)

        return unsubscribe

    @property
    def value(self) -> PickerValue:
        return replace(self._value)

    @property
    def hue(self) -> float:
        return self._value.h

    @property
    def saturation(self) -> float:
        return self._value.s

    @property
    def brightness(self) -> float:
        return self._value.v

    @property
    def alpha(self) -> float:
        return self._value.a

    @property
    def space(self) -> ColorSpace:
        return self._space

    def get_solid(self) -> ColorValue:
        """Current colour with alpha forced to 1."""
        return from_picker(replace(self._value, a=1.0), self._space)

    def get_color(self) -> ColorValue:
        return from_picker(self._value, self._space)


def create_picker(init: ColorValue, target: Optional[SpaceLike] = None) -> ColorPicker:
    return ColorPicker(init, target)
