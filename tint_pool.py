# -*- coding: utf-8 -*-
"""
Tint: Routing colour through the spaces between
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tint_pool.py — Bounded free-list of 3-slot float32 colour buffers.

Every conversion in Tint works on tiny (3,) float32 arrays. Allocating one per
intermediate step is the dominant cost of a Python-level conversion chain, so
buffers are recycled through a process-wide free-list instead.

Ownership protocol:
    - ``acquire()`` hands out a buffer that the caller now owns.
    - ``release(buf)`` gives it back. The former owner must not read or write
      it afterwards.
    - Reused buffers are NOT zeroed by default. Every adapter fully overwrites
      its output, so stale content is never observed through the engine.
      ``set_zero_on_release(True)`` switches zeroing on for debugging.

Threading:
    The free-list is unguarded module state. Confine Tint to one thread of
    control, or give each worker its own interpreter.
"""

from __future__ import annotations

import warnings
from contextlib import contextmanager
from typing import Final, Iterator, List, TypeAlias

import numpy as np
from numpy.typing import NDArray

__all__ = [
    "ColorBuffer",
    "BUFFER_DTYPE",
    "MAX_POOL_SIZE",
    "acquire",
    "release",
    "preallocate",
    "clear",
    "pool_size",
    "scratch",
    "set_zero_on_release",
]

# --- Type Aliases ---
ColorBuffer: TypeAlias = NDArray[np.float32]

# --- Constants ---
BUFFER_DTYPE: Final = np.float32
MAX_POOL_SIZE: Final[int] = 256

_pool: List[ColorBuffer] = []


# --- Runtime Configuration ---
# When True, ``release`` zero-fills buffers before recycling them so that a
# use-after-release bug surfaces as black instead of as a plausible colour.
#
# Toggle at runtime via:
#     import tint_pool
#     tint_pool.set_zero_on_release(True)
_ZERO_ON_RELEASE: bool = False

def set_zero_on_release(enabled: bool = True) -> None:
    """
    Toggle zero-filling of buffers returned to the pool.

    Args:
        enabled: If True, released buffers are cleared to 0.0.
    """
    global _ZERO_ON_RELEASE
    _ZERO_ON_RELEASE = bool(enabled)


def _allocate() -> ColorBuffer:
    return np.zeros(3, dtype=BUFFER_DTYPE)


def acquire() -> ColorBuffer:
    """Pop a recycled buffer, or allocate a fresh one if the pool is empty."""
    if _pool:
        return _pool.pop()
    return _allocate()


def release(buf: ColorBuffer) -> None:
    """
    Return a buffer to the pool.

    Releases beyond ``MAX_POOL_SIZE`` are dropped silently. Arrays that are not
    (3,) float32 never enter the pool.
    """
    if buf.shape != (3,) or buf.dtype != BUFFER_DTYPE:
        warnings.warn(
            f"Refusing to pool array of shape {buf.shape} and dtype {buf.dtype}; "
            f"expected (3,) {np.dtype(BUFFER_DTYPE).name}.",
            RuntimeWarning,
            stacklevel=2,
        )
        return
    if len(_pool) < MAX_POOL_SIZE:
        if _ZERO_ON_RELEASE:
            buf.fill(0.0)
        _pool.append(buf)


def preallocate(size: int) -> int:
    """
    Eagerly fill the free-list, never past ``MAX_POOL_SIZE``.

    Returns:
        Number of buffers actually added.
    """
    count = max(0, min(int(size), MAX_POOL_SIZE - len(_pool)))
    for _ in range(count):
        _pool.append(_allocate())
    return count


def clear() -> None:
    """Empty the free-list."""
    _pool.clear()


def pool_size() -> int:
    return len(_pool)


@contextmanager
def scratch() -> Iterator[ColorBuffer]:
    """Borrow one buffer for the duration of a ``with`` block."""
    buf = acquire()
    try:
        yield buf
    finally:
        release(buf)
