# -*- coding: utf-8 -*-
"""Test clamping and gamut checks.

Run:
    pytest tests/test_gamut.py -v
"""

import numpy as np
import pytest

from tint_color import ColorSpace, create_color
from tint_utils.gamut import CLAMP_BOUNDS, check_gamut, clamp_color


def test_every_space_has_bounds():
    assert set(CLAMP_BOUNDS) == set(ColorSpace)


def test_clamp_rgb():
    color = create_color("rgb", [1.2, -0.1, 0.5])
    result = clamp_color(color)
    assert result is color
    np.testing.assert_allclose(color.value, [1.0, 0.0, 0.5])


@pytest.mark.parametrize("hue, expected", [
    (-30.0, 330.0),
    (360.0, 0.0),
    (720.0, 0.0),
    (725.0, 5.0),
    (-0.000001, 0.0),
])
def test_clamp_wraps_hue(hue, expected):
    color = clamp_color(create_color("hsl", [hue, 0.5, 0.5]))
    assert 0.0 <= color.value[0] < 360.0
    assert color.value[0] == pytest.approx(expected, abs=1e-3)


def test_clamp_lch_and_oklab():
    lch = clamp_color(create_color("lch", [120.0, 200.0, 400.0]))
    np.testing.assert_allclose(lch.value, [100.0, 150.0, 40.0], atol=1e-4)
    oklab = clamp_color(create_color("oklab", [-0.1, 0.5, -0.5]))
    np.testing.assert_allclose(oklab.value, [0.0, 0.4, -0.4], atol=1e-6)


@pytest.mark.parametrize("space, values", [
    ("rgb", [1.5, -2.0, 0.3]),
    ("hwb", [-725.0, 1.2, -0.1]),
    ("lab", [150.0, -300.0, 40.0]),
    ("oklch", [0.5, 0.9, 359.9999]),
])
def test_clamp_is_idempotent(space, values):
    once = clamp_color(create_color(space, values))
    first = once.value.copy()
    clamp_color(once)
    np.testing.assert_array_equal(once.value, first)
    assert check_gamut(once)


def test_clamp_without_mutation():
    color = create_color("rgb", [2.0, 0.5, -1.0], alpha=0.3)
    result = clamp_color(color, mutate=False)
    assert result is not color
    assert result.value is not color.value
    assert result.alpha == 0.3
    np.testing.assert_allclose(color.value, [2.0, 0.5, -1.0])
    np.testing.assert_allclose(result.value, [1.0, 0.5, 0.0])


def test_unknown_space_passes_through():
    color = create_color("display-p3", [2.0, -1.0, 0.5])
    clamp_color(color)
    np.testing.assert_allclose(color.value, [2.0, -1.0, 0.5])
    assert check_gamut(color)


def test_check_gamut():
    assert check_gamut(create_color("rgb", [1.0, 0.0, 0.5]))
    assert check_gamut(create_color("rgb", [1.00005, -0.00005, 0.5]))
    assert not check_gamut(create_color("rgb", [1.01, 0.0, 0.5]))
    assert not check_gamut(create_color("rgb", [1.0, 0.0, 0.5]), tolerance=-0.1)
    assert check_gamut(create_color("hsl", [400.0, 0.5, 0.5]))
    assert not check_gamut(create_color("lab", [50.0, 130.0, 0.0]))
