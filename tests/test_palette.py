# -*- coding: utf-8 -*-
"""Test harmonies, mixing, shades and scales.

Run:
    pytest tests/test_palette.py -v
"""

import numpy as np
import pytest

from tint_color import ColorSpace, create_color
from tint_utils.palette import (
    HARMONY_PRESETS,
    HarmonyVariant,
    create_harmony,
    create_scales,
    create_shades,
    mix_color,
)

CS = ColorSpace


def hue_gap(a, b):
    d = abs(float(a) - float(b)) % 360.0
    return min(d, 360.0 - d)


def test_mix_takes_shortest_hue_arc():
    start = create_color("hsl", [350.0, 1.0, 0.5])
    end = create_color("hsl", [10.0, 1.0, 0.5])
    mid = mix_color(start, end, 0.5)
    assert hue_gap(mid.value[0], 0.0) < 1e-3
    assert 0.0 <= mid.value[0] < 360.0


def test_mix_shortest_arc_other_direction():
    start = create_color("oklch", [0.5, 0.1, 20.0])
    end = create_color("oklch", [0.7, 0.2, 300.0])
    quarter = mix_color(start, end, 0.25)
    np.testing.assert_allclose(quarter.value[:2], [0.55, 0.125], atol=1e-6)
    assert quarter.value[2] == pytest.approx(0.0, abs=1e-3)


def test_mix_in_hsv_takes_shortest_hue_arc():
    start = create_color("hsv", [340.0, 1.0, 1.0])
    end = create_color("hsv", [20.0, 1.0, 1.0])
    mid = mix_color(start, end, 0.5)
    assert hue_gap(mid.value[0], 0.0) < 1e-3


def test_mix_clamps_t_and_interpolates_alpha():
    start = create_color("rgb", [0.0, 0.0, 0.0], alpha=0.0)
    end = create_color("rgb", [1.0, 0.5, 0.25], alpha=1.0)
    np.testing.assert_allclose(mix_color(start, end, 2.0).value, end.value)
    np.testing.assert_allclose(mix_color(start, end, -1.0).value, start.value)
    half = mix_color(start, end, 0.5)
    np.testing.assert_allclose(half.value, [0.5, 0.25, 0.125], atol=1e-6)
    assert half.alpha == pytest.approx(0.5)


def test_mix_converts_end_into_start_space():
    start = create_color("rgb", [1.0, 0.0, 0.0])
    end = create_color("hsl", [240.0, 1.0, 0.5])
    mid = mix_color(start, end, 0.5)
    assert mid.space is CS.RGB
    np.testing.assert_allclose(mid.value, [0.5, 0.0, 0.5], atol=1e-5)
    assert end.space is CS.HSL


def test_create_shades():
    start = create_color("rgb", [0.0, 0.0, 0.0])
    end = create_color("rgb", [1.0, 1.0, 1.0])
    shades = create_shades(start, end, 5)
    assert len(shades) == 5
    np.testing.assert_allclose(shades[0].value, start.value)
    np.testing.assert_allclose(shades[-1].value, end.value)
    np.testing.assert_allclose(shades[1].value, [0.25, 0.25, 0.25], atol=1e-6)


def test_create_shades_edge_counts():
    start = create_color("rgb", [0.2, 0.2, 0.2])
    end = create_color("rgb", [0.8, 0.8, 0.8])
    assert create_shades(start, end, 0) == []
    single = create_shades(start, end, 1)
    assert len(single) == 1
    assert single[0].value is not start.value
    np.testing.assert_allclose(single[0].value, start.value)


def test_create_scales_hits_every_stop():
    stops = [
        create_color("rgb", [1.0, 0.0, 0.0]),
        create_color("rgb", [0.0, 1.0, 0.0]),
        create_color("rgb", [0.0, 0.0, 1.0]),
    ]
    scale = create_scales(stops, 5)
    assert len(scale) == 5
    np.testing.assert_allclose(scale[0].value, stops[0].value, atol=1e-6)
    np.testing.assert_allclose(scale[1].value, [0.5, 0.5, 0.0], atol=1e-6)
    np.testing.assert_allclose(scale[2].value, stops[1].value, atol=1e-6)
    np.testing.assert_allclose(scale[3].value, [0.0, 0.5, 0.5], atol=1e-6)
    np.testing.assert_allclose(scale[4].value, stops[2].value, atol=1e-6)


def test_create_scales_degenerate_inputs():
    red = create_color("rgb", [1.0, 0.0, 0.0])
    blue = create_color("rgb", [0.0, 0.0, 1.0])
    assert create_scales([red, blue], 0) == []
    assert len(create_scales([red], 4)) == 1
    one = create_scales([red, blue], 1)
    np.testing.assert_allclose(one[0].value, red.value)


def test_complementary_of_red_is_cyan():
    red = create_color("rgb", [1.0, 0.0, 0.0])
    (harmony,) = create_harmony(red, [HARMONY_PRESETS["complementary"]])
    assert harmony.name == "complementary"
    assert len(harmony.colors) == 2
    np.testing.assert_allclose(harmony.colors[0].value, [1.0, 0.0, 0.0], atol=1e-5)
    np.testing.assert_allclose(harmony.colors[1].value, [0.0, 1.0, 1.0], atol=1e-5)
    assert all(c.space is CS.RGB for c in harmony.colors)


def test_harmony_wraps_negative_offsets():
    base = create_color("hsl", [10.0, 0.5, 0.5], alpha=0.4)
    (harmony,) = create_harmony(base, [HARMONY_PRESETS["analogous"]])
    hues = [float(c.value[0]) for c in harmony.colors]
    np.testing.assert_allclose(hues, [340.0, 10.0, 40.0], atol=1e-4)
    assert all(c.alpha == 0.4 for c in harmony.colors)


def test_harmony_in_oklch_keeps_lightness_and_chroma():
    base = create_color("oklch", [0.6, 0.1, 30.0])
    results = create_harmony(base, [HARMONY_PRESETS["triadic"], HarmonyVariant("pair", (0.0, 90.0))])
    assert [h.name for h in results] == ["triadic", "pair"]
    triad = results[0].colors
    assert len(triad) == 3
    for color, hue in zip(triad, (30.0, 150.0, 270.0)):
        np.testing.assert_allclose(color.value, [0.6, 0.1, hue], atol=1e-4)
    np.testing.assert_allclose(results[1].colors[1].value, [0.6, 0.1, 120.0], atol=1e-4)
