# -*- coding: utf-8 -*-
"""
Tint: Routing colour through the spaces between
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tint_utils — Colour utilities built on the conversion engine.
"""

from tint_utils.compare import get_distance, is_equal
from tint_utils.contrast import (
    ContrastResult,
    check_contrast,
    check_contrast_bulk,
    get_contrast_rating,
    match_contrast,
    match_scales,
)
from tint_utils.gamut import check_gamut, clamp_color
from tint_utils.palette import (
    HARMONY_PRESETS,
    Harmony,
    HarmonyVariant,
    create_harmony,
    create_scales,
    create_shades,
    mix_color,
)
from tint_utils.picker import ColorPicker, PickerValue, create_picker, from_picker, to_picker
from tint_utils.simulate import simulate_deficiency

__all__ = [
    "is_equal",
    "get_distance",
    "ContrastResult",
    "check_contrast",
    "check_contrast_bulk",
    "get_contrast_rating",
    "match_contrast",
    "match_scales",
    "clamp_color",
    "check_gamut",
    "HarmonyVariant",
    "Harmony",
    "HARMONY_PRESETS",
    "create_harmony",
    "mix_color",
    "create_shades",
    "create_scales",
    "PickerValue",
    "ColorPicker",
    "create_picker",
    "to_picker",
    "from_picker",
    "simulate_deficiency",
]
