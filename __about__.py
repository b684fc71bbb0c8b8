# -*- coding: utf-8 -*-
# Tint: Routing colour through the spaces between.
#
# Copyright (c) 2026 opticsWolf
#
# SPDX-License-Identifier: LGPL-3.0-or-later

"""
Project metadata for the opticsWolf Tint colour engine.
"""

from typing import Final

# Metadata Definitions
__title__: Final[str] = "Tint"
__description__: Final[str] = (
    "A pooled, Numba-accelerated colour conversion engine with CSS "
    "interchange, APCA contrast matching and palette generation."
)
__version__: Final[str] = "0.1.0"
__author__: Final[str] = "opticsWolf"
__license__: Final[str] = "LGPL-3.0-or-later"
__copyright__: Final[str] = "Copyright (c) 2026 opticsWolf"

def metadata_summary() -> dict[str, str]:
    """Returns a dictionary of project metadata for introspection."""
    return {
        "title": __title__,
        "version": __version__,
        "license": __license__,
        "description": __description__,
        "copyright": __copyright__,
    }
