"""
Theme-specific post-processing of materialized icons.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

import copy

from .constants import PATH_LIKE_TAGS, PRIMARY_COLOR_PLACEHOLDER
from .models import IconDefinition, ThemeType


def apply_theme_fixup(icon: IconDefinition) -> IconDefinition:
    """
    Return an independent copy of the icon with theme fixups applied.

    Two-tone sources sometimes leave the primary colour implicit. Every
    immediate path-like child without a fill gets the primary placeholder so
    colour substitution can find it.
    """
    fixed = copy.deepcopy(icon)
    if fixed.theme is not ThemeType.TWOTONE:
        return fixed

    for child in fixed.children:
        if child.tag in PATH_LIKE_TAGS and not child.attrs.get("fill"):
            child.attrs["fill"] = PRIMARY_COLOR_PLACEHOLDER
    return fixed
