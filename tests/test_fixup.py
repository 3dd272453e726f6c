"""
Tests for theme fixups.
"""

import unittest

from iconbuild.fixup import apply_theme_fixup
from iconbuild.models import AbstractNode, IconDefinition, ThemeType


def make_icon(theme, children):
    return IconDefinition(tag="svg", attrs={"viewBox": "0 0 1024 1024"},
                          children=children, name="home", theme=theme)


def node(tag, **attrs):
    return AbstractNode(tag=tag, attrs=attrs, children=[])


class TestApplyThemeFixup(unittest.TestCase):
    """Test the two-tone primary colour default."""

    def test_missing_fill_gets_primary_placeholder(self):
        """Test children without fill."""
        icon = make_icon(ThemeType.TWOTONE, [node("path", d="M0 0"), node("circle", r="4", fill="")])
        fixed = apply_theme_fixup(icon)
        self.assertEqual(fixed.children[0].attrs["fill"], "#333")
        self.assertEqual(fixed.children[1].attrs["fill"], "#333")

    def test_existing_fill_kept(self):
        """Test children that already carry a fill."""
        icon = make_icon(ThemeType.TWOTONE, [node("path", d="M0 0", fill="#E6E6E6")])
        fixed = apply_theme_fixup(icon)
        self.assertEqual(fixed.children[0].attrs["fill"], "#E6E6E6")

    def test_only_path_like_children(self):
        """Test that groups and nested nodes are left alone."""
        group = AbstractNode(tag="g", attrs={}, children=[node("path", d="M1 1")])
        icon = make_icon(ThemeType.TWOTONE, [group, node("defs")])
        fixed = apply_theme_fixup(icon)
        self.assertNotIn("fill", fixed.children[0].attrs)
        self.assertNotIn("fill", fixed.children[0].children[0].attrs)
        self.assertNotIn("fill", fixed.children[1].attrs)

    def test_input_not_mutated(self):
        """Test that the fixup works on a copy."""
        icon = make_icon(ThemeType.TWOTONE, [node("path", d="M0 0")])
        fixed = apply_theme_fixup(icon)
        self.assertNotIn("fill", icon.children[0].attrs)
        self.assertIsNot(fixed, icon)

    def test_single_color_themes_unchanged(self):
        """Test that fill and outline icons pass through."""
        for theme in (ThemeType.FILL, ThemeType.OUTLINE):
            icon = make_icon(theme, [node("path", d="M0 0")])
            fixed = apply_theme_fixup(icon)
            self.assertEqual(fixed, icon)
            self.assertIsNot(fixed, icon)
