"""
Application constants for iconbuild.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

from pathlib import Path

# Config file looked up in the base directory when --config is not given
DEFAULT_CONFIG_FILENAME = "iconbuild.json"

# Default layout, relative to the base directory
DEFAULT_SVG_DIR = "svg"
DEFAULT_ICON_OUTPUT_DIR = "generated"
DEFAULT_INDEX_OUTPUT = "generated/__init__.py"
DEFAULT_MANIFEST_OUTPUT = "generated/manifest.py"

# Bundled templates
TEMPLATE_DIR = Path(__file__).parent / "template_files"
DEFAULT_ICON_TEMPLATE = TEMPLATE_DIR / "icon.py.tpl"
DEFAULT_TWO_TONE_ICON_TEMPLATE = TEMPLATE_DIR / "twotone_icon.py.tpl"
DEFAULT_INDEX_TEMPLATE = TEMPLATE_DIR / "index.py.tpl"
DEFAULT_MANIFEST_TEMPLATE = TEMPLATE_DIR / "manifest.py.tpl"

# Extensions
SVG_EXTENSION = ".svg"
OUTPUT_EXTENSION = ".py"

# Worker pool
DEFAULT_MAX_WORKERS = 8

# Formatter defaults (black)
DEFAULT_LINE_LENGTH = 88

# Optimizer defaults
DEFAULT_REMOVE_ELEMENTS = ["title", "desc", "metadata"]

# Identifier suffix per theme value
THEME_SUFFIXES = {
    "fill": "Fill",
    "outline": "Outline",
    "twotone": "TwoTone",
}

# Canonical kebab-case icon name
ICON_NAME_PATTERN = r'^[a-z][a-z0-9]*(-[a-z0-9]+)*$'

# Template placeholder tokens
ICON_IDENTIFIER = "$ICON_IDENTIFIER"
ICON_JSON = "$ICON_JSON"
ICON_GETTER_FUNCTION = "$ICON_GETTER_FUNCTION"
TWO_TONE_NAME = "$TWO_TONE_NAME"
TWO_TONE_THEME = "$TWO_TONE_THEME"
EXPORT_DEFAULT_COMPONENT_FROM_DIR = "$EXPORT_DEFAULT_COMPONENT_FROM_DIR"
EXPORT_DEFAULT_MANIFEST = "$EXPORT_DEFAULT_MANIFEST"

# Two-tone colour placeholders, matched as quoted JSON string literals
PRIMARY_COLOR_PLACEHOLDER = "#333"
SECONDARY_COLOR_PLACEHOLDERS = ("#E6E6E6", "#D9D9D9", "#D8D8D8")
PRIMARY_COLOR_PARAM = "primaryColor"
SECONDARY_COLOR_PARAM = "secondaryColor"

# Drawable elements that receive the default primary fill in two-tone icons
PATH_LIKE_TAGS = frozenset({
    "path",
    "circle",
    "ellipse",
    "rect",
    "polygon",
    "polyline",
    "line",
})
