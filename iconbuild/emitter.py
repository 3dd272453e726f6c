"""
Code emitters for icon, index and manifest modules.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

import json
from typing import Dict, Sequence

from .constants import (
    EXPORT_DEFAULT_COMPONENT_FROM_DIR, EXPORT_DEFAULT_MANIFEST,
    ICON_GETTER_FUNCTION, ICON_IDENTIFIER, ICON_JSON,
    PRIMARY_COLOR_PARAM, PRIMARY_COLOR_PLACEHOLDER,
    SECONDARY_COLOR_PARAM, SECONDARY_COLOR_PLACEHOLDERS,
    TWO_TONE_NAME, TWO_TONE_THEME
)
from .formatter import CodeFormatter
from .models import (
    BuildTimeIconMetaData, IconDefinition, Manifest, ThemeType
)
from .templates import TemplateSet, render

INDEX_IDENTIFIER = "index"
MANIFEST_IDENTIFIER = "manifest"


def serialize_icon(icon: IconDefinition) -> str:
    """Canonical structured-text form of an icon."""
    return json.dumps(icon.to_dict())


def color_replacements() -> Dict[str, str]:
    """Quoted colour literals mapped to the getter parameter that replaces them."""
    replacements = {json.dumps(PRIMARY_COLOR_PLACEHOLDER): PRIMARY_COLOR_PARAM}
    for literal in SECONDARY_COLOR_PLACEHOLDERS:
        replacements[json.dumps(literal)] = SECONDARY_COLOR_PARAM
    return replacements


def parameterize_colors(serialized: str) -> str:
    """
    Swap the known placeholder colour literals for getter parameters.

    Matching is exact and textual. Any other colour literal is kept as is.
    """
    for literal, param in color_replacements().items():
        serialized = serialized.replace(literal, param)
    return serialized


def build_manifest(metadata: Sequence[BuildTimeIconMetaData]) -> Manifest:
    """Group materialized icon names by theme, keeping their order."""
    manifest = Manifest()
    for meta in metadata:
        manifest.names_for(meta.icon.theme).append(meta.icon.name)
    return manifest


def index_line(meta: BuildTimeIconMetaData) -> str:
    """Re-export statement for one generated icon module."""
    return f"from .{meta.icon.theme.value}.{meta.identifier} import {meta.identifier}\n"


class CodeEmitter:
    """Renders icons and aggregates into formatted module source."""

    def __init__(self, templates: TemplateSet, formatter: CodeFormatter) -> None:
        """
        Initialize the emitter.

        Args:
            templates: Loaded module templates
            formatter: Formatter applied to every rendered module
        """
        self.templates = templates
        self.formatter = formatter

    def emit_icon(self, identifier: str, icon: IconDefinition) -> str:
        """
        Render one icon module.

        Two-tone icons are expected to have gone through the theme fixup.

        Raises:
            FormatError: If the rendered module cannot be formatted
        """
        if icon.theme is ThemeType.TWOTONE:
            return self._emit_two_tone(identifier, icon)
        source = render(self.templates.icon, {
            ICON_IDENTIFIER: identifier,
            ICON_JSON: serialize_icon(icon),
        })
        return self.formatter.format(source, identifier)

    def _emit_two_tone(self, identifier: str, icon: IconDefinition) -> str:
        body = f"return {parameterize_colors(serialize_icon(icon))}"
        source = render(self.templates.two_tone_icon, {
            ICON_IDENTIFIER: identifier,
            ICON_GETTER_FUNCTION: body,
            TWO_TONE_NAME: icon.name,
            TWO_TONE_THEME: icon.theme.value,
        })
        return self.formatter.format(source, identifier)

    def emit_index(self, metadata: Sequence[BuildTimeIconMetaData]) -> str:
        """Render the index module re-exporting every icon in the given order."""
        exports = "".join(index_line(meta) for meta in metadata)
        source = render(self.templates.index, {EXPORT_DEFAULT_COMPONENT_FROM_DIR: exports})
        return self.formatter.format(source, INDEX_IDENTIFIER)

    def emit_manifest(self, manifest: Manifest) -> str:
        """Render the manifest module."""
        statement = f"MANIFEST = {json.dumps(manifest.to_dict())}"
        source = render(self.templates.manifest, {EXPORT_DEFAULT_MANIFEST: statement})
        return self.formatter.format(source, MANIFEST_IDENTIFIER)

