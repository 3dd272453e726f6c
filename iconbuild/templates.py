"""
Template loading and placeholder substitution.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict

from .constants import (
    EXPORT_DEFAULT_COMPONENT_FROM_DIR, EXPORT_DEFAULT_MANIFEST,
    ICON_GETTER_FUNCTION, ICON_IDENTIFIER, ICON_JSON,
    TWO_TONE_NAME, TWO_TONE_THEME
)
from .exceptions import TemplateError
from .models import BuildPaths

PLACEHOLDER_TOKENS = (
    EXPORT_DEFAULT_COMPONENT_FROM_DIR,
    EXPORT_DEFAULT_MANIFEST,
    ICON_GETTER_FUNCTION,
    ICON_IDENTIFIER,
    ICON_JSON,
    TWO_TONE_NAME,
    TWO_TONE_THEME,
)

# Longest first so no token shadows another sharing its prefix
_TOKEN_RE = re.compile("|".join(
    re.escape(token) for token in sorted(PLACEHOLDER_TOKENS, key=len, reverse=True)
))


@dataclass(frozen=True)
class TemplateSet:
    """The four module templates used by one build."""
    icon: str
    two_tone_icon: str
    index: str
    manifest: str


def read_template(path: Path) -> str:
    """
    Read one template file.

    Raises:
        TemplateError: If the file cannot be read
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except OSError as e:
        raise TemplateError(f"Cannot read template: {e}", str(path)) from e


def load_templates(paths: BuildPaths) -> TemplateSet:
    """Load every template configured in paths."""
    return TemplateSet(
        icon=read_template(paths.icon_template),
        two_tone_icon=read_template(paths.two_tone_icon_template),
        index=read_template(paths.index_template),
        manifest=read_template(paths.manifest_template),
    )


def render(template: str, replacements: Dict[str, str]) -> str:
    """
    Replace every occurrence of the given placeholder tokens.

    Substitution is a single pass, so substituted text is never scanned
    for further tokens. Tokens without a replacement are left in place.
    """
    return _TOKEN_RE.sub(lambda m: replacements.get(m.group(0), m.group(0)), template)
