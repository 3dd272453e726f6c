"""
Icon name normalization.

Collects the base names shared across all theme directories and derives the
identifiers used for generated modules.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

import re
from pathlib import Path
from typing import Dict, Iterable, List

from .constants import SVG_EXTENSION, THEME_SUFFIXES
from .exceptions import InvalidIconNameError
from .models import THEME_ORDER, ThemeType
from .utils.logger import get_logger
from .utils.validators import validate_icon_name

logger = get_logger(__name__)


def to_kebab_case(raw: str) -> str:
    """
    Convert a raw file stem to kebab-case.

    Returns an empty string when no valid name can be derived.
    """
    if not raw:
        return ""
    name = re.sub(r'([A-Z]+)([A-Z][a-z])', r'\1-\2', raw)
    name = re.sub(r'([a-z0-9])([A-Z])', r'\1-\2', name)
    name = re.sub(r'[^a-z0-9]+', '-', name.lower()).strip('-')
    return name if validate_icon_name(name) else ""


def upper_camel_case(kebab_case_name: str) -> str:
    """
    Convert ``arrow-up-2`` to ``ArrowUp2``.

    Runs of letters and runs of digits are separate words, so a letter
    following a digit is capitalized: ``arrow-2b`` becomes ``Arrow2B``.
    """
    words = re.findall(r'[A-Za-z]+|[0-9]+', kebab_case_name)
    return "".join(word[:1].upper() + word[1:].lower() for word in words)


def get_identifier(kebab_case_name: str, theme: ThemeType) -> str:
    """Module identifier for one icon variant, e.g. ``HomeTwoTone``."""
    return upper_camel_case(kebab_case_name) + THEME_SUFFIXES[theme.value]


def collect_names(files: Iterable[Path], strict: bool = False) -> List[str]:
    """
    Reduce source file paths to a sorted list of unique base names.

    Files whose stem is not canonical kebab-case cannot be looked up later
    and are skipped with a warning, or rejected when strict is set. The same
    policy applies to names whose identifier is already taken by a name
    sorting before them (``home-2`` and ``home2`` both give ``Home2``).

    Args:
        files: SVG source files from any theme
        strict: Raise instead of skipping unusable names

    Returns:
        Sorted, deduplicated base names with distinct identifiers

    Raises:
        InvalidIconNameError: In strict mode, for the first unusable name
    """
    sources: Dict[str, Path] = {}
    for path in files:
        if path.suffix != SVG_EXTENSION:
            continue
        stem = path.stem
        if validate_icon_name(stem):
            if stem not in sources or str(path) < str(sources[stem]):
                sources[stem] = path
            continue

        suggestion = to_kebab_case(stem)
        if suggestion:
            message = f"Icon file name is not kebab-case, rename it to {suggestion}{SVG_EXTENSION}"
        else:
            message = "Icon file name cannot be converted to an identifier"
        if strict:
            raise InvalidIconNameError(message, stem, str(path))
        logger.warning(f"Skipping {path}: {message}")

    return _drop_identifier_clashes(sources, strict)


def _drop_identifier_clashes(sources: Dict[str, Path], strict: bool) -> List[str]:
    owners: Dict[str, str] = {}
    names: List[str] = []
    for name in sorted(sources):
        identifier = upper_camel_case(name)
        owner = owners.get(identifier)
        if owner is None:
            owners[identifier] = name
            names.append(name)
            continue

        message = f"Icon name {name} gives identifier {identifier}, already used by {owner}"
        if strict:
            raise InvalidIconNameError(message, name, str(sources[name]))
        logger.warning(f"Skipping {sources[name]}: {message}")
    return names


def normalize_names(svg_dir: Path, strict: bool = False) -> List[str]:
    """
    Enumerate every theme directory and return the canonical base names.

    Args:
        svg_dir: Directory holding one subdirectory per theme
        strict: Raise instead of skipping unusable names

    Returns:
        Sorted, deduplicated base names valid across themes
    """
    files: List[Path] = []
    for theme in THEME_ORDER:
        theme_dir = svg_dir / theme.value
        if not theme_dir.is_dir():
            logger.debug(f"Theme directory not found: {theme_dir}")
            continue
        files.extend(p for p in theme_dir.iterdir() if p.is_file())

    names = collect_names(files, strict=strict)
    logger.info(f"Found {len(names)} icon names in {svg_dir}")
    return names
