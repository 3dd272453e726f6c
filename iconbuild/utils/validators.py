"""
Input validation utilities for iconbuild.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

import re
from typing import Any, Dict, Union

from ..constants import ICON_NAME_PATTERN
from .logger import get_logger

logger = get_logger(__name__)

_ICON_NAME_RE = re.compile(ICON_NAME_PATTERN)


def validate_icon_name(name: str) -> bool:
    """
    Check that a name is a canonical kebab-case icon name.

    Args:
        name: Candidate icon name

    Returns:
        True if the name can be used as a base name
    """
    if not name or not isinstance(name, str):
        return False
    return bool(_ICON_NAME_RE.match(name))


def validate_config_json(data: Dict[str, Any]) -> bool:
    """
    Validate configuration JSON structure.

    Args:
        data: Parsed JSON data to validate

    Returns:
        True if data is valid

    Raises:
        ValueError: If data structure is invalid
    """
    if not isinstance(data, dict):
        raise ValueError("Configuration must be a JSON object")

    allowed_keys: Dict[str, Union[type, tuple[type, ...]]] = {
        'base': str,
        'paths': dict,
        'options': dict,
        'max_workers': int,
        'strict_names': bool,
        'debug_mode': bool,
        'log_file': (str, type(None)),
    }
    _check_section(data, allowed_keys, "")

    path_keys = {
        key: (str, type(None)) for key in (
            'svg_dir', 'icon_output_dir', 'index_output', 'manifest_output',
            'icon_template', 'two_tone_icon_template', 'index_template',
            'manifest_template',
        )
    }
    _check_section(data.get('paths', {}), path_keys, "paths.")

    options = data.get('options', {})
    _check_section(options, {'optimizer': dict, 'formatter': dict}, "options.")
    _check_section(options.get('optimizer', {}), {
        'remove_attrs': list,
        'remove_elements': list,
        'remove_comments': bool,
        'strip_namespaced': bool,
        'remove_dimensions': bool,
        'collapse_groups': bool,
    }, "options.optimizer.")
    _check_section(options.get('formatter', {}), {
        'line_length': int,
        'string_normalization': bool,
        'magic_trailing_comma': bool,
    }, "options.formatter.")

    # bool is an int subclass
    workers = data.get('max_workers', 1)
    if isinstance(workers, bool) or workers < 1:
        raise ValueError(f"max_workers must be a positive integer, got {workers!r}")

    line_length = options.get('formatter', {}).get('line_length', 1)
    if isinstance(line_length, bool) or line_length < 1:
        raise ValueError(f"options.formatter.line_length must be positive, got {line_length!r}")

    for key in ('remove_attrs', 'remove_elements'):
        values = options.get('optimizer', {}).get(key, [])
        if not all(isinstance(v, str) for v in values):
            raise ValueError(f"options.optimizer.{key} must be a list of strings")

    return True


def _check_section(section: Dict[str, Any],
                   allowed_keys: Dict[str, Union[type, tuple[type, ...]]],
                   prefix: str) -> None:
    for key in section.keys():
        if key not in allowed_keys:
            logger.warning(f"Unknown configuration key ignored: {prefix}{key}")

    for key, expected_type in allowed_keys.items():
        if key in section and not isinstance(section[key], expected_type):
            expected_name = getattr(expected_type, '__name__', str(expected_type))
            raise ValueError(
                f"Invalid type for {prefix}{key}: expected {expected_name}, "
                f"got {type(section[key]).__name__}"
            )
