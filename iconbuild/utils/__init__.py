"""
Utils package for iconbuild.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

from .logger import get_logger, set_global_config, setup_logging
from .validators import validate_icon_name, validate_config_json
from .fs import clear_output, is_accessible, write_file
from .thread_manager import BoundedTaskRunner

__all__ = [
    "get_logger",
    "set_global_config",
    "setup_logging",
    "validate_icon_name",
    "validate_config_json",
    "clear_output",
    "is_accessible",
    "write_file",
    "BoundedTaskRunner",
]
