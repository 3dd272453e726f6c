"""
Configuration management for iconbuild.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

import json
import os
from pathlib import Path
from typing import Dict, Any, Optional

from .exceptions import ConfigurationError
from .utils.logger import get_logger
from .utils.validators import validate_config_json
from .constants import (
    DEFAULT_CONFIG_FILENAME, DEFAULT_ICON_OUTPUT_DIR, DEFAULT_INDEX_OUTPUT,
    DEFAULT_MANIFEST_OUTPUT, DEFAULT_MAX_WORKERS, DEFAULT_SVG_DIR,
    DEFAULT_ICON_TEMPLATE, DEFAULT_TWO_TONE_ICON_TEMPLATE,
    DEFAULT_INDEX_TEMPLATE, DEFAULT_MANIFEST_TEMPLATE
)
from .models import BuildEnvironment, BuildPaths, FormatterOptions, OptimizerOptions

logger = get_logger(__name__)

# Larger config files are rejected outright
MAX_CONFIG_SIZE = 1024 * 1024


def _resolve(base: Path, value: Optional[str], default: Any) -> Path:
    path = Path(value) if value else Path(default)
    if not path.is_absolute():
        path = base / path
    return path.resolve()


class Config:
    """Loads the build configuration and turns it into a BuildEnvironment."""

    def __init__(self, config_file: Optional[str] = None, base: Optional[str] = None) -> None:
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration file
            base: Base directory; overrides the ``base`` key of the file
        """
        self._base_override = base
        if config_file:
            self.config_file = str(config_file)
            self._explicit_file = True
        else:
            self.config_file = str(Path(base or os.getcwd()) / DEFAULT_CONFIG_FILENAME)
            self._explicit_file = False
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """
        Load configuration data from file.

        Returns:
            Validated configuration dictionary, empty when no file exists

        Raises:
            ConfigurationError: If the file exists but is invalid
        """
        if not os.path.exists(self.config_file):
            if self._explicit_file:
                raise ConfigurationError(f"Config file not found: {self.config_file}")
            logger.info("No configuration file found, using default configuration")
            return {}

        try:
            file_size = os.path.getsize(self.config_file)
            if file_size > MAX_CONFIG_SIZE:
                raise ConfigurationError(f"Config file too large: {file_size} bytes")
            with open(self.config_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in config file {self.config_file}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Error reading config file {self.config_file}: {e}") from e

        try:
            validate_config_json(data)
        except ValueError as e:
            raise ConfigurationError(f"Invalid configuration structure: {e}") from e

        logger.info(f"Loaded and validated configuration from {self.config_file}")
        return data

    def get(self, key: str, default: Optional[Any] = None) -> Optional[Any]:
        """
        Get configuration value.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value
        """
        return self.config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """
        Set configuration value for this run, after validation.

        Raises:
            ConfigurationError: If the resulting configuration is invalid
        """
        updated = dict(self.config)
        updated[key] = value
        try:
            validate_config_json(updated)
        except ValueError as e:
            raise ConfigurationError(f"Invalid value for {key}: {e}") from e
        self.config = updated

    def get_base(self) -> Path:
        """Base directory all relative paths resolve against."""
        if self._base_override:
            return Path(self._base_override).resolve()
        base = self.get("base")
        if base:
            base_path = Path(base)
            if not base_path.is_absolute():
                # Relative to the config file, not the working directory
                base_path = Path(self.config_file).parent / base_path
            return base_path.resolve()
        return Path(self.config_file).parent.resolve()

    def get_paths(self) -> BuildPaths:
        """Resolve every configured path."""
        base = self.get_base()
        paths = self.get("paths", {})
        return BuildPaths(
            svg_dir=_resolve(base, paths.get("svg_dir"), DEFAULT_SVG_DIR),
            icon_output_dir=_resolve(base, paths.get("icon_output_dir"), DEFAULT_ICON_OUTPUT_DIR),
            index_output=_resolve(base, paths.get("index_output"), DEFAULT_INDEX_OUTPUT),
            manifest_output=_resolve(base, paths.get("manifest_output"), DEFAULT_MANIFEST_OUTPUT),
            icon_template=_resolve(base, paths.get("icon_template"), DEFAULT_ICON_TEMPLATE),
            two_tone_icon_template=_resolve(
                base, paths.get("two_tone_icon_template"), DEFAULT_TWO_TONE_ICON_TEMPLATE
            ),
            index_template=_resolve(base, paths.get("index_template"), DEFAULT_INDEX_TEMPLATE),
            manifest_template=_resolve(base, paths.get("manifest_template"), DEFAULT_MANIFEST_TEMPLATE),
        )

    def get_max_workers(self) -> int:
        """Get the worker pool size."""
        return self.get("max_workers", DEFAULT_MAX_WORKERS)

    def to_environment(self) -> BuildEnvironment:
        """Build the environment passed to the pipeline."""
        options = self.get("options", {})
        return BuildEnvironment(
            base=self.get_base(),
            paths=self.get_paths(),
            optimizer=OptimizerOptions.from_dict(options.get("optimizer", {})),
            formatter=FormatterOptions.from_dict(options.get("formatter", {})),
            max_workers=self.get_max_workers(),
            strict_names=self.get("strict_names", False),
            debug_mode=self.get("debug_mode", False),
            log_file=self.get("log_file"),
        )
