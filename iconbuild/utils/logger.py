"""
Logging configuration for iconbuild.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Optional, Dict, Any
import sys


class ColoredFormatter(logging.Formatter):
    """Custom formatter with colors for terminal output."""

    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m',  # Magenta
        'RESET': '\033[0m'      # Reset
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors."""
        log_color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
        reset_color = self.COLORS['RESET']

        # Color a copy so file handlers sharing the record stay plain
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{log_color}{record.levelname}{reset_color}"

        return super().format(record)


CONSOLE_FORMAT = '%(levelname)s - %(name)s - %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Global configuration for logging with thread synchronization
_global_config: Optional[Dict[str, Any]] = None
_log_file_path: Optional[str] = None
_configured_loggers: set[str] = set()
_logger_instances: Dict[str, logging.Logger] = {}
_global_state_lock = threading.RLock()


def _debug_enabled() -> bool:
    if not _global_config:
        return False
    return bool(_global_config.get('verbose_logging') or _global_config.get('debug_mode'))


def _default_level() -> int:
    if _debug_enabled():
        return logging.DEBUG
    if _global_config and _global_config.get('quiet'):
        return logging.WARNING
    return logging.INFO


def _make_file_handler(log_file: str, level: int) -> logging.FileHandler:
    Path(log_file).parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return file_handler


def set_global_config(config: Dict[str, Any]) -> None:
    """
    Set global configuration for logging with thread safety.

    Recognized keys are ``debug_mode``, ``verbose_logging``, ``quiet`` and
    ``log_file``.

    Args:
        config: Configuration dictionary
    """
    global _global_config, _log_file_path
    with _global_state_lock:
        _global_config = config
        _log_file_path = config.get('log_file') or None
        _reconfigure_all_loggers()


def _reconfigure_all_loggers() -> None:
    """Reconfigure all existing loggers with new settings."""
    # Called from set_global_config which already holds the lock
    level = _default_level()

    for logger in _logger_instances.values():
        logger.setLevel(level)
        for handler in list(logger.handlers):
            if isinstance(handler, logging.FileHandler):
                logger.removeHandler(handler)
                handler.close()
            else:
                handler.setLevel(level)

        if _log_file_path:
            try:
                logger.addHandler(_make_file_handler(_log_file_path, level))
            except OSError:
                # Don't log this error to avoid recursion
                pass


def setup_logging(name: str, log_file: Optional[str] = None, debug: bool = False) -> logging.Logger:
    """
    Set up logging configuration with thread safety.

    Args:
        name: Logger name
        log_file: Optional log file path
        debug: Enable debug logging

    Returns:
        Configured logger instance
    """
    with _global_state_lock:
        level = logging.DEBUG if debug else _default_level()

        if not log_file and _log_file_path:
            log_file = _log_file_path

        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.handlers.clear()

        # Console handler with colors (use stderr for logs)
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(ColoredFormatter(CONSOLE_FORMAT))
        logger.addHandler(console_handler)

        if log_file:
            try:
                logger.addHandler(_make_file_handler(log_file, level))
            except OSError as e:
                logger.error(f"Failed to create log file handler: {e}")

        # Prevent propagation to avoid duplicate messages
        logger.propagate = False

        _configured_loggers.add(name)
        _logger_instances[name] = logger
        return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get or create a logger instance with thread safety.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    with _global_state_lock:
        if name in _logger_instances:
            return _logger_instances[name]

        if name in _configured_loggers:
            logger = logging.getLogger(name)
            _logger_instances[name] = logger
            return logger

        return setup_logging(name)
