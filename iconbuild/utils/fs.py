"""
Filesystem helpers used by the build pipeline.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

import os
import shutil
from pathlib import Path
from typing import Iterable, List

from ..exceptions import WriteError
from ..models import WriteFileMetaData
from .logger import get_logger

logger = get_logger(__name__)


def is_accessible(path: Path) -> bool:
    """Check that a source file exists and can be read."""
    return path.is_file() and os.access(path, os.R_OK)


def clear_output(icon_dirs: Iterable[Path], files: Iterable[Path]) -> List[Path]:
    """
    Remove previously generated output.

    Args:
        icon_dirs: Per-theme output directories to delete recursively
        files: Single generated files to delete

    Returns:
        Paths that were actually removed
    """
    removed = []
    for directory in icon_dirs:
        if directory.is_dir():
            shutil.rmtree(directory)
            removed.append(directory)
            logger.debug(f"Removed {directory}")

    for path in files:
        if path.is_file():
            path.unlink()
            removed.append(path)
            logger.debug(f"Removed {path}")

    return removed


def write_file(meta: WriteFileMetaData) -> Path:
    """
    Write one generated file, creating parent directories as needed.

    Raises:
        WriteError: If the file cannot be written
    """
    try:
        meta.path.parent.mkdir(parents=True, exist_ok=True)
        with open(meta.path, "w", encoding="utf-8") as f:
            f.write(meta.content)
    except OSError as e:
        raise WriteError(f"Failed to write file: {e}", str(meta.path)) from e
    return meta.path
