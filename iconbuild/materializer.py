"""
Icon materialization: source SVG file to typed icon definition.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

from pathlib import Path
from typing import List, Optional, Sequence

from .constants import SVG_EXTENSION
from .exceptions import OptimizeError
from .models import (
    BuildTimeIconMetaData, IconDefinition, OptimizerOptions, ThemeType
)
from .normalizer import get_identifier
from .optimizer import SvgOptimizer
from .tree import generate_abstract_tree
from .utils.fs import is_accessible
from .utils.logger import get_logger
from .utils.thread_manager import BoundedTaskRunner

logger = get_logger(__name__)


class IconMaterializer:
    """Loads, optimizes and parses the icons of each theme."""

    def __init__(self, svg_dir: Path, options: OptimizerOptions,
                 runner: Optional[BoundedTaskRunner] = None) -> None:
        """
        Initialize the materializer.

        Args:
            svg_dir: Directory holding one subdirectory per theme
            options: Base optimizer options
            runner: Worker pool for per-icon tasks
        """
        self.svg_dir = svg_dir
        self.runner = runner or BoundedTaskRunner(pool_id="materialize")
        self.optimizer = SvgOptimizer(options)
        # Single-colour themes get their colour from CSS, never from a baked fill
        self.single_color_optimizer = SvgOptimizer(options.with_removed_attrs(["fill"]))

    def source_path(self, theme: ThemeType, name: str) -> Path:
        """Path the source file for (theme, name) is expected at."""
        return self.svg_dir / theme.value / f"{name}{SVG_EXTENSION}"

    def optimizer_for(self, theme: ThemeType) -> SvgOptimizer:
        """Select the optimizer variant for a theme."""
        if theme.is_single_color:
            return self.single_color_optimizer
        return self.optimizer

    def available_names(self, theme: ThemeType, names: Sequence[str]) -> List[str]:
        """Names that have a source file under the theme, in the given order."""
        return [name for name in names if is_accessible(self.source_path(theme, name))]

    def materialize(self, theme: ThemeType, name: str) -> BuildTimeIconMetaData:
        """
        Build the icon definition for one (theme, name) pair.

        Raises:
            OptimizeError: If the file cannot be read, optimized or parsed
        """
        path = self.source_path(theme, name)
        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise OptimizeError(f"Cannot read SVG source: {e}", str(path)) from e

        data = self.optimizer_for(theme).optimize(raw, str(path))
        node = generate_abstract_tree(data, str(path))
        icon = IconDefinition.from_node(node, name=name, theme=theme)
        logger.debug(f"Materialized {theme.value}/{name}")
        return BuildTimeIconMetaData(identifier=get_identifier(name, theme), icon=icon)

    def materialize_theme(self, theme: ThemeType, names: Sequence[str]) -> List[BuildTimeIconMetaData]:
        """
        Materialize every icon of a theme that exists on disk.

        Missing sources are skipped. Results follow the order of names.
        """
        available = self.available_names(theme, names)
        skipped = len(names) - len(available)
        if skipped:
            logger.debug(f"Theme {theme.value}: {skipped} icons have no source file")

        results = self.runner.map_ordered(lambda name: self.materialize(theme, name), available)
        logger.info(f"Materialized {len(results)} {theme.value} icons")
        return results
