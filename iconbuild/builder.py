"""
Build pipeline: SVG sources to generated icon, manifest and index modules.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

import os
import time
from pathlib import Path
from typing import List, Optional, Sequence

from .constants import OUTPUT_EXTENSION
from .emitter import CodeEmitter, build_manifest
from .fixup import apply_theme_fixup
from .formatter import CodeFormatter
from .materializer import IconMaterializer
from .models import (
    THEME_ORDER, BuildEnvironment, BuildResult, BuildTimeIconMetaData,
    Manifest, WriteFileMetaData
)
from .normalizer import normalize_names
from .templates import load_templates
from .utils.fs import clear_output, write_file
from .utils.logger import get_logger
from .utils.thread_manager import BoundedTaskRunner

logger = get_logger(__name__)


class IconBuilder:
    """Runs the whole generation pipeline for one environment."""

    def __init__(self, env: BuildEnvironment, runner: Optional[BoundedTaskRunner] = None) -> None:
        """
        Initialize the builder.

        Args:
            env: Build environment
            runner: Worker pool shared by materialization and writes
        """
        self.env = env
        self.runner = runner or BoundedTaskRunner(env.max_workers, pool_id="build")
        self.materializer = IconMaterializer(env.paths.svg_dir, env.optimizer, self.runner)

    def build(self) -> BuildResult:
        """
        Regenerate every output file.

        The first error from any stage aborts the run. No file is written
        until every module's content has been produced.

        Returns:
            Summary of the written files
        """
        started = time.monotonic()
        paths = self.env.paths

        # Templates first, so a broken template path leaves old output alone
        emitter = CodeEmitter(load_templates(paths), CodeFormatter(self.env.formatter))

        self.clear()
        names = normalize_names(paths.svg_dir, strict=self.env.strict_names)
        metadata = self.materialize_all(names)

        manifest = build_manifest(metadata)
        tasks = self.icon_tasks(metadata, emitter)
        tasks.append(WriteFileMetaData(path=paths.manifest_output, content=emitter.emit_manifest(manifest)))
        tasks.append(WriteFileMetaData(path=paths.index_output, content=emitter.emit_index(metadata)))

        written = self.write_all(tasks)
        logger.info("Done.")

        return BuildResult(
            written=written,
            manifest=manifest,
            icon_count=len(metadata),
            duration_sec=time.monotonic() - started,
        )

    def clear(self) -> None:
        """Remove the output of previous runs."""
        paths = self.env.paths
        removed = clear_output(
            [paths.icon_output_dir / theme.value for theme in THEME_ORDER],
            [paths.index_output, paths.manifest_output],
        )
        logger.debug(f"Cleared {len(removed)} previous outputs")

    def materialize_all(self, names: Sequence[str]) -> List[BuildTimeIconMetaData]:
        """Materialize every theme and flatten the groups in theme order."""
        groups = [self.materializer.materialize_theme(theme, names) for theme in THEME_ORDER]
        return [meta for group in groups for meta in group]

    def icon_path(self, meta: BuildTimeIconMetaData) -> Path:
        """Output path of one icon module."""
        return self.env.paths.icon_output_dir / meta.icon.theme.value / f"{meta.identifier}{OUTPUT_EXTENSION}"

    def icon_tasks(self, metadata: Sequence[BuildTimeIconMetaData],
                   emitter: CodeEmitter) -> List[WriteFileMetaData]:
        """Fix up and render every icon into a write task."""
        return [
            WriteFileMetaData(
                path=self.icon_path(meta),
                content=emitter.emit_icon(meta.identifier, apply_theme_fixup(meta.icon)),
            )
            for meta in metadata
        ]

    def write_all(self, tasks: Sequence[WriteFileMetaData]) -> List[Path]:
        """Write every task; fails on the first write error."""
        return self.runner.map_ordered(self._write_one, tasks)

    def _write_one(self, task: WriteFileMetaData) -> Path:
        path = write_file(task)
        logger.info(f"Generated ./{os.path.relpath(path, self.env.base)}.")
        return path

    def preview_manifest(self) -> Manifest:
        """Names each theme would export, without optimizing or writing anything."""
        names = normalize_names(self.env.paths.svg_dir, strict=self.env.strict_names)
        manifest = Manifest()
        for theme in THEME_ORDER:
            manifest.names_for(theme).extend(self.materializer.available_names(theme, names))
        return manifest


def build(env: BuildEnvironment) -> BuildResult:
    """Run one build for the given environment."""
    return IconBuilder(env).build()
