"""
Pytest configuration and shared fixtures for iconbuild tests.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

from pathlib import Path
from typing import Callable

import pytest

from iconbuild.config import Config
from iconbuild.models import BuildEnvironment
from iconbuild.utils.logger import set_global_config


FILL_SVG = """<?xml version="1.0" encoding="UTF-8"?>
<!-- Generator: Sketch 52.2 -->
<svg xmlns="http://www.w3.org/2000/svg"
     xmlns:sodipodi="http://sodipodi.sourceforge.net/DTD/sodipodi-0.dtd"
     viewBox="0 0 1024 1024" width="1em" height="1em" fill="#000">
  <title>home</title>
  <sodipodi:namedview pagecolor="#ffffff"/>
  <g fill="#333">
    <path d="M0 0h10v10H0z" fill="#333"/>
  </g>
  <path d="M512 64L64 512" fill="#1890ff"/>
</svg>
"""

OUTLINE_SVG = """<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 1024 1024">
  <path d="M100 100h800v800H100z" fill="currentColor" stroke="#000"/>
</svg>
"""

TWOTONE_SVG = """<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 1024 1024">
  <path d="M1 1" fill="#333"/>
  <path d="M2 2" fill="#E6E6E6"/>
  <path d="M3 3"/>
  <path d="M4 4" fill="#D9D9D9"/>
  <path d="M5 5" fill="#D8D8D8"/>
</svg>
"""

MALFORMED_SVG = """<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <path d="M0 0"
</svg>
"""


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo global logging changes made by a test."""
    yield
    set_global_config({})


@pytest.fixture
def svg_dir(tmp_path: Path) -> Path:
    """Empty source tree root."""
    path = tmp_path / "svg"
    path.mkdir()
    return path


@pytest.fixture
def write_svg(svg_dir: Path) -> Callable[[str, str, str], Path]:
    """Write one source SVG under svg/<theme>/<name>.svg."""
    def _write(theme: str, name: str, content: str = OUTLINE_SVG) -> Path:
        theme_dir = svg_dir / theme
        theme_dir.mkdir(exist_ok=True)
        path = theme_dir / f"{name}.svg"
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def env(tmp_path: Path, svg_dir: Path) -> BuildEnvironment:
    """Default build environment rooted at the temporary directory."""
    environment = Config(base=str(tmp_path)).to_environment()
    environment.max_workers = 4
    return environment
