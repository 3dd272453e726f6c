"""
Data models for iconbuild.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import List, Optional, Dict, Any
from enum import Enum

from .constants import (
    DEFAULT_LINE_LENGTH, DEFAULT_MAX_WORKERS, DEFAULT_REMOVE_ELEMENTS
)


class ThemeType(Enum):
    """Visual theme of an icon variant."""
    FILL = "fill"
    OUTLINE = "outline"
    TWOTONE = "twotone"

    @property
    def is_single_color(self) -> bool:
        """Single-colour themes carry no baked-in fill values."""
        return self is not ThemeType.TWOTONE


# Fixed iteration order for every per-theme stream
THEME_ORDER = (ThemeType.FILL, ThemeType.OUTLINE, ThemeType.TWOTONE)


@dataclass
class AbstractNode:
    """One markup element of an icon's drawable structure."""
    tag: str
    attrs: Dict[str, str]
    children: List['AbstractNode']

    def __post_init__(self) -> None:
        """Validate node data."""
        if not self.tag:
            raise ValueError("Node tag cannot be empty")
        for key, value in self.attrs.items():
            if value is None:
                raise ValueError(f"Attribute {key!r} on <{self.tag}> has no value")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "tag": self.tag,
            "attrs": dict(self.attrs),
            "children": [child.to_dict() for child in self.children],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AbstractNode':
        """Create from dictionary."""
        return cls(
            tag=data.get("tag", ""),
            attrs=dict(data.get("attrs", {})),
            children=[AbstractNode.from_dict(c) for c in data.get("children", [])],
        )


@dataclass
class IconDefinition(AbstractNode):
    """Root node of an icon, tagged with its base name and theme."""
    name: str
    theme: ThemeType

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        data: Dict[str, Any] = {"name": self.name, "theme": self.theme.value}
        data.update(super().to_dict())
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'IconDefinition':
        """Create from dictionary."""
        return cls(
            tag=data.get("tag", ""),
            attrs=dict(data.get("attrs", {})),
            children=[AbstractNode.from_dict(c) for c in data.get("children", [])],
            name=data.get("name", ""),
            theme=ThemeType(data.get("theme", "fill")),
        )

    @classmethod
    def from_node(cls, node: AbstractNode, name: str, theme: ThemeType) -> 'IconDefinition':
        """Wrap a parsed root node."""
        return cls(
            tag=node.tag,
            attrs=node.attrs,
            children=node.children,
            name=name,
            theme=theme,
        )


@dataclass
class BuildTimeIconMetaData:
    """Generated module identifier paired with its icon."""
    identifier: str
    icon: IconDefinition


@dataclass
class Manifest:
    """Icon base names available per theme."""
    fill: List[str] = field(default_factory=list)
    outline: List[str] = field(default_factory=list)
    twotone: List[str] = field(default_factory=list)

    def names_for(self, theme: ThemeType) -> List[str]:
        """Get the names registered for a theme."""
        return getattr(self, theme.value)

    def to_dict(self) -> Dict[str, List[str]]:
        """Convert to dictionary in theme order."""
        return {theme.value: list(self.names_for(theme)) for theme in THEME_ORDER}


@dataclass
class WriteFileMetaData:
    """A single file the build will write."""
    path: Path
    content: str


@dataclass
class OptimizerOptions:
    """Options passed through to the SVG optimizer."""
    remove_attrs: List[str] = field(default_factory=list)
    remove_elements: List[str] = field(default_factory=lambda: list(DEFAULT_REMOVE_ELEMENTS))
    remove_comments: bool = True
    strip_namespaced: bool = True
    remove_dimensions: bool = False
    collapse_groups: bool = True

    def with_removed_attrs(self, attrs: List[str]) -> 'OptimizerOptions':
        """Copy of these options that additionally strips the given attributes."""
        merged = list(self.remove_attrs)
        merged.extend(a for a in attrs if a not in merged)
        return replace(self, remove_attrs=merged, remove_elements=list(self.remove_elements))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "remove_attrs": list(self.remove_attrs),
            "remove_elements": list(self.remove_elements),
            "remove_comments": self.remove_comments,
            "strip_namespaced": self.strip_namespaced,
            "remove_dimensions": self.remove_dimensions,
            "collapse_groups": self.collapse_groups,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'OptimizerOptions':
        """Create from dictionary."""
        return cls(
            remove_attrs=list(data.get("remove_attrs", [])),
            remove_elements=list(data.get("remove_elements", DEFAULT_REMOVE_ELEMENTS)),
            remove_comments=data.get("remove_comments", True),
            strip_namespaced=data.get("strip_namespaced", True),
            remove_dimensions=data.get("remove_dimensions", False),
            collapse_groups=data.get("collapse_groups", True),
        )


@dataclass
class FormatterOptions:
    """Options passed through to the code formatter."""
    line_length: int = DEFAULT_LINE_LENGTH
    string_normalization: bool = True
    magic_trailing_comma: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "line_length": self.line_length,
            "string_normalization": self.string_normalization,
            "magic_trailing_comma": self.magic_trailing_comma,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FormatterOptions':
        """Create from dictionary."""
        return cls(
            line_length=data.get("line_length", DEFAULT_LINE_LENGTH),
            string_normalization=data.get("string_normalization", True),
            magic_trailing_comma=data.get("magic_trailing_comma", True),
        )


@dataclass
class BuildPaths:
    """Resolved filesystem locations for one build."""
    svg_dir: Path
    icon_output_dir: Path
    index_output: Path
    manifest_output: Path
    icon_template: Path
    two_tone_icon_template: Path
    index_template: Path
    manifest_template: Path

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary."""
        return {
            "svg_dir": str(self.svg_dir),
            "icon_output_dir": str(self.icon_output_dir),
            "index_output": str(self.index_output),
            "manifest_output": str(self.manifest_output),
            "icon_template": str(self.icon_template),
            "two_tone_icon_template": str(self.two_tone_icon_template),
            "index_template": str(self.index_template),
            "manifest_template": str(self.manifest_template),
        }


@dataclass
class BuildEnvironment:
    """Everything a build run needs, passed explicitly to the pipeline."""
    base: Path
    paths: BuildPaths
    optimizer: OptimizerOptions = field(default_factory=OptimizerOptions)
    formatter: FormatterOptions = field(default_factory=FormatterOptions)
    max_workers: int = DEFAULT_MAX_WORKERS
    strict_names: bool = False
    debug_mode: bool = False
    log_file: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "base": str(self.base),
            "paths": self.paths.to_dict(),
            "options": {
                "optimizer": self.optimizer.to_dict(),
                "formatter": self.formatter.to_dict(),
            },
            "max_workers": self.max_workers,
            "strict_names": self.strict_names,
            "debug_mode": self.debug_mode,
            "log_file": self.log_file,
        }


@dataclass
class BuildResult:
    """Outcome of a successful build."""
    written: List[Path] = field(default_factory=list)
    manifest: Manifest = field(default_factory=Manifest)
    icon_count: int = 0
    duration_sec: float = 0.0

    @property
    def file_count(self) -> int:
        """Get number of written files."""
        return len(self.written)
