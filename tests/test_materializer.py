"""
Tests for icon materialization.
"""

import pytest

from iconbuild.exceptions import OptimizeError
from iconbuild.materializer import IconMaterializer
from iconbuild.models import OptimizerOptions, ThemeType
from iconbuild.utils.thread_manager import BoundedTaskRunner

from conftest import FILL_SVG, MALFORMED_SVG, OUTLINE_SVG, TWOTONE_SVG


def collect_attr(node, name):
    values = [node.attrs[name]] if name in node.attrs else []
    for child in node.children:
        values.extend(collect_attr(child, name))
    return values


@pytest.fixture
def materializer(svg_dir):
    return IconMaterializer(svg_dir, OptimizerOptions(), BoundedTaskRunner(4, pool_id="test"))


class TestIconMaterializer:
    """Test per-theme materialization."""

    def test_single_color_themes_have_no_fill(self, materializer, write_svg):
        """Test that fill and outline icons carry no fill attribute anywhere."""
        write_svg("fill", "home", FILL_SVG)
        write_svg("outline", "home", OUTLINE_SVG)
        for theme in (ThemeType.FILL, ThemeType.OUTLINE):
            meta = materializer.materialize(theme, "home")
            assert collect_attr(meta.icon, "fill") == []

    def test_stroke_kept_on_single_color(self, materializer, write_svg):
        """Test that only fill is stripped."""
        write_svg("outline", "home", OUTLINE_SVG)
        meta = materializer.materialize(ThemeType.OUTLINE, "home")
        assert meta.icon.children[0].attrs["stroke"] == "#000"

    def test_two_tone_keeps_fill(self, materializer, write_svg):
        """Test that two-tone icons keep their colour literals."""
        write_svg("twotone", "home", TWOTONE_SVG)
        meta = materializer.materialize(ThemeType.TWOTONE, "home")
        assert collect_attr(meta.icon, "fill") == ["#333", "#E6E6E6", "#D9D9D9", "#D8D8D8"]
        assert meta.identifier == "HomeTwoTone"
        assert meta.icon.name == "home"
        assert meta.icon.theme is ThemeType.TWOTONE

    def test_missing_sources_skipped(self, materializer, write_svg):
        """Test that names without a file in a theme are left out."""
        write_svg("fill", "home")
        write_svg("fill", "user")
        write_svg("twotone", "home")
        names = ["home", "star", "user"]
        fill = materializer.materialize_theme(ThemeType.FILL, names)
        outline = materializer.materialize_theme(ThemeType.OUTLINE, names)
        twotone = materializer.materialize_theme(ThemeType.TWOTONE, names)
        assert [m.identifier for m in fill] == ["HomeFill", "UserFill"]
        assert outline == []
        assert [m.identifier for m in twotone] == ["HomeTwoTone"]

    def test_results_follow_name_order(self, materializer, write_svg):
        """Test ordering with more icons than workers."""
        names = [f"icon-{i:02d}" for i in range(20)]
        for name in names:
            write_svg("outline", name)
        results = materializer.materialize_theme(ThemeType.OUTLINE, names)
        assert [m.icon.name for m in results] == names

    def test_malformed_source(self, materializer, write_svg):
        """Test that a broken file fails the theme with its path."""
        write_svg("fill", "home")
        bad = write_svg("fill", "broken", MALFORMED_SVG)
        with pytest.raises(OptimizeError) as exc_info:
            materializer.materialize_theme(ThemeType.FILL, ["broken", "home"])
        assert exc_info.value.path == str(bad)

    def test_available_names(self, materializer, write_svg):
        """Test the existence check."""
        write_svg("fill", "user")
        assert materializer.available_names(ThemeType.FILL, ["home", "user"]) == ["user"]
