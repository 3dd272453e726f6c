"""
Tests for the CLI functionality.
"""

import json

import pytest

from iconbuild import __version__
from iconbuild.cli.main import (
    EXIT_BUILD_ERROR, EXIT_CONFIG_ERROR, EXIT_OK, create_parser, main
)
from iconbuild.cli.output import OutputFormatter

from conftest import FILL_SVG, MALFORMED_SVG, TWOTONE_SVG


def run_main(argv):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


class TestCLIParser:
    """Test command line argument parsing."""

    def test_default_command(self):
        """Test that no command means build."""
        args = create_parser().parse_args([])
        assert args.command is None
        assert args.workers is None

    def test_global_options(self):
        """Test options shared by every command."""
        args = create_parser().parse_args(
            ['--base', 'icons', '--workers', '3', '--json', '--no-color', '--debug', 'build']
        )
        assert args.base == 'icons'
        assert args.workers == 3
        assert args.json and args.no_color and args.debug
        assert args.command == 'build'

    def test_names_theme_choice(self):
        """Test the theme filter."""
        args = create_parser().parse_args(['names', '--theme', 'twotone'])
        assert args.theme == 'twotone'
        with pytest.raises(SystemExit):
            create_parser().parse_args(['names', '--theme', 'sepia'])

    def test_version(self, capsys):
        """Test --version."""
        with pytest.raises(SystemExit):
            create_parser().parse_args(['--version'])
        assert __version__ in capsys.readouterr().out


class TestCLICommands:
    """Test command execution end to end."""

    def test_build(self, tmp_path, write_svg, capsys):
        """Test a successful build."""
        write_svg("fill", "home", FILL_SVG)
        write_svg("twotone", "home", TWOTONE_SVG)
        code = run_main(['--base', str(tmp_path), '--no-color', 'build'])
        assert code == EXIT_OK
        assert "Generated 2 icons (4 files)" in capsys.readouterr().out
        assert (tmp_path / "generated" / "fill" / "HomeFill.py").is_file()

    def test_build_without_sources_warns(self, tmp_path, capsys):
        """Test the empty source tree notice."""
        code = run_main(['--base', str(tmp_path), '--no-color'])
        assert code == EXIT_OK
        out = capsys.readouterr().out
        assert "No SVG sources found" in out
        assert "Generated 0 icons (2 files)" in out

    def test_build_json(self, tmp_path, write_svg, capsys):
        """Test the machine-readable build summary."""
        write_svg("outline", "home")
        code = run_main(['--base', str(tmp_path), '--json'])
        assert code == EXIT_OK
        summary = json.loads(capsys.readouterr().out)
        assert summary["icons"] == 1
        assert summary["manifest"]["outline"] == ["home"]
        assert len(summary["files"]) == 3

    def test_build_failure(self, tmp_path, write_svg, capsys):
        """Test that a broken source exits with the build error code."""
        write_svg("fill", "broken", MALFORMED_SVG)
        code = run_main(['--base', str(tmp_path), '--no-color'])
        assert code == EXIT_BUILD_ERROR
        assert "Build failed" in capsys.readouterr().err

    def test_names_json(self, tmp_path, write_svg, capsys):
        """Test listing names without building."""
        write_svg("fill", "user")
        write_svg("twotone", "home")
        code = run_main(['--base', str(tmp_path), '--json', 'names', '--theme', 'twotone'])
        assert code == EXIT_OK
        assert json.loads(capsys.readouterr().out) == {"twotone": ["home"]}
        assert not (tmp_path / "generated").exists()

    def test_names_table(self, tmp_path, write_svg, capsys):
        """Test the human-readable listing."""
        write_svg("fill", "user")
        code = run_main(['--base', str(tmp_path), '--no-color', 'names'])
        assert code == EXIT_OK
        out = capsys.readouterr().out
        assert "Icons per theme" in out
        assert "Source directory:" in out
        assert "user" in out

    def test_config_json(self, tmp_path, capsys):
        """Test printing the effective configuration."""
        code = run_main(['--base', str(tmp_path), '--json', 'config'])
        assert code == EXIT_OK
        data = json.loads(capsys.readouterr().out)
        assert data["base"] == str(tmp_path.resolve())

    def test_invalid_config_file(self, tmp_path, capsys):
        """Test that a broken config exits with the config error code."""
        config = tmp_path / "iconbuild.json"
        config.write_text("{broken", encoding="utf-8")
        code = run_main(['--config', str(config)])
        assert code == EXIT_CONFIG_ERROR
        assert "Configuration error" in capsys.readouterr().err

    def test_invalid_workers(self, tmp_path, capsys):
        """Test that an invalid worker count is a config error."""
        code = run_main(['--base', str(tmp_path), '--no-color', '--workers', '0'])
        assert code == EXIT_CONFIG_ERROR


class TestOutputFormatter:
    """Test output helpers."""

    def test_manifest_table(self):
        """Test table layout without colours."""
        formatter = OutputFormatter(use_color=False)
        table = formatter.format_manifest_table({
            "fill": [f"icon-{i}" for i in range(7)],
            "outline": [],
        })
        assert "icon-0, icon-1, icon-2, icon-3, icon-4 +2 more" in table
        assert "outline" in table

    def test_empty_manifest(self):
        """Test the empty listing."""
        assert OutputFormatter(use_color=False).format_manifest_table({"fill": []}) == "No icons found"

    def test_quiet_suppresses_success(self, capsys):
        """Test quiet mode."""
        formatter = OutputFormatter(use_color=False, quiet=True)
        formatter.success("done")
        formatter.error("bad")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "bad" in captured.err
