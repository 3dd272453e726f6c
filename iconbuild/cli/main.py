"""
Main entry point for the iconbuild command-line tool.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

import argparse
import sys
from typing import Optional, List

from .. import __version__
from ..builder import IconBuilder
from ..config import Config
from ..exceptions import ConfigurationError, IconBuildError
from ..models import THEME_ORDER
from ..utils.logger import set_global_config
from .output import OutputFormatter

EXIT_OK = 0
EXIT_BUILD_ERROR = 1
EXIT_CONFIG_ERROR = 2
EXIT_INTERRUPTED = 130


class IconBuildCLI:
    """Main CLI application class."""

    def __init__(self, config_path: Optional[str] = None, base: Optional[str] = None):
        """Initialize CLI with configuration."""
        self.config = Config(config_path, base=base)
        self.formatter: Optional[OutputFormatter] = None

    def run(self, args: argparse.Namespace) -> int:
        """
        Run the CLI with given arguments.

        Args:
            args: Parsed command line arguments

        Returns:
            Exit code
        """
        self.formatter = OutputFormatter(
            use_color=not args.no_color,
            json_output=args.json,
            quiet=args.quiet
        )

        if args.workers is not None:
            try:
                self.config.set('max_workers', args.workers)
            except ConfigurationError as e:
                self.formatter.error(str(e))
                return EXIT_CONFIG_ERROR

        env = self.config.to_environment()
        set_global_config({
            'debug_mode': args.debug or env.debug_mode,
            'quiet': args.quiet,
            'log_file': env.log_file,
        })

        if args.command is None or args.command == 'build':
            return self.cmd_build(args)
        elif args.command == 'names':
            return self.cmd_names(args)
        elif args.command == 'config':
            return self.cmd_config(args)
        else:
            self.formatter.error(f"Unknown command: {args.command}")
            return EXIT_BUILD_ERROR

    def cmd_build(self, args: argparse.Namespace) -> int:
        """Handle 'build' command - regenerate every module."""
        env = self.config.to_environment()
        try:
            result = IconBuilder(env).build()
        except IconBuildError as e:
            self.formatter.error(f"Build failed: {e}")
            return EXIT_BUILD_ERROR

        if args.json:
            self.formatter.output_json({
                'icons': result.icon_count,
                'files': [str(p) for p in result.written],
                'manifest': result.manifest.to_dict(),
                'duration_sec': round(result.duration_sec, 3),
            })
        else:
            if result.icon_count == 0:
                self.formatter.warning(f"No SVG sources found in {env.paths.svg_dir}")
            self.formatter.success(
                f"Generated {result.icon_count} icons ({result.file_count} files) "
                f"in {result.duration_sec:.1f}s"
            )
        return EXIT_OK

    def cmd_names(self, args: argparse.Namespace) -> int:
        """Handle 'names' command - show the icon names per theme."""
        env = self.config.to_environment()
        try:
            manifest = IconBuilder(env).preview_manifest().to_dict()
        except IconBuildError as e:
            self.formatter.error(str(e))
            return EXIT_BUILD_ERROR

        if args.theme:
            manifest = {args.theme: manifest[args.theme]}

        if args.json:
            self.formatter.output_json(manifest)
        elif not args.quiet:
            self.formatter.header("Icons per theme")
            self.formatter.info(f"Source directory: {env.paths.svg_dir}")
            print(self.formatter.format_manifest_table(manifest))
        return EXIT_OK

    def cmd_config(self, args: argparse.Namespace) -> int:
        """Handle 'config' command - show the effective configuration."""
        data = self.config.to_environment().to_dict()
        if args.json:
            self.formatter.output_json(data)
        elif not args.quiet:
            self.formatter.header(f"Configuration ({self.config.config_file})")
            self._print_section(data, indent=2)
        return EXIT_OK

    def _print_section(self, data: dict, indent: int) -> None:
        for key, value in data.items():
            if isinstance(value, dict):
                print(f"{' ' * indent}{key}:")
                self._print_section(value, indent + 2)
            else:
                print(f"{' ' * indent}{key}: {value}")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog='iconbuild',
        description='Generate Python icon modules from themed SVG sources',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    # Global options
    parser.add_argument(
        '--config',
        metavar='PATH',
        help='Alternative config file path'
    )
    parser.add_argument(
        '--base',
        metavar='DIR',
        help='Base directory for relative paths (default: config file directory)'
    )
    parser.add_argument(
        '--workers',
        type=int,
        metavar='N',
        help='Maximum number of concurrent tasks'
    )
    parser.add_argument(
        '--json',
        action='store_true',
        help='Output in JSON format'
    )
    parser.add_argument(
        '--no-color',
        action='store_true',
        help='Disable ANSI colors'
    )
    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Minimal output (exit status only)'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    subparsers.add_parser('build', help='Regenerate all icon modules (default)')

    names_parser = subparsers.add_parser('names', help='List icon names per theme without building')
    names_parser.add_argument(
        '--theme',
        choices=[theme.value for theme in THEME_ORDER],
        help='Only show one theme'
    )

    subparsers.add_parser('config', help='Show the effective configuration')

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        cli = IconBuildCLI(args.config, base=args.base)
        exit_code = cli.run(args)
        sys.exit(exit_code)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(EXIT_CONFIG_ERROR)
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        sys.exit(EXIT_INTERRUPTED)
    except Exception as e:
        print(f"Fatal error: {str(e)}", file=sys.stderr)
        if args.debug:
            import traceback
            traceback.print_exc()
        sys.exit(EXIT_BUILD_ERROR)


if __name__ == '__main__':
    main()
