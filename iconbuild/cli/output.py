"""
Output formatting utilities for the CLI.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

import json
from typing import Any, Dict, List
import sys

from colorama import init, Fore, Style

# Initialize colorama for cross-platform color support
init(autoreset=True)


class OutputFormatter:
    """Handles output formatting for the CLI."""

    def __init__(self, use_color: bool = True, json_output: bool = False, quiet: bool = False):
        """
        Initialize output formatter.

        Args:
            use_color: Whether to use ANSI colors
            json_output: Whether to output JSON
            quiet: Suppress everything except errors
        """
        self.use_color = use_color
        self.json_output = json_output
        self.quiet = quiet

        # Color shortcuts
        self.green = Fore.GREEN if use_color else ''
        self.yellow = Fore.YELLOW if use_color else ''
        self.red = Fore.RED if use_color else ''
        self.cyan = Fore.CYAN if use_color else ''
        self.white = Fore.WHITE if use_color else ''
        self.reset = Style.RESET_ALL if use_color else ''
        self.bright = Style.BRIGHT if use_color else ''

    @property
    def _silent(self) -> bool:
        return self.json_output or self.quiet

    def success(self, message: str) -> None:
        """Print success message."""
        if not self._silent:
            print(f"{self.green}✅ {message}{self.reset}")

    def warning(self, message: str) -> None:
        """Print warning message."""
        if not self._silent:
            print(f"{self.yellow}⚠️  {message}{self.reset}")

    def error(self, message: str) -> None:
        """Print error message."""
        if not self.json_output:
            print(f"{self.red}❌ {message}{self.reset}", file=sys.stderr)

    def info(self, message: str) -> None:
        """Print info message."""
        if not self._silent:
            print(f"{self.cyan}ℹ️  {message}{self.reset}")

    def header(self, message: str) -> None:
        """Print header message."""
        if not self._silent:
            print(f"\n{self.cyan}{self.bright}{message}{self.reset}")
            print(f"{self.cyan}{'─' * len(message)}{self.reset}")

    def format_manifest_table(self, manifest: Dict[str, List[str]]) -> str:
        """
        Format per-theme icon names as a table.

        Args:
            manifest: Theme name mapped to icon names

        Returns:
            Formatted table string
        """
        if not any(manifest.values()):
            return "No icons found"

        max_theme = max(max(len(theme) for theme in manifest), 7)
        lines = [f"  {'Theme':<{max_theme}}  {'Count':>5}  Icons"]
        lines.append(f"  {'─' * max_theme}  {'─' * 5}  {'─' * 30}")

        for theme, names in manifest.items():
            shown = ', '.join(names[:5])
            if len(names) > 5:
                shown += f" +{len(names) - 5} more"
            if self.use_color:
                lines.append(f"  {self.white}{theme:<{max_theme}}{self.reset}  {self.green}{len(names):>5}{self.reset}  {shown}")
            else:
                lines.append(f"  {theme:<{max_theme}}  {len(names):>5}  {shown}")

        return '\n'.join(lines)

    def output_json(self, data: Any) -> None:
        """
        Output data as JSON.

        Args:
            data: Data to output
        """
        print(json.dumps(data, indent=2, default=str))
