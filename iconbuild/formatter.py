"""
Code formatting for generated modules.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

from typing import Optional

import black

from .exceptions import FormatError
from .models import FormatterOptions


class CodeFormatter:
    """Formats generated Python source with black."""

    def __init__(self, options: Optional[FormatterOptions] = None) -> None:
        """
        Initialize the formatter.

        Args:
            options: Formatter options, defaults when omitted
        """
        self.options = options or FormatterOptions()
        self.mode = black.Mode(
            line_length=self.options.line_length,
            string_normalization=self.options.string_normalization,
            magic_trailing_comma=self.options.magic_trailing_comma,
        )

    def format(self, source: str, identifier: str) -> str:
        """
        Format one generated module.

        Args:
            source: Unformatted module source
            identifier: Name of the module being formatted, for error messages

        Raises:
            FormatError: If the source is not valid Python
        """
        try:
            return black.format_str(source, mode=self.mode)
        except black.InvalidInput as e:
            raise FormatError(f"Generated source is not valid Python: {e}", identifier) from e
