"""
Custom exceptions for iconbuild.
"""

# SPDX-License-Identifier: GPL-3.0-or-later


class IconBuildError(Exception):
    """Base exception for all iconbuild errors."""

    pass


class ConfigurationError(IconBuildError):
    """Raised when configuration is invalid."""

    pass


class InvalidIconNameError(IconBuildError):
    """Raised when a source file name cannot be used as an icon name."""

    def __init__(self, message: str, name: str = "", path: str = "") -> None:
        """Initialize the error."""
        super().__init__(message)
        self.name = name
        self.path = path

    def __str__(self) -> str:
        return f"{self.args[0]} (Name: {self.name}, Path: {self.path})"


class OptimizeError(IconBuildError):
    """Raised when SVG markup cannot be optimized or parsed."""

    def __init__(self, message: str, path: str = "") -> None:
        """Initialize the error."""
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        return f"{self.args[0]} (File: {self.path})"


class FormatError(IconBuildError):
    """Raised when generated source fails reformatting."""

    def __init__(self, message: str, identifier: str = "") -> None:
        """Initialize the error."""
        super().__init__(message)
        self.identifier = identifier

    def __str__(self) -> str:
        return f"{self.args[0]} (Identifier: {self.identifier})"


class WriteError(IconBuildError):
    """Raised when a generated file cannot be written."""

    def __init__(self, message: str, path: str = "") -> None:
        """Initialize the error."""
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        return f"{self.args[0]} (File: {self.path})"


class TemplateError(IconBuildError):
    """Raised when a template file is missing or unreadable."""

    def __init__(self, message: str, path: str = "") -> None:
        """Initialize the error."""
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        return f"{self.args[0]} (Template: {self.path})"
