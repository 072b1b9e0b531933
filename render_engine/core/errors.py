"""
Exceptions raised by the render engine.

Structural errors abort the whole parse or layout call. Missing properties and
selectors that match nothing are not errors and never reach this module.
"""

from typing import Optional


class RenderEngineError(Exception):
    """Base class for all render engine errors."""


class StructuralError(RenderEngineError):
    """A fatal error: there is no well-defined partial result."""


class CSSSyntaxError(StructuralError):
    """
    Stylesheet text the CSS parser cannot turn into rules.

    Attributes:
        line: 1-based source line, when known
        column: 1-based source column, when known
    """

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)


class LayoutError(StructuralError):
    """The style tree cannot be turned into a layout tree."""


class ConfigError(RenderEngineError):
    """Unreadable configuration file or invalid configuration value."""
