"""Color themes mapping style roles to ANSI escape sequences.

A style role says *why* a span of text is colored (a string parameter, a
null value, plain template text...), the theme says *how*. Themes are
immutable and shared process-wide.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType


class StyleRole(Enum):
    TEXT = "text"
    SECONDARY_TEXT = "secondary_text"
    INVALID = "invalid"
    NULL = "null"
    NAME = "name"
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    SCALAR = "scalar"
    LEVEL_VERBOSE = "level_verbose"
    LEVEL_DEBUG = "level_debug"
    LEVEL_INFORMATION = "level_information"
    LEVEL_WARNING = "level_warning"
    LEVEL_ERROR = "level_error"
    LEVEL_CRITICAL = "level_critical"


class AnsiColorTheme:
    """Read-only mapping from style role to escape sequence."""

    def __init__(self, name: str, styles: Mapping[StyleRole, str]):
        self.name = name
        self._styles = MappingProxyType(dict(styles))

    def style(self, role: StyleRole) -> str:
        """Get the escape sequence for a role, empty when the theme leaves it undefined."""
        return self._styles.get(role, "")

    def __repr__(self) -> str:
        return f"AnsiColorTheme({self.name!r})"


CODE = AnsiColorTheme(
    "code",
    {
        StyleRole.TEXT: "\x1b[38;5;0253m",
        StyleRole.SECONDARY_TEXT: "\x1b[38;5;0246m",
        StyleRole.INVALID: "\x1b[38;5;0242m",
        StyleRole.NULL: "\x1b[38;5;0038m",
        StyleRole.NAME: "\x1b[38;5;0081m",
        StyleRole.NUMBER: "\x1b[38;5;0151m",
        StyleRole.STRING: "\x1b[38;5;0216m",
        StyleRole.BOOLEAN: "\x1b[38;5;0038m",
        StyleRole.SCALAR: "\x1b[38;5;0079m",
        StyleRole.LEVEL_VERBOSE: "\x1b[37m",
        StyleRole.LEVEL_DEBUG: "\x1b[37m",
        StyleRole.LEVEL_INFORMATION: "\x1b[37;1m",
        StyleRole.LEVEL_WARNING: "\x1b[38;5;0229m",
        StyleRole.LEVEL_ERROR: "\x1b[38;5;0197m\x1b[48;5;0238m",
        StyleRole.LEVEL_CRITICAL: "\x1b[38;5;0197m\x1b[48;5;0238m",
    },
)

# 16-color palette for terminals without 256-color support
LITERATE = AnsiColorTheme(
    "literate",
    {
        StyleRole.TEXT: "\x1b[37m",
        StyleRole.SECONDARY_TEXT: "\x1b[37m",
        StyleRole.INVALID: "\x1b[33m",
        StyleRole.NULL: "\x1b[34m",
        StyleRole.NAME: "\x1b[37m",
        StyleRole.NUMBER: "\x1b[35m",
        StyleRole.STRING: "\x1b[36m",
        StyleRole.BOOLEAN: "\x1b[34m",
        StyleRole.SCALAR: "\x1b[32m",
        StyleRole.LEVEL_VERBOSE: "\x1b[37m",
        StyleRole.LEVEL_DEBUG: "\x1b[37m",
        StyleRole.LEVEL_INFORMATION: "\x1b[37;1m",
        StyleRole.LEVEL_WARNING: "\x1b[33;1m",
        StyleRole.LEVEL_ERROR: "\x1b[31;1m",
        StyleRole.LEVEL_CRITICAL: "\x1b[31;1m",
    },
)

THEMES: Mapping[str, AnsiColorTheme] = MappingProxyType({theme.name: theme for theme in (CODE, LITERATE)})


__all__ = ["CODE", "LITERATE", "THEMES", "AnsiColorTheme", "StyleRole"]
