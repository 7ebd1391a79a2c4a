"""ANSI escape sequences for the 16 console colors."""

from __future__ import annotations

from enum import Enum
from typing import TextIO

DEFAULT_FOREGROUND = "\x1b[39m\x1b[22m"  # reset foreground and intensity
DEFAULT_BACKGROUND = "\x1b[49m"


class ConsoleColor(Enum):
    BLACK = "black"
    DARK_BLUE = "dark_blue"
    DARK_GREEN = "dark_green"
    DARK_CYAN = "dark_cyan"
    DARK_RED = "dark_red"
    DARK_MAGENTA = "dark_magenta"
    DARK_YELLOW = "dark_yellow"
    GRAY = "gray"
    DARK_GRAY = "dark_gray"
    BLUE = "blue"
    GREEN = "green"
    CYAN = "cyan"
    RED = "red"
    MAGENTA = "magenta"
    YELLOW = "yellow"
    WHITE = "white"


FOREGROUND_CODES: dict[ConsoleColor, str] = {
    ConsoleColor.BLACK: "\x1b[30m",
    ConsoleColor.DARK_RED: "\x1b[31m",
    ConsoleColor.DARK_GREEN: "\x1b[32m",
    ConsoleColor.DARK_YELLOW: "\x1b[33m",
    ConsoleColor.DARK_BLUE: "\x1b[34m",
    ConsoleColor.DARK_MAGENTA: "\x1b[35m",
    ConsoleColor.DARK_CYAN: "\x1b[36m",
    ConsoleColor.GRAY: "\x1b[37m",
    ConsoleColor.RED: "\x1b[1m\x1b[31m",
    ConsoleColor.GREEN: "\x1b[1m\x1b[32m",
    ConsoleColor.YELLOW: "\x1b[1m\x1b[33m",
    ConsoleColor.BLUE: "\x1b[1m\x1b[34m",
    ConsoleColor.MAGENTA: "\x1b[1m\x1b[35m",
    ConsoleColor.CYAN: "\x1b[1m\x1b[36m",
    ConsoleColor.WHITE: "\x1b[1m\x1b[37m",
}
# Bright variants have no background code, they fall back to the default
BACKGROUND_CODES: dict[ConsoleColor, str] = {
    ConsoleColor.BLACK: "\x1b[40m",
    ConsoleColor.DARK_RED: "\x1b[41m",
    ConsoleColor.DARK_GREEN: "\x1b[42m",
    ConsoleColor.DARK_YELLOW: "\x1b[43m",
    ConsoleColor.DARK_BLUE: "\x1b[44m",
    ConsoleColor.DARK_MAGENTA: "\x1b[45m",
    ConsoleColor.DARK_CYAN: "\x1b[46m",
    ConsoleColor.GRAY: "\x1b[47m",
}


def foreground_code(color: ConsoleColor | None) -> str:
    """Return the escape sequence setting the foreground, or the reset sequence for unknown colors."""
    if color is None:
        return DEFAULT_FOREGROUND
    return FOREGROUND_CODES.get(color, DEFAULT_FOREGROUND)


def background_code(color: ConsoleColor | None) -> str:
    """Return the escape sequence setting the background, or the reset sequence for unknown colors."""
    if color is None:
        return DEFAULT_BACKGROUND
    return BACKGROUND_CODES.get(color, DEFAULT_BACKGROUND)


def colored(text: str, foreground: ConsoleColor | None = None, background: ConsoleColor | None = None) -> str:
    """Wrap text in the given colors, background opened first and closed last."""
    parts: list[str] = []
    if background is not None:
        parts.append(background_code(background))
    if foreground is not None:
        parts.append(foreground_code(foreground))
    parts.append(text)
    if foreground is not None:
        parts.append(DEFAULT_FOREGROUND)
    if background is not None:
        parts.append(DEFAULT_BACKGROUND)
    return "".join(parts)


def write_colored(
    sink: TextIO, text: str, foreground: ConsoleColor | None = None, background: ConsoleColor | None = None
) -> None:
    """Write text to the sink wrapped in the given colors."""
    if background is not None:
        sink.write(background_code(background))
    if foreground is not None:
        sink.write(foreground_code(foreground))
    sink.write(text)
    if foreground is not None:
        sink.write(DEFAULT_FOREGROUND)
    if background is not None:
        sink.write(DEFAULT_BACKGROUND)


__all__ = [
    "BACKGROUND_CODES",
    "DEFAULT_BACKGROUND",
    "DEFAULT_FOREGROUND",
    "FOREGROUND_CODES",
    "ConsoleColor",
    "background_code",
    "colored",
    "foreground_code",
    "write_colored",
]
