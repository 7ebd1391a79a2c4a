"""Compose a full console line: prefix, bracketed timestamp and level badge, then the message.

Line shape, every color region closed before the message starts:

    <prefix><blue>[<reset><timestamp><level colors><BADGE><reset><blue>]<reset> <message>\n
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TextIO

from console_formatter.colors import DEFAULT_FOREGROUND, ConsoleColor, foreground_code, write_colored
from console_formatter.config import FormatterOptions
from console_formatter.models import LogLevel, UnknownLogLevelError

BRACKET_COLOR = ConsoleColor.BLUE
NEWLINE = "\n"

LEVEL_BADGES: dict[LogLevel, str] = {
    LogLevel.TRACE: "TRACE",
    LogLevel.DEBUG: "DBG",
    LogLevel.INFORMATION: "INF",
    LogLevel.WARNING: "WRN",
    LogLevel.ERROR: "ERR",
    LogLevel.CRITICAL: "CRI",
}

# Background is set along with the foreground, a lone foreground can be unreadable on some consoles
LEVEL_COLORS: dict[LogLevel, tuple[ConsoleColor, ConsoleColor | None]] = {
    LogLevel.TRACE: (ConsoleColor.BLUE, ConsoleColor.BLACK),
    LogLevel.DEBUG: (ConsoleColor.BLUE, ConsoleColor.BLACK),
    LogLevel.INFORMATION: (ConsoleColor.WHITE, None),
    LogLevel.WARNING: (ConsoleColor.YELLOW, ConsoleColor.BLACK),
    LogLevel.ERROR: (ConsoleColor.BLACK, ConsoleColor.DARK_RED),
    LogLevel.CRITICAL: (ConsoleColor.WHITE, ConsoleColor.DARK_RED),
}


def level_badge(level: LogLevel) -> str:
    try:
        return LEVEL_BADGES[level]
    except KeyError:
        raise UnknownLogLevelError(f"No badge for log level {level!r}") from None


def level_colors(level: LogLevel) -> tuple[ConsoleColor, ConsoleColor | None]:
    try:
        return LEVEL_COLORS[level]
    except KeyError:
        raise UnknownLogLevelError(f"No colors for log level {level!r}") from None


def format_timestamp(options: FormatterOptions, now: datetime | None = None) -> str:
    """Format the current time, or `now` when given, with the configured pattern.

    Returns an empty string when no timestamp format is configured.
    """
    if options.timestamp_format is None:
        return ""
    if now is None:
        now = datetime.now(timezone.utc) if options.use_utc_timestamp else datetime.now()
    elif options.use_utc_timestamp:
        now = now.astimezone(timezone.utc)
    return now.strftime(options.timestamp_format)


def compose_line(
    sink: TextIO, options: FormatterOptions, level: LogLevel, message: str, now: datetime | None = None
) -> None:
    """Write one terminated log line to the sink."""
    badge = level_badge(level)
    foreground, background = level_colors(level)

    sink.write(options.prefix)
    sink.write(foreground_code(BRACKET_COLOR))
    sink.write("[")
    sink.write(DEFAULT_FOREGROUND)
    sink.write(format_timestamp(options, now))
    write_colored(sink, badge, foreground, background)
    sink.write(foreground_code(BRACKET_COLOR))
    sink.write("]")
    sink.write(DEFAULT_FOREGROUND)
    sink.write(" ")
    sink.write(message)
    sink.write(NEWLINE)
