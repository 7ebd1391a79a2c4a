"""Plug the console formatter into the standard library logging.

Structured records are the ones logged with a single mapping argument, its
keys filling the `{name}` placeholders of the message:

    logger.info("Hello {name}, you are {age}", {"name": "Peter", "age": 42})

Any other record, `%(name)s` mappings included, is rendered from
`record.getMessage()` as plain text.

Usage in dictConfig / YAML config: use the special `()` key to point at
`console_formatter.logging.ConsoleHandler` (writes through the formatter
directly) or `console_formatter.logging.ColoredFormatter` (for any handler).
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from typing import Any, Literal, TextIO

from console_formatter.config import FormatterOptions, OptionsMonitor
from console_formatter.formatter import CustomFormatter
from console_formatter.models import ORIGINAL_FORMAT, LogEntry, LogLevel, Parameter

TRACE = 5
logging.addLevelName(TRACE, "TRACE")


def level_from_record(levelno: int) -> LogLevel:
    """Map a stdlib level number to the closest LogLevel at or below it."""
    if levelno >= logging.CRITICAL:
        return LogLevel.CRITICAL
    if levelno >= logging.ERROR:
        return LogLevel.ERROR
    if levelno >= logging.WARNING:
        return LogLevel.WARNING
    if levelno >= logging.INFO:
        return LogLevel.INFORMATION
    if levelno >= logging.DEBUG:
        return LogLevel.DEBUG
    return LogLevel.TRACE


def is_structured_record(record: logging.LogRecord) -> bool:
    """Tell whether a record uses `{name}` placeholders filled from its mapping argument.

    A mapping argument with `%(name)s` style messages is left to `record.getMessage()`.
    """
    if not isinstance(record.args, Mapping) or not record.args:
        return False
    msg = str(record.msg)
    return any(f"{{{name}}}" in msg for name in record.args)


def entry_from_record(record: logging.LogRecord) -> LogEntry:
    """Convert a log record to the entry rendered by the formatter."""
    exception = record.exc_info[1] if record.exc_info else None
    if is_structured_record(record):
        state = [Parameter.from_value(str(name), value) for name, value in record.args.items()]
        state.append(Parameter.from_value(ORIGINAL_FORMAT, str(record.msg)))
        return LogEntry(
            level=level_from_record(record.levelno),
            category=record.name,
            state=tuple(state),
            exception=exception,
        )
    return LogEntry(
        level=level_from_record(record.levelno),
        category=record.name,
        state=record.getMessage(),
        exception=exception,
    )


def _monitor(options: OptionsMonitor | FormatterOptions | None) -> OptionsMonitor:
    if isinstance(options, OptionsMonitor):
        return options
    return OptionsMonitor(options)


class ConsoleHandler(logging.StreamHandler):
    """Stream handler writing each record as one colored line, traceback lines following it."""

    def __init__(self, stream: TextIO | None = None, options: OptionsMonitor | FormatterOptions | None = None):
        super().__init__(stream)
        self.monitor = _monitor(options)
        self.console_formatter = CustomFormatter(self.monitor)
        self._plain = logging.Formatter()

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = self.console_formatter.format(entry_from_record(record))
            if line is None:
                return
            if record.exc_info:
                line += self._plain.formatException(record.exc_info) + self.terminator
            if record.stack_info:
                line += self._plain.formatStack(record.stack_info) + self.terminator
            self.stream.write(line)
            self.flush()
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)

    def close(self) -> None:
        self.console_formatter.close()
        super().close()


class ColoredFormatter(logging.Formatter):
    """Formatter returning the colored line of a record, for handlers adding their own terminator."""

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        style: Literal["%", "{", "$"] = "%",
        options: OptionsMonitor | FormatterOptions | None = None,
    ):
        super().__init__(fmt=fmt, datefmt=datefmt, style=style)
        if options is None and datefmt is not None:
            options = FormatterOptions(timestamp_format=datefmt)
        self.console_formatter = CustomFormatter(options)

    def format(self, record: logging.LogRecord) -> str:
        line = self.console_formatter.format(entry_from_record(record))
        if line is None:
            return ""
        line = line.removesuffix("\n")
        if record.exc_info and not record.exc_text:
            record.exc_text = self.formatException(record.exc_info)
        if record.exc_text:
            line = f"{line}\n{record.exc_text}"
        if record.stack_info:
            line = f"{line}\n{self.formatStack(record.stack_info)}"
        return line


def add_console_formatter(
    logger: logging.Logger | None = None,
    stream: TextIO | None = None,
    level: int | None = None,
    **options: Any,
) -> ConsoleHandler:
    """Attach a ConsoleHandler to the logger (root by default) and return it.

    Keyword arguments are `FormatterOptions` fields, e.g. `prefix="["` or
    `timestamp_format="%H:%M:%S "`. Reload them later with
    `handler.monitor.update(...)`.
    """
    target = logger if logger is not None else logging.getLogger()
    handler = ConsoleHandler(stream if stream is not None else sys.stderr, FormatterOptions(**options))
    if level is not None:
        handler.setLevel(level)
    target.addHandler(handler)
    return handler


__all__ = [
    "TRACE",
    "ColoredFormatter",
    "ConsoleHandler",
    "add_console_formatter",
    "entry_from_record",
    "is_structured_record",
    "level_from_record",
]
