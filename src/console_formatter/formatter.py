"""Entry point of the console formatter: one log entry in, at most one colored line out."""

from __future__ import annotations

import io
import logging
from datetime import datetime
from typing import TextIO

from console_formatter.config import FormatterOptions, OptionsMonitor, Subscription
from console_formatter.line import compose_line
from console_formatter.models import LogEntry
from console_formatter.template import render_message

logger = logging.getLogger("console_formatter")

FORMATTER_NAME = "customName"


class CustomFormatter:
    """Render structured log entries as colored console lines.

    Follows the options of the given monitor: a reload only affects the
    entries written after it, each `write` works on a single snapshot.
    """

    name = FORMATTER_NAME

    def __init__(self, options: OptionsMonitor | FormatterOptions | None = None):
        if isinstance(options, OptionsMonitor):
            self._options = options.current_value
            self._subscription: Subscription | None = options.on_change(self._on_options_change)
        else:
            self._options = options if options is not None else FormatterOptions()
            self._subscription = None

    @property
    def options(self) -> FormatterOptions:
        return self._options

    def _on_options_change(self, options: FormatterOptions) -> None:
        self._options = options

    def format(self, entry: LogEntry, now: datetime | None = None) -> str | None:
        """Render the entry line, terminator included, or None when it has no message."""
        options = self._options
        message = render_message(entry, options)
        if message is None:
            return None
        buffer = io.StringIO()
        compose_line(buffer, options, entry.level, message, now)
        return buffer.getvalue()

    def write(self, entry: LogEntry, stream: TextIO, now: datetime | None = None) -> None:
        """Write the entry to the stream as a single write, nothing at all when it has no message."""
        line = self.format(entry, now)
        if line is None:
            return
        stream.write(line)

    def close(self) -> None:
        """Stop following option reloads, can be called several times."""
        if self._subscription is not None:
            self._subscription.dispose()
            self._subscription = None
            logger.debug(f"Formatter {self.name} released its options subscription")

    dispose = close

    def __enter__(self) -> CustomFormatter:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
