"""Define the formatter options and the monitor delivering their live reloads."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from console_formatter.themes import THEMES, AnsiColorTheme

logger = logging.getLogger("console_formatter")


class FormatterOptions(BaseSettings):
    """Options of the console formatter, can be set using `CONSOLE_FORMATTER_*` environment variables.

    Instances are frozen: a reload replaces the whole snapshot.
    """

    # Written before the opening bracket of each line
    prefix: str = ""
    # Decoration around string parameter values
    string_prefix: str = '"'
    string_suffix: str = '"'

    # strftime pattern, no timestamp is written when unset
    timestamp_format: str | None = None
    use_utc_timestamp: bool = False

    color_theme: str = "code"

    model_config = SettingsConfigDict(
        env_prefix="CONSOLE_FORMATTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    @model_validator(mode="before")
    @classmethod
    def accept_suffix_alias(cls, data: Any) -> Any:
        """Accept `suffix` as a shorter name for `string_suffix`."""
        if isinstance(data, dict) and "suffix" in data:
            data = dict(data)
            data["string_suffix"] = data.pop("suffix")
        return data

    @field_validator("color_theme")
    @classmethod
    def check_theme_exists(cls, value: str) -> str:
        name = value.lower()
        if name not in THEMES:
            raise ValueError(f"Unknown color theme {value!r}, available: {', '.join(THEMES)}")
        return name

    @property
    def theme(self) -> AnsiColorTheme:
        """The color theme selected by `color_theme`."""
        return THEMES[self.color_theme]


OptionsListener = Callable[[FormatterOptions], None]


class Subscription:
    """Handle returned by `OptionsMonitor.on_change`, dispose it to stop receiving reloads."""

    def __init__(self, monitor: OptionsMonitor, listener: OptionsListener):
        self._monitor: OptionsMonitor | None = monitor
        self._listener = listener

    @property
    def active(self) -> bool:
        return self._monitor is not None

    def dispose(self) -> None:
        monitor, self._monitor = self._monitor, None
        if monitor is not None:
            monitor._remove(self._listener)

    def __enter__(self) -> Subscription:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.dispose()


class OptionsMonitor:
    """Hold the current options snapshot and notify listeners when it is replaced.

    The snapshot is swapped as a single reference, readers always get either
    the old or the new options, never a mix of both.
    """

    def __init__(self, options: FormatterOptions | None = None):
        self._current = options if options is not None else FormatterOptions()
        self._listeners: list[OptionsListener] = []
        self._lock = threading.Lock()

    @property
    def current_value(self) -> FormatterOptions:
        return self._current

    def on_change(self, listener: OptionsListener) -> Subscription:
        with self._lock:
            self._listeners.append(listener)
        return Subscription(self, listener)

    def reload(self, options: FormatterOptions) -> None:
        """Replace the current options and notify every listener with the new snapshot."""
        with self._lock:
            self._current = options
            listeners = list(self._listeners)
        self._notify(options, listeners)

    def update(self, **changes: Any) -> FormatterOptions:
        """Reload with a copy of the current options where the given fields are changed."""
        with self._lock:
            options = FormatterOptions(**{**self._current.model_dump(), **changes})
            self._current = options
            listeners = list(self._listeners)
        self._notify(options, listeners)
        return options

    def _notify(self, options: FormatterOptions, listeners: list[OptionsListener]) -> None:
        logger.debug(f"Formatter options reloaded, notifying {len(listeners)} listener(s)")
        for listener in listeners:
            listener(options)

    def _remove(self, listener: OptionsListener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)


__all__ = ["FormatterOptions", "OptionsListener", "OptionsMonitor", "Subscription"]
