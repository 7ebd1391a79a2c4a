"""Substitute `{name}` placeholders of a message template with colored parameter values."""

from __future__ import annotations

from collections.abc import Iterable

from console_formatter.colors import DEFAULT_FOREGROUND
from console_formatter.config import FormatterOptions
from console_formatter.models import ORIGINAL_FORMAT, LogEntry, Parameter, StringValue
from console_formatter.themes import CODE, AnsiColorTheme, StyleRole
from console_formatter.values import render_colored


def original_format(template: str, parameters: Iterable[Parameter]) -> str:
    """Get the raw template text, preferring the one stored under the sentinel key."""
    for param in parameters:
        if param.name == ORIGINAL_FORMAT:
            if isinstance(param.value, StringValue):
                return param.value.value
            return template
    return template


def render_template(
    template: str,
    parameters: Iterable[Parameter],
    theme: AnsiColorTheme = CODE,
    string_prefix: str = '"',
    string_suffix: str = '"',
) -> str:
    """Render a message template with its parameters.

    Substitution is a plain text replace of `{name}` for each parameter, in
    order: a placeholder used twice gets the same value twice, a placeholder
    without parameter stays as is, a parameter without placeholder is dropped.
    The whole message is wrapped in the theme text color.
    """
    parameters = tuple(parameters)
    message = original_format(template, parameters)
    for param in parameters:
        if param.name == ORIGINAL_FORMAT:
            continue
        replacement = render_colored(param.value, theme, string_prefix, string_suffix)
        message = message.replace(f"{{{param.name}}}", replacement)
    return f"{theme.style(StyleRole.TEXT)}{message}{DEFAULT_FOREGROUND}"


def render_message(entry: LogEntry, options: FormatterOptions) -> str | None:
    """Get the message of a log entry, None when there is nothing to print.

    Unstructured entries are returned as their own text, without colors.
    """
    if isinstance(entry.state, tuple):
        return render_template(
            "",
            entry.state,
            theme=options.theme,
            string_prefix=options.string_prefix,
            string_suffix=options.string_suffix,
        )
    return entry.state
