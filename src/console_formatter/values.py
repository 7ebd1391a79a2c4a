"""Render parameter values to text, each kind tagged with the style role it is colored with."""

from __future__ import annotations

from console_formatter.models import (
    BooleanValue,
    DateTimeValue,
    DecimalValue,
    DurationValue,
    FloatValue,
    GuidValue,
    IntegerValue,
    NullValue,
    OtherValue,
    ParameterValue,
    StringValue,
)
from console_formatter.themes import AnsiColorTheme, StyleRole

NULL_TEXT = "null"


def render_value(
    value: ParameterValue, string_prefix: str = '"', string_suffix: str = '"'
) -> tuple[str, StyleRole]:
    """Get the text of a parameter value and the role it should be colored with.

    Only strings are decorated with the prefix and suffix. Date, duration and
    identifier values share the scalar role.
    """
    match value:
        case BooleanValue(value=flag):
            return ("true" if flag else "false"), StyleRole.BOOLEAN
        case IntegerValue(value=number) | FloatValue(value=number) | DecimalValue(value=number):
            return str(number), StyleRole.NUMBER
        case StringValue(value=text):
            return f"{string_prefix}{text}{string_suffix}", StyleRole.STRING
        case DateTimeValue(value=moment):
            return moment.isoformat(), StyleRole.SCALAR
        case DurationValue(value=duration):
            return str(duration), StyleRole.SCALAR
        case GuidValue(value=guid):
            return str(guid), StyleRole.SCALAR
        case NullValue():
            return NULL_TEXT, StyleRole.NULL
        case OtherValue(raw_text=raw_text):
            # A value without any textual form is substituted by nothing
            return raw_text or "", StyleRole.TEXT
    raise TypeError(f"Not a parameter value: {value!r}")


def render_colored(
    value: ParameterValue, theme: AnsiColorTheme, string_prefix: str = '"', string_suffix: str = '"'
) -> str:
    """Render a value wrapped in its role color, switching back to the text color after it."""
    text, role = render_value(value, string_prefix, string_suffix)
    return f"{theme.style(role)}{text}{theme.style(StyleRole.TEXT)}"
