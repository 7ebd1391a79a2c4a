from console_formatter.colors import DEFAULT_FOREGROUND
from console_formatter.config import FormatterOptions
from console_formatter.models import ORIGINAL_FORMAT, LogEntry, LogLevel, Parameter
from console_formatter.template import original_format, render_message, render_template
from console_formatter.themes import CODE, LITERATE, StyleRole

TEXT = CODE.style(StyleRole.TEXT)
STRING = CODE.style(StyleRole.STRING)
NUMBER = CODE.style(StyleRole.NUMBER)
NULL = CODE.style(StyleRole.NULL)


def params(**values: object) -> list[Parameter]:
    return [Parameter.from_value(name, value) for name, value in values.items()]


def test_substitutes_string_parameters() -> None:
    message = render_template(
        "This is an information message: {string1} and {string2}", params(string1="Peter", string2="Emma")
    )
    assert message == (
        f'{TEXT}This is an information message: {STRING}"Peter"{TEXT} and {STRING}"Emma"{TEXT}{DEFAULT_FOREGROUND}'
    )
    assert "{string1}" not in message
    assert "{string2}" not in message


def test_repeated_placeholder_substituted_everywhere() -> None:
    message = render_template("{n} plus {n}", params(n=2))
    assert message == f"{TEXT}{NUMBER}2{TEXT} plus {NUMBER}2{TEXT}{DEFAULT_FOREGROUND}"


def test_missing_placeholder_kept_literally() -> None:
    message = render_template("Hello {name}, from {city}", params(name="Peter"))
    assert "{city}" in message
    assert "{name}" not in message


def test_unused_parameter_is_ignored() -> None:
    message = render_template("Nothing to see", params(extra="value"))
    assert message == f"{TEXT}Nothing to see{DEFAULT_FOREGROUND}"


def test_null_parameter() -> None:
    message = render_template("Value is {value}", params(value=None))
    assert message == f"{TEXT}Value is {NULL}null{TEXT}{DEFAULT_FOREGROUND}"


def test_sentinel_is_template_source_and_never_substituted() -> None:
    parameters = [*params(name="Emma"), Parameter.from_value(ORIGINAL_FORMAT, "Hi {name}")]
    assert original_format("ignored", parameters) == "Hi {name}"
    message = render_template("ignored", parameters)
    assert message == f'{TEXT}Hi {STRING}"Emma"{TEXT}{DEFAULT_FOREGROUND}'


def test_template_argument_used_without_sentinel() -> None:
    assert original_format("Hi {name}", params(name="Emma")) == "Hi {name}"


def test_empty_template_and_no_parameters() -> None:
    assert render_template("", []) == f"{TEXT}{DEFAULT_FOREGROUND}"
    assert render_template("plain", []) == f"{TEXT}plain{DEFAULT_FOREGROUND}"


def test_custom_decoration_and_theme() -> None:
    message = render_template("{who}", params(who="me"), theme=LITERATE, string_prefix="'", string_suffix="'")
    assert message == f"\x1b[37m\x1b[36m'me'\x1b[37m{DEFAULT_FOREGROUND}"


def test_render_message_structured_entry() -> None:
    entry = LogEntry.from_template(LogLevel.INFORMATION, "Count: {count}", count=3)
    options = FormatterOptions()
    assert render_message(entry, options) == f"{TEXT}Count: {NUMBER}3{TEXT}{DEFAULT_FOREGROUND}"


def test_render_message_uses_option_decoration() -> None:
    entry = LogEntry.from_template(LogLevel.INFORMATION, "{who}", who="me")
    options = FormatterOptions(string_prefix="<", suffix=">")
    assert f"{STRING}<me>{TEXT}" in render_message(entry, options)


def test_render_message_unstructured_entry_is_unmodified() -> None:
    entry = LogEntry(level=LogLevel.WARNING, state="already {formatted}")
    assert render_message(entry, FormatterOptions()) == "already {formatted}"


def test_render_message_without_state() -> None:
    entry = LogEntry(level=LogLevel.WARNING, state=None)
    assert render_message(entry, FormatterOptions()) is None
