import io

import pytest

import console_formatter.formatter as formatter_module
from console_formatter.config import FormatterOptions, OptionsMonitor
from console_formatter.formatter import CustomFormatter
from console_formatter.models import LogEntry, LogLevel


class CountingStream(io.StringIO):
    def __init__(self) -> None:
        super().__init__()
        self.writes = 0

    def write(self, text: str) -> int:
        self.writes += 1
        return super().write(text)


class BrokenStream(io.StringIO):
    def write(self, text: str) -> int:
        raise OSError("stream closed")


def test_write_is_a_single_call() -> None:
    stream = CountingStream()
    CustomFormatter().write(LogEntry.from_template(LogLevel.ERROR, "failed {x}", x=1), stream)
    assert stream.writes == 1
    assert stream.getvalue().endswith("\n")


def test_entry_without_message_writes_nothing() -> None:
    stream = CountingStream()
    CustomFormatter().write(LogEntry(level=LogLevel.INFORMATION, state=None), stream)
    assert stream.writes == 0
    assert stream.getvalue() == ""


def test_stream_errors_propagate() -> None:
    with pytest.raises(OSError, match="stream closed"):
        CustomFormatter().write(LogEntry.from_template(LogLevel.DEBUG, "hello"), BrokenStream())


def test_reload_applies_to_next_write() -> None:
    monitor = OptionsMonitor(FormatterOptions(prefix="A"))
    formatter = CustomFormatter(monitor)
    entry = LogEntry.from_template(LogLevel.INFORMATION, "hello")

    assert formatter.format(entry).startswith("A")
    monitor.update(prefix="B")
    assert formatter.options.prefix == "B"
    assert formatter.format(entry).startswith("B")


def test_reload_during_write_does_not_mix_options(monkeypatch: pytest.MonkeyPatch) -> None:
    """A reload arriving while a line is rendered only affects the following lines."""
    monitor = OptionsMonitor(FormatterOptions(prefix="old", string_prefix="<", string_suffix=">"))
    formatter = CustomFormatter(monitor)
    render_message = formatter_module.render_message

    def reload_then_render(entry, options):
        monitor.update(prefix="new", string_prefix="(", string_suffix=")")
        return render_message(entry, options)

    monkeypatch.setattr(formatter_module, "render_message", reload_then_render)
    stream = io.StringIO()
    formatter.write(LogEntry.from_template(LogLevel.INFORMATION, "{who}", who="me"), stream)

    line = stream.getvalue()
    assert line.startswith("old")
    assert "<me>" in line
    assert formatter.options.prefix == "new"


def test_close_is_idempotent() -> None:
    monitor = OptionsMonitor()
    formatter = CustomFormatter(monitor)
    assert monitor.listener_count == 1

    formatter.close()
    formatter.close()
    formatter.dispose()
    assert monitor.listener_count == 0

    monitor.update(prefix="ignored")
    assert formatter.options.prefix == ""


def test_context_manager_releases_subscription() -> None:
    monitor = OptionsMonitor()
    with CustomFormatter(monitor):
        assert monitor.listener_count == 1
    assert monitor.listener_count == 0


def test_plain_options_snapshot() -> None:
    formatter = CustomFormatter(FormatterOptions(prefix="fixed"))
    assert formatter.format(LogEntry.from_template(LogLevel.TRACE, "x")).startswith("fixed")
    formatter.close()
