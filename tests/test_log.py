import re

import pytest

from nitroterm.log import LogLevel, log, log_error, log_info, log_success, log_warning

TIMESTAMP = re.compile(r"\[\d{2}:\d{2}:\d{2}\]")


@pytest.mark.parametrize(
    "function, label",
    [
        (log_info, "ℹ️ INFO"),
        (log_warning, "⚠️ WARNING"),
        (log_error, "❌ ERROR"),
        (log_success, "✅ SUCCESS"),
    ],
)
def test_helpers_print_label_and_message(capsys, function, label):
    function("deploy finished")
    out = capsys.readouterr().out
    assert label in out
    assert out.rstrip("\n").endswith("deploy finished")
    assert TIMESTAMP.search(out)


def test_log_prints_one_line(capsys):
    log(LogLevel.WARNING, "careful")
    out = capsys.readouterr().out
    assert out.count("\n") == 1
    assert "WARNING" in out


def test_label_order_is_timestamp_label_message(capsys):
    log(LogLevel.ERROR, "boom")
    out = capsys.readouterr().out
    stamp = TIMESTAMP.search(out)
    assert stamp.start() < out.index("ERROR") < out.index("boom")


def test_each_level_prints_a_distinct_line(capsys):
    lines = set()
    for level in LogLevel:
        log(level, "same message")
        out = capsys.readouterr().out
        lines.add(TIMESTAMP.sub("", out))
    assert len(lines) == len(LogLevel)