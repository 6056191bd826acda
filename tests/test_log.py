import io
import re
from datetime import datetime

from zerod.log import (
    ANSI_CYAN,
    ANSI_RED,
    ANSI_RESET,
    ANSI_YELLOW,
    LogLevel,
    format_prefix,
    log,
    log_debug,
    log_error,
    log_info,
    log_warn,
)

WHEN = datetime(2024, 1, 2, 3, 4, 5)


def test_prefix_without_color_pads_level():
    assert format_prefix(LogLevel.INFO, None, WHEN) == "03:04:05 [ INFO] "


def test_prefix_with_color_wraps_level():
    prefix = format_prefix(LogLevel.ERROR, ANSI_RED, WHEN)
    assert prefix == f"03:04:05 [{ANSI_RED}ERROR{ANSI_RESET}] "


def test_prefix_level_names():
    labels = [format_prefix(level, None, WHEN)[10:15] for level in LogLevel]
    assert labels == ["DEBUG", " INFO", " WARN", "ERROR"]


def test_log_formats_arguments():
    stream = io.StringIO()
    log(stream, LogLevel.INFO, None, "value %d of %s", 7, "x")
    output = stream.getvalue()
    assert output[8:] == " [ INFO] value 7 of x\n"
    assert re.fullmatch(r"\d{2}:\d{2}:\d{2}", output[:8]) is not None


def test_log_without_arguments_keeps_percent():
    stream = io.StringIO()
    log(stream, LogLevel.WARN, None, "100%")
    assert stream.getvalue().endswith("] 100%\n")


def test_level_functions_write_to_stderr(capsys):
    log_debug("d %d", 1)
    log_info("i")
    log_warn("w")
    log_error("e")
    lines = capsys.readouterr().err.splitlines()
    assert len(lines) == 4
    assert ANSI_CYAN in lines[0] and lines[0].endswith("d 1")
    assert "[ INFO]" in lines[1]
    assert ANSI_YELLOW in lines[2]
    assert ANSI_RED in lines[3] and lines[3].endswith("e")