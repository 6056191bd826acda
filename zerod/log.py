"""Timestamped, optionally coloured log lines on standard error."""

from __future__ import annotations

import enum
import sys
from datetime import datetime, timezone
from typing import TextIO

ANSI_RESET = "\033[0m"
ANSI_RED = "\033[31m"
ANSI_CYAN = "\033[36m"
ANSI_YELLOW = "\033[33m"
ANSI_BOLD = "\033[1m"

TIME_FORMAT = "%H:%M:%S"


class LogLevel(enum.IntEnum):
    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3


def format_prefix(level: LogLevel, color: str | None, now: datetime) -> str:
    """Build the ``HH:MM:SS [LEVEL] `` prefix of a log line."""
    stamp = now.strftime(TIME_FORMAT)
    label = f"{level.name:>5}"
    if color is not None:
        return f"{stamp} [{color}{label}{ANSI_RESET}] "
    return f"{stamp} [{label}] "


def log(stream: TextIO, level: LogLevel, color: str | None, fmt: str, *args) -> None:
    """Write one log line, formatting ``fmt`` with ``args`` printf-style."""
    message = fmt % args if args else fmt
    prefix = format_prefix(level, color, datetime.now(timezone.utc))
    stream.write(f"{prefix}{message}\n")


def log_debug(fmt: str, *args) -> None:
    log(sys.stderr, LogLevel.DEBUG, ANSI_CYAN, fmt, *args)


def log_info(fmt: str, *args) -> None:
    log(sys.stderr, LogLevel.INFO, None, fmt, *args)


def log_warn(fmt: str, *args) -> None:
    log(sys.stderr, LogLevel.WARN, ANSI_YELLOW, fmt, *args)


def log_error(fmt: str, *args) -> None:
    log(sys.stderr, LogLevel.ERROR, ANSI_RED, fmt, *args)