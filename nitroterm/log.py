"""Timestamped, coloured console logging."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from termcolor import colored


class LogLevel(Enum):
    """Severity of a log line, with its label and colour."""

    INFO = ("ℹ️ INFO", "blue")
    WARNING = ("⚠️ WARNING", "yellow")
    ERROR = ("❌ ERROR", "red")
    SUCCESS = ("✅ SUCCESS", "green")

    def __init__(self, label: str, colour: str) -> None:
        self.label = label
        self.colour = colour


def log(level: LogLevel, message: str) -> None:
    """Print ``message`` with a UTC timestamp and the level's label."""
    timestamp = datetime.now(timezone.utc).strftime("%H:%M:%S")
    stamp = colored(f"[{timestamp}]", attrs=["dark"])
    label = colored(level.label, level.colour, attrs=["bold"])
    print(f"{stamp} {label} {message}")


def log_info(message: str) -> None:
    log(LogLevel.INFO, message)


def log_warning(message: str) -> None:
    log(LogLevel.WARNING, message)


def log_error(message: str) -> None:
    log(LogLevel.ERROR, message)


def log_success(message: str) -> None:
    log(LogLevel.SUCCESS, message)