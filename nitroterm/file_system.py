"""Small file helpers."""

from __future__ import annotations

import os
from pathlib import Path


def file_exists(path: str | os.PathLike[str]) -> bool:
    """Return True when something exists at ``path``."""
    return Path(path).exists()


def read_file_to_string(path: str | os.PathLike[str]) -> str:
    """Read a whole UTF-8 file without newline translation."""
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()


def write_string_to_file(path: str | os.PathLike[str], content: str) -> None:
    """Write ``content`` to ``path`` as UTF-8, replacing any existing file."""
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(content)