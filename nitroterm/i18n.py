"""Key-based message translation from JSON locale tables."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Mapping


class I18n:
    """Looks up translated strings for the current locale."""

    DEFAULT_LOCALE = "en"

    def __init__(self, translations: Mapping[str, Any] | None = None) -> None:
        self._translations: dict[str, Any] = dict(translations or {})
        self._locale = self.DEFAULT_LOCALE

    @classmethod
    def from_directory(cls, directory: str | os.PathLike[str]) -> I18n:
        """Load every ``<locale>.json`` file in ``directory``."""
        translations = {
            path.stem: json.loads(path.read_text(encoding="utf-8"))
            for path in sorted(Path(directory).glob("*.json"))
        }
        return cls(translations)

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def locales(self) -> list[str]:
        return sorted(self._translations)

    def set_locale(self, locale: str) -> None:
        """Switch locale; unknown locales are ignored."""
        if locale in self._translations:
            self._locale = locale

    def t(self, key: str) -> str:
        """Translate ``key``, falling back to the key itself."""
        table = self._translations.get(self._locale)
        if isinstance(table, dict):
            value = table.get(key)
            if isinstance(value, str):
                return value
        return key