"""Translated strings loaded from YAML locale files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

DEFAULT_LANG_CODE = "en"

_MISSING = object()


def _lower_keys(node: Any) -> Any:
    if isinstance(node, dict):
        return {str(key).lower(): _lower_keys(value) for key, value in node.items()}
    if isinstance(node, list):
        return [_lower_keys(value) for value in node]
    return node


class LocaleStore:
    """Parsed locale documents, keyed by language code."""

    def __init__(self) -> None:
        self._locales: dict[str, dict[str, Any]] = {}

    def add(self, lang_code: str, content: str | bytes) -> None:
        data = yaml.load(content, Loader=yaml.BaseLoader) if content else None
        self._locales[lang_code] = _lower_keys(data) if isinstance(data, dict) else {}

    def load_directory(self, path: str | Path) -> list[str]:
        """Load every file in a directory; the language code is the name without .yml/.yaml."""
        loaded = []
        for entry in sorted(Path(path).iterdir()):
            if not entry.is_file():
                continue
            lang_code = entry.name.replace(".yml", "").replace(".yaml", "")
            self.add(lang_code, entry.read_bytes())
            loaded.append(lang_code)
        return loaded

    def translator(self, lang_code: str) -> "I18n":
        return I18n(self, lang_code)

    def _lookup(self, lang_code: str, key: str) -> Any:
        node: Any = self._locales.get(lang_code, {})
        for part in key.lower().split("."):
            if not isinstance(node, dict) or part not in node:
                return _MISSING
            node = node[part]
        return node


@dataclass(frozen=True)
class I18n:
    """Looks up strings for one language, falling back to the default language."""

    store: LocaleStore
    lang_code: str = DEFAULT_LANG_CODE

    def _fallback(self) -> "I18n | None":
        if self.lang_code == DEFAULT_LANG_CODE:
            return None
        return I18n(self.store, DEFAULT_LANG_CODE)

    def get_string(self, key: str) -> str:
        value = self.store._lookup(self.lang_code, key)
        if value is _MISSING or value is None:
            fallback = self._fallback()
            return fallback.get_string(key) if fallback else ""
        if isinstance(value, (dict, list)):
            return ""
        return str(value)

    def get_string_slice(self, key: str) -> list[str]:
        value = self.store._lookup(self.lang_code, key)
        if isinstance(value, list):
            items = [str(item) for item in value if not isinstance(item, (dict, list))]
        elif isinstance(value, str):
            items = value.split()
        else:
            items = []
        if not items:
            fallback = self._fallback()
            return fallback.get_string_slice(key) if fallback else []
        return items