"""Translated labels for the currency widget.

Catalogs live in ``currency_field/translations/{lang}.json``. Nested keys
are flattened to dot notation (``currency_input.step_up``). Only
languages listed in SUPPORTED_LANGUAGES are loaded; any other code falls
back to DEFAULT_LANGUAGE. A key missing from the catalog resolves to the
English default given by the caller.

Usage:
    from currency_field.core.i18n import t, TranslationManager

    TranslationManager.init("it")
    t("currency_input.step_up", "Increase by {step}", step="1,00")
    # -> "Aumenta di 1,00"
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Mapping

from currency_field.constants import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES

logger = logging.getLogger(__name__)

CATALOG_DIR = Path(__file__).parent.parent / "translations"


def flatten_catalog(data: dict, prefix: str = "") -> dict[str, str]:
    """{"currency_input": {"label": "Importo"}} -> {"currency_input.label": "Importo"}"""
    flat: dict[str, str] = {}
    for name, value in data.items():
        key = f"{prefix}.{name}" if prefix else name
        if isinstance(value, dict):
            flat.update(flatten_catalog(value, key))
        else:
            flat[key] = str(value)
    return flat


def resolve_language(lang: str) -> str:
    """Return *lang* if a catalog ships for it, else DEFAULT_LANGUAGE."""
    if lang in SUPPORTED_LANGUAGES:
        return lang
    logger.warning("Unsupported language %r, using %r", lang, DEFAULT_LANGUAGE)
    return DEFAULT_LANGUAGE


@lru_cache(maxsize=None)
def load_catalog(lang: str) -> Mapping[str, str]:
    """Read-only flattened catalog for *lang* (empty if the file is missing)."""
    path = CATALOG_DIR / f"{lang}.json"
    if not path.exists():
        logger.warning("Catalog file %s not found", path)
        return MappingProxyType({})
    with path.open(encoding="utf-8") as f:
        return MappingProxyType(flatten_catalog(json.load(f)))


class TranslationManager:
    """Active language, shared by every widget in the process.

    Widgets register a retranslate callback with ``on_language_changed``;
    the callbacks survive ``init()`` so a language can be chosen after the
    widgets exist.
    """

    _instance: TranslationManager | None = None
    _listeners: list[Callable[[], None]] = []

    def __init__(self, lang: str = DEFAULT_LANGUAGE):
        self.lang = resolve_language(lang)
        self._catalog = load_catalog(self.lang)

    def get(self, key: str, default: str = "") -> str:
        return self._catalog.get(key, default)

    def translate(self, key: str, default: str = "", **values) -> str:
        """Look up *key* and fill its ``{placeholders}`` from *values*."""
        text = self.get(key, default)
        return text.format(**values) if values else text

    def set_language(self, lang: str) -> None:
        """Switch catalogs; listeners run only when the language changes."""
        lang = resolve_language(lang)
        if lang == self.lang:
            return
        self.lang = lang
        self._catalog = load_catalog(lang)
        logger.debug("Language switched to %r", lang)
        for callback in list(self._listeners):
            callback()

    @classmethod
    def instance(cls) -> TranslationManager:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def init(cls, lang: str = DEFAULT_LANGUAGE) -> TranslationManager:
        cls._instance = cls(lang)
        return cls._instance

    @classmethod
    def on_language_changed(cls, callback: Callable[[], None]) -> None:
        if callback not in cls._listeners:
            cls._listeners.append(callback)

    @classmethod
    def remove_listener(cls, callback: Callable[[], None]) -> None:
        if callback in cls._listeners:
            cls._listeners.remove(callback)

    @classmethod
    def reset(cls) -> None:
        """Drop the active manager and all listeners (tests)."""
        cls._instance = None
        cls._listeners.clear()


def t(key: str, default: str = "", **values) -> str:
    """Translate *key* in the active language.

    Args:
        key: Dot-notation key, e.g. ``"app.committed"``.
        default: English text used when the key is missing.
        **values: Substituted into ``{placeholders}``.
    """
    return TranslationManager.instance().translate(key, default, **values)
