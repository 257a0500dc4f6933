"""Resolve schedule labels for a requested locale."""

from __future__ import annotations

from typing import Callable, Dict

from .schedule_labels import TABLES

SUPPORTED_LANGS = {"en", "de", "es", "fr", "it", "nl", "pl"}

Lookup = Callable[[str], str]


def clamp_lang(lang: str | None) -> str:
    if not lang:
        return "en"
    lang = lang.lower()
    return lang if lang in SUPPORTED_LANGS else "en"


def _merged(lang: str) -> Dict[str, str]:
    labels: Dict[str, str] = {}
    for table in TABLES:
        labels.update(table.get("en", {}))
        labels.update(table.get(lang, {}))
    return labels


def make_lookup(lang: str | None) -> Lookup:
    """Return ``key -> label`` for ``lang``, falling back to English, then the key."""

    labels = _merged(clamp_lang(lang))

    def _pick(key: str) -> str:
        return labels.get(key, key)

    return _pick


def identity_lookup(key: str) -> str:
    return key
