"""
Default collaborator implementations: names, ids, and terms.

These are small, deterministic defaults so a factory works out of the box.
Applications with their own naming scheme or localization store plug in
their own objects implementing the protocols in ``formbind.ports``.
"""

from __future__ import annotations

import re
from typing import Dict, Mapping, Optional

from .formatting import culture_tag, resolve_culture
from .ports import Accessor, Culture

_ID_UNSAFE_RE = re.compile(r"[^A-Za-z0-9_-]+")
_CAMEL_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def humanize(key: str) -> str:
    """Turn ``post_code`` or ``postCode`` into ``Post code``."""
    text = _CAMEL_RE.sub(" ", key.strip())
    text = re.sub(r"[_\-.\s]+", " ", text).strip()
    if not text:
        return key
    return text[0].upper() + text[1:].lower()


class DefaultNameResolver:
    """Use the accessor path as the submission key, with an optional prefix."""

    def __init__(self, prefix: str = "") -> None:
        self.prefix = prefix

    def resolve_name(self, accessor: Accessor) -> str:
        return f"{self.prefix}{accessor.path}"


class DefaultIdResolver:
    """Derive ``{control_prefix}_{path}`` with id-unsafe characters replaced."""

    def __init__(self, separator: str = "_") -> None:
        self.separator = separator

    def resolve_id(self, accessor: Accessor, control_prefix: str) -> str:
        path_part = _ID_UNSAFE_RE.sub("_", accessor.path).strip("_")
        if not control_prefix:
            return path_part
        return f"{control_prefix}{self.separator}{path_part}"


def _culture_key(culture: str) -> str:
    return culture.replace("_", "-").lower()


class DictionaryTermResolver:
    """Look up terms in an in-memory table keyed by culture.

    Parameters:
        terms: ``{"en-GB": {"Choose": "Choose..."}, "de": {...}}``.

    Lookup order: exact culture tag, then language only, then the humanized
    key, so a missing translation still renders readable text.
    """

    def __init__(self, terms: Optional[Mapping[str, Mapping[str, str]]] = None) -> None:
        self.terms: Dict[str, Dict[str, str]] = {
            _culture_key(culture): dict(table) for culture, table in (terms or {}).items()
        }

    def _lookup(self, key: str, culture: Culture) -> Optional[str]:
        locale = resolve_culture(culture)
        for candidate in (_culture_key(culture_tag(locale)), locale.language):
            table = self.terms.get(candidate)
            if table and key in table:
                return table[key]
        return None

    def resolve_term(self, key: str, culture: Culture) -> str:
        found = self._lookup(key, culture)
        return found if found is not None else humanize(key)

    def resolve_label(self, accessor: Accessor, culture: Culture) -> str:
        for key in (accessor.path, accessor.last_segment):
            found = self._lookup(key, culture)
            if found is not None:
                return found
        return humanize(accessor.last_segment)


__all__ = [
    "humanize",
    "DefaultNameResolver",
    "DefaultIdResolver",
    "DictionaryTermResolver",
]
