"""Field identifier formatting for raw JSON keys.

A key goes through two casing passes. First every underscore-separated part
is title-cased (with ``id``/``url`` endings forced to upper case) and the
parts are joined; then, after invalid characters have been replaced with
underscores, a separator-driven pass lower-cases the leading rune. The
result is always a usable identifier, e.g. ``quest_id`` becomes ``questID``.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Callable

UPPERCASE_FIXUPS = frozenset({"id", "url"})


def is_separator(ch: str) -> bool:
    """Return True when ``ch`` starts a new word for casing purposes."""
    if ch.isascii():
        return not (ch.isalnum() or ch == "_")
    if ch.isalpha() or ch.isdecimal():
        return False
    return ch.isspace() or unicodedata.category(ch).startswith("P")


def _single_rune(mapped: str, original: str) -> str:
    # Case mappings that expand to several characters (e.g. "ß") are skipped.
    return mapped if len(mapped) == 1 else original


def _title_rune(ch: str) -> str:
    return _single_rune(ch.title(), ch)


def _lower_rune(ch: str) -> str:
    return _single_rune(ch.lower(), ch)


def _map_word_starts(text: str, fn: Callable[[str], str]) -> str:
    """Apply ``fn`` to every rune that follows a separator.

    The start of ``text`` counts as following a separator.
    """
    prev = " "
    out = []
    for ch in text:
        out.append(fn(ch) if is_separator(prev) else ch)
        prev = ch
    return "".join(out)


def title_words(text: str) -> str:
    """Title-case every rune that starts a word."""
    return _map_word_starts(text, _title_rune)


def soft_camel(text: str) -> str:
    """Lower-case every rune that starts a word, including the first."""
    return _map_word_starts(text, _lower_rune)


def sanitize_identifier(text: str) -> str:
    """Replace runes that cannot appear in an identifier with ``_``.

    The first rune must be a letter; later runes may also be digits.
    """
    runes = []
    for idx, ch in enumerate(text):
        ok = ch.isalpha() if idx == 0 else ch.isalpha() or ch.isdecimal()
        runes.append(ch if ok else "_")
    return "".join(runes)


def format_field_name(key: str) -> str:
    """Format a JSON key as a struct field identifier.

    >>> format_field_name("quest_id")
    'questID'
    >>> format_field_name("FloorCount")
    'floorCount'
    """
    parts = [title_words(part) for part in key.split("_")]
    if parts[-1].lower() in UPPERCASE_FIXUPS:
        parts[-1] = parts[-1].upper()
    assembled = sanitize_identifier("".join(parts))
    if not assembled:
        return "_"
    return soft_camel(assembled)


__all__ = [
    "UPPERCASE_FIXUPS",
    "format_field_name",
    "is_separator",
    "sanitize_identifier",
    "soft_camel",
    "title_words",
]
