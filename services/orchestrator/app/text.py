"""Small string helpers used by the templating engines."""

from __future__ import annotations

import re
from typing import Iterable

_TRAILING_PUNCTUATION = ".!?;:,"
_SMALL_WORDS = frozenset({"a", "an", "and", "as", "at", "but", "by", "for", "in", "of", "on", "or", "the", "to", "vs", "with"})
_WORD_RE = re.compile(r"[^\W_][\w'-]*")


def clean_phrase(value: str) -> str:
    """Collapse whitespace and drop trailing sentence punctuation.

    A phrase made only of punctuation is kept as written.
    """

    collapsed = " ".join(value.split())
    return collapsed.rstrip(_TRAILING_PUNCTUATION).strip() or collapsed


def lower_first(value: str) -> str:
    if not value:
        return value
    return value[0].lower() + value[1:]


def upper_first(value: str) -> str:
    if not value:
        return value
    return value[0].upper() + value[1:]


def title_case(value: str) -> str:
    """Headline-style capitalisation that leaves small connecting words lowercase."""

    words = clean_phrase(value).split(" ")
    titled = []
    for index, word in enumerate(words):
        if index and word.lower() in _SMALL_WORDS:
            titled.append(word.lower())
        else:
            titled.append(upper_first(word))
    return " ".join(titled)


def words(value: str) -> list[str]:
    return _WORD_RE.findall(value.casefold())


def unique_preserve_order(values: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    result: list[str] = []
    for value in values:
        key = value.strip().lower()
        if not key or key in seen:
            continue
        seen.add(key)
        result.append(value.strip())
    return result
