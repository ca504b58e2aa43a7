"""Small text helpers used by the XPM reader: substring search and word splitting."""

from __future__ import annotations

import re

__all__ = ["find", "find_outside_quotes", "split_words"]

_WORD_SEPARATORS = re.compile(r"[ \t]+")


def _check_needle(needle: str) -> None:
    if not needle:
        raise ValueError("needle must not be empty")


def find(text: str, needle: str) -> int:
    """Return the index of the first occurrence of ``needle`` in ``text``, or -1."""
    _check_needle(needle)
    return text.find(needle)


def find_outside_quotes(text: str, needle: str) -> int:
    """Return the index of the first ``needle`` not inside a double-quoted span, or -1.

    A double quote toggles the quoted state as it is reached, so a match may
    start on a closing quote but never on an opening one.
    """
    _check_needle(needle)
    inside = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            inside = not inside
        if not inside and text.startswith(needle, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by runs of spaces and tabs."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]