"""Substring search and whitespace word splitting for XPM text."""

from __future__ import annotations

import re

_WORD_SEPARATORS = re.compile(r"[ \t]+")


def _check_pattern(pattern: str) -> None:
    if not pattern:
        raise ValueError("pattern must not be empty")


def find(text: str, pattern: str, length: int) -> int:
    """Return the first index of ``pattern`` in ``text``, or -1.

    ``length`` is the size of the available text; a pattern longer than it
    never matches.
    """
    _check_pattern(pattern)
    if len(pattern) > length:
        return -1
    return text.find(pattern)


def find_outside_quotes(text: str, pattern: str, length: int) -> int:
    """Like :func:`find`, but skip matches inside double-quoted sections."""
    _check_pattern(pattern)
    if len(pattern) > length:
        return -1
    inside = False
    for pos in range(len(text) - len(pattern) + 1):
        if text[pos] == '"':
            inside = not inside
        if not inside and text.startswith(pattern, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split ``text`` on runs of spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]