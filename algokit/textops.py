"""String utilities: reversal, length-first sorting and tokenizing."""

from __future__ import annotations

from collections.abc import Iterable


def reverse_string(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]


def sort_strings(strings: Iterable[str]) -> list[str]:
    """Sort longest first; strings of equal length sort lexicographically."""
    return sorted(strings, key=lambda s: (-len(s), s))


def tokenize(text: str, delimiters: str = " ") -> list[str]:
    """Split ``text`` at any delimiter character, dropping empty tokens."""
    tokens: list[str] = []
    current: list[str] = []
    for char in text:
        if char in delimiters:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        tokens.append("".join(current))
    return tokens