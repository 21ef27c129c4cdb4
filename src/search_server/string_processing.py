"""
Tokenization and validation helpers shared by the index and the query parser.

Text is split on the space character only. Any other character below 0x20
(tab, newline, NUL, ...) makes the text invalid rather than acting as a
separator.
"""

from __future__ import annotations

from collections.abc import Iterable

from search_server.errors import InvalidTextError

SEPARATOR = " "


def split_into_words(text: str) -> list[str]:
    """Split text into space-delimited words, skipping empty runs."""
    return [word for word in text.split(SEPARATOR) if word]


def is_valid_word(text: str) -> bool:
    """Return False if text contains a control character (code point below 0x20)."""
    return not any(ord(char) < 0x20 for char in text)


def make_unique_non_empty_strings(strings: Iterable[str]) -> set[str]:
    """
    Build a set of stop words from an arbitrary collection of strings.

    Args:
        strings: Candidate stop words. Empty strings are dropped.

    Returns:
        Set of distinct non-empty strings.

    Raises:
        InvalidTextError: If any string contains a control character.
    """
    result: set[str] = set()
    for string in strings:
        if not is_valid_word(string):
            raise InvalidTextError(f"Stop word {string!r} contains control characters")
        if string:
            result.add(string)
    return result


__all__ = [
    "SEPARATOR",
    "split_into_words",
    "is_valid_word",
    "make_unique_non_empty_strings",
]
