from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum


class DocumentStatus(IntEnum):
    """Moderation status of an indexed document. Integer values are printed as-is."""

    ACTUAL = 0
    IRRELEVANT = 1
    BANNED = 2
    REMOVED = 3


@dataclass
class Document:
    """A scored search result."""

    id: int = 0
    relevance: float = 0.0
    rating: int = 0

    def __str__(self) -> str:
        return (
            f"{{ document_id = {self.id}, "
            f"relevance = {self.relevance:g}, "
            f"rating = {self.rating} }}"
        )


def compute_average_rating(ratings: Sequence[int]) -> int:
    """Integer mean of ratings, truncated toward zero (-7 / 2 -> -3)."""
    total = sum(ratings)
    count = len(ratings)
    if total >= 0:
        return total // count
    return -(-total // count)


__all__ = ["DocumentStatus", "Document", "compute_average_rating"]
