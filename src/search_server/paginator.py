"""Split a sequence of results into fixed-size pages."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Generic, TypeVar

T = TypeVar("T")


class Page(Sequence, Generic[T]):
    """Read-only view of items[start:stop]."""

    def __init__(self, items: Sequence[T], start: int, stop: int):
        self._items = items
        self.start = start
        self.stop = stop

    def __len__(self) -> int:
        return self.stop - self.start

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(len(self)))]
        if index < 0:
            index += len(self)
        if not 0 <= index < len(self):
            raise IndexError("page index out of range")
        return self._items[self.start + index]

    def __iter__(self) -> Iterator[T]:
        for i in range(self.start, self.stop):
            yield self._items[i]

    def __str__(self) -> str:
        return "".join(str(item) for item in self)

    def __repr__(self) -> str:
        return f"Page({list(self)!r})"


class Paginator(Generic[T]):
    """
    Pages over a sequence.

    Every page holds page_size items except possibly the last one.

    Raises:
        ValueError: If page_size is less than 1.
    """

    def __init__(self, items: Sequence[T], page_size: int):
        if page_size < 1:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self.page_size = page_size
        self._pages = [
            Page(items, start, min(start + page_size, len(items)))
            for start in range(0, len(items), page_size)
        ]

    def __len__(self) -> int:
        return len(self._pages)

    def __iter__(self) -> Iterator[Page[T]]:
        return iter(self._pages)

    def __getitem__(self, index: int) -> Page[T]:
        return self._pages[index]


def paginate(items: Sequence[T], page_size: int) -> Paginator[T]:
    return Paginator(items, page_size)


__all__ = ["Page", "Paginator", "paginate"]
