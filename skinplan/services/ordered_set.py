"""
Insertion-ordered set — the first occurrence of a value fixes its position.
"""

from typing import Generic, Hashable, Iterable, Iterator, TypeVar

T = TypeVar("T", bound=Hashable)


class OrderedSet(Generic[T]):
    """Set that iterates in insertion order and ignores repeats."""

    def __init__(self, items: Iterable[T] = ()):
        self._items: dict[T, None] = {}
        self.update(items)

    def add(self, item: T) -> None:
        if item not in self._items:
            self._items[item] = None

    def update(self, items: Iterable[T]) -> None:
        for item in items:
            self.add(item)

    def head(self, limit: int) -> list[T]:
        """First `limit` items, in insertion order."""
        return list(self._items)[:limit]

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"OrderedSet({list(self._items)!r})"
