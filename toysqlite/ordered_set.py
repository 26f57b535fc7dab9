"""A set that remembers the order in which items were added."""

from __future__ import annotations

from typing import Generic, Hashable, Iterable, Iterator, Optional, TypeVar

__all__ = ["OrderedSet"]

T = TypeVar("T", bound=Hashable)


class OrderedSet(Generic[T]):
    """Insertion-ordered collection that ignores items it already holds."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._items: dict[T, None] = {}
        for item in items or ():
            self.add(item)

    def add(self, item: T) -> None:
        """Append ``item`` unless it is already present."""
        self._items.setdefault(item, None)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"