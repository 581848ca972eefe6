"""Insertion-ordered set used to merge resolved actions."""

from collections.abc import Hashable, Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T", bound=Hashable)


class OrderedSet(Generic[T]):
    """A set that iterates in first-insertion order.

    Backed by a dict with ``None`` values; adding an element that is
    already present keeps its original position.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: dict[T, None] = {}
        self.extend(items)

    def add(self, item: T) -> None:
        self._items.setdefault(item, None)

    def extend(self, items: Iterable[T]) -> None:
        for item in items:
            self.add(item)

    def to_list(self) -> list[T]:
        return list(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"OrderedSet({list(self._items)!r})"
