"""Insertion-ordered set with constant-time index lookup."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Hashable, Iterable, Iterator


class OrderedSet[T: Hashable]:
    """A sequence of unique items that remembers insertion order.

    Alongside the item list a reverse index maps each item to its position,
    so membership and position queries are O(1).

    Example:
        >>> s = OrderedSet(["b", "a", "b"])
        >>> list(s)
        ['b', 'a']
        >>> s.index("a")
        1

    """

    __slots__ = ("_indexes", "_items")

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._indexes: dict[T, int] = {}
        self._items: list[T] = []
        for item in items:
            self.add(item)

    def add(self, item: T) -> bool:
        """Append an item unless it is already present.

        Returns:
            True if the item was newly inserted, False otherwise.

        """
        if item in self._indexes:
            return False
        self._indexes[item] = len(self._items)
        self._items.append(item)
        return True

    def pop(self) -> T:
        """Remove and return the most recently added item.

        Raises:
            KeyError: If the set is empty.

        """
        if not self._items:
            msg = "pop from an empty OrderedSet"
            raise KeyError(msg)
        item = self._items.pop()
        del self._indexes[item]
        return item

    def copy(self) -> OrderedSet[T]:
        """Return an independent copy with the same items in the same order."""
        clone: OrderedSet[T] = OrderedSet()
        clone._items = self._items.copy()
        clone._indexes = self._indexes.copy()
        return clone

    def index(self, item: T) -> int:
        """Return the position of an item, or -1 if it is not present."""
        return self._indexes.get(item, -1)

    @property
    def items(self) -> tuple[T, ...]:
        """Snapshot of the items in insertion order."""
        return tuple(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._indexes

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedSet):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"
