"""Favorite entries and the LIFO stack that holds them."""
from dataclasses import dataclass
from typing import Iterator, Optional

from uocflix_catalog_service.models.film import Film, Series


@dataclass(frozen=True)
class Favorite:
    """A user's saved reference to a film."""
    film: Film


class _Node:
    __slots__ = ("favorite", "next")

    def __init__(self, favorite: Favorite, next_node: Optional["_Node"] = None):
        self.favorite = favorite
        self.next = next_node


class FavoriteStack:
    """
    Stack of favorites. The most recently pushed entry is the first one
    popped and the first one visited by iteration and traversals.
    """

    def __init__(self):
        self._first: Optional[_Node] = None
        self._size = 0

    def push(self, favorite: Favorite) -> None:
        self._first = _Node(favorite, self._first)
        self._size += 1

    def pop(self) -> Favorite:
        """Remove and return the top entry. Raises IndexError when empty."""
        if self._first is None:
            raise IndexError("pop from empty favorite stack")
        node = self._first
        self._first = node.next
        self._size -= 1
        return node.favorite

    def top(self) -> Favorite:
        """Return the top entry without removing it. Raises IndexError when empty."""
        if self._first is None:
            raise IndexError("top of empty favorite stack")
        return self._first.favorite

    def is_empty(self) -> bool:
        return self._first is None

    def duplicate(self) -> "FavoriteStack":
        """Return an independent stack with the same entries in the same order."""
        copy = FavoriteStack()
        # Push in reverse pop order so the copy pops identically
        for favorite in reversed(list(self)):
            copy.push(favorite)
        return copy

    def free(self) -> None:
        """Drop every entry. Safe to call on an empty stack."""
        while self._first is not None:
            self._first = self._first.next
        self._size = 0

    def count_per_series(self, series: Series) -> int:
        """Count entries whose film belongs to ``series``."""
        return sum(1 for favorite in self if favorite.film.series == series)

    def length_in_min(self) -> int:
        """Total runtime of every entry, in minutes."""
        return sum(favorite.film.duration for favorite in self)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Favorite]:
        node = self._first
        while node is not None:
            yield node.favorite
            node = node.next

    def __repr__(self):
        return f"<FavoriteStack(size={self._size})>"
