"""In-memory table of catalog users keyed by username."""

import logging
from typing import Iterator, List, Optional

from uocflix_catalog_service.exceptions import DuplicatedError, NotFoundError
from uocflix_catalog_service.models import User

logger = logging.getLogger(__name__)


class UserTable:
    """
    Ordered, resizable collection of users.

    The table stores its own copy of every user it is given, so later
    changes to the caller's object do not reach the table. Usernames are
    unique. ``add`` appends and ``remove`` keeps the order of the others.
    """

    def __init__(self):
        self._elements: List[User] = []

    def free(self) -> None:
        """Release every user, including their favorites, and empty the table."""
        count = len(self._elements)
        for user in self._elements:
            user.free()
        self._elements = []
        logger.debug(f"Freed user table ({count} users)")

    def add(self, user: User) -> None:
        """
        Store a copy of ``user`` at the end of the table.

        Args:
            user: User to copy in

        Raises:
            DuplicatedError: If the username is already present
            MemoryError: If the copy cannot be built; the table is left unchanged
        """
        if user is None:
            raise ValueError("user is required")

        if self.find(user.username) is not None:
            logger.warning(f"Rejected duplicate user '{user.username}'")
            raise DuplicatedError(user.username)

        # Build the copy first so a failure leaves the table untouched
        element = User.from_user(user)
        self._elements.append(element)

        logger.info(f"Added user '{user.username}' (size: {len(self._elements)})")

    def remove(self, user: User) -> None:
        """
        Remove the user with the same username as ``user``.

        Later elements move one position left; they are moved, not copied,
        so compaction cannot fail halfway.

        Raises:
            NotFoundError: If no user has that username
        """
        if user is None or user.username is None:
            raise ValueError("user is required")

        # ``user`` may be the stored element itself, which free() clears
        username = user.username
        index = self._index_of(username)
        if index is None:
            logger.warning(f"Cannot remove unknown user '{username}'")
            raise NotFoundError(username)

        removed = self._elements.pop(index)
        removed.free()

        logger.info(f"Removed user '{username}' (size: {len(self._elements)})")

    def find(self, username: str) -> Optional[User]:
        """Return the stored user with ``username``, or None."""
        if username is None:
            raise ValueError("username is required")

        index = self._index_of(username)
        return None if index is None else self._elements[index]

    def size(self) -> int:
        return len(self._elements)

    def equals(self, other: "UserTable") -> bool:
        """
        True when both tables hold the same usernames, in any order.

        Only usernames are compared. Two tables whose users share usernames
        but differ in name or mail are still equal.
        """
        if self.size() != other.size():
            return False

        return all(self.find(user.username) is not None for user in other)

    def _index_of(self, username: str) -> Optional[int]:
        for i, element in enumerate(self._elements):
            if element.username == username:
                return i
        return None

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[User]:
        return iter(self._elements)

    def __contains__(self, username) -> bool:
        return self._index_of(username) is not None

    def __enter__(self) -> "UserTable":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.free()
        return False

    def __repr__(self):
        return f"<UserTable(size={len(self._elements)})>"


def tables_equal(table1: UserTable, table2: UserTable) -> bool:
    """Compare two tables by username set; see ``UserTable.equals``."""
    if table1 is None or table2 is None:
        raise ValueError("both tables are required")
    return table1.equals(table2)
