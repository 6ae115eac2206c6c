"""Catalog user with an owned stack of favorites."""
import logging
from typing import Optional

from uocflix_catalog_service.models.favorite import FavoriteStack
from uocflix_catalog_service.processing.text_processor import trim_capitalize

logger = logging.getLogger(__name__)


class User:
    """
    A catalog user identified by ``username``.

    A user is either fully built or not built at all: the constructor
    validates every field before storing any of them. The favorites
    stack belongs to the user and is released with it.
    """

    def __init__(self, username: str, name: str, mail: str):
        for field, value in (("username", username), ("name", name), ("mail", mail)):
            if value is None:
                raise ValueError(f"{field} is required")

        self.username: Optional[str] = str(username)
        self.name: Optional[str] = str(name)
        self.mail: Optional[str] = str(mail)
        self.favorites: Optional[FavoriteStack] = FavoriteStack()

    @classmethod
    def from_user(cls, src: "User") -> "User":
        """Build an independent copy of ``src``'s fields. Favorites start empty."""
        return cls(src.username, src.name, src.mail)

    def free(self) -> None:
        """Release fields and favorites. Calling it again is a no-op."""
        if self.favorites is not None:
            self.favorites.free()
        self.username = None
        self.name = None
        self.mail = None
        self.favorites = None

    @property
    def is_freed(self) -> bool:
        return self.username is None

    def copy_from(self, src: "User") -> None:
        """
        Replace this user's data with ``src``'s.

        The three text fields are copied. Favorites are not: this user
        ends up with a fresh, empty favorites stack.
        """
        replacement = User.from_user(src)
        self.free()
        self.username = replacement.username
        self.name = replacement.name
        self.mail = replacement.mail
        self.favorites = replacement.favorites

    def equals(self, other: "User") -> bool:
        """True when username, name and mail match. Favorites are ignored."""
        return (
            self.username == other.username
            and self.name == other.name
            and self.mail == other.mail
        )

    def trim_capitalize_name(self) -> None:
        """Normalize ``name`` in place, e.g. ``"  john   DOE "`` -> ``"John   Doe"``."""
        self.name = trim_capitalize(self.name)
        logger.debug(f"Normalized name for {self.username}: '{self.name}'")

    def __eq__(self, other):
        if not isinstance(other, User):
            return NotImplemented
        return self.equals(other)

    # Fields are mutable and cleared by free(), so users are unhashable
    __hash__ = None

    def __repr__(self):
        return f"<User(username='{self.username}', name='{self.name}')>"
