"""Catalog errors"""


class CatalogError(Exception):
    """Base class for recoverable catalog errors."""

    def __init__(self, username: str, message: str):
        super().__init__(message)
        self.username = username


class DuplicatedError(CatalogError):
    """Raised when a username is already present in a table."""

    def __init__(self, username: str):
        super().__init__(username, f"User '{username}' already exists")


class NotFoundError(CatalogError):
    """Raised when a username is not present in a table."""

    def __init__(self, username: str):
        super().__init__(username, f"User '{username}' not found")
