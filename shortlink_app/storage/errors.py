"""
Storage error taxonomy.

Callers match on these classes only; engine-specific exceptions never
cross the storage boundary.
"""


class StorageError(Exception):
    """Base class for URL storage errors."""


class StorageInitError(StorageError):
    """The backing store could not be opened or its schema created."""


class AliasExistsError(StorageError):
    """A mapping with this alias already exists."""

    def __init__(self, alias: str):
        super().__init__(f"alias '{alias}' already exists")
        self.alias = alias


class URLNotFoundError(StorageError):
    """No mapping exists for this alias."""

    def __init__(self, alias: str):
        super().__init__(f"alias '{alias}' not found")
        self.alias = alias


class StorageIOError(StorageError):
    """Unexpected failure of the underlying storage."""

    def __init__(self, op: str, cause: Exception):
        super().__init__(f"{op}: {cause}")
        self.op = op
        self.cause = cause


__all__ = [
    "StorageError",
    "StorageInitError",
    "AliasExistsError",
    "URLNotFoundError",
    "StorageIOError",
]
