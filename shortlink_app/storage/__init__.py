"""
URL storage module.

Implements the Strategy Pattern for the alias -> URL store.
"""

from .strategies import URLStorage, SQLURLStorage
from .errors import (
    StorageError,
    StorageInitError,
    AliasExistsError,
    URLNotFoundError,
    StorageIOError,
)

__all__ = [
    "URLStorage",
    "SQLURLStorage",
    "StorageError",
    "StorageInitError",
    "AliasExistsError",
    "URLNotFoundError",
    "StorageIOError",
]
