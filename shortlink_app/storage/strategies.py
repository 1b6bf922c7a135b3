"""
URL storage strategies using Strategy Pattern.

The storage owns the alias -> URL table: it enforces alias uniqueness and
translates engine errors into the StorageError taxonomy.
"""

from abc import ABC, abstractmethod
from typing import Optional
import logging
import threading

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from shortlink_app.database.connection import Base, create_storage_engine
from shortlink_app.models.url import URLMapping
from .errors import AliasExistsError, StorageInitError, StorageIOError, URLNotFoundError


class URLStorage(ABC):
    """
    Abstract base class for URL storage.

    Every operation is atomic on its own and safe to call from many
    threads at once. Implementations return a value or raise one of the
    StorageError subclasses, never both.
    """

    @abstractmethod
    def save_url(self, url_to_save: str, alias: str) -> int:
        """
        Create a new mapping.

        Args:
            url_to_save: Target URL, stored verbatim
            alias: Unique alias for the URL

        Returns:
            The id assigned to the new mapping

        Raises:
            AliasExistsError: alias is already mapped
            StorageIOError: storage failure
        """
        pass

    @abstractmethod
    def get_url(self, alias: str) -> str:
        """
        Resolve an alias.

        Raises:
            URLNotFoundError: alias is not mapped
            StorageIOError: storage failure
        """
        pass

    @abstractmethod
    def delete_url(self, alias: str) -> None:
        """
        Remove the mapping for an alias if there is one.

        Deleting an unknown alias is not an error.

        Raises:
            StorageIOError: storage failure
        """
        pass


def _require(value: str, name: str) -> None:
    if not isinstance(value, str) or not value:
        raise ValueError(f"{name} must be a non-empty string")


class SQLURLStorage(URLStorage):
    """
    SQLAlchemy implementation (SQLite by default).

    One engine is created at construction and shared by all callers for
    the lifetime of the process. Writes are serialized by a lock so racing
    inserts on one alias reach the UNIQUE constraint one at a time; the
    constraint itself is what guarantees uniqueness.
    """

    def __init__(self, location: str, logger: Optional[logging.Logger] = None):
        """
        Open (or create) the store and make sure the schema exists.

        Args:
            location: SQLite file path, ":memory:", or SQLAlchemy URL
            logger: Optional logger

        Raises:
            StorageInitError: the store cannot be opened or initialized
        """
        self.location = location
        self.logger = logger or logging.getLogger(__name__)
        self._write_lock = threading.Lock()

        try:
            self._engine = create_storage_engine(location)
            # create_all checks for existing table and index first
            Base.metadata.create_all(bind=self._engine)
        except (SQLAlchemyError, ImportError) as e:
            # ImportError: the database URL names a DBAPI driver that is not installed
            raise StorageInitError(f"storage.sql.init: {e}") from e

        self._session_factory = sessionmaker(bind=self._engine, expire_on_commit=False)
        self.logger.debug(f"Storage initialized at {self._engine.url!r}")

    def save_url(self, url_to_save: str, alias: str) -> int:
        op = "storage.sql.save_url"
        _require(url_to_save, "url")
        _require(alias, "alias")

        with self._write_lock:
            try:
                with self._session_factory.begin() as session:
                    mapping = URLMapping(alias=alias, url=url_to_save)
                    session.add(mapping)
                    session.flush()
                    mapping_id = mapping.id
            except IntegrityError as e:
                # alias UNIQUE is the only constraint an insert can violate
                raise AliasExistsError(alias) from e
            except SQLAlchemyError as e:
                raise StorageIOError(op, e) from e

        return mapping_id

    def get_url(self, alias: str) -> str:
        op = "storage.sql.get_url"
        _require(alias, "alias")

        try:
            with self._session_factory() as session:
                url = session.scalar(
                    select(URLMapping.url).where(URLMapping.alias == alias)
                )
        except SQLAlchemyError as e:
            raise StorageIOError(op, e) from e

        if url is None:
            raise URLNotFoundError(alias)
        return url

    def delete_url(self, alias: str) -> None:
        op = "storage.sql.delete_url"
        _require(alias, "alias")

        with self._write_lock:
            try:
                with self._session_factory.begin() as session:
                    session.execute(delete(URLMapping).where(URLMapping.alias == alias))
            except SQLAlchemyError as e:
                raise StorageIOError(op, e) from e
