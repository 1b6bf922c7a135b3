import logging
from dataclasses import dataclass
from typing import Optional

from shortlink_app.services.alias_strategies import (
    RESERVED_ALIASES,
    AliasStrategy,
    RandomAliasStrategy,
)
from shortlink_app.storage.errors import AliasExistsError
from shortlink_app.storage.strategies import URLStorage


@dataclass(frozen=True)
class SavedURL:
    id: int
    alias: str
    url: str


class URLService:
    """
    URL Service with the storage and alias strategy injected.

    Sits between the HTTP routes and the storage:
    - picks an alias when the caller did not supply one
    - retries generated aliases that collide

    Storage failures (StorageIOError) are not handled here; they propagate
    to the caller unchanged.
    """

    def __init__(
        self,
        storage: URLStorage,
        alias_strategy: Optional[AliasStrategy] = None,
        max_retries: int = 5,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize URL service with dependencies.

        Args:
            storage: URL storage shared by all requests
            alias_strategy: Generator used when no alias is supplied
            max_retries: Attempts with generated aliases before giving up
            logger: Optional logger
        """
        if max_retries < 1:
            raise ValueError("max_retries must be at least 1")
        self.storage = storage
        self.alias_strategy = alias_strategy or RandomAliasStrategy()
        self.max_retries = max_retries
        self.logger = logger or logging.getLogger(__name__)

    def save_url(self, url: str, alias: Optional[str] = None) -> SavedURL:
        """Save a URL under the given alias, or under a generated one

        Raises:
            AliasExistsError: the given alias is taken, or every generated
                alias collided
        """
        if alias:
            mapping_id = self.storage.save_url(url, alias)
            self.logger.info(f"Saved url: {alias} -> {url}")
            return SavedURL(id=mapping_id, alias=alias, url=url)

        last_error = None
        for attempt in range(self.max_retries):
            candidate = self.alias_strategy.generate()
            if candidate in RESERVED_ALIASES:
                self.logger.debug(f"Generated alias is reserved on attempt {attempt + 1}: {candidate}")
                last_error = AliasExistsError(candidate)
                continue
            try:
                mapping_id = self.storage.save_url(url, candidate)
            except AliasExistsError as e:
                self.logger.debug(f"Generated alias collision on attempt {attempt + 1}: {candidate}")
                last_error = e
                continue

            self.logger.info(f"Saved url: {candidate} -> {url}")
            return SavedURL(id=mapping_id, alias=candidate, url=url)

        self.logger.info(f"No free alias after {self.max_retries} attempts")
        raise last_error

    def resolve_url(self, alias: str) -> str:
        """Return the URL an alias points to (raises URLNotFoundError)"""
        return self.storage.get_url(alias)

    def delete_url(self, alias: str) -> None:
        """Delete an alias; unknown aliases are ignored"""
        self.storage.delete_url(alias)
        self.logger.info(f"Deleted alias: {alias}")
