"""
FastAPI dependencies for dependency injection.

The storage is created once in the application lifespan and kept on
app.state; nothing here holds it in a module global.
"""

from fastapi import Depends, Request

from shortlink_app.config import Settings
from shortlink_app.services.alias_strategies import RandomAliasStrategy
from shortlink_app.services.url_service import URLService
from shortlink_app.storage.strategies import URLStorage


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> URLStorage:
    return request.app.state.store


def get_url_service(
    store: URLStorage = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> URLService:
    """Get URLService wired to the shared store"""
    return URLService(
        storage=store,
        alias_strategy=RandomAliasStrategy(length=settings.alias_length),
        max_retries=settings.max_retries,
    )
