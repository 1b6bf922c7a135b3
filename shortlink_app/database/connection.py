"""
Database engine construction.

The storage location is a single string: either a SQLite file path or a
full SQLAlchemy database URL.
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool


MEMORY_LOCATION = ":memory:"

# Seconds a SQLite connection waits on a locked database before failing
SQLITE_BUSY_TIMEOUT = 15


class Base(DeclarativeBase):
    pass


def build_database_url(location: str) -> str:
    """Turn a storage location into a SQLAlchemy database URL"""
    if location == MEMORY_LOCATION:
        return "sqlite://"
    if "://" in location:
        return location
    return f"sqlite:///{location}"


def create_storage_engine(location: str) -> Engine:
    """
    Create the engine shared by every request for the process lifetime.
    
    SQLite connections are opened with check_same_thread=False so the
    pooled connections can be used from FastAPI's worker threads.
    An in-memory database keeps a single connection (StaticPool),
    otherwise each connection would see its own empty database.
    """
    url = build_database_url(location)
    
    if not url.startswith("sqlite"):
        return create_engine(url, pool_pre_ping=True)
    
    connect_args = {"check_same_thread": False, "timeout": SQLITE_BUSY_TIMEOUT}
    if url == "sqlite://":
        return create_engine(url, connect_args=connect_args, poolclass=StaticPool)
    return create_engine(url, connect_args=connect_args)
