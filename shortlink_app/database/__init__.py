from .connection import Base, build_database_url, create_storage_engine

__all__ = ["Base", "build_database_url", "create_storage_engine"]
