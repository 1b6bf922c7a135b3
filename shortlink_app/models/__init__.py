"""
Database models for URL shortener.

The only persisted entity is the alias -> URL mapping.
"""

from .url import URLMapping

__all__ = ["URLMapping"]
