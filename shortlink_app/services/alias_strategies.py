"""
Alias generation strategies for URL shortener.
Uses Strategy Pattern so the generation algorithm can be swapped.
"""

import string
import random
from abc import ABC, abstractmethod


# First path segments served by fixed routes; a short URL using one of
# these would never reach the redirect route.
RESERVED_ALIASES = frozenset({"health", "docs", "redoc", "openapi.json", "api"})


class AliasStrategy(ABC):
    """Abstract base class for alias generation strategies"""
    
    @abstractmethod
    def generate(self) -> str:
        """
        Generate a candidate alias.
        
        Uniqueness is not checked here: the storage rejects a taken alias
        and the caller asks for another one.
        """
        pass


class RandomAliasStrategy(AliasStrategy):
    """Random string of ASCII letters and digits"""
    
    def __init__(self, length: int = 6):
        if length < 1:
            raise ValueError("alias length must be positive")
        self.length = length
        self.characters = string.ascii_letters + string.digits
    
    def generate(self) -> str:
        return ''.join(random.choice(self.characters) for _ in range(self.length))
