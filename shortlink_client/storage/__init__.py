"""
Session storage module for the shortlink client.
Implements Strategy Pattern for flexible persistence backends.
"""

from .strategies import (
    SessionStorageStrategy,
    FileSessionStorage,
    InMemorySessionStorage,
    RedisSessionStorage,
)
from .factory import SessionStorageFactory, SessionBackend

__all__ = [
    "SessionStorageStrategy",
    "FileSessionStorage",
    "InMemorySessionStorage",
    "RedisSessionStorage",
    "SessionStorageFactory",
    "SessionBackend",
]
