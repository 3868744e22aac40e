"""Storage layer for short links."""

from .base import LinkStoreBase
from .cache import RedisCache
from .memory import InMemoryLinkStore
from .models import LinkRecord
from .postgres import PostgresLinkStore

__all__ = [
    "LinkStoreBase",
    "RedisCache",
    "InMemoryLinkStore",
    "LinkRecord",
    "PostgresLinkStore",
]
