"""
Entity storage for the pricing pipeline.

This module provides the record store the pricing code reads pairs, tokens
and the native price bundle from:
- EntityStore: interface implemented by storage backends
- InMemoryEntityStore: dictionary-backed store for replays and tests

Usage:
    from src.core.storage import InMemoryEntityStore

    store = InMemoryEntityStore()
    store.save_token(Token(id="0xc42c30ac6cc15fac9bd938618bcaa1a1fae8501d"))
    token = store.load_token("0xc42c30ac6cc15fac9bd938618bcaa1a1fae8501d")
"""

from .base import DataError, EntityStore, StorageError
from .memory import InMemoryEntityStore

__all__ = [
    "EntityStore",
    "StorageError",
    "DataError",
    "InMemoryEntityStore",
]
