"""
Base classes and interfaces for entity storage.

Pricing code only reads through the loader callables; the pipeline side
(DerivedPriceUpdater) also writes back through the save methods.
"""

from abc import ABC, abstractmethod
from typing import Optional
import logging

from src.pricing.pricing_types import Bundle, Pair, Token

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Base exception for storage-related errors."""
    pass


class DataError(StorageError):
    """Raised when data operations fail."""
    pass


class EntityStore(ABC):
    """
    Interface for pair, token and bundle records.

    Loads return None for unknown ids rather than raising.
    """

    @abstractmethod
    def load_pair(self, pair_id: str) -> Optional[Pair]:
        """Retrieve a pair by address."""
        pass

    @abstractmethod
    def save_pair(self, pair: Pair) -> None:
        """Insert or replace a pair."""
        pass

    @abstractmethod
    def load_token(self, token_id: str) -> Optional[Token]:
        """Retrieve a token by address."""
        pass

    @abstractmethod
    def save_token(self, token: Token) -> None:
        """Insert or replace a token."""
        pass

    @abstractmethod
    def load_bundle(self) -> Bundle:
        """
        Get the native price bundle.

        Returns:
            The stored bundle, created with a zero price if missing
        """
        pass

    @abstractmethod
    def save_bundle(self, bundle: Bundle) -> None:
        """Replace the native price bundle."""
        pass
