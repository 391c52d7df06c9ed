"""
In-memory entity store.

Backs replays, backfills and tests. Records are keyed by lower-case address.
"""

import logging
from typing import Dict, Iterable, Optional

from src.pricing.pricing_types import BUNDLE_ID, Bundle, Pair, Token, normalize_address

from .base import DataError, EntityStore

logger = logging.getLogger(__name__)


class InMemoryEntityStore(EntityStore):
    """Dictionary-backed implementation of EntityStore."""

    def __init__(
        self,
        pairs: Optional[Iterable[Pair]] = None,
        tokens: Optional[Iterable[Token]] = None,
        bundle: Optional[Bundle] = None,
    ):
        """
        Initialize the store.

        Args:
            pairs: Pairs to preload
            tokens: Tokens to preload
            bundle: Bundle to preload (a zero-price bundle is created lazily otherwise)
        """
        self.pairs: Dict[str, Pair] = {}
        self.tokens: Dict[str, Token] = {}
        self.bundle: Optional[Bundle] = bundle

        for pair in pairs or []:
            self.save_pair(pair)
        for token in tokens or []:
            self.save_token(token)

    def load_pair(self, pair_id: str) -> Optional[Pair]:
        return self.pairs.get(normalize_address(pair_id))

    def save_pair(self, pair: Pair) -> None:
        if not pair.id:
            raise DataError("Pair id is required")
        pair.id = normalize_address(pair.id)
        pair.token0 = normalize_address(pair.token0)
        pair.token1 = normalize_address(pair.token1)
        self.pairs[pair.id] = pair

    def load_token(self, token_id: str) -> Optional[Token]:
        return self.tokens.get(normalize_address(token_id))

    def save_token(self, token: Token) -> None:
        if not token.id:
            raise DataError("Token id is required")
        token.id = normalize_address(token.id)
        self.tokens[token.id] = token

    def load_bundle(self) -> Bundle:
        if self.bundle is None:
            logger.debug("Creating native price bundle")
            self.bundle = Bundle(id=BUNDLE_ID)
        return self.bundle

    def save_bundle(self, bundle: Bundle) -> None:
        self.bundle = bundle

    def __repr__(self) -> str:
        return f"InMemoryEntityStore(pairs={len(self.pairs)}, tokens={len(self.tokens)})"
