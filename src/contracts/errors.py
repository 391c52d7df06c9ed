"""
Error types for on-chain contract access.
"""

from typing import Optional


class ContractError(Exception):
    """Base exception for contract operations."""
    pass


class PairLookupError(ContractError):
    """Raised when the factory getPair call cannot be completed."""

    def __init__(self, message: str, token_a: Optional[str] = None, token_b: Optional[str] = None):
        super().__init__(message)
        self.token_a = token_a
        self.token_b = token_b
