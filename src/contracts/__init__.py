"""
On-chain contract access.

This package provides the pair address lookups used by price discovery:
FactoryPairLookup calls a factory's getPair through web3, StaticPairLookup
serves the same answers from memory.
"""

from .errors import ContractError, PairLookupError
from .factory import FACTORY_GET_PAIR_ABI, FactoryPairLookup, StaticPairLookup

__all__ = [
    "ContractError",
    "PairLookupError",
    "FACTORY_GET_PAIR_ABI",
    "FactoryPairLookup",
    "StaticPairLookup",
]
