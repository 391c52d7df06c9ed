"""
Pair address lookups.

Both lookups are callables with the signature (token_a, token_b) -> pair
address and return the zero address when no pair exists, so either can be
handed to find_price_in_native().
"""

import logging
from typing import Dict, FrozenSet, Union

from web3 import Web3
from web3.exceptions import BadFunctionCallOutput, ContractLogicError

from src.pricing.decimal_utils import ZERO_ADDRESS
from src.pricing.pricing_types import normalize_address

from .errors import PairLookupError

logger = logging.getLogger(__name__)

# Minimal UniswapV2-style factory ABI, only getPair is needed
FACTORY_GET_PAIR_ABI = [
    {
        "constant": True,
        "inputs": [
            {"internalType": "address", "name": "tokenA", "type": "address"},
            {"internalType": "address", "name": "tokenB", "type": "address"},
        ],
        "name": "getPair",
        "outputs": [{"internalType": "address", "name": "pair", "type": "address"}],
        "payable": False,
        "stateMutability": "view",
        "type": "function",
    }
]


class FactoryPairLookup:
    """
    Look up pair addresses through the factory contract's getPair view.

    Every call goes to the node; results are not cached so a pair created
    after the first lookup is picked up on the next one.
    """

    def __init__(
        self,
        web3: Web3,
        factory_address: str,
        block_identifier: Union[int, str] = "latest",
    ):
        """
        Initialize the lookup.

        Args:
            web3: Web3 instance for blockchain calls
            factory_address: Factory contract address
            block_identifier: Block to call at (pin it for deterministic replays)
        """
        self.web3 = web3
        self.factory_address = Web3.to_checksum_address(factory_address)
        self.block_identifier = block_identifier
        self.contract = web3.eth.contract(
            address=self.factory_address, abi=FACTORY_GET_PAIR_ABI
        )

    def get_pair(self, token_a: str, token_b: str) -> str:
        """
        Get the pair address for two tokens.

        Args:
            token_a: First token address
            token_b: Second token address

        Returns:
            Lower-case pair address, or the zero address if there is no pair

        Raises:
            PairLookupError: If the node call fails for any other reason
        """
        try:
            pair_address = self.contract.functions.getPair(
                Web3.to_checksum_address(token_a),
                Web3.to_checksum_address(token_b),
            ).call(block_identifier=self.block_identifier)
        except (ContractLogicError, BadFunctionCallOutput) as e:
            logger.warning(f"getPair({token_a}, {token_b}) failed on {self.factory_address}: {e}")
            return ZERO_ADDRESS
        except Exception as e:
            raise PairLookupError(
                f"getPair({token_a}, {token_b}) failed: {e}", token_a, token_b
            ) from e

        return normalize_address(pair_address)

    def __call__(self, token_a: str, token_b: str) -> str:
        return self.get_pair(token_a, token_b)


class StaticPairLookup:
    """In-memory pair registry, e.g. built from indexed PairCreated events."""

    def __init__(self):
        self.pairs: Dict[FrozenSet[str], str] = {}

    def register(self, token0: str, token1: str, pair_address: str) -> None:
        """Register a pair for a token combination (order-insensitive)."""
        key = frozenset((normalize_address(token0), normalize_address(token1)))
        self.pairs[key] = normalize_address(pair_address)

    def get_pair(self, token_a: str, token_b: str) -> str:
        key = frozenset((normalize_address(token_a), normalize_address(token_b)))
        return self.pairs.get(key, ZERO_ADDRESS)

    def __call__(self, token_a: str, token_b: str) -> str:
        return self.get_pair(token_a, token_b)

    def __len__(self) -> int:
        return len(self.pairs)
