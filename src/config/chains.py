"""
Chain-specific configuration for ammPricing.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List

from src.pricing.pricing_types import PricingConfig

from .base import BaseConfig


@dataclass
class ChainConfig(BaseConfig):
    """Chain-specific pricing deployments for different blockchains."""

    # Default chain settings
    DEFAULT_CHAIN: str = field(
        default_factory=lambda: BaseConfig.get_env("DEFAULT_CHAIN", "aurora")
    )

    # Chain-specific RPC URLs
    AURORA_RPC_URL: str = BaseConfig.get_env("AURORA_RPC_URL", "https://mainnet.aurora.dev")
    BSC_RPC_URL: str = BaseConfig.get_env("BSC_RPC_URL", "https://bsc-dataseed.binance.org")

    # Chain IDs
    AURORA_CHAIN_ID: int = 1313161554
    BSC_CHAIN_ID: int = 56

    # Pairs must hold strictly more than this (in native coin) to price a token
    MINIMUM_LIQUIDITY_THRESHOLD_NATIVE: Decimal = field(
        default_factory=lambda: BaseConfig.get_env_decimal(
            "MINIMUM_LIQUIDITY_THRESHOLD_NATIVE", "10"
        )
    )

    # Replaces the default chain's whitelist when set (comma separated, ordered)
    PRICING_WHITELIST: List[str] = field(
        default_factory=lambda: BaseConfig.get_env_list("PRICING_WHITELIST")
    )

    @property
    def supported_chains(self) -> Dict[str, Dict]:
        """Get configuration for all supported chains."""
        return {
            "aurora": {
                "chain_id": self.AURORA_CHAIN_ID,
                "rpc_url": self.AURORA_RPC_URL,
                "native_token": "NEAR",
                "explorer_url": "https://explorer.aurora.dev",
                "factory_address": "0xc66F594268041dB60507F00703b152492fb176E7",  # Trisolaris
                "native_token_address": "0xc42c30ac6cc15fac9bd938618bcaa1a1fae8501d",  # wNEAR
                "stable_native_pair": "0x20f8aefb5697b77e0bb835a8518be70775cda1b0",  # wNEAR-USDC
                "whitelist": [
                    "0xc42c30ac6cc15fac9bd938618bcaa1a1fae8501d",  # wNEAR
                    "0xb12bfca5a55806aaf64e99521918a4bf0fc40802",  # USDC
                    "0x4988a896b1227218e4a686fde5eabdcabd91571f",  # USDT
                    "0x8bec47865ade3b172a928df8f990bc7f2a3b9f79",  # AURORA
                    "0xc9bdeed33cd01541e1eed10f90519d2c06fe3feb",  # wETH
                    "0xfa94348467f64d5a457f75f8bc40495d33c65abb",  # TRI
                    "0xbc8a244e8fb683ec1fd6f88f3cc6e565082174eb",  # WBTC
                ],
            },
            "bsc": {
                "chain_id": self.BSC_CHAIN_ID,
                "rpc_url": self.BSC_RPC_URL,
                "native_token": "BNB",
                "explorer_url": "https://bscscan.com",
                "factory_address": "0xcA143Ce32Fe78f1f7019d7d551a6402fC5350c73",  # PancakeSwap V2
                "native_token_address": "0xbb4cdb9cbd36b01bd1cbaebf2de08d9173bc095c",  # WBNB
                "stable_native_pair": "0x58f876857a02d6762e0101bb5c46a8c1ed44dc16",  # WBNB-BUSD
                "whitelist": [
                    "0xbb4cdb9cbd36b01bd1cbaebf2de08d9173bc095c",  # WBNB
                    "0xe9e7cea3dedca5984780bafc599bd69add087d56",  # BUSD
                    "0x55d398326f99059ff775485246999027b3197955",  # USDT
                    "0x8ac76a51cc950d9822d68b83fe1ad97b32cd580d",  # USDC
                    "0x2170ed0880ac9a755fd29b2688956bd959f933f8",  # ETH
                    "0x7130d2a12b9bcbfae4f2634d864a1ee1ce3ead9c",  # BTCB
                ],
            },
        }

    def get_chain_config(self, chain_name: str) -> Dict:
        """Get configuration for a specific chain."""
        if chain_name not in self.supported_chains:
            raise ValueError(f"Unsupported chain: {chain_name}")
        return self.supported_chains[chain_name]

    def get_rpc_url(self, chain_name: str) -> str:
        """Get RPC URL for a specific chain."""
        return self.get_chain_config(chain_name)["rpc_url"]

    def get_chain_id(self, chain_name: str) -> int:
        """Get chain ID for a specific chain."""
        return self.get_chain_config(chain_name)["chain_id"]

    def get_whitelist(self, chain_name: str) -> List[str]:
        """Get the ordered pricing whitelist for a chain."""
        chain_config = self.get_chain_config(chain_name)
        if self.PRICING_WHITELIST and chain_name == self.DEFAULT_CHAIN:
            return list(self.PRICING_WHITELIST)
        return list(chain_config["whitelist"])

    def get_pricing_config(self, chain_name: str) -> PricingConfig:
        """Build the immutable pricing configuration for a chain."""
        chain_config = self.get_chain_config(chain_name)
        return PricingConfig(
            native_token=chain_config["native_token_address"],
            stable_native_pair=chain_config["stable_native_pair"],
            whitelist=tuple(self.get_whitelist(chain_name)),
            minimum_liquidity_threshold=self.MINIMUM_LIQUIDITY_THRESHOLD_NATIVE,
            factory_address=chain_config["factory_address"],
        )
