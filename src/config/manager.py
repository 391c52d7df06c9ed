"""
Configuration manager for ammPricing.

This module provides a centralized way to access all configuration settings
across the application. It combines all configuration classes into a single
easy-to-use interface.
"""

import logging
from typing import Dict, Any, Optional

from web3 import Web3

from src.pricing.pricing_types import PricingConfig

from .base import BaseConfig, ConfigError
from .chains import ChainConfig

logger = logging.getLogger(__name__)


class ConfigManager:
    """
    Centralized configuration manager that combines all configuration classes.

    This class provides easy access to all configuration settings and ensures
    that configurations are properly initialized and validated.
    """

    def __init__(self, environment: str = None):
        """
        Initialize the configuration manager.

        Args:
            environment: Override the environment (local, dev, staging, production)
        """
        self._environment = environment
        self._base_config = None
        self._chain_config = None
        self._initialize_configs()

    def _initialize_configs(self):
        """Initialize all configuration objects."""
        try:
            if self._environment:
                self._base_config = BaseConfig(ENVIRONMENT=self._environment)
            else:
                self._base_config = BaseConfig()

            self._chain_config = ChainConfig(ENVIRONMENT=self._base_config.ENVIRONMENT)

            logger.info(f"Configuration initialized for environment: {self.environment}")

        except Exception as e:
            logger.error(f"Failed to initialize configuration: {e}")
            raise ConfigError(f"Configuration initialization failed: {e}")

    @property
    def environment(self) -> str:
        """Get current environment."""
        return self._base_config.ENVIRONMENT

    @property
    def base(self) -> BaseConfig:
        """Get base configuration."""
        return self._base_config

    @property
    def chains(self) -> ChainConfig:
        """Get chain configuration."""
        return self._chain_config

    def get_pricing_config(self, chain_name: Optional[str] = None) -> PricingConfig:
        """
        Get the pricing configuration for a chain.

        Args:
            chain_name: Chain name (defaults to DEFAULT_CHAIN)

        Returns:
            Immutable PricingConfig
        """
        return self.chains.get_pricing_config(chain_name or self.chains.DEFAULT_CHAIN)

    def validate_configuration(self) -> bool:
        """
        Validate all configuration settings.

        Returns:
            True if all configurations are valid

        Raises:
            ConfigError: If any configuration is invalid
        """
        try:
            if self.chains.DEFAULT_CHAIN not in self.chains.supported_chains:
                raise ConfigError(f"Unsupported default chain: {self.chains.DEFAULT_CHAIN}")

            if self.chains.MINIMUM_LIQUIDITY_THRESHOLD_NATIVE < 0:
                raise ConfigError("Minimum liquidity threshold must not be negative")

            for chain_name in self.chains.supported_chains:
                pricing = self.chains.get_pricing_config(chain_name)

                if not pricing.whitelist:
                    raise ConfigError(f"Empty pricing whitelist for {chain_name}")

                addresses = [
                    pricing.native_token,
                    pricing.stable_native_pair,
                    pricing.factory_address,
                    *pricing.whitelist,
                ]
                for address in addresses:
                    if not Web3.is_address(address):
                        raise ConfigError(f"Invalid address for {chain_name}: {address}")

                if len(set(pricing.whitelist)) != len(pricing.whitelist):
                    logger.warning(f"Duplicate whitelist entries for {chain_name}")

            logger.info("Configuration validation successful")
            return True

        except ConfigError:
            raise
        except Exception as e:
            logger.error(f"Configuration validation failed: {e}")
            raise ConfigError(f"Configuration validation failed: {e}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert all configurations to dictionary format."""
        return {
            "environment": self.environment,
            "base": self.base.to_dict() if self.base else {},
            "chains": self.chains.to_dict() if self.chains else {},
        }

    def __repr__(self) -> str:
        """String representation of the configuration manager."""
        return f"ConfigManager(environment={self.environment})"


# Global configuration manager instance
_config_manager = None


def get_config(environment: str = None, force_reload: bool = False) -> ConfigManager:
    """
    Get the global configuration manager instance.

    Args:
        environment: Override environment
        force_reload: Force reload of configuration

    Returns:
        ConfigManager instance
    """
    global _config_manager

    if _config_manager is None or force_reload:
        _config_manager = ConfigManager(environment=environment)
        _config_manager.validate_configuration()

    return _config_manager


def reload_config(environment: str = None) -> ConfigManager:
    """
    Reload the global configuration manager.

    Picks up changed environment variables, e.g. a new PRICING_WHITELIST.

    Args:
        environment: Override environment

    Returns:
        New ConfigManager instance
    """
    return get_config(environment=environment, force_reload=True)
