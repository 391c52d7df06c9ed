"""
Configuration management for ammPricing project.

This module provides centralized configuration management for the pricing
pipeline. Use get_config() to access all configuration settings.

Example:
    from src.config import get_config

    config = get_config()

    # Access chain settings
    aurora_rpc = config.chains.get_rpc_url("aurora")

    # Immutable pricing settings (native token, stable pair, whitelist, threshold)
    pricing = config.get_pricing_config("aurora")
"""

from .base import BaseConfig, ConfigError
from .chains import ChainConfig
from .manager import ConfigManager, get_config, reload_config

__all__ = [
    "BaseConfig",
    "ConfigError",
    "ChainConfig",
    "ConfigManager",
    "get_config",
    "reload_config",
]
