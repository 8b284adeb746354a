"""Runtime configuration."""

from .config import DappConfig, get_dapp_config

__all__ = [
    "DappConfig",
    "get_dapp_config",
]
