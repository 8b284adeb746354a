"""Runtime configuration loaded from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from adapters.messaging.ipfs.factory import DEFAULT_API_ADDR
from config.config import ROBONOMICS
from domains.robonomics.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_NETWORK_ID = 1
DEFAULT_WEB3_PROVIDER_URI = "http://127.0.0.1:8545"


def _get_int_env(
    env: Mapping[str, str],
    name: str,
    default: int,
    *,
    min_value: int | None = None,
) -> int:
    try:
        val = int(env.get(name, str(default)))
        if min_value is not None and val < min_value:
            raise ValueError(f"{name} must be >= {min_value}")
        return val
    except Exception as exc:
        logger.warning(f"Invalid integer for {name}: {exc}; using default {default}")
        return int(default)


def _get_bool_env(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class DappConfig:
    """Connection settings for the dapp's Robonomics layer."""

    network_id: int = DEFAULT_NETWORK_ID
    ipfs_api_addr: str = DEFAULT_API_ADDR
    ipfs_timeout_s: int = 120
    web3_provider_uri: str = DEFAULT_WEB3_PROVIDER_URI
    web3_timeout_s: int = 10
    account: Optional[str] = None  # None => first account of the web3 node
    dial_bootstrap: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "DappConfig":
        """Create configuration from environment variables."""

        env = os.environ if env is None else env

        raw_network = env.get("ROBONOMICS_NETWORK_ID", str(DEFAULT_NETWORK_ID)).strip()
        try:
            network_id = int(raw_network)
        except ValueError:
            raise ConfigurationError(f"ROBONOMICS_NETWORK_ID must be an integer, got {raw_network!r}") from None
        if network_id not in ROBONOMICS:
            raise ConfigurationError(
                f"ROBONOMICS_NETWORK_ID {network_id} has no profile; known: {sorted(ROBONOMICS)}"
            )

        return cls(
            network_id=network_id,
            ipfs_api_addr=env.get("IPFS_API_ADDR", DEFAULT_API_ADDR).strip() or DEFAULT_API_ADDR,
            ipfs_timeout_s=_get_int_env(env, "IPFS_TIMEOUT_S", 120, min_value=1),
            web3_provider_uri=env.get("WEB3_PROVIDER_URI", DEFAULT_WEB3_PROVIDER_URI).strip()
            or DEFAULT_WEB3_PROVIDER_URI,
            web3_timeout_s=_get_int_env(env, "WEB3_TIMEOUT_S", 10, min_value=1),
            account=(env.get("ROBONOMICS_ACCOUNT") or "").strip() or None,
            dial_bootstrap=_get_bool_env(env, "IPFS_DIAL_BOOTSTRAP", False),
            log_level=env.get("LOG_LEVEL", "INFO").strip().upper() or "INFO",
        )


def get_dapp_config() -> DappConfig:
    """Convenience accessor for callers that do not manage config lifecycle."""
    return DappConfig.from_env()
