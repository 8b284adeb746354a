"""Wire runtime configuration, web3, IPFS and the Robonomics context together."""

from __future__ import annotations

import logging
from typing import Optional

from adapters.messaging.ipfs.factory import build_ipfs_client, connect_bootstrap
from adapters.providers.web3_provider import build_web3
from adapters.robonomics import Robonomics
from domains.robonomics.models import ipfs_node_config
from server.config.config import DappConfig
from server.services.robonomics import RobonomicsContext, default_context

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def bootstrap(
    config: Optional[DappConfig] = None,
    *,
    context: Optional[RobonomicsContext] = None,
) -> Robonomics:
    """Connect to web3 and IPFS, then initialize the Robonomics context."""

    cfg = config or DappConfig.from_env()
    configure_logging(cfg.log_level)
    ctx = context or default_context()

    web3 = build_web3(cfg.web3_provider_uri, timeout_s=cfg.web3_timeout_s)
    ipfs = build_ipfs_client(cfg.ipfs_api_addr, timeout=cfg.ipfs_timeout_s)

    if cfg.dial_bootstrap:
        connect_bootstrap(ipfs, ipfs_node_config())

    client = ctx.initialize(ipfs, cfg.network_id, web3=web3, account=cfg.account)
    logger.info("bootstrap complete for network %s", cfg.network_id)
    return client
