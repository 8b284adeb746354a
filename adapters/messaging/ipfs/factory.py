"""Factory for the IPFS client handle used by the message provider."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import ipfshttpclient

logger = logging.getLogger(__name__)

DEFAULT_API_ADDR = "/dns/localhost/tcp/5001/http"


def build_ipfs_client(addr: str = DEFAULT_API_ADDR, *, timeout: Optional[float] = 120) -> Any:
    """Connect to an IPFS daemon's HTTP API."""

    try:
        client = ipfshttpclient.connect(addr, timeout=timeout)
    except ipfshttpclient.exceptions.Error as exc:
        logger.error("failed to connect to ipfs api at %s: %s", addr, exc)
        raise

    logger.info("connected to ipfs api at %s", addr)
    return client


def connect_bootstrap(client: Any, node_config: Mapping[str, Any]) -> int:
    """Dial every bootstrap peer listed in the node configuration.

    Unreachable peers are logged and skipped. Returns the number of peers
    the daemon connected to.
    """

    peers = (node_config.get("config") or {}).get("Bootstrap") or []
    connected = 0

    for addr in peers:
        try:
            client.swarm.connect(addr)
            connected += 1
        except ipfshttpclient.exceptions.Error as exc:
            logger.warning("bootstrap peer %s unreachable: %s", addr, exc)

    logger.info("connected to %d/%d bootstrap peers", connected, len(peers))
    return connected
