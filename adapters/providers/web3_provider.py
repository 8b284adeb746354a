"""Web3 connection and account selection."""

from __future__ import annotations

import logging
from typing import Optional

from web3 import Web3

from domains.robonomics.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def build_web3(uri: str, *, timeout_s: float = 10.0) -> Web3:
    """Build a Web3 instance for an HTTP(S) endpoint or an IPC socket path."""

    uri = (uri or "").strip()
    if not uri:
        raise ConfigurationError("web3 provider uri must be a non-empty string")

    if uri.startswith(("http://", "https://")):
        provider = Web3.HTTPProvider(uri, request_kwargs={"timeout": timeout_s})
    elif uri.startswith("file://") or uri.endswith(".ipc"):
        provider = Web3.IPCProvider(uri[len("file://"):] if uri.startswith("file://") else uri, timeout=timeout_s)
    else:
        raise ConfigurationError(f"unsupported web3 provider uri: {uri}")

    logger.info("web3 provider configured: %s", type(provider).__name__)
    return Web3(provider)


def resolve_account(web3: Web3, account: Optional[str] = None) -> str:
    """Return the sender account: the explicit one, else the node's first account."""

    if account:
        return Web3.to_checksum_address(account)

    accounts = list(web3.eth.accounts)
    if not accounts:
        raise ConfigurationError("web3 provider exposes no accounts; pass one explicitly")

    return Web3.to_checksum_address(accounts[0])
