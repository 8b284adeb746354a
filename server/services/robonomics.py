"""Robonomics client context and process-wide accessor."""

from __future__ import annotations

import enum
import logging
import threading
from typing import Any, Dict, Optional, Union

from web3 import Web3

from adapters.messaging.ipfs.provider import MessageProviderIpfs
from adapters.providers.web3_provider import resolve_account
from adapters.robonomics import EnsSettings, Robonomics
from config.config import VERSION
from domains.robonomics.exceptions import RobonomicsNotInitializedError
from domains.robonomics.models import NetworkProfile, get_network_profile

logger = logging.getLogger(__name__)


class RobonomicsState(enum.Enum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"


def create_robonomics_client(
    ipfs: Any,
    profile: NetworkProfile,
    *,
    web3: Web3,
    account: Optional[str] = None,
) -> Robonomics:
    """Build a Robonomics client for a network profile."""

    return Robonomics(
        web3=web3,
        account=resolve_account(web3, account),
        ens=EnsSettings(address=profile.ens, suffix=profile.ens_suffix, version=VERSION),
        message_provider=MessageProviderIpfs(ipfs),
        lighthouse=profile.lighthouse,
    )


class RobonomicsContext:
    """Owns at most one Robonomics client.

    ``initialize`` builds a client and replaces any previous one; ``get``
    returns it or raises RobonomicsNotInitializedError.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._client: Optional[Robonomics] = None
        self._profile: Optional[NetworkProfile] = None

    @property
    def state(self) -> RobonomicsState:
        return RobonomicsState.READY if self._client is not None else RobonomicsState.UNINITIALIZED

    @property
    def profile(self) -> Optional[NetworkProfile]:
        return self._profile

    def is_initialized(self) -> bool:
        return self._client is not None

    def initialize(
        self,
        ipfs: Any,
        network_id: Union[int, str],
        *,
        web3: Web3,
        account: Optional[str] = None,
    ) -> Robonomics:
        # Profile lookup fails before anything is constructed
        profile = get_network_profile(network_id)
        client = create_robonomics_client(ipfs, profile, web3=web3, account=account)

        with self._lock:
            previous = self._client
            self._client = client
            self._profile = profile

        if previous is not None:
            logger.info("replacing robonomics client %r", previous)
        logger.info(
            "robonomics client initialized for network %s (lighthouse %s)",
            profile.network_id,
            profile.lighthouse,
        )
        return client

    def get(self) -> Robonomics:
        client = self._client
        if client is None:
            raise RobonomicsNotInitializedError()
        return client

    def health_check(self) -> Dict[str, Any]:
        """Local initialization state; makes no network calls."""

        client = self._client
        profile = self._profile
        if client is None or profile is None:
            return {"status": RobonomicsState.UNINITIALIZED.value}
        return {
            "status": RobonomicsState.READY.value,
            "network_id": profile.network_id,
            "lighthouse": profile.lighthouse,
            "account": client.account,
        }

    def reset(self) -> None:
        """Drop the current client. Intended for tests and shutdown."""

        with self._lock:
            client = self._client
            self._client = None
            self._profile = None

        if client is not None:
            client.close()
            logger.info("robonomics client reset")


_DEFAULT_CONTEXT = RobonomicsContext()


def default_context() -> RobonomicsContext:
    return _DEFAULT_CONTEXT


def init_robonomics(
    ipfs: Any,
    network: Union[int, str],
    *,
    web3: Web3,
    account: Optional[str] = None,
) -> Robonomics:
    """Initialize the process-wide Robonomics client and return it."""

    return _DEFAULT_CONTEXT.initialize(ipfs, network, web3=web3, account=account)


def get_robonomics() -> Robonomics:
    """Return the process-wide Robonomics client."""

    return _DEFAULT_CONTEXT.get()


def reset_robonomics_for_tests() -> None:
    _DEFAULT_CONTEXT.reset()
