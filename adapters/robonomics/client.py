"""Robonomics messaging client bound to a web3 account and an IPFS transport."""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar

from ens import ENS
from web3 import Web3

from adapters.messaging.ipfs.provider import MessageProviderIpfs, Subscription
from config.config import TOKEN
from domains.robonomics.exceptions import EnsResolutionError, MessageError
from domains.robonomics.messages import (
    Demand,
    Message,
    Offer,
    Result,
    decode_message,
    message_hash,
)

from .ens import EnsSettings

logger = logging.getLogger(__name__)

M = TypeVar("M", Demand, Offer, Result)


class Robonomics:
    """Client for one lighthouse: signs market messages and relays them over IPFS."""

    def __init__(
        self,
        *,
        web3: Web3,
        account: str,
        ens: EnsSettings,
        message_provider: MessageProviderIpfs,
        lighthouse: str,
        token: Optional[str] = TOKEN,
    ) -> None:
        self.web3 = web3
        self.account = account
        self.ens = ens
        self.message_provider = message_provider
        self.lighthouse = lighthouse

        self._token = token
        self._lock = threading.Lock()
        self._ns: Optional[ENS] = None
        self._resolved: Dict[str, str] = {}

    def __repr__(self) -> str:
        return f"<Robonomics account={self.account} lighthouse={self.lighthouse}>"

    # --------------------- ENS ---------------------
    def _ens(self) -> ENS:
        if self._ns is None:
            self._ns = ENS.from_web3(self.web3, addr=self.ens.address or None)
        return self._ns

    def resolve(self, name: str) -> str:
        """Resolve an ENS name to a checksum address, caching the result."""

        with self._lock:
            cached = self._resolved.get(name)
        if cached:
            return cached

        address = self._ens().address(name)
        if not address:
            raise EnsResolutionError(f"ENS name {name} does not resolve")

        with self._lock:
            self._resolved[name] = address
        logger.debug("resolved %s to %s", name, address)
        return address

    @property
    def lighthouse_address(self) -> str:
        return self.resolve(self.lighthouse)

    @property
    def token_address(self) -> str:
        if self._token:
            return Web3.to_checksum_address(self._token)
        return self.resolve(self.ens.contract_name("xrt"))

    # --------------------- messages ---------------------
    def sign(self, message: M) -> M:
        """Fill in the sender (demands and offers) and sign the message hash."""

        if isinstance(message, (Demand, Offer)):
            message.sender = self.account

        digest = message_hash(message)
        signature = self.web3.eth.sign(self.account, data=digest)
        message.signature = Web3.to_hex(signature)
        return message

    def _send(self, message: M) -> M:
        signed = self.sign(message)
        self.message_provider.publish(self.lighthouse, signed.to_dict())
        logger.info("sent %s to %s", signed.kind, self.lighthouse)
        return signed

    def send_demand(self, demand: Demand) -> Demand:
        return self._send(demand)

    def send_offer(self, offer: Offer) -> Offer:
        return self._send(offer)

    def send_result(self, result: Result) -> Result:
        return self._send(result)

    def _on(self, message_cls: Type[Message], handler: Callable[[Any], None]) -> Subscription:
        def _dispatch(payload: Dict[str, Any]) -> None:
            if payload.get("kind") != message_cls.kind:
                return
            try:
                message = decode_message(payload)
            except MessageError as exc:
                logger.warning("ignoring malformed %s on %s: %s", message_cls.kind, self.lighthouse, exc)
                return
            handler(message)

        return self.message_provider.subscribe(self.lighthouse, _dispatch)

    def on_demand(self, handler: Callable[[Demand], None]) -> Subscription:
        return self._on(Demand, handler)

    def on_offer(self, handler: Callable[[Offer], None]) -> Subscription:
        return self._on(Offer, handler)

    def on_result(self, handler: Callable[[Result], None]) -> Subscription:
        return self._on(Result, handler)

    def peers(self) -> List[str]:
        return self.message_provider.peers(self.lighthouse)

    def close(self) -> None:
        self.message_provider.close()
