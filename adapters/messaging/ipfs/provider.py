"""IPFS pub/sub message provider for Robonomics topics.

Messages are compact JSON objects published on a topic named after the
lighthouse. Each subscription owns a listener thread that reads frames from
the IPFS daemon and forwards decoded payloads to a callback.
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
import threading
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

Callback = Callable[[Dict[str, Any]], None]


def _encode(payload: Mapping[str, Any]) -> str:
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def _decode_data(data: Any) -> Optional[bytes]:
    """Return raw bytes of a pub/sub frame ``data`` field.

    Older daemons send standard base64, newer ones a multibase string with
    a ``u`` (base64url, unpadded) prefix. Plain JSON text is accepted as is.
    """
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    if not isinstance(data, str) or not data:
        return None
    if data.lstrip().startswith("{"):
        return data.encode("utf-8")

    try:
        if data.startswith("u"):
            body = data[1:]
            return base64.urlsafe_b64decode(body + "=" * (-len(body) % 4))
        return base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError):
        return None


def decode_frame(frame: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
    """Decode one pub/sub frame into a JSON object, or None if malformed."""
    raw = _decode_data(frame.get("data"))
    if raw is None:
        return None
    try:
        payload = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, ValueError):
        return None
    return payload if isinstance(payload, dict) else None


class Subscription:
    """A running topic subscription. Call ``close()`` to stop it."""

    def __init__(
        self,
        channel: Any,
        topic: str,
        callback: Callback,
        on_close: Optional[Callable[["Subscription"], None]] = None,
    ) -> None:
        self._channel = channel
        self._topic = topic
        self._callback = callback
        self._on_close = on_close
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def topic(self) -> str:
        return self._topic

    @property
    def active(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> "Subscription":
        self._thread = threading.Thread(
            target=self._run, name=f"ipfs-sub:{self._topic}", daemon=True
        )
        self._thread.start()
        return self

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the listener exits; True if it has."""
        thread = self._thread
        if thread is None:
            return True
        thread.join(timeout)
        return not thread.is_alive()

    def close(self, timeout: float = 2.0) -> None:
        self._stop.set()
        try:
            self._channel.close()
        except Exception as exc:
            logger.debug("closing ipfs subscription %s: %s", self._topic, exc)

        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)

        on_close, self._on_close = self._on_close, None
        if on_close is not None:
            on_close(self)

    def _run(self) -> None:
        try:
            for frame in self._channel:
                if self._stop.is_set():
                    break

                payload = decode_frame(frame)
                if payload is None:
                    logger.debug("dropping malformed frame on %s", self._topic)
                    continue

                try:
                    self._callback(payload)
                except Exception:
                    logger.exception("subscriber callback failed on %s", self._topic)
        except Exception as exc:
            if not self._stop.is_set():
                logger.warning("ipfs subscription %s ended: %s", self._topic, exc)


class MessageProviderIpfs:
    """Publish and subscribe to Robonomics topics through an IPFS client."""

    def __init__(self, ipfs: Any) -> None:
        self._ipfs = ipfs
        self._lock = threading.Lock()
        self._subscriptions: List[Subscription] = []

    @property
    def ipfs(self) -> Any:
        return self._ipfs

    def publish(self, topic: str, payload: Mapping[str, Any]) -> None:
        self._ipfs.pubsub.publish(topic, _encode(payload))
        logger.debug("published %s message on %s", payload.get("kind", "raw"), topic)

    @property
    def subscriptions(self) -> Tuple[Subscription, ...]:
        with self._lock:
            return tuple(self._subscriptions)

    def subscribe(self, topic: str, callback: Callback) -> Subscription:
        with self._lock:
            finished = [s for s in self._subscriptions if not s.active]
        for stale in finished:
            stale.close()

        channel = self._ipfs.pubsub.subscribe(topic)
        subscription = Subscription(channel, topic, callback, on_close=self._discard).start()
        with self._lock:
            self._subscriptions.append(subscription)
        logger.info("subscribed to %s", topic)
        return subscription

    def _discard(self, subscription: Subscription) -> None:
        with self._lock:
            if subscription in self._subscriptions:
                self._subscriptions.remove(subscription)

    def peers(self, topic: str) -> List[str]:
        result = self._ipfs.pubsub.peers(topic)
        return list((result or {}).get("Strings") or [])

    def close(self) -> None:
        with self._lock:
            subscriptions, self._subscriptions = self._subscriptions, []
        for subscription in subscriptions:
            subscription.close()
