"""Robonomics market messages exchanged over a lighthouse topic.

Three kinds travel on the wire: a ``demand`` (a consumer asks for a model
run), an ``offer`` (a provider proposes one) and a ``result`` (outcome of a
liability). Wire keys are camelCase so the payloads stay readable by the
browser clients that share the topic.

Each message is identified by the keccak hash of its packed fields;
``message_hash`` computes it and the client signs that hash with the sender
account.
"""

from __future__ import annotations

from dataclasses import MISSING, asdict, dataclass, fields
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Tuple, Type, Union

from web3 import Web3

from .exceptions import MessageError

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


def _to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _as_uint(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise TypeError(f"expected an unsigned integer, got {value!r}")
    number = int(value)
    if number < 0:
        raise ValueError(f"expected an unsigned integer, got {value!r}")
    return number


def _check_wire_value(abi_type: str, value: Any) -> Any:
    """Validate a decoded wire value against its abi type; uint256 strings become ints."""
    if abi_type == "uint256":
        return _as_uint(value)
    if abi_type == "address":
        if not isinstance(value, str) or not Web3.is_address(value):
            raise ValueError(f"not an address: {value!r}")
    elif abi_type == "bytes":
        if not isinstance(value, (str, bytes)):
            raise TypeError(f"expected a string, got {value!r}")
    elif abi_type == "bool":
        if not isinstance(value, bool):
            raise TypeError(f"expected a boolean, got {value!r}")
    return value


def _pack_value(abi_type: str, value: Any) -> Any:
    if abi_type == "bytes":
        if isinstance(value, str):
            return value.encode("utf-8")
        if isinstance(value, (bytes, bytearray)):
            return bytes(value)
        raise TypeError(f"expected str or bytes, got {type(value).__name__}")
    if abi_type == "address":
        return Web3.to_checksum_address(value or ZERO_ADDRESS)
    if abi_type == "uint256":
        return _as_uint(value)
    if abi_type == "bool":
        return bool(value)
    return value


@dataclass
class _Message:
    kind: ClassVar[str] = ""
    # (field name, abi type) in hashing order
    hash_layout: ClassVar[Tuple[Tuple[str, str], ...]] = ()

    def to_dict(self) -> Dict[str, Any]:
        payload = {_to_camel(k): v for k, v in asdict(self).items()}
        payload["kind"] = self.kind
        return payload

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]):
        if data.get("kind", cls.kind) != cls.kind:
            raise MessageError(f"expected {cls.kind} message, got {data.get('kind')!r}")

        kwargs: Dict[str, Any] = {}
        for f in fields(cls):
            key = _to_camel(f.name)
            if key in data:
                kwargs[f.name] = data[key]
            elif f.default is not MISSING or f.default_factory is not MISSING:
                continue
            else:
                raise MessageError(f"{cls.kind} message missing field {key!r}")

        for name, abi_type in cls.hash_layout:
            if name not in kwargs:
                continue
            try:
                kwargs[name] = _check_wire_value(abi_type, kwargs[name])
            except (TypeError, ValueError) as exc:
                raise MessageError(f"invalid {cls.kind} field {_to_camel(name)!r}: {exc}") from exc
        signature = kwargs.get("signature")
        if signature is not None and not isinstance(signature, str):
            raise MessageError(f"invalid {cls.kind} field 'signature': {signature!r}")

        try:
            return cls(**kwargs)
        except (TypeError, ValueError) as exc:
            raise MessageError(f"invalid {cls.kind} message: {exc}") from exc

    def hash_fields(self) -> Tuple[List[str], List[Any]]:
        types: List[str] = []
        values: List[Any] = []
        for name, abi_type in self.hash_layout:
            try:
                value = _pack_value(abi_type, getattr(self, name))
            except (TypeError, ValueError) as exc:
                raise MessageError(f"cannot hash {self.kind} field {name!r}: {exc}") from exc
            types.append(abi_type)
            values.append(value)
        return types, values


@dataclass
class Demand(_Message):
    kind: ClassVar[str] = "demand"
    hash_layout: ClassVar[Tuple[Tuple[str, str], ...]] = (
        ("model", "bytes"),
        ("objective", "bytes"),
        ("token", "address"),
        ("cost", "uint256"),
        ("lighthouse", "address"),
        ("validator", "address"),
        ("validator_fee", "uint256"),
        ("deadline", "uint256"),
        ("nonce", "uint256"),
        ("sender", "address"),
    )

    model: str
    objective: str
    token: str
    cost: int
    lighthouse: str
    deadline: int
    validator: str = ZERO_ADDRESS
    validator_fee: int = 0
    nonce: int = 0
    sender: str = ZERO_ADDRESS
    signature: Optional[str] = None


@dataclass
class Offer(_Message):
    kind: ClassVar[str] = "offer"
    hash_layout: ClassVar[Tuple[Tuple[str, str], ...]] = (
        ("model", "bytes"),
        ("objective", "bytes"),
        ("token", "address"),
        ("cost", "uint256"),
        ("validator", "address"),
        ("lighthouse", "address"),
        ("lighthouse_fee", "uint256"),
        ("deadline", "uint256"),
        ("nonce", "uint256"),
        ("sender", "address"),
    )

    model: str
    objective: str
    token: str
    cost: int
    lighthouse: str
    deadline: int
    validator: str = ZERO_ADDRESS
    lighthouse_fee: int = 0
    nonce: int = 0
    sender: str = ZERO_ADDRESS
    signature: Optional[str] = None


@dataclass
class Result(_Message):
    kind: ClassVar[str] = "result"
    hash_layout: ClassVar[Tuple[Tuple[str, str], ...]] = (
        ("liability", "address"),
        ("result", "bytes"),
        ("success", "bool"),
    )

    liability: str
    result: str
    success: bool = True
    signature: Optional[str] = None


Message = Union[Demand, Offer, Result]

MESSAGE_TYPES: Dict[str, Type[_Message]] = {
    Demand.kind: Demand,
    Offer.kind: Offer,
    Result.kind: Result,
}


def decode_message(payload: Mapping[str, Any]) -> Message:
    """Build a typed message from a decoded wire payload."""
    if not isinstance(payload, Mapping):
        raise MessageError("message payload must be an object")

    kind = payload.get("kind")
    message_cls = MESSAGE_TYPES.get(kind) if isinstance(kind, str) else None
    if message_cls is None:
        raise MessageError(f"unsupported message kind: {kind!r}")

    return message_cls.from_dict(payload)


def message_hash(message: _Message) -> bytes:
    """Keccak-256 of the packed message fields."""
    types, values = message.hash_fields()
    return bytes(Web3.solidity_keccak(types, values))
