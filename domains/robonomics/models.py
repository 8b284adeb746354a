"""Typed views over the static Robonomics configuration."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Mapping, Tuple, Union

from config.config import IPFS_CONFIG, ROBONOMICS, TOKEN_DECIMALS

from .exceptions import UnknownNetworkError, UnknownObjectiveError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NetworkProfile:
    """Per-chain settings used to build a messaging client."""
    network_id: int
    ens: str          # ENS registry address; empty => chain default registry
    ens_suffix: str   # empty => "eth"
    lighthouse: str

    @classmethod
    def from_mapping(cls, network_id: int, data: Mapping[str, Any]) -> "NetworkProfile":
        return cls(
            network_id=int(network_id),
            ens=str(data.get("ens") or ""),
            ens_suffix=str(data.get("ens_suffix") or ""),
            lighthouse=str(data["lighthouse"]),
        )


def get_network_profile(
    network_id: Union[int, str],
    table: Mapping[int, Mapping[str, Any]] = ROBONOMICS,
) -> NetworkProfile:
    """Look up the profile for a chain id.

    The id may arrive as a string (e.g. from ``net_version``) and is coerced
    with ``int()``. Absent or non-numeric ids raise UnknownNetworkError.
    """
    try:
        key = int(network_id)
    except (TypeError, ValueError):
        raise UnknownNetworkError(network_id) from None

    data = table.get(key)
    if data is None:
        logger.warning("no robonomics profile for network %s", network_id)
        raise UnknownNetworkError(network_id)

    return NetworkProfile.from_mapping(key, data)


@dataclass(frozen=True)
class Objective:
    objective: str
    label: str


@dataclass(frozen=True)
class ModelDescriptor:
    """A model CID with its labelled objective CIDs."""
    model: str
    objectives: Tuple[Objective, ...] = field(default_factory=tuple)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ModelDescriptor":
        objectives = tuple(
            Objective(objective=str(entry["objective"]), label=str(entry.get("label", key)))
            for key, entry in (data.get("objectives") or {}).items()
        )
        return cls(model=str(data["model"]), objectives=objectives)

    def labels(self) -> Tuple[str, ...]:
        return tuple(o.label for o in self.objectives)

    def objective(self, label: str) -> str:
        """Return the objective CID for a label."""
        for entry in self.objectives:
            if entry.label == label:
                return entry.objective
        raise UnknownObjectiveError(self.model, label)

    def as_dict(self) -> Dict[str, str]:
        return {o.label: o.objective for o in self.objectives}


def ipfs_node_config() -> Dict[str, Any]:
    """Return a private copy of the IPFS node configuration."""
    return copy.deepcopy(IPFS_CONFIG)


def to_token_units(amount: Union[int, str, Decimal], decimals: int = TOKEN_DECIMALS) -> int:
    """Convert a human token amount (e.g. ``"1.5"`` XRT) to integer base units."""
    value = Decimal(str(amount)) * (Decimal(10) ** decimals)
    if value != value.to_integral_value():
        raise ValueError(f"amount {amount} has more than {decimals} decimal places")
    return int(value)


def from_token_units(units: int, decimals: int = TOKEN_DECIMALS) -> Decimal:
    return Decimal(int(units)) / (Decimal(10) ** decimals)
