"""Robonomics domain types: network profiles, model descriptors and messages."""

from .exceptions import (
    ConfigurationError,
    EnsResolutionError,
    MessageError,
    RobonomicsError,
    RobonomicsNotInitializedError,
    UnknownNetworkError,
    UnknownObjectiveError,
)
from .messages import Demand, Offer, Result, decode_message, message_hash
from .models import (
    ModelDescriptor,
    NetworkProfile,
    Objective,
    get_network_profile,
    ipfs_node_config,
)

__all__ = [
    "ConfigurationError",
    "Demand",
    "EnsResolutionError",
    "MessageError",
    "ModelDescriptor",
    "NetworkProfile",
    "Objective",
    "Offer",
    "Result",
    "RobonomicsError",
    "RobonomicsNotInitializedError",
    "UnknownNetworkError",
    "UnknownObjectiveError",
    "decode_message",
    "get_network_profile",
    "ipfs_node_config",
    "message_hash",
]
