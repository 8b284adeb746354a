"""Robonomics layer exceptions."""

from __future__ import annotations

from typing import Any


class RobonomicsError(Exception):
    """Base error for the Robonomics messaging layer."""
    pass


class RobonomicsNotInitializedError(RobonomicsError, RuntimeError):
    """Raised when the messaging client is read before it was initialized."""

    def __init__(self, message: str = "Robonomics not init") -> None:
        super().__init__(message)


class UnknownNetworkError(RobonomicsError, LookupError):
    """Raised when a chain id has no network profile."""

    def __init__(self, network_id: Any) -> None:
        self.network_id = network_id
        super().__init__(f"unknown network: {network_id!r}")


class UnknownObjectiveError(RobonomicsError, LookupError):
    """Raised when a model descriptor has no objective with the given label."""

    def __init__(self, model: str, label: str) -> None:
        self.model = model
        self.label = label
        super().__init__(f"model {model} has no objective labelled {label!r}")


class ConfigurationError(RobonomicsError):
    pass


class EnsResolutionError(RobonomicsError):
    pass


class MessageError(RobonomicsError, ValueError):
    """Raised for malformed or unsupported Robonomics messages."""
    pass
