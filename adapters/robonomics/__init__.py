"""Robonomics messaging client."""

from .client import Robonomics
from .ens import EnsSettings

__all__ = [
    "EnsSettings",
    "Robonomics",
]
