"""
Blockchain providers package.

Builds the web3 connection and picks the sender account the messaging
client signs with.
"""

from .web3_provider import build_web3, resolve_account

__all__ = [
    "build_web3",
    "resolve_account",
]
