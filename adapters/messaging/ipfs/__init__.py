"""IPFS pub/sub messaging adapter."""

from .factory import build_ipfs_client, connect_bootstrap  # noqa: F401
from .provider import MessageProviderIpfs, Subscription, decode_frame  # noqa: F401
