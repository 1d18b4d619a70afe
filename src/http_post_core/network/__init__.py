"""
Network backend components for http_post_core.

This module provides the low-level networking abstractions:
blocking network streams and the backends that open them.
"""

from .backend import NetworkBackend
from .stream import NetworkStream
from .mock import MockNetworkBackend, MockNetworkStream
from .sync import SocketNetworkBackend, SocketStream
from .utils import (
    create_ssl_context,
    format_host_header,
    has_tls_support,
    is_ipv6_address,
)

__all__ = [
    "NetworkBackend",
    "NetworkStream",
    "MockNetworkBackend",
    "MockNetworkStream",
    "SocketNetworkBackend",
    "SocketStream",
    "create_ssl_context",
    "format_host_header",
    "has_tls_support",
    "is_ipv6_address",
]
