"""
Network utilities for http_post_core.

This module provides helpers for TLS capability detection,
SSL context setup and Host header formatting.
"""

import socket
from typing import Optional

try:
    import ssl
except ImportError:  # pragma: no cover - interpreters built without OpenSSL
    ssl = None  # type: ignore[assignment]


def has_tls_support() -> bool:
    """
    Check whether the interpreter can open TLS connections.

    Returns:
        True if the ``ssl`` module is importable and usable
    """
    return ssl is not None and hasattr(ssl, "SSLContext")


def create_ssl_context(
    verify: bool = True,
    cafile: Optional[str] = None,
) -> "ssl.SSLContext":
    """
    Create a client SSL context.

    Args:
        verify: Whether to verify the peer certificate and hostname
        cafile: Optional path to a CA bundle to trust

    Returns:
        Configured SSL context

    Raises:
        ssl.SSLError: If SSL context creation fails
    """
    context = ssl.create_default_context(cafile=cafile)
    if not verify:
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE

    context.options |= ssl.OP_NO_COMPRESSION
    context.minimum_version = ssl.TLSVersion.TLSv1_2

    return context


def is_ipv6_address(host: str) -> bool:
    """
    Check if a host string is an IPv6 address.

    Args:
        host: Host string to check

    Returns:
        True if the host is an IPv6 address
    """
    try:
        socket.inet_pton(socket.AF_INET6, host)
        return True
    except (OSError, ValueError):
        return False


def format_host_header(host: str) -> str:
    """
    Format the Host header value for a request.

    IPv6 literals are enclosed in brackets; the port is never included.

    Args:
        host: Hostname or IP address

    Returns:
        Host header value
    """
    if is_ipv6_address(host):
        return f"[{host}]"
    return host
