"""
Network backend interface for http_post_core.

This module defines the NetworkBackend interface that provides
abstractions for opening plain and TLS connections.
"""

from abc import ABC, abstractmethod
from typing import Optional

from .stream import NetworkStream


class NetworkBackend(ABC):
    """
    Interface for network backend implementations.

    Every call opens a fresh connection; backends never pool or
    reuse streams.
    """

    @abstractmethod
    def connect_tcp(
        self,
        host: str,
        port: int,
        timeout: Optional[float] = None,
    ) -> NetworkStream:
        """
        Connect to a TCP endpoint.

        Args:
            host: The hostname or IP address to connect to.
            port: The port number to connect to.
            timeout: Optional timeout in seconds for establishing the connection.

        Returns:
            A NetworkStream representing the TCP connection.

        Raises:
            OSError: If the connection fails or times out.
        """
        pass

    @abstractmethod
    def connect_tls(
        self,
        stream: NetworkStream,
        host: str,
        timeout: Optional[float] = None,
    ) -> NetworkStream:
        """
        Upgrade a TCP stream to TLS.

        Args:
            stream: The existing TCP NetworkStream to upgrade.
            host: The hostname for SNI and certificate verification.
            timeout: Optional timeout in seconds for the TLS handshake.

        Returns:
            A NetworkStream representing the TLS connection.

        Raises:
            OSError: If the TLS handshake fails.
        """
        pass
