"""
Network stream interface for http_post_core.

This module defines the NetworkStream interface that all network stream
implementations must follow. Streams are blocking and synchronous.
"""

from abc import ABC, abstractmethod
from typing import Optional


class NetworkStream(ABC):
    """
    Interface for blocking network streams.

    A stream wraps one connected socket (plain or TLS) for the
    duration of a single request/response cycle.
    """

    @abstractmethod
    def read(self, max_bytes: int = 4096) -> bytes:
        """
        Read data from the stream.

        Args:
            max_bytes: Maximum number of bytes to read.

        Returns:
            The data read, or ``b""`` once the peer has closed the stream.

        Raises:
            RuntimeError: If the stream is closed.
            OSError: If a network error occurs.
        """
        pass

    @abstractmethod
    def write(self, data: bytes) -> int:
        """
        Write data to the stream.

        Args:
            data: The data to write to the stream.

        Returns:
            Number of bytes accepted by the transport.

        Raises:
            RuntimeError: If the stream is closed.
            OSError: If a network error occurs.
        """
        pass

    @abstractmethod
    def set_timeout(self, timeout: Optional[float]) -> None:
        """
        Set the deadline for subsequent blocking operations.

        Args:
            timeout: Seconds, or None to block indefinitely.
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Close the stream. Closing twice is a no-op."""
        pass

    @property
    @abstractmethod
    def is_closed(self) -> bool:
        """Check if the stream is closed."""
        pass
