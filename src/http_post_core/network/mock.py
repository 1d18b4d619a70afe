"""
Mock network implementations for testing.

This module provides mock implementations of NetworkStream and NetworkBackend
that can be used for unit testing without requiring actual network connections.
"""

from typing import Any, Dict, List, Optional, Tuple

from .backend import NetworkBackend
from .stream import NetworkStream


class MockNetworkStream(NetworkStream):
    """
    Mock network stream for testing.

    This implementation simulates a network stream in memory,
    allowing tests to verify network behavior without actual I/O.
    """

    def __init__(
        self,
        data: bytes = b"",
        accept_writes: bool = True,
        read_error: Optional[Exception] = None,
        write_error: Optional[Exception] = None,
    ):
        """
        Initialize the mock stream.

        Args:
            data: Data to be returned by successive reads.
            accept_writes: When False, writes report zero bytes accepted.
            read_error: Exception raised by the first read, if any.
            write_error: Exception raised by the first write, if any.
        """
        self._data = data
        self._position = 0
        self._closed = False
        self._write_buffer: List[bytes] = []
        self._accept_writes = accept_writes
        self._read_error = read_error
        self._write_error = write_error
        self.timeout: Optional[float] = None
        self.tls = False

    def read(self, max_bytes: int = 4096) -> bytes:
        """
        Read data from the mock stream.

        Args:
            max_bytes: Maximum number of bytes to read.

        Returns:
            The data read from the stream, ``b""`` when exhausted.

        Raises:
            RuntimeError: If the stream is closed.
        """
        if self._closed:
            raise RuntimeError("Stream is closed")

        if self._read_error is not None:
            raise self._read_error

        end = min(self._position + max_bytes, len(self._data))
        result = self._data[self._position:end]
        self._position = end
        return result

    def write(self, data: bytes) -> int:
        """
        Write data to the mock stream.

        Args:
            data: The data to write.

        Returns:
            Number of bytes accepted.

        Raises:
            RuntimeError: If the stream is closed.
        """
        if self._closed:
            raise RuntimeError("Stream is closed")

        if self._write_error is not None:
            raise self._write_error

        if not self._accept_writes:
            return 0

        self._write_buffer.append(data)
        return len(data)

    def set_timeout(self, timeout: Optional[float]) -> None:
        self.timeout = timeout

    def close(self) -> None:
        """Close the mock stream."""
        self._closed = True

    @property
    def is_closed(self) -> bool:
        """Check if the mock stream is closed."""
        return self._closed

    @property
    def written_data(self) -> bytes:
        """Get all data that was written to the stream."""
        return b"".join(self._write_buffer)

    @property
    def write_count(self) -> int:
        """Number of successful write calls."""
        return len(self._write_buffer)


class MockNetworkBackend(NetworkBackend):
    """
    Mock network backend for testing.

    Responses are queued per ``(host, port)``; every connect hands out a
    fresh MockNetworkStream preloaded with the queued bytes.
    """

    def __init__(self):
        """Initialize the mock backend."""
        self._responses: Dict[Tuple[str, int], bytes] = {}
        self._connect_errors: Dict[Tuple[str, int], Exception] = {}
        self._stream_options: Dict[Tuple[str, int], Dict[str, Any]] = {}
        self.streams: List[MockNetworkStream] = []
        self.connect_calls: List[Tuple[str, int, Optional[float]]] = []
        self.tls_hosts: List[str] = []

    def queue_response(
        self, host: str, port: int, data: bytes, **stream_options: Any
    ) -> None:
        """
        Queue the raw bytes a connection to ``host:port`` will return.

        Args:
            host: The hostname.
            port: The port number.
            data: Raw response bytes.
            **stream_options: Extra keyword arguments for MockNetworkStream.
        """
        self._responses[(host, port)] = data
        self._stream_options[(host, port)] = stream_options

    def fail_connect(self, host: str, port: int, error: Exception) -> None:
        """Make connections to ``host:port`` raise ``error``."""
        self._connect_errors[(host, port)] = error

    def connect_tcp(
        self,
        host: str,
        port: int,
        timeout: Optional[float] = None,
    ) -> MockNetworkStream:
        """
        Create a mock TCP connection.

        Args:
            host: The hostname to connect to.
            port: The port number to connect to.
            timeout: Recorded but otherwise ignored.

        Returns:
            A MockNetworkStream representing the connection.
        """
        key = (host, port)
        self.connect_calls.append((host, port, timeout))

        if key in self._connect_errors:
            raise self._connect_errors[key]

        stream = MockNetworkStream(
            self._responses.get(key, b""), **self._stream_options.get(key, {})
        )
        self.streams.append(stream)
        return stream

    def connect_tls(
        self,
        stream: MockNetworkStream,
        host: str,
        timeout: Optional[float] = None,
    ) -> MockNetworkStream:
        """
        Mark a mock stream as TLS encrypted.

        Args:
            stream: The existing TCP stream to upgrade.
            host: The hostname for TLS verification.
            timeout: Ignored in mock implementation.

        Returns:
            The same stream, flagged with ``tls``.
        """
        self.tls_hosts.append(host)
        stream.tls = True
        return stream

    @property
    def last_stream(self) -> Optional[MockNetworkStream]:
        """The stream handed out by the most recent connect."""
        return self.streams[-1] if self.streams else None

    def reset(self) -> None:
        """Reset all mock connections."""
        self._responses.clear()
        self._connect_errors.clear()
        self._stream_options.clear()
        self.streams.clear()
        self.connect_calls.clear()
        self.tls_hosts.clear()
