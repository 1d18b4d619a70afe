"""
Socket transport for http_post_core.

This module implements the Transport class that performs exactly one
blocking connect/write/read/close cycle over a fresh connection.
"""

import logging
import socket
import time
from typing import Optional

from .diagnostics import DiagnosticSink, NullSink, trace
from .exceptions import ConnectionFailure, ReadFailure, ReadTimeout, WriteFailure
from .http_primitives import EndpointConfig
from .network.backend import NetworkBackend
from .network.stream import NetworkStream

logger = logging.getLogger(__name__)


class Transport:
    """
    One-shot request/response transport.

    Only connection establishment honours ``endpoint.timeout``. Reads
    honour ``endpoint.read_timeout`` when it is set; with the default
    of None a stalled peer blocks the read loop indefinitely.
    """

    READ_CHUNK_SIZE = 4096

    def __init__(
        self,
        backend: NetworkBackend,
        sink: Optional[DiagnosticSink] = None,
    ) -> None:
        """
        Initialize the transport.

        Args:
            backend: Network backend used to open connections
            sink: Diagnostic sink receiving trace messages
        """
        self._backend = backend
        self._sink = sink or NullSink()

    def round_trip(self, endpoint: EndpointConfig, head: bytes, body: bytes) -> bytes:
        """
        Send a framed request and read the whole response.

        Args:
            endpoint: Where to connect
            head: Request line and headers, including the blank line
            body: Request body

        Returns:
            Every byte received until the peer closed the connection

        Raises:
            ConnectionFailure: If the connection cannot be established
            WriteFailure: If the request is not accepted by the socket
            ReadTimeout: If a read exceeds ``endpoint.read_timeout``
            ReadFailure: If reading the response fails
        """
        start_time = time.time()
        self._sink.log(trace("connect", endpoint.address))

        stream = self._connect(endpoint)
        try:
            self._sink.log(trace("request header", head.decode("iso-8859-1").rstrip("\r\n")))
            self._sink.log(trace("request body", body.decode("utf-8", errors="replace")))

            self._write(stream, head + body)
            raw = self._read_all(stream, endpoint.read_timeout)
        finally:
            stream.close()

        logger.debug(
            f"POST {endpoint.address}{endpoint.path}: sent {len(head) + len(body)} bytes, "
            f"received {len(raw)} bytes ({time.time() - start_time:.3f}s)"
        )
        return raw

    def _connect(self, endpoint: EndpointConfig) -> NetworkStream:
        stream = None
        try:
            stream = self._backend.connect_tcp(
                endpoint.host, endpoint.port, timeout=endpoint.timeout
            )
            if endpoint.is_tls:
                stream = self._backend.connect_tls(
                    stream, endpoint.host, timeout=endpoint.timeout
                )
            if stream.is_closed:
                raise ConnectionFailure(endpoint.host, endpoint.port)
            stream.set_timeout(endpoint.read_timeout)
        except (OSError, ValueError) as e:
            # unresolvable names surface as UnicodeError from the idna codec
            if stream is not None:
                stream.close()
            logger.error(f"Connection to {endpoint.address} failed: {e}")
            raise ConnectionFailure(endpoint.host, endpoint.port, cause=e) from e
        return stream

    def _write(self, stream: NetworkStream, data: bytes) -> None:
        try:
            written = stream.write(data)
        except OSError as e:
            raise WriteFailure("failed to send content to host", cause=e) from e

        if written < len(data):
            raise WriteFailure(
                f"failed to send content to host ({written} of {len(data)} bytes written)"
            )

    def _read_all(self, stream: NetworkStream, timeout: Optional[float]) -> bytes:
        chunks = []
        while True:
            try:
                chunk = stream.read(self.READ_CHUNK_SIZE)
            except socket.timeout as e:
                raise ReadTimeout("no response data received", timeout=timeout, cause=e) from e
            except OSError as e:
                raise ReadFailure("failed to read response", cause=e) from e
            if not chunk:
                break
            chunks.append(chunk)
        return b"".join(chunks)
