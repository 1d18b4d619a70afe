import logging
import socket
from typing import Any, Optional

from .backend import NetworkBackend
from .stream import NetworkStream
from .utils import create_ssl_context

logger = logging.getLogger(__name__)


class SocketStream(NetworkStream):
    """Blocking network stream over a connected (optionally TLS) socket."""

    def __init__(self, sock: socket.socket) -> None:
        self.sock = sock
        self.closed = False

    def read(self, max_bytes: int = 4096) -> bytes:
        if self.closed:
            raise RuntimeError("Stream is closed")
        return self.sock.recv(max_bytes)

    def write(self, data: bytes) -> int:
        if self.closed:
            raise RuntimeError("Stream is closed")
        view = memoryview(data)
        total = 0
        while total < len(data):
            sent = self.sock.send(view[total:])
            if sent == 0:
                break
            total += sent
        return total

    def set_timeout(self, timeout: Optional[float]) -> None:
        self.sock.settimeout(timeout)

    def close(self) -> None:
        if not self.closed:
            self.sock.close()
            self.closed = True

    @property
    def is_closed(self) -> bool:
        return self.closed or self.sock.fileno() == -1


class SocketNetworkBackend(NetworkBackend):
    """Network backend opening blocking sockets with the standard library."""

    def __init__(self, ssl_context: Optional[Any] = None) -> None:
        self._ssl_context = ssl_context

    def connect_tcp(
        self, host: str, port: int, timeout: Optional[float] = None
    ) -> SocketStream:
        sock = socket.create_connection((host, port), timeout=timeout)
        sock.setsockopt(socket.IPPROTO_TCP, socket.TCP_NODELAY, 1)
        logger.debug(f"Connected to {host}:{port}")
        return SocketStream(sock)

    def connect_tls(
        self,
        stream: SocketStream,
        host: str,
        timeout: Optional[float] = None,
    ) -> SocketStream:
        if self._ssl_context is None:
            self._ssl_context = create_ssl_context()
        if timeout is not None:
            stream.set_timeout(timeout)
        try:
            ssl_sock = self._ssl_context.wrap_socket(stream.sock, server_hostname=host)
        except OSError:
            stream.close()
            raise
        logger.debug(f"TLS established with {host} ({ssl_sock.version()})")
        return SocketStream(ssl_sock)
