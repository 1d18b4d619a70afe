"""
Pytest configuration for http_post_core tests.

This file contains shared fixtures and configuration
for all tests in the project.
"""

import socket
import threading
from typing import List

import pytest

from http_post_core.network.mock import MockNetworkBackend


class RecordingSink:
    """Diagnostic sink that keeps every message it receives."""

    def __init__(self) -> None:
        self.messages: List[str] = []

    def log(self, message: str) -> None:
        self.messages.append(message)

    def labels(self) -> List[str]:
        return [message.split("]", 1)[0] + "]" for message in self.messages]


class LoopbackServer:
    """
    One-shot HTTP server on 127.0.0.1.

    Accepts a single connection, reads one request (headers plus
    Content-Length bytes), replies with a canned response and closes.
    With ``hold_open`` it never replies and keeps the socket open
    until ``stop()`` is called.
    """

    def __init__(self, response: bytes, hold_open: bool = False) -> None:
        self.response = response
        self.hold_open = hold_open
        self.requests: List[bytes] = []
        self._release = threading.Event()
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self._sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        self._sock.bind(("127.0.0.1", 0))
        self._sock.listen(1)
        self._sock.settimeout(5.0)
        self.port = self._sock.getsockname()[1]
        self._thread = threading.Thread(target=self._serve, daemon=True)
        self._thread.start()

    @property
    def url(self) -> str:
        return f"http://127.0.0.1:{self.port}/submit"

    def _read_request(self, conn: socket.socket) -> bytes:
        data = b""
        while b"\r\n\r\n" not in data:
            chunk = conn.recv(4096)
            if not chunk:
                return data
            data += chunk

        head, _, body = data.partition(b"\r\n\r\n")
        length = 0
        for line in head.split(b"\r\n"):
            name, _, value = line.partition(b":")
            if name.strip().lower() == b"content-length":
                length = int(value.strip())

        while len(body) < length:
            chunk = conn.recv(4096)
            if not chunk:
                break
            body += chunk
        return head + b"\r\n\r\n" + body

    def _serve(self) -> None:
        try:
            conn, _ = self._sock.accept()
        except OSError:
            return
        with conn:
            request = self._read_request(conn)
            if b"\r\n\r\n" not in request:
                return
            self.requests.append(request)
            if self.hold_open:
                self._release.wait(5.0)
                return
            conn.sendall(self.response)

    def stop(self) -> None:
        self._release.set()
        self._sock.close()
        self._thread.join(timeout=5.0)


@pytest.fixture
def mock_backend():
    """Create a mock network backend."""
    return MockNetworkBackend()


@pytest.fixture
def recording_sink():
    """Create a diagnostic sink that records messages."""
    return RecordingSink()


@pytest.fixture
def loopback_server():
    """Start one-shot loopback servers; all are stopped after the test."""
    servers: List[LoopbackServer] = []

    def _start(response: bytes = b"", hold_open: bool = False) -> LoopbackServer:
        server = LoopbackServer(response, hold_open=hold_open)
        servers.append(server)
        return server

    yield _start

    for server in servers:
        server.stop()


@pytest.fixture
def ok_response():
    """A plain 200 response with a Content-Length body."""
    return (
        b"HTTP/1.1 200 OK\r\n"
        b"Content-Type: text/plain\r\n"
        b"Content-Length: 11\r\n"
        b"\r\n"
        b"hello world"
    )


@pytest.fixture
def chunked_response():
    """A 200 response with a chunked body."""
    return (
        b"HTTP/1.1 200 OK\r\n"
        b"Content-Type: application/json\r\n"
        b"Transfer-Encoding: chunked\r\n"
        b"\r\n"
        b"5\r\n"
        b"Hello\r\n"
        b"6\r\n"
        b"World!\r\n"
        b"0\r\n"
        b"\r\n"
    )
