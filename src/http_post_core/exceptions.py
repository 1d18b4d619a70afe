"""
Custom exceptions for http_post_core.

This module defines the exception hierarchy used throughout
the library. Every failure is terminal: errors are raised at the
point of detection and propagate to the caller of ``post()``.
"""

from typing import Optional


class HTTPCoreError(Exception):
    """Base exception for all http_post_core errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class InvalidConfiguration(HTTPCoreError):
    """Raised when a URL or a header value cannot be used to build a request."""

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(f"Invalid configuration: {message}", cause)


class TlsUnavailable(HTTPCoreError):
    """Raised when https is requested but the interpreter has no TLS support."""

    def __init__(self, message: str = "ssl module is not available") -> None:
        super().__init__(f"TLS unavailable: {message}")


class ConnectionFailure(HTTPCoreError):
    """Raised when a connection to the remote host cannot be established."""

    def __init__(
        self,
        host: str,
        port: int,
        cause: Optional[Exception] = None,
    ) -> None:
        message = f"cannot establish connection to host {host} on port {port}"
        if cause is not None:
            message = f"{message} ({cause})"
        super().__init__(f"Connection error: {message}", cause)
        self.host = host
        self.port = port


class WriteFailure(HTTPCoreError):
    """Raised when the request could not be written to the socket."""

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(f"Write error: {message}", cause)


class ReadFailure(HTTPCoreError):
    """Raised when reading the response from the socket fails."""

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(f"Read error: {message}", cause)


class ReadTimeout(ReadFailure):
    """Raised when the response does not arrive within the read timeout."""

    def __init__(
        self,
        message: str,
        timeout: Optional[float] = None,
        cause: Optional[Exception] = None,
    ) -> None:
        if timeout is not None:
            message = f"{message} (timeout: {timeout}s)"
        super().__init__(message, cause)
        self.timeout = timeout


class ProtocolError(HTTPCoreError):
    """Raised when the response bytes do not form a usable HTTP response."""

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(f"Protocol error: {message}", cause)


class EmptyResponse(ProtocolError):
    """Raised when the peer closed the connection without sending anything."""

    def __init__(self, message: str = "empty response") -> None:
        super().__init__(message)


class MalformedResponse(ProtocolError):
    """Raised when no header/body separator is present in the response."""


class ChunkDecodeError(ProtocolError):
    """Raised when a chunked body cannot be reassembled."""

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(f"unable to join chunks: {message}", cause)
