"""
http_post_core - minimal synchronous HTTP/1.1 POST client

Performs a single POST over a plain or TLS socket and parses the
response, decoding chunked transfer-encoded bodies by hand.
"""

__version__ = "0.1.0"
__author__ = "Developer"
__email__ = "dev@example.com"

# Import main components for easy access
from .client import HTTPClient
from .http_primitives import EndpointConfig, Response, TransportScheme
from .encoding import encode_body
from .chunked import decode_chunked
from .http11 import frame_request, parse_response
from .transport import Transport
from .diagnostics import DiagnosticSink, LoggingSink, NullSink
from .exceptions import (
    HTTPCoreError,
    InvalidConfiguration,
    TlsUnavailable,
    ConnectionFailure,
    WriteFailure,
    ReadFailure,
    ReadTimeout,
    ProtocolError,
    EmptyResponse,
    MalformedResponse,
    ChunkDecodeError,
)

__all__ = [
    "HTTPClient",
    "EndpointConfig",
    "Response",
    "TransportScheme",
    "encode_body",
    "decode_chunked",
    "frame_request",
    "parse_response",
    "Transport",
    "DiagnosticSink",
    "LoggingSink",
    "NullSink",
    "HTTPCoreError",
    "InvalidConfiguration",
    "TlsUnavailable",
    "ConnectionFailure",
    "WriteFailure",
    "ReadFailure",
    "ReadTimeout",
    "ProtocolError",
    "EmptyResponse",
    "MalformedResponse",
    "ChunkDecodeError",
]
