"""
HTTP/1.1 message handling for http_post_core.

This module frames outgoing POST requests with h11 and parses raw
response buffers into Response objects, decoding chunked bodies.
"""

import base64
import logging
import re
from typing import Dict, Optional, Tuple

import h11

from .chunked import decode_chunked
from .exceptions import EmptyResponse, InvalidConfiguration, MalformedResponse
from .http_primitives import EndpointConfig, Response
from .network.utils import format_host_header

logger = logging.getLogger(__name__)

HEADER_SEPARATOR = b"\r\n\r\n"

STATUS_LINE = re.compile(r"HTTP/\d\.\d +(\d+)(?: +([^\r\n]*))?", re.IGNORECASE)
_LEADING_INT = re.compile(r"\s*(\d+)")
_LINE_BREAK = re.compile(r"\r?\n")


def basic_auth_value(username: str, password: str) -> str:
    """Build the value of a Basic ``Authorization`` header."""
    credentials = f"{username}:{password}".encode("utf-8")
    return "Basic " + base64.b64encode(credentials).decode("ascii")


def build_request_headers(
    endpoint: EndpointConfig,
    content_length: int,
    content_type: str,
) -> list:
    """
    Build the request header list for a POST to ``endpoint``.

    Args:
        endpoint: Target endpoint
        content_length: Body length in bytes
        content_type: Value of the Content-Type header

    Returns:
        List of (name, value) header tuples in wire order
    """
    headers = [
        ("Host", format_host_header(endpoint.host)),
        ("Content-Type", content_type),
        ("Content-Length", str(content_length)),
        ("Accept-Encoding", "identity"),
    ]

    if endpoint.username:
        headers.append(
            ("Authorization", basic_auth_value(endpoint.username, endpoint.password))
        )

    headers.append(("Connection", "close"))
    return headers


def frame_request(
    endpoint: EndpointConfig,
    body: bytes,
    content_type: str,
) -> Tuple[bytes, bytes]:
    """
    Serialize a POST request using h11.

    Args:
        endpoint: Target endpoint
        body: Encoded request body
        content_type: Value of the Content-Type header

    Returns:
        Tuple of (header block including the blank line, body bytes)

    Raises:
        InvalidConfiguration: If a header value or the path cannot be
            put on the wire
    """
    connection = h11.Connection(h11.CLIENT)
    headers = build_request_headers(endpoint, len(body), content_type)

    try:
        head = connection.send(
            h11.Request(method="POST", target=endpoint.path, headers=headers)
        )
        payload = connection.send(h11.Data(data=body)) if body else b""
        payload += connection.send(h11.EndOfMessage())
    except (h11.LocalProtocolError, UnicodeError) as e:
        raise InvalidConfiguration(f"cannot frame request: {e}", cause=e) from e

    return head, payload


def split_response(raw: bytes) -> Tuple[str, bytes]:
    """
    Split a raw response into its header block and body.

    Raises:
        EmptyResponse: If ``raw`` is empty
        MalformedResponse: If no header/body separator is present
    """
    if not raw:
        raise EmptyResponse()

    header_end = raw.find(HEADER_SEPARATOR)
    if header_end == -1:
        raise MalformedResponse("no header/body separator in response")

    header_block = raw[:header_end].decode("iso-8859-1")
    return header_block, raw[header_end + len(HEADER_SEPARATOR):]


def parse_status_line(header_block: str) -> Tuple[int, str]:
    """Return (status code, reason) or (0, "") when no status line is found."""
    match = STATUS_LINE.search(header_block)
    if match is None:
        return 0, ""
    return int(match.group(1)), (match.group(2) or "").strip()


def parse_headers(header_block: str) -> Dict[str, str]:
    """
    Tokenize a header block into a mapping.

    Names are lower-cased, values stripped, and the first occurrence of
    a name wins. The status line and lines without a colon are skipped.
    """
    headers: Dict[str, str] = {}
    for line in _LINE_BREAK.split(header_block):
        if STATUS_LINE.match(line):
            continue
        name, sep, value = line.partition(":")
        if not sep or not name.strip():
            continue
        headers.setdefault(name.strip().lower(), value.strip(" \t"))
    return headers


def _coerce_int(value: Optional[str]) -> int:
    if not value:
        return 0
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else 0


def _is_chunked(headers: Dict[str, str]) -> bool:
    codings = headers.get("transfer-encoding", "").lower().split(",")
    return "chunked" in (coding.strip() for coding in codings)


def parse_response(raw: bytes) -> Response:
    """
    Parse a raw HTTP/1.x response buffer.

    Args:
        raw: Everything read from the socket until EOF

    Returns:
        The parsed Response

    Raises:
        EmptyResponse: If ``raw`` is empty
        MalformedResponse: If no header/body separator is present
        ChunkDecodeError: If a chunked body cannot be reassembled
    """
    header_block, raw_body = split_response(raw)
    return build_response(header_block, raw_body)


def build_response(header_block: str, raw_body: bytes) -> Response:
    """
    Build a Response from an already split header block and body.

    Raises:
        ChunkDecodeError: If a chunked body cannot be reassembled
    """
    headers = parse_headers(header_block)
    status_code, status_text = parse_status_line(header_block)
    content_length = _coerce_int(headers.get("content-length"))

    if _is_chunked(headers):
        body = decode_chunked(raw_body)
        content_length = len(body)
    else:
        if "content-length" in headers and content_length != len(raw_body):
            logger.warning(
                f"Content-Length mismatch: declared {content_length}, "
                f"received {len(raw_body)} bytes"
            )
        body = raw_body.strip()

    logger.debug(f"Parsed response {status_code} {status_text} ({len(body)} bytes)")

    return Response(
        status_code=status_code,
        status_text=status_text,
        content_type=headers.get("content-type", ""),
        content_length=content_length,
        body=body,
        headers=headers,
        header_block=header_block,
    )
