"""
Request body encoding for http_post_core.

Bodies are either a scalar rendered as a string or a mapping rendered
as ``key=value`` pairs joined with ``&``, optionally form-encoded.
"""

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote_plus


def _to_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="surrogateescape")
    return str(value)


def _quote(value: Any) -> str:
    return quote_plus(_to_str(value), errors="surrogateescape")


def encode_body(content: Any, raw: bool = True) -> str:
    """
    Convert request content to the body string.

    Bytes that are not valid UTF-8 are carried through as surrogate
    escapes, so encoding the result with ``errors="surrogateescape"``
    restores them unchanged.

    Args:
        content: A scalar value or a mapping of key/value pairs
        raw: When False, keys and values are URL-escaped
            (``application/x-www-form-urlencoded`` style)

    Returns:
        The request body
    """
    escape = _to_str if raw else _quote

    if isinstance(content, Mapping):
        return "&".join(
            f"{escape(key)}={escape(value)}" for key, value in content.items()
        )

    return escape(content)
