"""
Chunked transfer-encoding decoder.

Reassembles a body framed as hex-length-prefixed chunks terminated
by a zero-length chunk. Trailer fields after the last chunk are
discarded.
"""

import re
from typing import Iterator, NamedTuple

from .exceptions import ChunkDecodeError

CRLF = b"\r\n"

_LEADING_WHITESPACE = re.compile(rb"[ \t\r\n\x0b\x0c\x00]*")
_HEX_DIGITS = re.compile(rb"[0-9A-Fa-f]+")


class _Chunk(NamedTuple):
    size_hex: bytes
    data: bytes


def _parse_chunk_size(size_line: bytes) -> int:
    # chunk-ext ("1a;name=value") carries nothing we use
    token = size_line.split(b";", 1)[0].strip()
    if not _HEX_DIGITS.fullmatch(token):
        raise ChunkDecodeError(f"invalid chunk size {size_line!r}")
    return int(token, 16)


def _iter_chunks(data: bytes) -> Iterator[_Chunk]:
    position = 0
    while True:
        position = _LEADING_WHITESPACE.match(data, position).end()

        eol = data.find(CRLF, position)
        if eol == -1:
            raise ChunkDecodeError("chunk size line is not terminated")

        size_line = data[position:eol]
        size = _parse_chunk_size(size_line)

        start = eol + len(CRLF)
        end = start + size
        if end > len(data):
            raise ChunkDecodeError(
                f"chunk declares {size} bytes but only {len(data) - start} remain"
            )

        yield _Chunk(size_line, data[start:end])

        if size == 0:
            return
        position = end


def decode_chunked(data: bytes) -> bytes:
    """
    Decode a chunked-encoded body.

    Args:
        data: Body bytes following the header separator

    Returns:
        The reassembled body

    Raises:
        ChunkDecodeError: If a size line is unterminated or not hexadecimal,
            or a chunk is shorter than its declared size
    """
    return b"".join(chunk.data for chunk in _iter_chunks(data))
