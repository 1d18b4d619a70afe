"""
HTTP primitives for http_post_core.

This module defines the core data structures: the endpoint a client
talks to and the response it gets back. Both are immutable; changes
create a new instance.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, Dict, Optional, Union
from urllib.parse import urlsplit

from .exceptions import InvalidConfiguration, TlsUnavailable
from .network.utils import has_tls_support


class TransportScheme(Enum):
    """Whether the connection is plain TCP or wrapped in TLS."""
    PLAIN = "tcp"
    TLS = "tls"


DEFAULT_PORTS = {
    "http": 80,
    "https": 443,
}


def _to_number(kind: Callable[[Any], Any], value: Any, name: str) -> Any:
    try:
        return kind(value)
    except (TypeError, ValueError) as e:
        raise InvalidConfiguration(f"invalid {name}: {value!r}", cause=e) from e


@dataclass(frozen=True)
class EndpointConfig:
    """
    Immutable connection parameters derived from a URL.

    ``timeout`` applies to connection establishment only;
    ``read_timeout`` bounds each socket read once connected
    (None blocks until the peer closes).
    """

    host: str
    port: int = 80
    path: str = "/"
    scheme: TransportScheme = TransportScheme.PLAIN
    username: str = ""
    password: str = ""
    timeout: int = 10
    read_timeout: Optional[float] = None

    def __post_init__(self) -> None:
        """Validate endpoint data after initialization."""
        if not isinstance(self.host, str) or not self.host:
            raise InvalidConfiguration("host must be a non-empty string")

    @classmethod
    def from_url(cls, url: str) -> "EndpointConfig":
        """
        Create an EndpointConfig from a URL string.

        Supported form: ``scheme://[user[:pass]@]host[:port][/path][?query]``.
        ``http`` and ``https`` select the default port and transport;
        any other scheme connects in plain text on port 80.

        Args:
            url: The URL to connect to

        Returns:
            New EndpointConfig instance

        Raises:
            InvalidConfiguration: If the URL cannot be parsed or has no host
            TlsUnavailable: If https is requested without TLS support
        """
        try:
            parsed = urlsplit(url)
            host = parsed.hostname
            explicit_port = parsed.port
        except (TypeError, ValueError, AttributeError) as e:
            raise InvalidConfiguration(f"invalid url specified: {url!r}", cause=e) from e

        if not host:
            raise InvalidConfiguration(f"invalid url specified: {url!r}")

        path = parsed.path or "/"
        if parsed.query:
            path = f"{path}?{parsed.query}"

        scheme = TransportScheme.PLAIN
        if parsed.scheme == "https":
            if not has_tls_support():
                raise TlsUnavailable()
            scheme = TransportScheme.TLS

        port = explicit_port or DEFAULT_PORTS.get(parsed.scheme, 80)

        return cls(
            host=host,
            port=port,
            path=path,
            scheme=scheme,
            username=parsed.username or "",
            password=parsed.password or "",
        )

    def with_port(self, port: Union[int, str]) -> "EndpointConfig":
        """
        Create a new endpoint with a different port.

        Raises:
            InvalidConfiguration: If ``port`` is not an integer
        """
        return replace(self, port=_to_number(int, port, "port"))

    def with_username(self, username: str) -> "EndpointConfig":
        """Create a new endpoint with a different username."""
        return replace(self, username=username)

    def with_password(self, password: str) -> "EndpointConfig":
        """Create a new endpoint with a different password."""
        return replace(self, password=password)

    def with_timeout(self, seconds: Union[int, str]) -> "EndpointConfig":
        """Create a new endpoint with a different connect timeout."""
        return replace(self, timeout=_to_number(int, seconds, "timeout"))

    def with_read_timeout(self, seconds: Optional[float]) -> "EndpointConfig":
        """Create a new endpoint with a different read timeout."""
        return replace(
            self,
            read_timeout=None if seconds is None else _to_number(float, seconds, "read timeout"),
        )

    @property
    def is_tls(self) -> bool:
        return self.scheme is TransportScheme.TLS

    @property
    def address(self) -> str:
        """Target in ``tcp://host:port`` / ``tls://host:port`` form."""
        return f"{self.scheme.value}://{self.host}:{self.port}"


@dataclass(frozen=True)
class Response:
    """
    Immutable HTTP response representation.

    Fields default to empty/zero when the corresponding header is
    absent. ``content_length`` is the decoded body length for chunked
    responses and the declared Content-Length otherwise.
    """

    status_code: int = 0
    status_text: str = ""
    content_type: str = ""
    content_length: int = 0
    body: bytes = b""
    headers: Dict[str, str] = field(default_factory=dict)
    header_block: str = field(default="", repr=False)

    def __post_init__(self) -> None:
        """Validate response data after initialization."""
        if not isinstance(self.status_code, int):
            raise ValueError("status_code must be int")

        if not isinstance(self.body, bytes):
            raise ValueError("body must be bytes")

    def get_header(self, name: str) -> Optional[str]:
        """Get a header value by name (case-insensitive)."""
        return self.headers.get(name.lower())

    def has_header(self, name: str) -> bool:
        """Check if a header exists (case-insensitive)."""
        return name.lower() in self.headers

    @property
    def text(self) -> str:
        """The body decoded as UTF-8, undecodable bytes replaced."""
        return self.body.decode("utf-8", errors="replace")
