"""
Diagnostic sinks for http_post_core.

A sink receives pre-formatted trace messages (connection target,
request and response header/body). Sinks never influence control
flow; the client works the same with or without one.
"""

import logging
from typing import Optional

from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class DiagnosticSink(Protocol):
    """Anything exposing ``log(message)``."""

    def log(self, message: str) -> None:
        ...


class NullSink:
    """Sink that discards every message."""

    def log(self, message: str) -> None:
        pass


class LoggingSink:
    """
    Sink forwarding trace messages to a standard ``logging`` logger.

    Args:
        logger: Logger to write to (defaults to ``http_post_core.trace``)
        level: Level the messages are emitted at
    """

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
    ) -> None:
        self._logger = logger or logging.getLogger("http_post_core.trace")
        self._level = level

    def log(self, message: str) -> None:
        self._logger.log(self._level, message)


def trace(label: str, payload: str) -> str:
    """Format a trace message as ``[label]`` followed by the payload."""
    return f"[{label}] \r\n{payload}"
