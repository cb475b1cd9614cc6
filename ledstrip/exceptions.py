"""
Exceptions raised by the LED strip controller
"""

from typing import Iterable, Optional, Union


class LEDStripError(Exception):
    """Base class for all controller errors"""


class UnknownColorError(LEDStripError, ValueError):
    """Raised when a color name is not in the named color table."""

    def __init__(self, name: str, known: Iterable[str] = ()):
        self.name = name
        self.known = list(known)
        message = f"Unknown color name: {name!r}"
        if self.known:
            message += f" (choose from {', '.join(self.known)})"
        super().__init__(message)


class TransportError(LEDStripError):
    """Raised when a frame could not be delivered to the strip."""

    kind = "transport failure"

    def __init__(
        self, host: str, port: Union[int, str], cause: Optional[BaseException] = None
    ):
        self.host = host
        self.port = port
        self.cause = cause
        message = f"{self.kind} for {self.target}"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)

    @property
    def target(self) -> str:
        return f"{self.host}:{self.port}"


class ResolveError(TransportError):
    """Host or service name could not be resolved."""

    kind = "name resolution failed"


class ConnectError(TransportError):
    """Connection refused, unreachable or timed out."""

    kind = "connection failed"


class WriteError(TransportError):
    """Frame could not be written to the socket."""

    kind = "write failed"


class FlushError(TransportError):
    """Socket could not be flushed after writing."""

    kind = "flush failed"
