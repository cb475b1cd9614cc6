"""
Simple LED strip controller
Fire-and-forget TCP: one short-lived connection per command
"""

import logging
import socket
import threading
from typing import Optional, Union

from .color_utils import Color
from .exceptions import ConnectError, FlushError, ResolveError, WriteError
from .protocol import Command, PowerOff, PowerOn, SetColor, encode

log = logging.getLogger(__name__)

DEFAULT_PORT = 5577
DEFAULT_TIMEOUT = 3.0

Port = Union[int, str]


def _socket_timeout(timeout: Optional[float]) -> Optional[float]:
    if timeout is None or timeout <= 0:
        return None
    return timeout


def send_frame(
    host: str, port: Port, frame: bytes, timeout: Optional[float] = DEFAULT_TIMEOUT
) -> None:
    """Open a connection to host:port, write the whole frame and close.

    Raises a TransportError subclass naming the step that failed. Nothing is
    read back and nothing is retried.
    """
    log.debug("STRIP %s:%s: Sending frame %s", host, port, frame.hex(" "))
    try:
        sock = socket.create_connection((host, port), timeout=_socket_timeout(timeout))
    except socket.gaierror as e:
        raise ResolveError(host, port, e) from e
    except OSError as e:
        raise ConnectError(host, port, e) from e

    with sock:
        try:
            sock.sendall(frame)
        except OSError as e:
            raise WriteError(host, port, e) from e
        try:
            sock.shutdown(socket.SHUT_WR)
        except OSError as e:
            raise FlushError(host, port, e) from e

    log.debug("STRIP %s:%s: Frame sent successfully", host, port)


class LEDController:
    def __init__(
        self, host: str, port: Port = DEFAULT_PORT, timeout: Optional[float] = DEFAULT_TIMEOUT
    ):
        self.host = host
        self.port = port
        self.timeout = timeout
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"LEDController({self.host!r}, {self.port!r})"

    @property
    def target(self) -> str:
        return f"{self.host}:{self.port}"

    def send(self, command: Command) -> bytes:
        """Encode and send a command, returning the frame written

        Sends through one controller never overlap: the strip gets one
        connection at a time.
        """
        frame = encode(command)
        with self._lock:
            send_frame(self.host, self.port, frame, timeout=self.timeout)
        return frame

    def power_on(self) -> bytes:
        """Turn strip on"""
        log.debug("STRIP %s: Power ON command", self.target)
        return self.send(PowerOn())

    def power_off(self) -> bytes:
        """Turn strip off"""
        log.debug("STRIP %s: Power OFF command", self.target)
        return self.send(PowerOff())

    def set_color(self, color: Color) -> bytes:
        log.debug("STRIP %s: Set RGB(%d, %d, %d)", self.target, color.r, color.g, color.b)
        return self.send(SetColor(color))

    def set_rgb(self, r: int, g: int, b: int) -> bytes:
        """Set RGB color (0-255 each)"""
        return self.set_color(Color(r, g, b))
