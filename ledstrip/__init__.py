"""Control a WiFi LED strip light over its TCP command port."""

__version__ = "0.2.0"

from .color_utils import NAMED_COLORS, Color, random_color, resolve_color
from .exceptions import (
    ConnectError,
    FlushError,
    LEDStripError,
    ResolveError,
    TransportError,
    UnknownColorError,
    WriteError,
)
from .led_controller import LEDController, send_frame
from .protocol import Command, PowerOff, PowerOn, SetColor, checksum, encode
from .rave import run_rave

__all__ = [
    "Color",
    "Command",
    "ConnectError",
    "FlushError",
    "LEDController",
    "LEDStripError",
    "NAMED_COLORS",
    "PowerOff",
    "PowerOn",
    "ResolveError",
    "SetColor",
    "TransportError",
    "UnknownColorError",
    "WriteError",
    "checksum",
    "encode",
    "random_color",
    "resolve_color",
    "run_rave",
    "send_frame",
]
