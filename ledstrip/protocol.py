"""
Wire protocol for the WiFi LED strip controller

Every command is a short fixed layout followed by one checksum byte:

    power on     71 23 0f <sum>
    power off    71 24 0f <sum>
    set color    31 RR GG BB 00 00 0f <sum>
"""

from dataclasses import dataclass
from typing import Union

from .color_utils import Color

POWER_ON_BYTES = (0x71, 0x23, 0x0F)
POWER_OFF_BYTES = (0x71, 0x24, 0x0F)
SET_COLOR_OPCODE = 0x31
TERMINATOR = 0x0F


def checksum(data) -> int:
    """Calculate simple checksum"""
    return sum(data) & 0xFF


@dataclass(frozen=True)
class PowerOn:
    def payload(self) -> bytearray:
        return bytearray(POWER_ON_BYTES)


@dataclass(frozen=True)
class PowerOff:
    def payload(self) -> bytearray:
        return bytearray(POWER_OFF_BYTES)


@dataclass(frozen=True)
class SetColor:
    color: Color

    def payload(self) -> bytearray:
        c = self.color
        return bytearray([SET_COLOR_OPCODE, c.r, c.g, c.b, 0x00, 0x00, TERMINATOR])


Command = Union[PowerOn, PowerOff, SetColor]


def encode(command: Command) -> bytes:
    """Serialize a command into a frame with its trailing checksum."""
    if not isinstance(command, (PowerOn, PowerOff, SetColor)):
        raise TypeError(f"Not a strip command: {command!r}")
    frame = command.payload()
    frame.append(checksum(frame))
    return bytes(frame)
