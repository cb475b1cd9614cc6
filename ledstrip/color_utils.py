"""
Color values and lookup helpers
Named colors, hex parsing and random colors for the strip
"""

import random
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from .exceptions import UnknownColorError

HEX_COLOR_RE = re.compile(r"[0-9a-fA-F]{6}")


def _check_channel(label: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{label} channel must be an integer, got {value!r}")
    if not 0 <= value <= 255:
        raise ValueError(f"{label} channel must be 0-255, got {value}")


@dataclass(frozen=True)
class Color:
    """RGB color, each channel 0-255"""

    r: int
    g: int
    b: int

    def __post_init__(self):
        _check_channel("red", self.r)
        _check_channel("green", self.g)
        _check_channel("blue", self.b)

    @classmethod
    def from_hex(cls, hex_color: str) -> "Color":
        return cls(*hex_to_rgb(hex_color))

    def to_hex(self) -> str:
        return rgb_to_hex(self.r, self.g, self.b)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


NAMED_COLORS: Mapping[str, Color] = MappingProxyType(
    {
        "black": Color(0, 0, 0),
        "red": Color(255, 0, 0),
        "green": Color(0, 255, 0),
        "blue": Color(0, 0, 255),
        "yellow": Color(255, 255, 0),
        "cyan": Color(0, 255, 255),
        "magenta": Color(255, 0, 255),
        "white": Color(255, 255, 255),
    }
)


def resolve_color(name: str) -> Color:
    """Look up a named color (exact, lowercase match)"""
    try:
        return NAMED_COLORS[name]
    except KeyError:
        raise UnknownColorError(name, NAMED_COLORS.keys()) from None


def random_color(rng: Optional[random.Random] = None) -> Color:
    """Uniformly random color, every channel over the full 0-255 range"""
    rng = rng or random
    return Color(rng.randint(0, 255), rng.randint(0, 255), rng.randint(0, 255))


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """Convert hex color (RRGGBB, optional '#') to RGB tuple"""
    hex_color = hex_color.strip().lstrip("#")
    if not HEX_COLOR_RE.fullmatch(hex_color):
        raise ValueError(f"Hex color must be 6 hex digits (RRGGBB), got {hex_color!r}")
    return (int(hex_color[0:2], 16), int(hex_color[2:4], 16), int(hex_color[4:6], 16))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Convert RGB to hex string"""
    return f"#{r:02x}{g:02x}{b:02x}".upper()
