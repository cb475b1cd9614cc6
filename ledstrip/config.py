"""
Validated configuration models
Filled in by the CLI and the HTTP API before anything is sent
"""

from typing import Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from .color_utils import Color, hex_to_rgb, resolve_color
from .led_controller import DEFAULT_PORT, DEFAULT_TIMEOUT, LEDController
from .rave import DEFAULT_DELAY_MS


class TargetConfig(BaseModel):
    host: str = Field(..., min_length=1, description="Strip hostname or IP")
    port: Union[int, str] = Field(
        DEFAULT_PORT, description="TCP port number or service name"
    )
    timeout: float = Field(
        DEFAULT_TIMEOUT,
        allow_inf_nan=False,
        description="Connect/write timeout in seconds, <= 0 to wait forever",
    )

    @field_validator("host")
    @classmethod
    def _strip_host(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("host must not be empty")
        return value

    @field_validator("port", mode="before")
    @classmethod
    def _check_port(cls, value):
        if isinstance(value, str):
            value = value.strip()
            if not value:
                raise ValueError("port must not be empty")
            if not value.isdigit():
                return value  # service name, resolved at connect time
            value = int(value)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"port must be a number or service name, got {value!r}")
        if not 1 <= value <= 65535:
            raise ValueError(f"port must be 1-65535, got {value}")
        return value

    def controller(self) -> LEDController:
        return LEDController(self.host, self.port, timeout=self.timeout)


class ColorRequest(BaseModel):
    """A color given by name, by hex code or by explicit channels"""

    name: Optional[str] = Field(None, description="Named color")
    red: Optional[int] = Field(None, ge=0, le=255)
    green: Optional[int] = Field(None, ge=0, le=255)
    blue: Optional[int] = Field(None, ge=0, le=255)
    hex: Optional[str] = Field(None, description="Hex color code RRGGBB")

    @field_validator("hex")
    @classmethod
    def _check_hex(cls, value: Optional[str]) -> Optional[str]:
        if value is not None:
            hex_to_rgb(value)
        return value

    @model_validator(mode="after")
    def _check_exclusive(self):
        channels = any(c is not None for c in (self.red, self.green, self.blue))
        if self.name is not None and (channels or self.hex is not None):
            raise ValueError("name cannot be combined with hex or red/green/blue")
        if self.hex is not None and channels:
            raise ValueError("hex cannot be combined with red/green/blue")
        return self

    def has_color(self) -> bool:
        return any(
            v is not None for v in (self.name, self.hex, self.red, self.green, self.blue)
        )

    def to_color(self) -> Color:
        """Resolve to a Color; unknown names raise UnknownColorError"""
        if self.name is not None:
            return resolve_color(self.name)
        if self.hex is not None:
            return Color.from_hex(self.hex)
        return Color(self.red or 0, self.green or 0, self.blue or 0)


class RaveConfig(BaseModel):
    delay_ms: int = Field(DEFAULT_DELAY_MS, ge=0, description="Delay between colors")
    count: Optional[int] = Field(None, ge=1, description="Stop after this many colors")


class CommandRequest(ColorRequest):
    action: Literal["on", "off", "color"] = Field(..., description="Action: on, off, color")
