"""Console theme descriptor and color conversion.

Why the theme stays "dumb":
- Role values are opaque strings (hex like `#CCCCCC` or a color name) until a
  renderer asks for them through `hex_to_color`.
- Theme files written for the PowerShell module use PascalCase keys
  (`DefaultAccentColor`); they are accepted as aliases.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_pascal
from pydantic.config import ConfigDict

from core.domain.colors import lookup_named_color
from core.domain.errors import (
    ColorConversionError,
    InvalidColorArgument,
    MalformedHexColor,
    UnknownColorName,
)

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")


class RGBColor(BaseModel):
    """A 24-bit color (alpha is not modeled)."""

    model_config = ConfigDict(frozen=True)

    red: int = Field(..., ge=0, le=255)
    green: int = Field(..., ge=0, le=255)
    blue: int = Field(..., ge=0, le=255)

    @property
    def hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    def __str__(self) -> str:
        return f"RGB({self.red}, {self.green}, {self.blue})"


def _parse_hex(digits: str) -> RGBColor:
    if len(digits) != 6:
        raise MalformedHexColor("Hex color must be 6 characters long.")
    if not _HEX_DIGITS.fullmatch(digits):
        raise MalformedHexColor(f"Hex color contains non-hex characters: {digits!r}")

    return RGBColor(
        red=int(digits[0:2], 16),
        green=int(digits[2:4], 16),
        blue=int(digits[4:6], 16),
    )


def _convert(value: str) -> RGBColor:
    if value.startswith("#"):
        return _parse_hex(value.lstrip("#"))

    named = lookup_named_color(value)
    if named is not None:
        red, green, blue = named
        return RGBColor(red=red, green=green, blue=blue)

    # Bare hex without the leading '#', e.g. "ffaa00".
    if _HEX_DIGITS.fullmatch(value):
        return _parse_hex(value)

    raise UnknownColorName(value)


def hex_to_color(value: str | None) -> RGBColor:
    """Convert a hex color string (`"#CCCCCC"`) or a color name to `RGBColor`.

    Raises:
    - `InvalidColorArgument` when `value` is `None`, empty or whitespace-only.
    - `ColorConversionError` for everything else; `cause` holds the
      `MalformedHexColor` / `UnknownColorName` (or unexpected error) behind it.
    """

    if value is None or not value.strip():
        raise InvalidColorArgument("Color cannot be null or empty.")

    try:
        return _convert(value.strip())
    except ValueError as exc:
        raise ColorConversionError(value, exc) from exc


class ConsoleTheme(BaseModel):
    """Named bundle of color roles used when rendering tables and exceptions."""

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        validate_assignment=True,
        extra="ignore",
    )

    theme_name: str | None = None

    default_accent_color: str | None = None
    default_value_color: str | None = None

    table_header_color: str | None = None
    table_text_color: str | None = None
    table_border_color: str | None = None
    table_border_type: str | None = Field(
        default=None,
        description="Border style name (e.g. 'Rounded'); not a color.",
    )
    table_text_color_accent: str | None = None

    exception_type_color: str | None = None
    exception_message_color: str | None = None
    exception_message_non_emphasized_color: str | None = None
    exception_message_parenthesis_color: str | None = None
    exception_message_method_color: str | None = None
    exception_message_parameter_name_color: str | None = None
    exception_message_parameter_type_color: str | None = None
    exception_message_path_color: str | None = None
    exception_message_line_number_color: str | None = None

    @classmethod
    def role_names(cls) -> list[str]:
        """Color role field names in declaration order."""

        return [
            name
            for name in cls.model_fields
            if name not in ("theme_name", "table_border_type")
        ]

    def color_roles(self) -> dict[str, str]:
        """Every color role that has a value, in declaration order."""

        out: dict[str, str] = {}
        for name in self.role_names():
            value = getattr(self, name)
            if value is not None:
                out[name] = value
        return out

    def resolve(self, role: str) -> RGBColor:
        if role not in self.role_names():
            raise KeyError(f"Unknown theme role: {role}")
        return hex_to_color(getattr(self, role))
