"""Color conversion errors.

Hierarchy:
- `ColorError` is the common base (a `ValueError`, so callers that only care
  about "bad input" can catch the builtin).
- `ColorConversionError` is what callers see for any parse failure; the
  originating error stays available in `cause`.
"""

from __future__ import annotations


class ColorError(ValueError):
    """Base class for color conversion failures."""


class InvalidColorArgument(ColorError):
    """The input is missing, empty or whitespace-only."""


class MalformedHexColor(ColorError):
    """A hex color is not exactly six hexadecimal digits."""


class UnknownColorName(ColorError):
    """The input does not match any known named color."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown color name: {name!r}")
        self.name = name


class ColorConversionError(ColorError):
    """Wrapper raised for any failure while converting a color string."""

    def __init__(self, value: str, cause: BaseException) -> None:
        super().__init__(f"Failed to convert color {value!r}: {cause}")
        self.value = value
        self.cause = cause
