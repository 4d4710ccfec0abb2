"""Named colors accepted by `hex_to_color`.

The 16 basic HTML/W3C colors. Keys are lower-case; lookups are
case-insensitive.
"""

from __future__ import annotations

NAMED_COLORS: dict[str, tuple[int, int, int]] = {
    "black": (0, 0, 0),
    "silver": (192, 192, 192),
    "gray": (128, 128, 128),
    "grey": (128, 128, 128),
    "white": (255, 255, 255),
    "maroon": (128, 0, 0),
    "red": (255, 0, 0),
    "purple": (128, 0, 128),
    "fuchsia": (255, 0, 255),
    "green": (0, 128, 0),
    "lime": (0, 255, 0),
    "olive": (128, 128, 0),
    "yellow": (255, 255, 0),
    "navy": (0, 0, 128),
    "blue": (0, 0, 255),
    "teal": (0, 128, 128),
    "aqua": (0, 255, 255),
}


def lookup_named_color(name: str) -> tuple[int, int, int] | None:
    """Return the RGB triple for `name`, or `None` if it is not known."""

    return NAMED_COLORS.get(name.casefold())
