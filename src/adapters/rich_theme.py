"""Bridge between `ConsoleTheme` and rich.

Why separate:
- The domain never imports rich; only the CLI needs styles and boxes.
"""

from __future__ import annotations

from rich import box
from rich.color import Color
from rich.style import Style
from rich.theme import Theme

from core.domain.theme import ConsoleTheme, RGBColor, hex_to_color

_BORDER_BOXES: dict[str, box.Box | None] = {
    "ascii": box.ASCII,
    "square": box.SQUARE,
    "rounded": box.ROUNDED,
    "heavy": box.HEAVY,
    "double": box.DOUBLE,
    "minimal": box.MINIMAL,
    "simple": box.SIMPLE,
    "markdown": box.MARKDOWN,
    "none": None,
}


def to_rich_color(color: RGBColor) -> Color:
    return Color.from_rgb(color.red, color.green, color.blue)


def role_style_name(role: str) -> str:
    """`table_header_color` -> `theme.table_header`."""

    return "theme." + role.removesuffix("_color")


def to_rich_theme(theme: ConsoleTheme, *, strict: bool = True) -> Theme:
    """Build a rich `Theme` with one `theme.<role>` style per color role.

    Unset roles map to an empty style so tables can always reference them.
    With `strict`, conversion errors propagate; otherwise the role falls back
    to an empty style.
    """

    styles: dict[str, Style] = {}
    for role in ConsoleTheme.role_names():
        value = getattr(theme, role)
        style = Style()
        if value is not None:
            try:
                style = Style(color=to_rich_color(hex_to_color(value)))
            except ValueError:
                if strict:
                    raise
        styles[role_style_name(role)] = style
    return Theme(styles)


def border_box(theme: ConsoleTheme) -> box.Box | None:
    """rich box for `table_border_type` (ROUNDED when unset or unknown)."""

    if not theme.table_border_type:
        return box.ROUNDED
    return _BORDER_BOXES.get(theme.table_border_type.strip().lower(), box.ROUNDED)
