"""CLI UI components (rich).

Why separate components:
- Keeps command logic apart from visual details.
- Tables are built from a `ConsoleTheme`, so every command renders the same
  way.
"""

from __future__ import annotations

from rich.table import Table
from rich.text import Text

from adapters.rich_theme import border_box, role_style_name
from core.domain.theme import ConsoleTheme, hex_to_color
from core.domain.timespan import TimeSpanAbbreviation
from core.domain.venv import VenvDescriptor

_VENV_FIELDS: tuple[tuple[str, str], ...] = (
    ("is_venv", "Is venv"),
    ("venv_path", "Path"),
    ("python_version", "Python version"),
    ("python_home", "Python home"),
    ("python_binary", "Python binary"),
    ("python_debug_binary", "Python debug binary"),
    ("pip_binary", "pip binary"),
    ("pip_version", "pip version"),
    ("site_packages_dir", "site-packages"),
    ("include_system_packages", "System packages"),
    ("activate_file_ps1", "Activate.ps1"),
    ("activate_file_bat", "activate.bat"),
    ("deactivate_bat", "deactivate.bat"),
    ("config_file", "Config file"),
)


def format_elapsed(seconds: float, *, long: bool = False) -> str:
    """`0.0123` -> `"12 ms"`, `75` -> `"1.2 m"`.

    The unit is picked on the rounded value, so `59.97` reads `1.0 m`
    rather than `60.0 s`.
    """

    milliseconds = round(seconds * 1000)
    if milliseconds < 1000:
        value, unit = milliseconds, TimeSpanAbbreviation.MILLISECONDS
    elif round(seconds, 1) < 60:
        value, unit = seconds, TimeSpanAbbreviation.SECONDS
    elif round(seconds / 60, 1) < 60:
        value, unit = seconds / 60, TimeSpanAbbreviation.MINUTES
    else:
        value, unit = seconds / 3600, TimeSpanAbbreviation.HOURS

    label = unit.long if long else unit.short
    if unit is TimeSpanAbbreviation.MILLISECONDS:
        return f"{value} {label}"
    return f"{value:.1f} {label}"


def _new_table(title: str, theme: ConsoleTheme) -> Table:
    return Table(
        title=Text(title, style="table.title"),
        box=border_box(theme),
        border_style=role_style_name("table_border_color"),
        header_style=role_style_name("table_header_color"),
    )


def build_venv_table(venv: VenvDescriptor, theme: ConsoleTheme) -> Table:
    table = _new_table("Virtual environment", theme)
    table.add_column("Field", style=role_style_name("default_accent_color"), no_wrap=True)
    table.add_column("Value", style=role_style_name("default_value_color"))
    for attr, label in _VENV_FIELDS:
        value = getattr(venv, attr)
        table.add_row(label, Text(value) if value is not None else Text("-", style="dim"))
    return table


def build_packages_table(venv: VenvDescriptor, theme: ConsoleTheme) -> Table:
    table = _new_table(f"site-packages ({len(venv.site_packages_list)})", theme)
    table.add_column("Package", style=role_style_name("table_text_color"), no_wrap=True)
    table.add_column("Version", style=role_style_name("table_text_color_accent"))
    for package in venv.site_packages_list:
        table.add_row(Text(package.name), Text(package.version))
    return table


def build_theme_table(theme: ConsoleTheme) -> Table:
    """One row per role: value, RGB and a swatch (or the conversion error)."""

    table = _new_table(f"Theme: {theme.theme_name or '(unnamed)'}", theme)
    table.add_column("Role", style=role_style_name("default_accent_color"), no_wrap=True)
    table.add_column("Value", style=role_style_name("default_value_color"))
    table.add_column("RGB")
    table.add_column("Swatch")

    for role in ConsoleTheme.role_names():
        value = getattr(theme, role)
        if value is None:
            table.add_row(role, Text("-", style="dim"), "", "")
            continue
        try:
            color = hex_to_color(value)
        except ValueError as exc:
            table.add_row(role, Text(value), Text(str(exc), style="red"), "")
            continue
        table.add_row(role, Text(value), str(color), Text("    ", style=f"on {color.hex}"))

    table.add_row("table_border_type", Text(theme.table_border_type or "-"), "", "")
    return table
