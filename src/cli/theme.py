"""`theme` commands: show, convert and export console themes."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from adapters.theme_loader import ThemeFileError, export_theme_json, load_theme_or_default
from cli.console import build_console
from cli.ui_components import build_theme_table
from core.config import load_settings
from core.domain.errors import ColorError
from core.domain.theme import ConsoleTheme, hex_to_color

app = typer.Typer(no_args_is_help=True, help="Console color themes.")

_console = Console()
_err_console = Console(stderr=True)


def _load(file: Path | None) -> ConsoleTheme:
    path = file or load_settings().theme_path
    try:
        return load_theme_or_default(path)
    except ThemeFileError as exc:
        _err_console.print(str(exc), style="red", markup=False)
        raise typer.Exit(code=1) from exc


@app.command()
def show(
    file: Path | None = typer.Option(None, "--file", "-f", help="Theme JSON (defaults to FMDT_THEME_PATH)."),
) -> None:
    """Print every role of the theme with its RGB value."""

    theme = _load(file)
    build_console(theme).print(build_theme_table(theme))


@app.command()
def convert(value: str = typer.Argument(..., help="Hex color ('#CCCCCC') or color name.")) -> None:
    """Convert a single color string to RGB."""

    try:
        color = hex_to_color(value)
    except ColorError as exc:
        _err_console.print(str(exc), style="red", markup=False)
        raise typer.Exit(code=1) from exc

    _console.print(f"{color} {color.hex}", highlight=False)


@app.command()
def export(
    output: Path = typer.Argument(..., help="Destination JSON file."),
    file: Path | None = typer.Option(None, "--file", "-f", help="Source theme (defaults to the built-in one)."),
) -> None:
    """Write a theme file using the PowerShell module's key names."""

    theme = _load(file)
    written = export_theme_json(theme=theme, output_path=output)
    _console.print(f"[green]Saved theme to:[/green] {escape(str(written))}")
