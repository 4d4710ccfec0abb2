"""`venv` commands: inspect a Python virtual environment."""

from __future__ import annotations

import time
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from adapters.theme_loader import ThemeFileError, load_theme_or_default
from adapters.venv_exporter import export_venv_json
from adapters.venv_inspector import FilesystemVenvInspector, NotAVirtualEnvironment
from cli.console import build_console
from cli.ui_components import build_packages_table, build_venv_table, format_elapsed
from core.config import load_settings

app = typer.Typer(no_args_is_help=True, help="Inspect Python virtual environments.")

_err_console = Console(stderr=True)


@app.command()
def inspect(
    path: Path | None = typer.Argument(None, help="Venv root (defaults to FMDT_VENV_PATH or .venv)."),
    no_packages: bool = typer.Option(False, "--no-packages", help="Skip site-packages enumeration."),
    json_out: Path | None = typer.Option(None, "--json", help="Also write the descriptor as JSON."),
) -> None:
    """Describe a venv: paths, interpreter metadata and installed packages."""

    settings = load_settings()
    target = path or settings.venv_path
    list_packages = settings.list_packages and not no_packages

    try:
        theme = load_theme_or_default(settings.theme_path)
    except ThemeFileError as exc:
        _err_console.print(str(exc), style="red", markup=False)
        raise typer.Exit(code=1) from exc

    inspector = FilesystemVenvInspector(list_packages=list_packages)
    started = time.perf_counter()
    try:
        venv = inspector.inspect(target)
    except NotAVirtualEnvironment as exc:
        _err_console.print(f"[red]Not a virtual environment:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    elapsed = time.perf_counter() - started

    console = build_console(theme)
    console.print(build_venv_table(venv, theme))
    if list_packages:
        console.print(build_packages_table(venv, theme))
    console.print(f"[dim]Inspected in {format_elapsed(elapsed)}[/dim]")

    if json_out is not None:
        written = export_venv_json(venv=venv, output_path=json_out)
        console.print(f"[green]Saved JSON to:[/green] {escape(str(written))}")
