"""Doctor command for environment diagnostics."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from adapters.rich_theme import to_rich_theme
from adapters.theme_loader import ThemeFileError, load_theme_or_default
from adapters.venv_inspector import NotAVirtualEnvironment, inspect_venv
from core.config import get_user_env_file, load_settings, write_user_env_vars
from core.domain.errors import ColorError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_theme(path: Path | None) -> tuple[bool, str]:
    """Load the configured theme and convert every color role."""

    try:
        theme = load_theme_or_default(path)
        to_rich_theme(theme, strict=True)
    except (ThemeFileError, ColorError) as exc:
        return False, str(exc)
    return True, theme.theme_name or "(unnamed)"


def _check_venv(path: Path) -> tuple[bool, str]:
    try:
        venv = inspect_venv(path, list_packages=False)
    except NotAVirtualEnvironment as exc:
        return False, str(exc)
    return True, f"Python {venv.python_version or '?'}"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = load_settings()

    table = Table(title="fm-devtoolbox Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    env_file = get_user_env_file()
    table.add_row("User config", "OK" if env_file.exists() else "OPTIONAL", Text(str(env_file)))

    ok_theme, detail_theme = _check_theme(settings.theme_path)
    table.add_row("Theme", "OK" if ok_theme else "FAIL", Text(detail_theme))

    ok_venv, detail_venv = _check_venv(settings.venv_path)
    table.add_row("Default venv", "OK" if ok_venv else "OPTIONAL", Text(detail_venv))

    _console.print(table)

    if not ok_theme:
        _console.print(
            "\n[yellow]Note:[/yellow] Fix the theme file or unset FMDT_THEME_PATH to use the built-in theme."
        )


@app.command(name="set-theme")
def set_theme(path: Path = typer.Argument(..., help="Theme JSON file to use by default.")) -> None:
    """Store the default theme path in the user config .env."""

    resolved = path.expanduser().resolve()
    ok, detail = _check_theme(resolved)
    if not ok:
        raise typer.BadParameter(detail)

    env_path = write_user_env_vars({"FMDT_THEME_PATH": str(resolved)})
    _console.print(f"[green]Saved theme config to:[/green] {escape(str(env_path))}")
