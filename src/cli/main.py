"""CLI entry point (typer).

Commands:
- `fmdt venv inspect`   describe a virtual environment
- `fmdt theme ...`      show/convert/export console themes
- `fmdt doctor ...`     diagnostics and user configuration
"""

from __future__ import annotations

import typer

from cli import doctor, theme, venv
from cli.console import configure_logging, is_known_log_level
from core.config import load_settings

app = typer.Typer(no_args_is_help=True, help="Developer toolbox: venv inspection and console themes.")
app.add_typer(venv.app, name="venv")
app.add_typer(theme.app, name="theme")
app.add_typer(doctor.app, name="doctor")


@app.callback()
def main(
    log_level: str | None = typer.Option(None, "--log-level", help="Overrides FMDT_LOG_LEVEL."),
) -> None:
    level = (log_level or load_settings().log_level).strip().upper()
    if not is_known_log_level(level):
        raise typer.BadParameter(
            f"unknown level {level!r} (use DEBUG, INFO, WARNING, ERROR or CRITICAL)",
            param_hint="'--log-level' / FMDT_LOG_LEVEL",
        )
    configure_logging(level)


def run() -> None:
    app()
