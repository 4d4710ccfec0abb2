"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) away from the CLI.
- Adapters and commands read settings through one consistent contract.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_DIR_NAME = "fm-devtoolbox"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / APP_DIR_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_DIR_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_DIR_NAME
    return Path.home() / ".config" / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def parse_env_lines(text: str) -> dict[str, str]:
    """Parse `KEY=value` lines (also used for pyvenv.cfg's `key = value`)."""

    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str]) -> Path:
    """Write/update variables in the user's global .env."""

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        try:
            existing = parse_env_lines(env_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError):
            # Unreadable file: rewrite it from the new values only.
            existing = {}

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# fm-devtoolbox user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typed, validated at the edge (env vars) without leaking into the domain.
    - One configuration contract shared by the CLI and adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="FMDT_",
        extra="ignore",
        case_sensitive=False,
        # Order: project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    theme_path: Path | None = Field(
        default=None,
        description="JSON theme file used when rendering tables.",
    )
    venv_path: Path = Field(
        default=Path(".venv"),
        description="Virtual environment inspected when no path is given.",
    )
    list_packages: bool = Field(
        default=True,
        description="Enumerate site-packages while inspecting a venv.",
    )
    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Level for the CLI log handler (DEBUG, INFO, WARNING...).",
    )


def load_settings() -> AppSettings:
    """`AppSettings()`, skipping the user .env when it is not valid UTF-8."""

    try:
        return AppSettings()
    except UnicodeDecodeError:
        return AppSettings(_env_file=".env")
