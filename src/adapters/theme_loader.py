"""Theme files (JSON).

Supported format: a flat object with either the PowerShell module's
PascalCase keys or the snake_case field names:

    {"ThemeName": "Default", "DefaultAccentColor": "#5F87FF", ...}
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from core.domain.theme import ConsoleTheme

DEFAULT_THEME = ConsoleTheme(
    theme_name="Default",
    default_accent_color="#5F87FF",
    default_value_color="#CCCCCC",
    table_header_color="#FFFFFF",
    table_text_color="#CCCCCC",
    table_border_color="#4E4E4E",
    table_border_type="Rounded",
    table_text_color_accent="#87D7FF",
    exception_type_color="#FF5F5F",
    exception_message_color="#FFFFFF",
    exception_message_non_emphasized_color="#808080",
    exception_message_parenthesis_color="#808080",
    exception_message_method_color="#FFD75F",
    exception_message_parameter_name_color="#AFAFAF",
    exception_message_parameter_type_color="#5FAFFF",
    exception_message_path_color="#FFFF87",
    exception_message_line_number_color="#5FD7AF",
)


class ThemeFileError(ValueError):
    """The theme file could not be read or does not describe a theme."""


def load_theme(path: Path) -> ConsoleTheme:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ThemeFileError(f"Cannot read theme file {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ThemeFileError(f"Theme file {path} must contain a JSON object")

    try:
        return ConsoleTheme.model_validate(data)
    except ValidationError as exc:
        raise ThemeFileError(f"Invalid theme file {path}: {exc}") from exc


def load_theme_or_default(path: Path | None) -> ConsoleTheme:
    if path is None:
        return DEFAULT_THEME
    return load_theme(path)


def export_theme_json(*, theme: ConsoleTheme, output_path: Path) -> Path:
    """Write `theme` with PascalCase keys so the PowerShell module can read it."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = theme.model_dump(mode="json", by_alias=True, exclude_none=True)
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2) + "\n",
        encoding="utf-8",
    )
    return output_path
