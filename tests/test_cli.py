"""CLI tests (typer CliRunner) for the venv, theme and doctor commands."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from cli.main import app
from cli.ui_components import format_elapsed

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep the developer's real .env files and env vars out of the tests."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.setenv("COLUMNS", "200")
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    for key in ("FMDT_THEME_PATH", "FMDT_VENV_PATH", "FMDT_LIST_PACKAGES", "FMDT_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


def _make_venv(root: Path) -> Path:
    root.mkdir(parents=True)
    (root / "pyvenv.cfg").write_text("home = /usr/bin\nversion = 3.12.1\n", encoding="utf-8")
    (root / "bin").mkdir()
    (root / "bin" / "python").write_text("", encoding="utf-8")
    dist_info = root / "lib" / "python3.12" / "site-packages" / "numpy-1.26.0.dist-info"
    dist_info.mkdir(parents=True)
    return root


# --- format_elapsed ---

@pytest.mark.parametrize(
    ("seconds", "expected"),
    [
        (0.0123, "12 ms"),
        (2.5, "2.5 s"),
        (90, "1.5 m"),
        (5400, "1.5 h"),
        (0.9996, "1.0 s"),
        (0.9994, "999 ms"),
        (59.97, "1.0 m"),
        (59.94, "59.9 s"),
        (3599.9, "1.0 h"),
    ],
)
def test_format_elapsed_short(seconds, expected):
    assert format_elapsed(seconds) == expected


def test_format_elapsed_long():
    assert format_elapsed(90, long=True) == "1.5 min"


# --- venv ---

def test_venv_inspect(tmp_path):
    root = _make_venv(tmp_path / "venv")
    result = runner.invoke(app, ["venv", "inspect", str(root)])

    assert result.exit_code == 0, result.output
    assert "3.12.1" in result.output
    assert "numpy" in result.output
    assert "Inspected in" in result.output


def test_venv_inspect_uses_configured_path(tmp_path, monkeypatch):
    root = _make_venv(tmp_path / "configured")
    monkeypatch.setenv("FMDT_VENV_PATH", str(root))

    result = runner.invoke(app, ["venv", "inspect", "--no-packages"])
    assert result.exit_code == 0, result.output
    assert "numpy" not in result.output


def test_venv_inspect_writes_json(tmp_path):
    root = _make_venv(tmp_path / "venv")
    out = tmp_path / "venv.json"

    result = runner.invoke(app, ["venv", "inspect", str(root), "--json", str(out)])
    assert result.exit_code == 0, result.output
    payload = json.loads(out.read_text(encoding="utf-8"))
    assert payload["site_packages_list"] == [{"name": "numpy", "version": "1.26.0"}]


def test_venv_inspect_not_a_venv(tmp_path):
    result = runner.invoke(app, ["venv", "inspect", str(tmp_path)])
    assert result.exit_code == 1


# --- theme ---

def test_theme_convert_hex():
    result = runner.invoke(app, ["theme", "convert", "ffaa00"])
    assert result.exit_code == 0, result.output
    assert "RGB(255, 170, 0)" in result.output


def test_theme_convert_name():
    result = runner.invoke(app, ["theme", "convert", "Red"])
    assert result.exit_code == 0, result.output
    assert "#ff0000" in result.output


@pytest.mark.parametrize("value", ["#ABC", "not_a_color", "   "])
def test_theme_convert_failure(value):
    result = runner.invoke(app, ["theme", "convert", value])
    assert result.exit_code == 1


def test_theme_show_default():
    result = runner.invoke(app, ["theme", "show"])
    assert result.exit_code == 0, result.output
    assert "Default" in result.output
    assert "exception_type_color" in result.output


def test_theme_show_reports_bad_colors(tmp_path):
    path = tmp_path / "theme.json"
    path.write_text(json.dumps({"ThemeName": "Broken", "TableHeaderColor": "#ABC"}), encoding="utf-8")

    result = runner.invoke(app, ["theme", "show", "--file", str(path)])
    assert result.exit_code == 0, result.output
    assert "Broken" in result.output
    assert "6 characters" in result.output


def test_theme_show_bad_file(tmp_path):
    path = tmp_path / "theme.json"
    path.write_text("{oops", encoding="utf-8")
    result = runner.invoke(app, ["theme", "show", "--file", str(path)])
    assert result.exit_code == 1


def test_theme_export(tmp_path):
    out = tmp_path / "exported.json"
    result = runner.invoke(app, ["theme", "export", str(out)])
    assert result.exit_code == 0, result.output
    assert json.loads(out.read_text(encoding="utf-8"))["ThemeName"] == "Default"


# --- doctor ---

def test_doctor_run():
    result = runner.invoke(app, ["doctor", "run"])
    assert result.exit_code == 0, result.output
    assert "Theme" in result.output


def test_doctor_set_theme(tmp_path):
    theme = tmp_path / "theme.json"
    theme.write_text(json.dumps({"ThemeName": "Mine", "DefaultAccentColor": "Blue"}), encoding="utf-8")

    result = runner.invoke(app, ["doctor", "set-theme", str(theme)])
    assert result.exit_code == 0, result.output
    env_file = tmp_path / "xdg" / "fm-devtoolbox" / ".env"
    assert f"FMDT_THEME_PATH={theme.resolve()}" in env_file.read_text(encoding="utf-8")


def test_doctor_set_theme_rejects_bad_colors(tmp_path):
    theme = tmp_path / "theme.json"
    theme.write_text(json.dumps({"DefaultAccentColor": "#12"}), encoding="utf-8")

    result = runner.invoke(app, ["doctor", "set-theme", str(theme)])
    assert result.exit_code != 0


# --- user text containing rich markup ---

@pytest.mark.parametrize("value", ["[/x]", "#[bold]", "[red]nope"])
def test_theme_convert_bracketed_value_exits_cleanly(value):
    result = runner.invoke(app, ["theme", "convert", value])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)


def test_theme_show_bracketed_values(tmp_path):
    path = tmp_path / "theme.json"
    path.write_text(
        json.dumps({"ThemeName": "[/x]", "TableHeaderColor": "[/y]", "TableBorderType": "[bold]"}),
        encoding="utf-8",
    )

    result = runner.invoke(app, ["theme", "show", "--file", str(path)])
    assert result.exit_code == 0, result.output
    assert "[/x]" in result.output
    assert "[/y]" in result.output


def test_theme_show_bad_file_with_brackets_in_path(tmp_path):
    folder = tmp_path / "[/x]"  # nested "[" then "x]"
    folder.mkdir(parents=True)
    path = folder / "theme.json"
    path.write_text("{oops", encoding="utf-8")

    result = runner.invoke(app, ["theme", "show", "--file", str(path)])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)


def test_venv_inspect_not_a_venv_with_brackets_in_path(tmp_path):
    folder = tmp_path / "[/x]"  # nested "[" then "x]"
    folder.mkdir(parents=True)

    result = runner.invoke(app, ["venv", "inspect", str(folder)])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)


def test_venv_inspect_bracketed_package_names(tmp_path):
    root = _make_venv(tmp_path / "venv")
    site_packages = root / "lib" / "python3.12" / "site-packages"
    (site_packages / "[red]odd-1.0.dist-info").mkdir()

    result = runner.invoke(app, ["venv", "inspect", str(root)])
    assert result.exit_code == 0, result.output
    assert "[red]odd" in result.output


# --- log level ---

def test_unknown_log_level_is_a_usage_error():
    result = runner.invoke(app, ["--log-level", "loud", "theme", "convert", "red"])
    assert result.exit_code == 2
    assert not isinstance(result.exception, ValueError)


def test_unknown_log_level_from_environment(monkeypatch):
    monkeypatch.setenv("FMDT_LOG_LEVEL", "chatty")
    result = runner.invoke(app, ["theme", "convert", "red"])
    assert result.exit_code == 2


@pytest.mark.parametrize("level", ["debug", "INFO", " warning "])
def test_known_log_levels_are_accepted(level):
    result = runner.invoke(app, ["--log-level", level, "theme", "convert", "red"])
    assert result.exit_code == 0, result.output


# --- user config ---

def test_doctor_set_theme_overwrites_unreadable_user_env(tmp_path):
    env_file = tmp_path / "xdg" / "fm-devtoolbox" / ".env"
    env_file.parent.mkdir(parents=True)
    env_file.write_bytes(b"FMDT_LOG_LEVEL=\xff\xfe\n")
    theme = tmp_path / "theme.json"
    theme.write_text(json.dumps({"DefaultAccentColor": "Blue"}), encoding="utf-8")

    result = runner.invoke(app, ["doctor", "set-theme", str(theme)])
    assert result.exit_code == 0, result.output
    assert env_file.read_text(encoding="utf-8").splitlines()[1:] == [f"FMDT_THEME_PATH={theme.resolve()}"]
