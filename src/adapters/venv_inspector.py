"""Filesystem inspection of a Python virtual environment.

Why in adapters:
- Knowing where `pyvenv.cfg`, `Scripts/` or `lib/python3.x/site-packages`
  live is an infrastructure detail; the core only knows `VenvDescriptor`.

Layout handled:
- Windows: `Scripts/` + `Lib/site-packages`
- POSIX:   `bin/` + `lib/pythonX.Y/site-packages`
"""

from __future__ import annotations

import logging
from email.parser import HeaderParser
from pathlib import Path

from core.config import parse_env_lines
from core.domain.venv import VenvDescriptor
from core.interfaces.inspector import VenvInspector

logger = logging.getLogger(__name__)

PYVENV_CFG = "pyvenv.cfg"


class NotAVirtualEnvironment(FileNotFoundError):
    """The directory does not contain a `pyvenv.cfg`."""


def _str_or_none(path: Path | None) -> str | None:
    if path is None:
        return None
    return str(path)


def _first_existing(*candidates: Path) -> Path | None:
    for candidate in candidates:
        if candidate.exists():
            return candidate
    return None


def _scripts_dir(root: Path) -> Path | None:
    return _first_existing(root / "Scripts", root / "bin")


def _site_packages_dir(root: Path) -> Path | None:
    windows = root / "Lib" / "site-packages"
    if windows.is_dir():
        return windows

    lib = root / "lib"
    if lib.is_dir():
        for candidate in sorted(lib.glob("python*/site-packages")):
            if candidate.is_dir():
                return candidate
    return None


def _binary(scripts: Path, stem: str) -> Path | None:
    return _first_existing(scripts / f"{stem}.exe", scripts / stem)


def read_dist_info(dist_info: Path) -> tuple[str, str] | None:
    """Return `(name, version)` for a `*.dist-info` folder.

    `METADATA` wins; the folder name (`name-version.dist-info`) is the
    fallback when the file is missing or incomplete.
    """

    metadata_file = dist_info / "METADATA"
    if metadata_file.is_file():
        try:
            headers = HeaderParser().parsestr(
                metadata_file.read_text(encoding="utf-8", errors="replace")
            )
        except OSError as exc:
            logger.warning("Could not read %s: %s", metadata_file, exc)
        else:
            name = headers.get("Name")
            version = headers.get("Version")
            if name and version:
                return name.strip(), version.strip()

    stem = dist_info.name[: -len(".dist-info")]
    if "-" not in stem:
        logger.debug("Skipping %s: no version in folder name", dist_info.name)
        return None
    name, version = stem.rsplit("-", 1)
    return name, version


def inspect_venv(path: Path, *, list_packages: bool = True) -> VenvDescriptor:
    """Build a `VenvDescriptor` for the venv rooted at `path`.

    Fields that cannot be found stay `None`. Packages are appended in
    `*.dist-info` folder name order.
    """

    root = path.expanduser().resolve()
    cfg_path = root / PYVENV_CFG
    if not cfg_path.is_file():
        raise NotAVirtualEnvironment(f"{root} has no {PYVENV_CFG}")

    cfg = parse_env_lines(cfg_path.read_text(encoding="utf-8"))
    logger.debug("Parsed %s: %s", cfg_path, cfg)

    venv = VenvDescriptor(
        is_venv="True",
        venv_path=str(root),
        config_file=str(cfg_path),
        python_home=cfg.get("home"),
        python_version=cfg.get("version") or cfg.get("version_info"),
        include_system_packages=cfg.get("include-system-site-packages"),
    )

    scripts = _scripts_dir(root)
    if scripts is not None:
        venv.activate_file_ps1 = _str_or_none(_first_existing(scripts / "Activate.ps1"))
        venv.activate_file_bat = _str_or_none(_first_existing(scripts / "activate.bat"))
        venv.deactivate_bat = _str_or_none(_first_existing(scripts / "deactivate.bat"))
        venv.python_binary = _str_or_none(_binary(scripts, "python"))
        venv.python_debug_binary = _str_or_none(_binary(scripts, "python_d"))
        venv.pip_binary = _str_or_none(_binary(scripts, "pip"))
        venv.scripts_content = sorted(p.name for p in scripts.iterdir())
    else:
        logger.warning("No Scripts/ or bin/ folder under %s", root)

    site_packages = _site_packages_dir(root)
    venv.site_packages_dir = _str_or_none(site_packages)
    if site_packages is None:
        logger.warning("No site-packages folder under %s", root)
        return venv

    for dist_info in sorted(site_packages.glob("*.dist-info"), key=lambda p: p.name):
        info = read_dist_info(dist_info)
        if info is None:
            continue
        name, version = info
        if name.lower() == "pip":
            venv.pip_version = version
        if list_packages:
            venv.add_package_info(name, version)

    return venv


class FilesystemVenvInspector(VenvInspector):
    """`VenvInspector` backed by `inspect_venv`."""

    def __init__(self, *, list_packages: bool = True) -> None:
        self._list_packages = list_packages

    def inspect(self, path: Path) -> VenvDescriptor:
        return inspect_venv(path, list_packages=self._list_packages)
