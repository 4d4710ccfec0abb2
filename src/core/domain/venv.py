"""Python virtual environment descriptor.

Why a transparent carrier:
- Inspection logic (adapters) fills the fields one by one; the model itself
  never validates or normalizes what it receives.
- Every optional field starts as `None` ("not discovered yet").
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class PackageRecord(BaseModel):
    """An installed package (name, version) found in site-packages."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Distribution name as reported by its metadata.")
    version: str = Field(..., description="Installed version string.")


class VenvDescriptor(BaseModel):
    """Paths, interpreter metadata and installed packages of one venv.

    Not thread-safe: concurrent writers must serialize their own access to
    `add_package_info`.
    """

    model_config = ConfigDict(validate_assignment=True)

    site_packages_list: list[PackageRecord] = Field(
        default_factory=list,
        description="Installed packages in discovery order (duplicates allowed).",
    )

    is_venv: str | None = None
    venv_path: str | None = None
    python_version: str | None = None
    python_home: str | None = Field(
        default=None,
        description="`home` key of pyvenv.cfg (base interpreter directory).",
    )
    activate_file_ps1: str | None = None
    activate_file_bat: str | None = None
    deactivate_bat: str | None = None
    site_packages_dir: str | None = None
    python_binary: str | None = None
    python_debug_binary: str | None = None
    pip_binary: str | None = None
    pip_version: str | None = None
    include_system_packages: str | None = None
    config_file: str | None = None
    scripts_content: list[str] | None = Field(
        default=None,
        description="Raw listing of the scripts folder, if captured.",
    )

    def add_package_info(self, name: str, version: str) -> None:
        """Append a `PackageRecord` to the end of `site_packages_list`."""

        self.site_packages_list.append(PackageRecord(name=name, version=version))

    def package_names(self) -> list[str]:
        return [package.name for package in self.site_packages_list]
