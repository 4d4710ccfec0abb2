"""Virtual environment inspector contract.

Why Protocol:
- Structural contract (duck typing) without rigid inheritance.
- Lets the CLI swap the filesystem inspector for a stub in tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from core.domain.venv import VenvDescriptor


@runtime_checkable
class VenvInspector(Protocol):
    """Minimal contract for something that can describe a venv.

    Design rules:
    - `inspect` is synchronous: it only reads a handful of local files.
    - Returns a fully populated `VenvDescriptor`; fields that could not be
      discovered stay `None`.
    """

    def inspect(self, path: Path) -> VenvDescriptor:
        """Describe the virtual environment rooted at `path`."""

        ...
