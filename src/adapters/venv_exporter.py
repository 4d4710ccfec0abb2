"""JSON export of a `VenvDescriptor`.

Why JSON:
- Other tooling (the PowerShell module, CI scripts) can consume the
  inspection without re-reading the venv.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.venv import VenvDescriptor


def export_venv_json(*, venv: VenvDescriptor, output_path: Path) -> Path:
    """Export `VenvDescriptor` as UTF-8 JSON with a stable layout."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = venv.model_dump(mode="json")
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
