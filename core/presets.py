# core/presets.py
# Valores padrão dos formulários (como texto, igual aos campos da tela).

from __future__ import annotations

import json
from pathlib import Path

from . import config


def load_presets(path: Path | None = None) -> dict[str, dict[str, str]]:
    """Lê data/presets.json -> {"freight": {...}, "route": {...}}."""
    path = path or config.PRESETS_PATH
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ValueError(f"Cannot read presets from {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ValueError(f"Presets file {path} must contain a JSON object")

    presets: dict[str, dict[str, str]] = {}
    for kind in ("freight", "route"):
        section = raw.get(kind)
        if not isinstance(section, dict):
            raise ValueError(f"Presets file {path} has no '{kind}' section")
        presets[kind] = {k: "" if v is None else str(v) for k, v in section.items()}

    return presets
