"""Histórico de cotações salvas (JSON em data/history/).

Um snapshot guarda a entrada já normalizada e a saída arredondada a duas
casas no momento do save; nunca é recalculado depois.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel

from . import config
from .models import QuoteKind

logger = logging.getLogger(__name__)

KINDS: tuple[str, ...] = ("freight", "route")


def _money(x: float) -> float:
    # arredondamento estável de dinheiro
    return round(float(x) + 1e-9, 2)


def snapshot_quote(
    kind: QuoteKind,
    inp: BaseModel,
    breakdown: BaseModel,
    *,
    client_name: str = "",
    reference: str = "",
    created_at: Optional[str] = None,
) -> dict[str, Any]:
    if kind not in KINDS:
        raise ValueError(f"Unknown quote kind: {kind!r}")

    output = {k: _money(v) for k, v in breakdown.model_dump(by_alias=True).items()}

    return {
        "meta": {
            "created_at": created_at or datetime.now().isoformat(timespec="seconds"),
            "kind": kind,
            "client_name": client_name,
            "reference": reference,
        },
        "input": inp.model_dump(by_alias=True),
        "output": output,
    }


def save_quote_json(payload: dict[str, Any], history_dir: Path | None = None) -> Path:
    """
    Grava o snapshot como JSON no diretório de histórico.
    Retorna o caminho do arquivo criado.
    """
    history_dir = history_dir or config.HISTORY_DIR
    history_dir.mkdir(parents=True, exist_ok=True)

    meta = payload["meta"]
    if meta.get("kind") not in KINDS:
        raise ValueError(f"Unknown quote kind: {meta.get('kind')!r}")

    # nome de arquivo seguro
    ts = meta["created_at"].replace(":", "").replace("-", "")
    client = meta.get("client_name", "").strip().lower().replace(" ", "_") or "client"
    client = "".join(c for c in client if c.isalnum() or c in "_-") or "client"

    path = history_dir / f"{ts}_{meta['kind']}_{client}.json"
    n = 1
    while path.exists():
        n += 1
        path = history_dir / f"{ts}_{meta['kind']}_{client}_{n}.json"

    path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    logger.info("Saved %s quote to %s", meta["kind"], path)
    return path


def load_quote_history(
    history_dir: Path | None = None, *, kind: Optional[str] = None
) -> list[dict[str, Any]]:
    """Snapshots salvos, mais recentes primeiro."""
    history_dir = history_dir or config.HISTORY_DIR
    if not history_dir.is_dir():
        return []

    quotes: list[dict[str, Any]] = []
    for path in history_dir.glob("*.json"):
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError):
            payload = None
        if not isinstance(payload, dict) or not isinstance(payload.get("meta", {}), dict):
            logger.warning("Skipping unreadable quote file %s", path)
            continue
        if kind is not None and payload.get("meta", {}).get("kind") != kind:
            continue
        quotes.append(payload)

    quotes.sort(key=lambda q: str(q.get("meta", {}).get("created_at", "")), reverse=True)
    return quotes
