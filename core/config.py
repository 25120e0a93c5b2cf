from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

ROOT_DIR = Path(__file__).resolve().parents[1]

DATA_DIR = Path(os.environ.get("QUOTE_DATA_DIR", str(ROOT_DIR / "data")))
HISTORY_DIR = Path(os.environ.get("QUOTE_HISTORY_DIR", str(DATA_DIR / "history")))
PRESETS_PATH = Path(os.environ.get("QUOTE_PRESETS_PATH", str(DATA_DIR / "presets.json")))

API_HOST = os.environ.get("QUOTE_API_HOST", "127.0.0.1")
API_PORT = int(os.environ.get("QUOTE_API_PORT", "8000"))

LOG_LEVEL = os.environ.get("QUOTE_LOG_LEVEL", "INFO").upper()


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=level or LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
