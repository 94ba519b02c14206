"""Runtime settings read from the environment (and .env at the repo root)."""

import os
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent.parent
load_dotenv(ROOT / ".env")

DEFAULT_DATA_DIR = ROOT / "data"


def data_dir() -> Path:
    """Directory holding the save file. Resolved by the launcher or DATA_DIR."""
    return Path(os.getenv("DATA_DIR", str(DEFAULT_DATA_DIR)))


def host() -> str:
    return os.getenv("HOST", "127.0.0.1")


def port() -> int:
    return int(os.getenv("PORT", "13013"))


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()
