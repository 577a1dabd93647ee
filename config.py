"""Host application configuration objects."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class AppConfig:
    """Immutable container for host configuration."""

    items_file_path: Path = Path("items.json")
    mod_path: Path = Path(__file__).resolve().parent / "deepfried_headsets"
    log_level: int = logging.INFO


config = AppConfig()

# Simple names used by the rest of the application.
ITEMS_FILE_PATH: Path = config.items_file_path
MOD_PATH: Path = config.mod_path
