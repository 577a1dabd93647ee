"""Mod entry point invoked by the host once the item database is ready."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Protocol

from .config_loader import CONFIG_RELATIVE_PATH, load_config
from .models import ItemRecord
from .transform import apply


@dataclass(frozen=True)
class ModMetadata:
    """Identity of the mod as reported to the host."""

    guid: str = "com.shwng.deepfriedheadsets"
    name: str = "Deep Fried Headsets"
    author: str = "shwng"
    version: str = "4.0.0"
    host_version: str = "~4.0.0"
    license: str = "MIT"


METADATA = ModMetadata()


class ItemSource(Protocol):
    def get_items(self) -> Mapping[str, Optional[ItemRecord]]: ...


class DeepFriedHeadsetsMod:
    """Applies the headset config to the host catalog.

    The host must call :meth:`on_load` once, after the catalog is fully
    populated and before items are served.
    """

    def __init__(
        self,
        database: ItemSource,
        mod_path: Path,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._database = database
        self._mod_path = Path(mod_path)
        self._logger = logger or logging.getLogger(__name__)

    @property
    def config_path(self) -> Path:
        return self._mod_path / CONFIG_RELATIVE_PATH

    def on_load(self) -> int:
        config = load_config(self.config_path)
        modified = apply(self._database.get_items(), config)
        self._logger.info("%s: Modified %d headset items!", METADATA.name, modified)
        return modified
