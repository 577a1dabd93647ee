"""In-memory item database loaded from the host's JSON item catalog."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List

from pydantic import ValidationError

from deepfried_headsets.errors import CatalogLoadError
from deepfried_headsets.models import ItemRecord
from deepfried_headsets.transform import is_headset

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JsonFileStorage:
    """Simple JSON file storage abstraction.

    Its only job is reading a JSON document from a given path.
    """

    path: Path

    def read(self) -> Any:
        if not self.path.exists():
            raise FileNotFoundError(f"Item catalog does not exist: {self.path}")
        raw_text = self.path.read_text(encoding="utf-8")
        return json.loads(raw_text)


class ItemDatabase:
    """Item catalog keyed by item id.

    Public API:

    * :meth:`get_items`  – the live, mutable ``id -> ItemRecord`` mapping.
    * :meth:`get_item`
    * :meth:`headset_ids`
    """

    def __init__(self, path: Path) -> None:
        self._storage = JsonFileStorage(path=path)
        self._items: Dict[str, ItemRecord] = {}
        self._load()

    # --------------------------------------------------------------------- #
    # Loading
    # --------------------------------------------------------------------- #

    def _load(self) -> None:
        try:
            raw = self._storage.read()
        except (OSError, ValueError) as exc:
            raise CatalogLoadError(f"Cannot read item catalog: {exc}") from exc

        if isinstance(raw, dict) and isinstance(raw.get("items"), dict):
            raw = raw["items"]
        if not isinstance(raw, dict):
            raise CatalogLoadError("Invalid item catalog: expected a JSON object")

        items: Dict[str, ItemRecord] = {}
        for item_id, payload in raw.items():
            if not isinstance(payload, dict):
                raise CatalogLoadError(f"Invalid item record: {item_id}")
            payload.setdefault("_id", item_id)
            try:
                items[item_id] = ItemRecord.model_validate(payload)
            except ValidationError as exc:
                raise CatalogLoadError(f"Invalid item record {item_id}: {exc}") from exc

        self._items = items
        logger.info("Loaded %d items from %s", len(items), self._storage.path)

    # --------------------------------------------------------------------- #
    # Access
    # --------------------------------------------------------------------- #

    def get_items(self) -> Dict[str, ItemRecord]:
        return self._items

    def get_item(self, item_id: str) -> ItemRecord:
        """Return the record for ``item_id``."""
        if item_id not in self._items:
            raise KeyError(f"Item not found: {item_id}")
        return self._items[item_id]

    def headset_ids(self) -> List[str]:
        return [
            item_id
            for item_id, record in self._items.items()
            if is_headset(record.properties)
        ]
