"""FastAPI host serving the item catalog after the headset mod has run."""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import Depends, FastAPI, HTTPException, Query

from config import ITEMS_FILE_PATH, MOD_PATH, config
from db import ItemDatabase
from deepfried_headsets.errors import DeepFriedHeadsetsError
from deepfried_headsets.mod import METADATA, DeepFriedHeadsetsMod
from schemas import InfoResponse, ItemListResponse, ItemResponse, ModInfo

logger = logging.getLogger(__name__)


class ItemService:
    """Application layer façade around :class:`ItemDatabase`.

    The catalog is loaded on first use and the headset mod is run exactly
    once, before any item is returned to a client.
    """

    def __init__(self, items_path: Path, mod_path: Path) -> None:
        self._items_path = items_path
        self._mod_path = mod_path
        self._db: ItemDatabase | None = None
        self._modified_count = 0
        self._load_error: str | None = None

    # ------------------------------------------------------------------ #
    # Lifecycle helpers
    # ------------------------------------------------------------------ #

    def _ensure_loaded(self) -> ItemDatabase:
        # A failed load is not retried.
        if self._load_error is not None:
            raise HTTPException(status_code=500, detail=self._load_error)
        if self._db is None:
            try:
                db = ItemDatabase(self._items_path)
                mod = DeepFriedHeadsetsMod(db, self._mod_path)
                self._modified_count = mod.on_load()
            except DeepFriedHeadsetsError as exc:
                logger.error("Mod load failed: %s", exc)
                self._load_error = str(exc)
                raise HTTPException(status_code=500, detail=str(exc)) from exc
            self._db = db
        return self._db

    # ------------------------------------------------------------------ #
    # Delegated operations
    # ------------------------------------------------------------------ #

    def info(self) -> InfoResponse:
        db = self._ensure_loaded()
        return InfoResponse(
            mod=ModInfo(
                guid=METADATA.guid,
                name=METADATA.name,
                author=METADATA.author,
                version=METADATA.version,
                license=METADATA.license,
            ),
            item_count=len(db.get_items()),
            modified_count=self._modified_count,
        )

    def list_items(self, headsets_only: bool) -> ItemListResponse:
        db = self._ensure_loaded()
        ids = db.headset_ids() if headsets_only else list(db.get_items())
        return ItemListResponse(ids=ids, count=len(ids))

    def get_item(self, item_id: str) -> ItemResponse:
        db = self._ensure_loaded()
        try:
            record = db.get_item(item_id)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return ItemResponse(
            id=item_id,
            item=record.model_dump(by_alias=True, exclude_unset=True),
        )


app = FastAPI(title="Deep Fried Headsets item host")

_item_service = ItemService(ITEMS_FILE_PATH, MOD_PATH)


def get_item_service() -> ItemService:
    """FastAPI dependency returning the shared item service."""
    return _item_service


@app.get("/info", response_model=InfoResponse)
def info(service: ItemService = Depends(get_item_service)) -> InfoResponse:
    """Return mod metadata and how many headsets were modified."""
    return service.info()


@app.get("/items", response_model=ItemListResponse)
def list_items(
    headsets_only: bool = Query(False),
    service: ItemService = Depends(get_item_service),
) -> ItemListResponse:
    """List item ids, optionally only those recognised as headsets."""
    return service.list_items(headsets_only=headsets_only)


@app.get("/item/{item_id}", response_model=ItemResponse)
def get_item(
    item_id: str,
    service: ItemService = Depends(get_item_service),
) -> ItemResponse:
    """Return a single item record as the host stores it."""
    return service.get_item(item_id)


@app.get("/")
def root() -> dict[str, str]:
    """Simple health endpoint for convenience."""
    return {"message": f"{METADATA.name} item host. See /docs for Swagger UI."}


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    uvicorn.run("app:app", host="0.0.0.0", port=8000, reload=True)
