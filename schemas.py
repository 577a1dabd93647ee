# schemas.py

from typing import Any, Dict, List

from pydantic import BaseModel


class ModInfo(BaseModel):
    guid: str
    name: str
    author: str
    version: str
    license: str


class InfoResponse(BaseModel):
    mod: ModInfo
    item_count: int
    modified_count: int


class ItemListResponse(BaseModel):
    ids: List[str]
    count: int


class ItemResponse(BaseModel):
    id: str
    item: Dict[str, Any]
