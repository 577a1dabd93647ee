"""Tests for the mod entry point the host calls on load."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Optional

import pytest

from deepfried_headsets.errors import ConfigLoadError
from deepfried_headsets.mod import METADATA, DeepFriedHeadsetsMod
from deepfried_headsets.models import ItemRecord


class FakeDatabase:
    def __init__(self, items: Dict[str, Optional[ItemRecord]]) -> None:
        self.items = items
        self.calls = 0

    def get_items(self) -> Dict[str, Optional[ItemRecord]]:
        self.calls += 1
        return self.items


def headset(item_id: str) -> ItemRecord:
    return ItemRecord.model_validate(
        {
            "_id": item_id,
            "_props": {
                "AmbientVolume": 4,
                "HeadphonesMixerVolume": 2,
                "CompressorGain": 10,
                "CompressorThreshold": -20,
                "DryVolume": -10,
            },
        }
    )


@pytest.fixture
def mod_dir(tmp_path: Path) -> Path:
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "config.json").write_text(
        json.dumps({"AmbientVolume": 2.0}), encoding="utf-8"
    )
    return tmp_path


def test_on_load_applies_config_and_logs_count(
    mod_dir: Path, caplog: pytest.LogCaptureFixture
) -> None:
    db = FakeDatabase(
        {
            "h1": headset("h1"),
            "h2": headset("h2"),
            "other": ItemRecord.model_validate({"_id": "other", "_props": {}}),
        }
    )
    caplog.set_level(logging.INFO, logger="deepfried_headsets.mod")

    count = DeepFriedHeadsetsMod(db, mod_dir).on_load()

    assert count == 2
    assert db.calls == 1
    assert db.items["h1"].properties.ambient_volume == 8  # type: ignore[union-attr]
    assert "Deep Fried Headsets: Modified 2 headset items!" in caplog.messages


def test_on_load_uses_given_logger(mod_dir: Path) -> None:
    messages = []

    class Recorder(logging.Handler):
        def emit(self, record: logging.LogRecord) -> None:
            messages.append(record.getMessage())

    custom = logging.getLogger("host.mods")
    custom.setLevel(logging.INFO)
    handler = Recorder()
    custom.addHandler(handler)
    try:
        DeepFriedHeadsetsMod(FakeDatabase({}), mod_dir, logger=custom).on_load()
    finally:
        custom.removeHandler(handler)

    assert messages == ["Deep Fried Headsets: Modified 0 headset items!"]


def test_missing_config_aborts_without_touching_catalog(tmp_path: Path) -> None:
    item = headset("h1")
    db = FakeDatabase({"h1": item})

    with pytest.raises(ConfigLoadError):
        DeepFriedHeadsetsMod(db, tmp_path).on_load()

    assert db.calls == 0
    assert item.properties is not None
    assert item.properties.ambient_volume == 4


def test_config_path_is_inside_mod_folder(tmp_path: Path) -> None:
    mod = DeepFriedHeadsetsMod(FakeDatabase({}), tmp_path)
    assert mod.config_path == tmp_path / "config" / "config.json"


def test_metadata() -> None:
    assert METADATA.guid == "com.shwng.deepfriedheadsets"
    assert METADATA.version == "4.0.0"
    assert METADATA.license == "MIT"
