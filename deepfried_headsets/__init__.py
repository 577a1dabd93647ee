"""Deep Fried Headsets.

Rescales the audio properties of every headset in a game item database
from a small JSON config.
"""

from __future__ import annotations

from .config_loader import load_config
from .models import HeadsetConfig, ItemProperties, ItemRecord
from .mod import METADATA, DeepFriedHeadsetsMod, ModMetadata
from .transform import apply, is_headset

__all__ = [
    "METADATA",
    "DeepFriedHeadsetsMod",
    "HeadsetConfig",
    "ItemProperties",
    "ItemRecord",
    "ModMetadata",
    "apply",
    "is_headset",
    "load_config",
]
