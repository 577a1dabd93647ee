"""Loading of the mod's JSON config file."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from .errors import ConfigLoadError
from .models import HeadsetConfig

logger = logging.getLogger(__name__)

CONFIG_RELATIVE_PATH = Path("config") / "config.json"


def load_config(path: Path) -> HeadsetConfig:
    """Read ``path`` and merge its keys over the built-in defaults.

    Raises :class:`ConfigLoadError` when the file is missing, is not valid
    JSON, or holds values that are not numbers.
    """
    path = Path(path)
    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigLoadError(f"Cannot read config file: {path}") from exc

    try:
        config = HeadsetConfig.model_validate_json(raw_text)
    except ValidationError as exc:
        raise ConfigLoadError(f"Invalid config file {path}: {exc}") from exc

    logger.debug("Loaded headset config from %s", path)
    return config
