"""The single pass that rewrites headset audio properties in place."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Tuple

from .models import HeadsetConfig, ItemProperties, ItemRecord

Operation = Callable[[float, HeadsetConfig], float]

# An item counts as a headset when all of these are present.
HEADSET_SIGNATURE: Tuple[str, ...] = (
    "ambient_volume",
    "headphones_mixer_volume",
    "compressor_gain",
    "compressor_threshold",
    "dry_volume",
)

DISTORTION_CEILING = 1.0
ROLLOFF_CEILING = 1.35


def apply_multiplier(value: float, multiplier: float, lo: float, hi: float) -> float:
    """Scale ``value`` and clamp the result to ``[lo, hi]``."""
    return max(lo, min(value * multiplier, hi))


def is_present(value: Any) -> bool:
    """True for a numeric property value; ``None`` and non-numbers are absent."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_headset(props: Optional[ItemProperties]) -> bool:
    if props is None:
        return False
    return all(is_present(getattr(props, name)) for name in HEADSET_SIGNATURE)


# ---------------------------------------------------------------------- #
# Operation builders
# ---------------------------------------------------------------------- #


def _scale(setting: str, lo: float, hi: float) -> Operation:
    def op(current: float, config: HeadsetConfig) -> float:
        return apply_multiplier(current, getattr(config, setting), lo, hi)

    return op


def _set(setting: str) -> Operation:
    def op(current: float, config: HeadsetConfig) -> float:
        return getattr(config, setting)

    return op


def _add(setting: str) -> Operation:
    def op(current: float, config: HeadsetConfig) -> float:
        return current + getattr(config, setting)

    return op


def _set_if_zero_else_add(setting: str) -> Operation:
    # A send level of exactly zero is replaced rather than offset.
    def op(current: float, config: HeadsetConfig) -> float:
        level = getattr(config, setting)
        return level if current == 0 else current + level

    return op


def _distortion(current: float, config: HeadsetConfig) -> float:
    return min(current * config.distortion_multiplier, DISTORTION_CEILING)


def _rolloff(current: float, config: HeadsetConfig) -> float:
    return min(max(config.rolloff_multiplier, current), ROLLOFF_CEILING)


@dataclass(frozen=True)
class FieldRule:
    """Rewrite of one property, applied only if the property is present."""

    field: str
    operation: Operation

    def apply(self, props: ItemProperties, config: HeadsetConfig) -> None:
        current = getattr(props, self.field)
        if not is_present(current):
            return
        setattr(props, self.field, self.operation(current, config))


HEADSET_RULES: Tuple[FieldRule, ...] = (
    # Volume
    FieldRule("ambient_volume", _scale("ambient_volume", -50, 50)),
    FieldRule("headphones_mixer_volume", _scale("headphones_mixer_volume", -20, 10)),
    FieldRule("dry_volume", _scale("dry_volume", -60, 0)),
    FieldRule("effects_returns_group_volume", _set("effects_returns_group_volume_set")),
    # Compressor
    FieldRule("compressor_gain", _scale("compressor_gain", 0, 30)),
    FieldRule("compressor_threshold", _scale("compressor_threshold", -80, -5)),
    FieldRule("compressor_attack", _scale("compressor_attack", 1, 200)),
    FieldRule("compressor_release", _scale("compressor_release", 10, 1000)),
    # Compressor send levels
    FieldRule(
        "client_player_compressor_send_level",
        _set("client_player_compressor_send_level_set"),
    ),
    FieldRule(
        "ambient_compressor_send_level", _add("ambient_compressor_send_level_add")
    ),
    FieldRule("guns_compressor_send_level", _add("guns_compressor_send_level_add")),
    FieldRule(
        "effects_returns_compressor_send_level",
        _set("effects_returns_compressor_send_level_set"),
    ),
    FieldRule(
        "npc_compressor_send_level",
        _set_if_zero_else_add("player_compressor_send_level"),
    ),
    FieldRule(
        "observed_player_compressor_send_level",
        _set_if_zero_else_add("player_compressor_send_level"),
    ),
    # EQ
    FieldRule("eq_band1_gain", _scale("eq_band_gain", -10, 10)),
    FieldRule("eq_band2_gain", _scale("eq_band_gain", -10, 10)),
    FieldRule("eq_band3_gain", _scale("eq_band_gain", -10, 10)),
    FieldRule("eq_band1_frequency", _scale("eq_band_frequency", 20, 500)),
    FieldRule("eq_band2_frequency", _scale("eq_band_frequency", 200, 5000)),
    FieldRule("eq_band3_frequency", _scale("eq_band_frequency", 2000, 20000)),
    FieldRule("eq_band1_q", _scale("eq_band_q", 0.1, 10)),
    FieldRule("eq_band2_q", _scale("eq_band_q", 0.1, 10)),
    FieldRule("eq_band3_q", _scale("eq_band_q", 0.1, 10)),
    # Filters
    FieldRule("highpass_freq", _scale("highpass_freq", 20, 2000)),
    FieldRule("highpass_resonance", _scale("highpass_resonance", 0.5, 10)),
    FieldRule("lowpass_freq", _scale("lowpass_freq", 1000, 22000)),
    # Distortion and spatial
    FieldRule("distortion", _distortion),
    FieldRule("rolloff_multiplier", _rolloff),
)


def apply(
    catalog: Mapping[str, Optional[ItemRecord]],
    config: HeadsetConfig,
) -> int:
    """Rewrite every headset in ``catalog`` in place.

    Returns the number of items that matched the headset signature. Items
    without it, and fields an item does not carry, are left untouched.
    """
    modified = 0
    for record in catalog.values():
        if record is None or not is_headset(record.properties):
            continue
        for rule in HEADSET_RULES:
            rule.apply(record.properties, config)
        modified += 1
    return modified
