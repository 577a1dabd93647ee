"""Pydantic models for the mod config and the host's item records."""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt


# Item values keep the type they were read with. Anything that is not a
# number is carried through as-is and treated as absent by the transform.
AudioValue = Optional[Union[StrictInt, StrictFloat, Any]]


class HeadsetConfig(BaseModel):
    """Tuning parameters read from ``config/config.json``.

    All values are multipliers unless the name ends in ``Add`` (added to the
    current value) or ``Set`` (written as-is). Keys missing from the file
    keep the defaults below; unknown keys are ignored.
    """

    model_config = ConfigDict(
        frozen=True, extra="ignore", populate_by_name=True, allow_inf_nan=False
    )

    # Volume
    ambient_volume: float = Field(1.5, alias="AmbientVolume")
    headphones_mixer_volume: float = Field(2.0, alias="HeadphonesMixerVolume")
    dry_volume: float = Field(1.0, alias="DryVolume")
    effects_returns_group_volume_set: float = Field(
        0.0, alias="EffectsReturnsGroupVolumeSet"
    )

    # Compressor
    compressor_gain: float = Field(1.5, alias="CompressorGain")
    compressor_threshold: float = Field(1.2, alias="CompressorThreshold")
    compressor_attack: float = Field(1.0, alias="CompressorAttack")
    compressor_release: float = Field(1.0, alias="CompressorRelease")

    # Compressor send levels
    ambient_compressor_send_level_add: float = Field(
        -5.0, alias="AmbientCompressorSendLevelAdd"
    )
    client_player_compressor_send_level_set: float = Field(
        6.0, alias="ClientPlayerCompressorSendLevelSet"
    )
    player_compressor_send_level: float = Field(
        12.0, alias="PlayerCompressorSendLevel"
    )
    guns_compressor_send_level_add: float = Field(
        12.0, alias="GunsCompressorSendLevelAdd"
    )
    effects_returns_compressor_send_level_set: float = Field(
        0.0, alias="EffectsReturnsCompressorSendLevelSet"
    )

    # EQ
    eq_band_gain: float = Field(1.75, alias="EQBandGain")
    eq_band_frequency: float = Field(1.0, alias="EQBandFrequency")
    eq_band_q: float = Field(1.0, alias="EQBandQ")

    # Filters
    highpass_freq: float = Field(1.0, alias="HighpassFreq")
    highpass_resonance: float = Field(1.0, alias="HighpassResonance")
    lowpass_freq: float = Field(1.0, alias="LowpassFreq")

    distortion_multiplier: float = Field(0.75, alias="DistortionMultiplier")
    rolloff_multiplier: float = Field(1.00015, alias="RolloffMultiplier")


class ItemProperties(BaseModel):
    """The ``_props`` block of an item.

    Only the audio fields are declared. ``None`` means the item type does
    not carry that field. Any other property is kept as an extra.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    ambient_volume: AudioValue = Field(None, alias="AmbientVolume")
    headphones_mixer_volume: AudioValue = Field(
        None, alias="HeadphonesMixerVolume"
    )
    dry_volume: AudioValue = Field(None, alias="DryVolume")
    effects_returns_group_volume: AudioValue = Field(
        None, alias="EffectsReturnsGroupVolume"
    )

    compressor_gain: AudioValue = Field(None, alias="CompressorGain")
    compressor_threshold: AudioValue = Field(None, alias="CompressorThreshold")
    compressor_attack: AudioValue = Field(None, alias="CompressorAttack")
    compressor_release: AudioValue = Field(None, alias="CompressorRelease")

    client_player_compressor_send_level: AudioValue = Field(
        None, alias="ClientPlayerCompressorSendLevel"
    )
    ambient_compressor_send_level: AudioValue = Field(
        None, alias="AmbientCompressorSendLevel"
    )
    guns_compressor_send_level: AudioValue = Field(
        None, alias="GunsCompressorSendLevel"
    )
    effects_returns_compressor_send_level: AudioValue = Field(
        None, alias="EffectsReturnsCompressorSendLevel"
    )
    npc_compressor_send_level: AudioValue = Field(
        None, alias="NpcCompressorSendLevel"
    )
    observed_player_compressor_send_level: AudioValue = Field(
        None, alias="ObservedPlayerCompressorSendLevel"
    )

    eq_band1_gain: AudioValue = Field(None, alias="EQBand1Gain")
    eq_band2_gain: AudioValue = Field(None, alias="EQBand2Gain")
    eq_band3_gain: AudioValue = Field(None, alias="EQBand3Gain")
    eq_band1_frequency: AudioValue = Field(None, alias="EQBand1Frequency")
    eq_band2_frequency: AudioValue = Field(None, alias="EQBand2Frequency")
    eq_band3_frequency: AudioValue = Field(None, alias="EQBand3Frequency")
    eq_band1_q: AudioValue = Field(None, alias="EQBand1Q")
    eq_band2_q: AudioValue = Field(None, alias="EQBand2Q")
    eq_band3_q: AudioValue = Field(None, alias="EQBand3Q")

    highpass_freq: AudioValue = Field(None, alias="HighpassFreq")
    highpass_resonance: AudioValue = Field(None, alias="HighpassResonance")
    lowpass_freq: AudioValue = Field(None, alias="LowpassFreq")

    distortion: AudioValue = Field(None, alias="Distortion")
    rolloff_multiplier: AudioValue = Field(None, alias="RolloffMultiplier")


class ItemRecord(BaseModel):
    """One entry of the host item database."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str = Field(..., alias="_id")
    name: Optional[str] = Field(None, alias="_name")
    parent: Optional[str] = Field(None, alias="_parent")
    type: Optional[str] = Field(None, alias="_type")
    properties: Optional[ItemProperties] = Field(None, alias="_props")
