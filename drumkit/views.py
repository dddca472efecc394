"""Client-facing views of a loaded kit preset."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional

from drumkit.models import ControlType, KitPreset, PresetInstrument

SAMPLER_CHANNEL_KEY = "sampler"
SAMPLER_CHANNEL_NAME = "Kit"
MIDI_CC_MIN = 0.0
MIDI_CC_MAX = 127.0

_VOLUME = ControlType.VOLUME.value
_PAN = ControlType.PAN.value


class ChannelType(Enum):
    """Kind of a mixer channel shown to clients."""

    SAMPLER = "sampler"
    INSTRUMENT = "instrument"


class TuneParamType(Enum):
    """Kind of a tune parameter."""

    RANGE = "range"


@dataclass(kw_only=True)
class TuneParam:
    """One adjustable parameter of a tune."""

    key: str = ""
    name: str = ""
    type: TuneParamType = TuneParamType.RANGE
    value: float = 0.0
    min: Optional[float] = None
    max: Optional[float] = None


@dataclass(kw_only=True)
class Tune:
    """An instrument adjustment other than volume and pan."""

    key: str = ""
    name: str = ""
    order: int = 0
    params: list[TuneParam] = field(default_factory=list)


@dataclass(kw_only=True)
class LayerInfo:
    """A layer of an instrument with its optional volume and pan."""

    key: str = ""
    name: str = ""
    volume: Optional[float] = None
    pan: Optional[float] = None


@dataclass(kw_only=True)
class InstrumentInfo:
    """An instrument of a channel with its tunes and layers."""

    key: str = ""
    name: str = ""
    volume: Optional[float] = None
    pan: Optional[float] = None
    tunes: list[Tune] = field(default_factory=list)
    layers: list[LayerInfo] = field(default_factory=list)


@dataclass(kw_only=True)
class ChannelInfo:
    """A mixer channel and the instruments routed to it."""

    key: str = ""
    name: str = ""
    type: ChannelType = ChannelType.INSTRUMENT
    volume: float = 0.0
    pan: float = 0.0
    instruments: list[InstrumentInfo] = field(default_factory=list)


@dataclass(kw_only=True)
class PresetInfo:
    """A loaded preset as presented to clients."""

    key: str = ""
    name: str = ""
    channels: list[ChannelInfo] = field(default_factory=list)


def _tune(key: str, name: str, value: float, order: int) -> Tune:
    return Tune(
        key=key,
        name=name,
        order=order,
        params=[
            TuneParam(
                key=key,
                name=name,
                type=TuneParamType.RANGE,
                value=float(value),
                min=MIDI_CC_MIN,
                max=MIDI_CC_MAX,
            )
        ],
    )


def instruments_to_view(instruments: Iterable[PresetInstrument]) -> list[InstrumentInfo]:
    """Describe the instruments of one channel.

    Volume and pan are reported per instrument only when the channel holds
    several instruments; every other control becomes a tune.
    """
    instruments = list(instruments)
    shared = len(instruments) > 1
    result: list[InstrumentInfo] = []

    for instrument in instruments:
        view = InstrumentInfo(key=str(instrument.id), name=instrument.name)

        for key, control in instrument.controls.items():
            if control.type in (_VOLUME, _PAN):
                if not shared:
                    continue
                mixer = instrument.controls.get(control.type)
                if mixer is None:
                    continue
                if control.type == _VOLUME:
                    view.volume = float(mixer.value)
                else:
                    view.pan = float(mixer.value)
            else:
                view.tunes.append(
                    _tune(key, control.name, control.value, len(view.tunes))
                )

        for key, layer in instrument.layers.items():
            layer_view = LayerInfo(key=key, name=layer.name)
            volume = layer.controls.get(_VOLUME)
            if volume is not None:
                layer_view.volume = float(volume.value)
            pan = layer.controls.get(_PAN)
            if pan is not None:
                layer_view.pan = float(pan.value)
            view.layers.append(layer_view)

        result.append(view)
    return result


def _channel_value(channel_controls: dict, name: str) -> float:
    control = channel_controls.get(name)
    return float(control.value) if control is not None else 0.0


def preset_to_view(preset: KitPreset) -> PresetInfo:
    """Describe a preset: the global sampler channel followed by its instrument channels.

    Raises the error of the preset's channel indexing when an instrument refers
    to a missing channel.
    """
    view = PresetInfo(key=preset.uid, name=preset.name)
    view.channels.append(
        ChannelInfo(
            key=SAMPLER_CHANNEL_KEY,
            name=SAMPLER_CHANNEL_NAME,
            type=ChannelType.SAMPLER,
        )
    )

    for channel in preset.channels:
        channel_view = ChannelInfo(
            key=channel.key, name=channel.name, type=ChannelType.INSTRUMENT
        )
        instruments = preset.channel_instruments_by_key(channel.key)

        if len(instruments) == 1:
            controls = instruments[0].controls
            volume = controls.get(_VOLUME)
            if volume is not None:
                channel_view.volume = (
                    float(volume.value)
                    if volume.midi_cc != 0
                    else _channel_value(channel.controls, _VOLUME)
                )
            pan = controls.get(_PAN)
            if pan is not None:
                channel_view.pan = (
                    float(pan.value)
                    if pan.midi_cc != 0
                    else _channel_value(channel.controls, _PAN)
                )
        else:
            if _VOLUME in channel.controls:
                channel_view.volume = _channel_value(channel.controls, _VOLUME)
            if _PAN in channel.controls:
                channel_view.pan = _channel_value(channel.controls, _PAN)

        channel_view.instruments = instruments_to_view(instruments)
        view.channels.append(channel_view)

    return view