"""Domain model for drum kits, instruments and kit presets."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Optional


@dataclass(kw_only=True)
class Control:
    """A control exposed by an instrument or layer; ``cfg_key`` is its sfz variable."""

    name: str = ""
    type: str = ""
    cfg_key: str = ""


@dataclass(kw_only=True)
class Layer:
    """An articulation layer of an instrument."""

    name: str = ""
    cfg_midi_key: str = ""
    controls: dict[str, Control] = field(default_factory=dict)


@dataclass(kw_only=True)
class Instrument:
    """An instrument of a kit as described by its definition file."""

    id: int = 0
    uid: str = ""
    key: str = ""
    name: str = ""
    full_name: str = ""
    type: str = ""
    subtype: str = ""
    description: str = ""
    copyright: str = ""
    licence: str = ""
    credits: str = ""
    tags: list[str] = field(default_factory=list)
    midi_key: str = ""
    controls: dict[str, Control] = field(default_factory=dict)
    layers: dict[str, Layer] = field(default_factory=dict)


@dataclass(kw_only=True)
class Kit:
    """A drum kit: a named collection of instruments."""

    id: int = 0
    uid: str = ""
    name: str = ""
    is_custom: bool = False
    description: str = ""
    copyright: str = ""
    licence: str = ""
    credits: str = ""
    url: str = ""
    tags: list[str] = field(default_factory=list)


@dataclass(kw_only=True)
class KitRef:
    """Reference from a preset to its kit."""

    id: int = 0
    uid: str = ""
    name: str = ""
    is_custom: bool = False


@dataclass(kw_only=True)
class InstrumentRef:
    """Reference from a preset instrument to the kit instrument it uses."""

    id: int = 0
    uid: str = ""
    key: str = ""
    name: str = ""
    cfg_midi_key: str = ""
    controls: dict[str, Control] = field(default_factory=dict)
    layers: dict[str, Layer] = field(default_factory=dict)


class ControlType(Enum):
    """Known kinds of preset controls."""

    VOLUME = "volume"
    PAN = "pan"
    PITCH = "pitch"
    OTHER = "other"

    @classmethod
    def from_name(cls, name: str) -> "ControlType":
        """Return the control type called ``name``; raise ValueError if unknown."""
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"unknown control type '{name}'") from None


class MidiDevice(ABC):
    """A MIDI input device that maps key aliases to MIDI note numbers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human readable device name."""

    @abstractmethod
    def keys_mapping(self) -> dict[str, int]:
        """Return the mapping of key alias to MIDI note number."""


@dataclass(kw_only=True)
class PresetControl:
    """A control value stored in a preset."""

    name: str = ""
    type: str = ""
    midi_cc: int = 0
    cfg_key: str = ""
    value: float = 0.0
    owner: Optional[Any] = field(default=None, repr=False, compare=False)


@dataclass(kw_only=True)
class PresetLayer:
    """Layer settings of an instrument in a preset."""

    name: str = ""
    midi_key: str = ""
    cfg_midi_key: str = ""
    midi_note: int = 0
    controls: dict[str, PresetControl] = field(default_factory=dict)


@dataclass(kw_only=True)
class PresetInstrument:
    """An instrument placed on a channel of a preset."""

    instrument: InstrumentRef = field(default_factory=InstrumentRef)
    id: int = 0
    name: str = ""
    channel_key: str = ""
    midi_key: str = ""
    midi_note: int = 0
    controls: dict[str, PresetControl] = field(default_factory=dict)
    layers: dict[str, PresetLayer] = field(default_factory=dict)


@dataclass(kw_only=True)
class PresetChannel:
    """A mixer channel of a preset."""

    key: str = ""
    name: str = ""
    controls: dict[str, PresetControl] = field(default_factory=dict)
    instruments: list[PresetInstrument] = field(
        init=False, default_factory=list, repr=False, compare=False
    )


@dataclass(kw_only=True)
class KitPreset:
    """A preset of a kit: channels, instruments on them and their control values."""

    uid: str = ""
    kit: KitRef = field(default_factory=KitRef)
    name: str = ""
    channels: list[PresetChannel] = field(default_factory=list)
    instruments: list[PresetInstrument] = field(default_factory=list)
    _controls: dict[str, PresetControl] = field(
        init=False, default_factory=dict, repr=False, compare=False
    )

    @property
    def controls(self) -> dict[str, PresetControl]:
        """Index of all controls built by :meth:`prepare_to_load`."""
        return dict(self._controls)

    def index_instruments(self) -> None:
        """Attach every instrument to the channel named by its ``channel_key``."""
        by_key = {channel.key: channel for channel in self.channels}
        for channel in self.channels:
            channel.instruments = []
        for instrument in self.instruments:
            channel = by_key.get(instrument.channel_key)
            if channel is None:
                raise ValueError(
                    f"instrument '{instrument.name}' refs to missing channel "
                    f"'{instrument.channel_key}'"
                )
            channel.instruments.append(instrument)

    def channel_instruments_by_index(self, idx: int) -> list[PresetInstrument]:
        """Return the instruments of the channel at position ``idx``."""
        if not 0 <= idx < len(self.channels):
            raise IndexError(f"index {idx} out of range")
        channel = self.channels[idx]
        if not channel.instruments:
            self.index_instruments()
        return list(channel.instruments)

    def channel_instruments_by_key(self, key: str) -> list[PresetInstrument]:
        """Return the instruments of the channel with the given key."""
        for idx, channel in enumerate(self.channels):
            if channel.key == key:
                return self.channel_instruments_by_index(idx)
        raise KeyError(f"unknown channel key {key}")

    def prepare_to_load(self, midi_devices: Iterable[MidiDevice]) -> None:
        """Fill in MIDI notes and sfz keys from the instruments and index all controls."""
        devices = list(midi_devices)
        control_id = 0

        def register(prefix: str, control: PresetControl, owner: Any) -> None:
            nonlocal control_id
            control.owner = owner
            self._controls[f"{prefix}{control_id}"] = control
            control_id += 1

        for channel in self.channels:
            for control in channel.controls.values():
                register("c", control, channel)

        for instrument in self.instruments:
            ref = instrument.instrument
            if instrument.midi_key:
                instrument.midi_note = map_midi_key(instrument.midi_key, devices)

            for key, control in instrument.controls.items():
                source = ref.controls.get(key)
                if source is None:
                    raise ValueError(
                        f"not found control '{key}' in instrument '{ref.key}'"
                    )
                control.cfg_key = source.cfg_key
                register("i", control, instrument)

            for layer_key, layer in instrument.layers.items():
                if layer.midi_key:
                    layer.midi_note = map_midi_key(layer.midi_key, devices)
                source_layer = ref.layers.get(layer_key)
                if source_layer is None:
                    raise ValueError(
                        f"not found layer '{layer_key}' in instrument '{ref.key}'"
                    )
                layer.cfg_midi_key = source_layer.cfg_midi_key
                for key, control in layer.controls.items():
                    source = source_layer.controls.get(key)
                    if source is None:
                        raise ValueError(
                            f"not found control '{key}' of layer '{layer_key}' "
                            f"in instrument '{ref.key}'"
                        )
                    control.cfg_key = source.cfg_key
                    register("l", control, layer)


def map_midi_key(midi_key: str, devices: Iterable[MidiDevice]) -> int:
    """Return the MIDI note for ``midi_key`` from the first device that maps it."""
    names: list[str] = []
    for device in devices:
        try:
            mapping = device.keys_mapping()
        except Exception as exc:
            raise RuntimeError(
                f"failed get MIDI Keys mapping for device {device.name}: {exc}"
            ) from exc
        names.append(device.name)
        if midi_key in mapping:
            return mapping[midi_key]
    raise LookupError(
        f"MIDI devices {names} don't have mapping for MIDI Key {midi_key}"
    )