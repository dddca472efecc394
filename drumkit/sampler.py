"""Sampler access and its start-up sequence."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional, Sequence

AUDIO_DRIVER = "COREAUDIO"
MIDI_DRIVER = "COREMIDI"
MIDI_BINDINGS_PARAM = "CORE_MIDI_BINDINGS"
MIDI_BINDINGS_VALUE = "vmpk vmpk out"


class SamplerError(Exception):
    """Raised when the sampler cannot be set up or loaded."""


@dataclass(frozen=True)
class Param:
    """A named driver parameter."""

    name: str
    value: Any


class SamplerRepo(ABC):
    """Operations a sampler backend offers."""

    @abstractmethod
    def connect_audio_output(
        self, driver: str, params: Optional[Sequence[Param]]
    ) -> int:
        """Create an audio output device and return its id."""

    @abstractmethod
    def connect_midi_input(
        self, driver: str, params: Optional[Sequence[Param]]
    ) -> int:
        """Create a MIDI input device and return its id."""

    @abstractmethod
    def create_channel(self, audio_device_id: int, midi_device_id: int) -> int:
        """Create a sampler channel bound to the given devices and return its id."""

    @abstractmethod
    def load_instrument(
        self, instrument_file: str, instrument_index: int, channel_id: int
    ) -> None:
        """Load an instrument file into a channel."""


def init_sampler(sampler: SamplerRepo) -> tuple[int, int]:
    """Connect the audio output and MIDI input; return ``(audio_id, midi_id)``."""
    try:
        audio_id = sampler.connect_audio_output(AUDIO_DRIVER, None)
    except Exception as exc:
        raise SamplerError(f"failed init sampler: {exc}") from exc

    bindings = Param(MIDI_BINDINGS_PARAM, MIDI_BINDINGS_VALUE)
    try:
        midi_id = sampler.connect_midi_input(MIDI_DRIVER, [bindings])
    except Exception as exc:
        raise SamplerError(f"failed init sampler: {exc}") from exc
    return audio_id, midi_id


def load_instrument_to_new_channel(
    sampler: SamplerRepo,
    audio_device_id: int,
    midi_device_id: int,
    instrument_file: str,
) -> int:
    """Create a channel, load one instrument file into it and return the channel id."""
    try:
        channel = sampler.create_channel(audio_device_id, midi_device_id)
    except Exception as exc:
        raise SamplerError(f"failed load preset: {exc}") from exc
    sampler.load_instrument(instrument_file, 0, channel)
    return channel