"""MIDI input devices."""

from __future__ import annotations

from drumkit.models import MidiDevice

# Drum pad note numbers, ordered by note.
_NOTE_ALIASES: tuple[tuple[int, str], ...] = (
    (27, "hihat_foot_open"),
    (28, "hihat_splash"),
    (29, "hihat_loose"),
    (36, "kick1"),
    (38, "snare"),
    (39, "snare_rimshot"),
    (41, "tom4"),
    (42, "hihat_close"),
    (43, "tom3"),
    (44, "hihat_foot_close"),
    (45, "tom2"),
    (46, "hihat_open"),
    (48, "tom1"),
    (49, "crash1_edge"),
    (51, "ride1_edge"),
    (53, "ride1_bell"),
)


class UsbMidiDevice(MidiDevice):
    """A USB MIDI device identified by its system id, e.g. ``"24:0"`` under ALSA."""

    def __init__(self, dev_id: str, name: str) -> None:
        self._dev_id = dev_id
        self._name = name

    @property
    def dev_id(self) -> str:
        """System identifier of the device."""
        return self._dev_id

    @property
    def name(self) -> str:
        """Human readable device name."""
        return self._name

    def keys_mapping(self) -> dict[str, int]:
        """Return the key alias to MIDI note mapping, e.g. ``hihat_close -> 42``."""
        return {alias: note for note, alias in _NOTE_ALIASES}

    def __repr__(self) -> str:
        return f"UsbMidiDevice(dev_id={self._dev_id!r}, name={self._name!r})"