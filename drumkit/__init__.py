"""Drum kit presets: data model, validation, MIDI key mapping, client views and sampler set-up."""

__version__ = "0.1.0"
__all__ = [
    "channel_control",
    "convert",
    "mididevice",
    "models",
    "sampler",
    "validation",
    "views",
]