"""Consistency checks for kit presets, layers and controls."""

from __future__ import annotations

from typing import Iterable, Optional

from drumkit.models import (
    ControlType,
    KitPreset,
    PresetControl,
    PresetInstrument,
    PresetLayer,
)


class ValidationError(Exception):
    """A single problem found in a field of a preset."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationError):
            return NotImplemented
        return (self.field, self.message) == (other.field, other.message)

    def __hash__(self) -> int:
        return hash((self.field, self.message))


class MultiValidationError(Exception):
    """All problems found while validating one object."""

    def __init__(self, errors: Iterable[ValidationError]) -> None:
        self.errors: list[ValidationError] = list(errors)
        super().__init__("; ".join(str(error) for error in self.errors))


def _control_type(name: str) -> Optional[ControlType]:
    try:
        return ControlType.from_name(name)
    except ValueError:
        return None


def _control_errors(control: PresetControl) -> list[ValidationError]:
    try:
        validate_control(control)
    except MultiValidationError as exc:
        return exc.errors
    return []


def validate_control(control: PresetControl) -> None:
    """Check that the control's type is a known control type."""
    if _control_type(control.type) is None:
        raise MultiValidationError(
            [ValidationError("type", f"unknown value '{control.type}'")]
        )


def validate_layer(layer: PresetLayer) -> None:
    """Check that the layer has a volume control and its volume and pan carry a MIDI CC."""
    errors: list[ValidationError] = []
    has_volume = False

    for key, control in layer.controls.items():
        errors.extend(_control_errors(control))
        ctype = _control_type(control.type)
        if ctype is None:
            continue
        has_volume = has_volume or ctype is ControlType.VOLUME
        # CC 0 is "Bank Select" and cannot drive a layer control.
        if ctype in (ControlType.VOLUME, ControlType.PAN) and control.midi_cc == 0:
            errors.append(
                ValidationError(f"control '{key}'", "midiCC is required and can't be 0")
            )

    if not has_volume:
        errors.append(ValidationError(" ", "missing 'volume' control"))
    if errors:
        raise MultiValidationError(errors)


def _mixer_control_errors(
    instrument: PresetInstrument, ctype: ControlType, required: bool
) -> list[ValidationError]:
    field = f"instrument control '{instrument.name}.{ctype.value}'"
    control = instrument.controls.get(ctype.value)
    if control is None:
        return [ValidationError(field, "is required, but missing")] if required else []
    if control.midi_cc == 0:
        return [ValidationError(field, "midiCC is required and can't be 0")]
    return []


def validate_preset(preset: KitPreset) -> None:
    """Validate a whole preset, raising MultiValidationError with every problem found.

    An instrument without layers that shares its channel with others must have
    ``volume`` and ``pan`` controls; whenever such an instrument has them they
    must carry a MIDI CC. Instruments with layers are checked layer by layer.
    """
    errors: list[ValidationError] = []

    try:
        preset.index_instruments()
    except ValueError as exc:
        errors.append(ValidationError("preset", str(exc)))

    for channel in preset.channels:
        for control in channel.controls.values():
            errors.extend(_control_errors(control))

        many_instruments = len(channel.instruments) > 1

        for instrument in channel.instruments:
            for control in instrument.controls.values():
                errors.extend(_control_errors(control))

            if not instrument.layers:
                for ctype in (ControlType.VOLUME, ControlType.PAN):
                    errors.extend(
                        _mixer_control_errors(instrument, ctype, many_instruments)
                    )
                continue

            for layer_key, layer in instrument.layers.items():
                try:
                    validate_layer(layer)
                except MultiValidationError as exc:
                    errors.append(ValidationError(f"layer '{layer_key}'", str(exc)))

    if errors:
        raise MultiValidationError(errors)