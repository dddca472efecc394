"""Conversion of named control lists into keyed control maps."""

from __future__ import annotations

from typing import Iterable

from drumkit.models import Control


def _normalize(name: str) -> str:
    return name.lower().strip()


def control_key(name: str) -> str:
    """Derive a map key from a display name: lower case, trimmed, spaces as underscores."""
    return _normalize(name).replace(" ", "_")


def transform_controls(controls: Iterable[Control]) -> dict[str, Control]:
    """Key controls by their derived name, keeping the display name only when it had spaces."""
    result: dict[str, Control] = {}
    for control in controls:
        keep_name = " " in _normalize(control.name)
        result[control_key(control.name)] = Control(
            name=control.name if keep_name else "",
            type=control.type,
            cfg_key=control.cfg_key,
        )
    return result