"""Streaming service for channel control values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(frozen=True)
class ControlValue:
    """A value set on a control, tagged with the client's sequence number."""

    key: str
    seq: int
    value: float


class ChannelControlService:
    """Receives control values from a client and acknowledges each one."""

    def set_value(self, values: Iterable[ControlValue]) -> Iterator[ControlValue]:
        """Yield an acknowledgement for every received value until the stream ends.

        Errors raised while reading the incoming stream propagate to the caller.
        """
        for incoming in values:
            yield ControlValue(key=incoming.key, seq=incoming.seq, value=incoming.value)