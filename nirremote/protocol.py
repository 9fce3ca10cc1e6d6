"""Pulse types, captured pulses and the library's fixed limits."""

from __future__ import annotations

import enum
from dataclasses import dataclass

MAX_PULSES = 100
"""Largest number of pulses a single capture records."""

CAPTURE_TIMEOUT = 50000
"""Length of a capture window in microseconds."""

MIN_PULSES = 10
"""A capture must record more pulses than this to count as a signal."""

IR_INPUT_PIN = 11
IR_LED_PIN = 3


class PulseType(enum.Enum):
    """Whether a pulse is the carrier being on (mark) or off (space)."""

    MARK = 0
    SPACE = 1


class Brand(enum.Enum):
    """Remote control brands the library knows about."""

    UNKNOWN = 0
    SONY = 1
    SAMSUNG = 2


@dataclass(frozen=True)
class IRPulse:
    """One captured pulse: its kind and its length in microseconds."""

    type: PulseType
    duration: int

    def __post_init__(self) -> None:
        if self.duration < 0:
            raise ValueError(f"pulse duration must not be negative: {self.duration}")

    def is_mark(self) -> bool:
        """Return True if this pulse is a mark."""
        return self.type is PulseType.MARK