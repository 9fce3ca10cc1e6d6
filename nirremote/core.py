"""Capturing raw infrared pulses from a receiver line and decoding them."""

from __future__ import annotations

import time
from collections.abc import Callable

from . import sony
from .debug import format_raw
from .protocol import CAPTURE_TIMEOUT, MAX_PULSES, MIN_PULSES, IRPulse, PulseType

_MICROS_MASK = 0xFFFFFFFF


def _monotonic_micros() -> int:
    return time.monotonic_ns() // 1000


class Decoder:
    """Samples a receiver line, records pulses and decodes them.

    ``read_pin`` returns the current level of the receiver line and
    ``clock`` returns the current time in microseconds.
    """

    def __init__(
        self,
        read_pin: Callable[[], bool],
        clock: Callable[[], int] | None = None,
    ) -> None:
        self._read_pin = read_pin
        self._clock = clock if clock is not None else _monotonic_micros
        self.pulses: tuple[IRPulse, ...] = ()

    def _elapsed(self, since: int) -> int:
        return (self._clock() - since) & _MICROS_MASK

    def capture(self) -> bool:
        """Record pulses for one capture window; True if a signal was seen."""
        captured: list[IRPulse] = []
        start = self._clock()
        last_time = start
        last_state = bool(self._read_pin())

        while self._elapsed(start) < CAPTURE_TIMEOUT and len(captured) < MAX_PULSES:
            state = bool(self._read_pin())
            if state != last_state:
                now = self._clock()
                kind = PulseType.MARK if last_state else PulseType.SPACE
                captured.append(IRPulse(kind, (now - last_time) & _MICROS_MASK))
                last_state = state
                last_time = now

        self.pulses = tuple(captured)
        return len(self.pulses) > MIN_PULSES

    def debug_text(self) -> str:
        """Describe every captured pulse, one per line."""
        lines = ["RAW PULSES:"]
        lines.extend(
            f"{index}: {'MARK  ' if pulse.is_mark() else 'SPACE '} - {pulse.duration} us"
            for index, pulse in enumerate(self.pulses)
        )
        return "\n".join(lines) + "\n"

    def raw_text(self) -> str:
        """Render the captured pulses in the raw debug format."""
        return format_raw(self.pulses)

    def decode_sony(self) -> int:
        """Decode the captured pulses as a Sony signal, 0 if not one."""
        return sony.decode(self.pulses)