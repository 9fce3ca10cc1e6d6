"""Decoding of Sony infrared signals from captured pulses."""

from __future__ import annotations

from collections.abc import Sequence

from .protocol import IRPulse

SONY_HEADER_MARK = 2400
SONY_HEADER_SPACE = 600
SONY_BIT_MARK = 600
SONY_ONE_SPACE = 1200
SONY_ZERO_SPACE = 600
SONY_TOLERANCE = 200
_MAX_BITS = 32


def _near(duration: int, target: int) -> bool:
    return abs(duration - target) < SONY_TOLERANCE


def is_sony(pulses: Sequence[IRPulse]) -> bool:
    """Return True if the pulses start with a Sony header."""
    if len(pulses) < 3:
        return False
    return _near(pulses[0].duration, SONY_HEADER_MARK) and _near(
        pulses[1].duration, SONY_HEADER_SPACE
    )


def decode(pulses: Sequence[IRPulse]) -> int:
    """Decode Sony pulses into a code, least significant bit first.

    Returns 0 when the pulses do not start with a Sony header. Decoding
    stops at the first bit with bad timing or after 32 bits.
    """
    if not is_sony(pulses):
        return 0

    data = 0
    bits = 0
    for mark, space in zip(pulses[2::2], pulses[3::2]):
        if abs(mark.duration - SONY_BIT_MARK) > SONY_TOLERANCE:
            break
        if _near(space.duration, SONY_ONE_SPACE):
            data |= 1 << bits
        elif not _near(space.duration, SONY_ZERO_SPACE):
            break
        bits += 1
        if bits >= _MAX_BITS:
            break
    return data