import dataclasses

import pytest

from nirremote.protocol import IRPulse, PulseType


def test_mark_pulse_is_mark():
    assert IRPulse(PulseType.MARK, 600).is_mark() is True


def test_space_pulse_is_not_mark():
    assert IRPulse(PulseType.SPACE, 600).is_mark() is False


def test_pulses_compare_by_value():
    assert IRPulse(PulseType.MARK, 2400) == IRPulse(PulseType.MARK, 2400)
    assert IRPulse(PulseType.MARK, 2400) != IRPulse(PulseType.SPACE, 2400)


def test_negative_duration_rejected():
    with pytest.raises(ValueError):
        IRPulse(PulseType.MARK, -1)


def test_pulse_is_immutable():
    pulse = IRPulse(PulseType.SPACE, 1200)
    with pytest.raises(dataclasses.FrozenInstanceError):
        pulse.duration = 5
    assert pulse.duration == 1200


def test_zero_duration_allowed():
    assert IRPulse(PulseType.SPACE, 0).duration == 0