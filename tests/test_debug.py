import re

import pytest

from nirremote.debug import (
    format_array,
    format_binary,
    format_hex,
    format_raw,
    format_summary,
)
from nirremote.protocol import IRPulse, PulseType

PULSES = [
    IRPulse(PulseType.MARK, 900),
    IRPulse(PulseType.SPACE, 450),
    IRPulse(PulseType.MARK, 600),
    IRPulse(PulseType.SPACE, 600),
]


def test_raw_lists_each_pulse():
    text = format_raw(PULSES)
    lines = text.split("\n")
    assert lines[0] == "Raw Pulses:"
    assert lines[1] == "0: 900us MARK"
    assert lines[2] == "1: 450us SPACE"
    assert len(lines) == len(PULSES) + 3
    assert text.endswith("\n\n")


def test_raw_of_nothing_has_only_heading():
    assert format_raw([]) == "Raw Pulses:\n\n"


def test_hex_round_trip():
    text = format_hex(0xA90)
    assert text.startswith("Code (HEX): 0x")
    body = text[len("Code (HEX): 0x"):].strip()
    assert body == body.upper()
    assert int(body, 16) == 0xA90


def test_hex_rejects_out_of_range():
    with pytest.raises(ValueError):
        format_hex(1 << 32)
    with pytest.raises(ValueError):
        format_hex(-1)


@pytest.mark.parametrize("code,bits", [(5, 4), (0xFFFFFFFF, 32), (0x12, 12)])
def test_binary_round_trip(code, bits):
    text = format_binary(code, bits)
    body = text[len("Code (BIN): "):].strip()
    assert len(body) == bits
    assert int(body, 2) == code


def test_binary_default_width_is_32():
    body = format_binary(1)[len("Code (BIN): "):].strip()
    assert len(body) == 32
    assert body.endswith("1") and set(body[:-1]) == {"0"}


def test_binary_keeps_only_low_bits():
    body = format_binary(0b1101, 2)[len("Code (BIN): "):].strip()
    assert int(body, 2) == 0b01


def test_binary_rejects_bad_width():
    with pytest.raises(ValueError):
        format_binary(1, 33)


def test_array_round_trip():
    text = format_array(PULSES)
    match = re.search(r"uint16_t rawPulses\[\] = \{ (.*) \};", text)
    assert match is not None
    values = [int(v) for v in match.group(1).split(", ")]
    assert values == [p.duration for p in PULSES]
    assert f"// Total pulses: {len(PULSES)}" in text


def test_summary_counts():
    text = format_summary(PULSES)
    assert f"Total Pulses: {len(PULSES)}\n" in text
    assert "MARKs: 2 | SPACEs: 2\n" in text
    duration = int(re.search(r"Total Duration: (\d+) us", text).group(1))
    assert duration == sum(p.duration for p in PULSES)