"""Human-readable renderings of captured pulses and decoded codes."""

from __future__ import annotations

from collections.abc import Sequence

from .protocol import IRPulse

_CODE_LIMIT = 0xFFFFFFFF


def _check_code(code: int) -> None:
    if not 0 <= code <= _CODE_LIMIT:
        raise ValueError(f"code must fit in 32 bits: {code}")


def format_raw(pulses: Sequence[IRPulse]) -> str:
    """List every pulse with its index, duration and kind."""
    lines = ["Raw Pulses:"]
    lines.extend(
        f"{index}: {pulse.duration}us {'MARK' if pulse.is_mark() else 'SPACE'}"
        for index, pulse in enumerate(pulses)
    )
    lines.append("")
    return "\n".join(lines) + "\n"


def format_hex(code: int) -> str:
    """Show a decoded code in upper-case hexadecimal."""
    _check_code(code)
    return f"Code (HEX): 0x{code:X}\n"


def format_binary(code: int, bits: int = 32) -> str:
    """Show the lowest ``bits`` bits of a code, most significant first."""
    _check_code(code)
    if not 0 <= bits <= 32:
        raise ValueError(f"bit count must be between 0 and 32: {bits}")
    digits = "".join(str((code >> shift) & 1) for shift in reversed(range(bits)))
    return f"Code (BIN): {digits}\n"


def format_array(pulses: Sequence[IRPulse]) -> str:
    """Render pulse durations as an array declaration for saving."""
    values = ", ".join(str(pulse.duration) for pulse in pulses)
    return (
        "Raw Pulse Array:\n"
        f"uint16_t rawPulses[] = {{ {values} }};\n"
        f"// Total pulses: {len(pulses)}\n"
        "\n"
    )


def format_summary(pulses: Sequence[IRPulse]) -> str:
    """Summarise pulse count, total duration and mark/space counts."""
    total_time = sum(pulse.duration for pulse in pulses)
    marks = sum(1 for pulse in pulses if pulse.is_mark())
    spaces = len(pulses) - marks
    return (
        "Pulse Summary:\n"
        f"Total Pulses: {len(pulses)}\n"
        f"Total Duration: {total_time} us\n"
        f"MARKs: {marks} | SPACEs: {spaces}\n"
        "\n"
    )