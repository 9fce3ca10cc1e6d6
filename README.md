# nirremote

A small library for capturing infrared remote-control signals as trains of
MARK/SPACE pulses, decoding them with the Sony protocol and rendering them
as text that is easy to read.

## Installation

```
pip install nirremote
```

## Pulses

`nirremote.protocol` holds the basic types and limits.

A signal is a sequence of `IRPulse` values. Each one is a frozen dataclass
with a `type` (`PulseType.MARK` or `PulseType.SPACE`) and a `duration` in
microseconds. A negative duration raises `ValueError`.

```python
from nirremote.protocol import IRPulse, PulseType

pulse = IRPulse(PulseType.MARK, 2400)
pulse.is_mark()  # True
```

The module also defines:

- `MAX_PULSES` (100): the most pulses one capture records.
- `CAPTURE_TIMEOUT` (50000): the length of a capture window in microseconds.
- `MIN_PULSES` (10): a capture must record more pulses than this to count.
- `IR_INPUT_PIN` (11) and `IR_LED_PIN` (3): default pin numbers.
- `Brand`: an enum of `UNKNOWN`, `SONY` and `SAMSUNG`.

## Decoding Sony signals

```python
from nirremote import sony

if sony.is_sony(pulses):
    code = sony.decode(pulses)
```

`is_sony` checks that there are at least three pulses and that the first two
match the Sony header (a 2400 µs mark and a 600 µs space, within 200 µs).

`decode` reads mark/space pairs after the header and fills bits least
significant first: a space near 1200 µs is a 1, a space near 600 µs is a 0.
It stops at the first pair with bad timing or after 32 bits, and returns
`0` when the header does not match.

## Capturing from an input

`Decoder` records a signal from any source of pin levels. It takes a
callable that returns the current pin level and, optionally, a callable
that returns a time in microseconds (a monotonic clock is used if none is
given):

```python
from nirremote.core import Decoder

decoder = Decoder(read_pin, clock)
if decoder.capture():
    print(decoder.debug_text())
    print(hex(decoder.decode_sony()))
```

`capture()` samples the pin and records a pulse at each level change until
it has `MAX_PULSES` pulses or `CAPTURE_TIMEOUT` microseconds have passed.
A high level is recorded as a mark, a low level as a space. The pulses are
kept in `decoder.pulses` as a tuple, and `capture()` returns `True` when
there are more than `MIN_PULSES` of them.

- `debug_text()` lists each captured pulse as `index: MARK/SPACE - duration us`.
- `raw_text()` gives the same pulses in the format of `debug.format_raw`.
- `decode_sony()` runs `sony.decode` on the captured pulses.

## Debug output

The `nirremote.debug` module turns pulses and codes into text:

- `format_raw(pulses)` lists each pulse with its duration and type.
- `format_hex(code)` gives the code in upper-case hexadecimal.
- `format_binary(code, bits=32)` gives the lowest `bits` bits of the code,
  most significant first.
- `format_array(pulses)` gives the durations as an array literal you can save.
- `format_summary(pulses)` gives the pulse count, the total duration and the
  MARK/SPACE counts.

`format_hex` and `format_binary` raise `ValueError` for a code that does not
fit in 32 bits, and `format_binary` for a bit count outside 0 to 32.

## What it does not do

- It does not talk to hardware: you supply the function that reads the
  receiver pin.
- It decodes only the Sony protocol; there is no Samsung decoder.
- `Brand` is only an enum; there is no function that guesses a brand from a
  code.
- It does not send infrared signals.