# seqwrap

Sequence numbers in TCP are 32 bits wide and wrap around. Each one counts
from an initial sequence number (ISN). A byte stream can be longer than
2³² bytes, so a receiver needs to map each 32-bit sequence number back to
its 64-bit absolute position in the stream. `seqwrap` does that mapping.

## Installation

```
pip install seqwrap
```

## Usage

Everything lives in the module `seqwrap.wrapping_integers`.

```python
from seqwrap.wrapping_integers import WrappingInt32, wrap, unwrap

isn = WrappingInt32(15)

# Absolute position -> 32-bit sequence number
seqno = wrap(3 * 2**32 + 17, isn)
assert seqno == WrappingInt32(32)

# 32-bit sequence number -> absolute position closest to a checkpoint
assert unwrap(WrappingInt32(1), WrappingInt32(0), 2**32 - 1) == 2**32 + 1
```

### `WrappingInt32`

An immutable value holding one 32-bit number in its `raw_value` field.
A value given outside the 32-bit range is reduced modulo 2³², and a value
that is not an `int` raises `TypeError`.

- `a + n` and `a - n`, with `n` an `int`, step forward or back by `n`,
  wrapping modulo 2³².
- `a - b` between two `WrappingInt32` values gives the signed 32-bit offset
  from `b` to `a`.
- `==` and `!=` compare raw values, and the values are hashable.
- `str()` gives the raw value in decimal.

### `wrap(n, isn)`

Turns the absolute, zero-indexed sequence number `n` into the
`WrappingInt32` that lies `n` steps past `isn`.

### `unwrap(n, isn, checkpoint)`

Returns the absolute sequence number that wraps to `n` and lies closest to
`checkpoint`. The result stays within the unsigned 64-bit range, so it is
never negative.

## What it does not do

`seqwrap` only does arithmetic on sequence numbers. It does not send,
receive, parse or build TCP segments, and it keeps no connection state.

## Running the tests

```
pip install -e ".[test]"
pytest
```