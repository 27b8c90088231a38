# wrapseq

TCP sequence numbers are 32 bits wide and wrap around, and each stream
starts from an arbitrary initial sequence number (ISN). `wrapseq` turns
those wrapping numbers into zero-indexed 64-bit absolute sequence numbers
and back again.

## Installation

```
pip install wrapseq
```

## Usage

```python
from wrapseq.wrapping_integers import WrappingInt32, wrap, unwrap

isn = WrappingInt32(15)

# Absolute sequence number -> 32-bit relative sequence number
seqno = wrap(3 * 2**32 + 17, isn)
print(seqno)                     # 32

# Relative sequence number -> absolute sequence number nearest the checkpoint
absolute = unwrap(seqno, isn, 3 * 2**32)
print(absolute)                  # 12884901905

# Arithmetic wraps modulo 2**32
later = isn + 10                 # WrappingInt32(raw_value=25)
earlier = isn - 20               # WrappingInt32(raw_value=4294967291)
offset = later - isn             # 10, a signed 32-bit distance
```

All of these live in the module `wrapseq.wrapping_integers`.

### `WrappingInt32`

An immutable (frozen dataclass) 32-bit value holding a sequence number
relative to an ISN. Its one field, `raw_value`, is reduced modulo 2**32 when
the object is made, so `WrappingInt32(2**32 + 1).raw_value == 1`.

- `a + n`: steps `n` forward, wrapping modulo 2**32.
- `a - n`: steps `n` back, when `n` is an integer.
- `a - b`: when `b` is a `WrappingInt32`, gives the signed 32-bit offset
  from `b` to `a`, negative when going back is no longer than going forward.
- `==` and `!=` compare the raw values; instances are hashable.
- `str()` gives the raw value in decimal.

### `wrap(n, isn)`

Turns an absolute sequence number `n` into a `WrappingInt32` relative to
`isn`. Raises `ValueError` if `n` is not an unsigned 64-bit integer.

### `unwrap(n, isn, checkpoint)`

Gives the absolute sequence number that wraps to `n` and lies closest to
`checkpoint`, a recent absolute sequence number. The result stays within the
unsigned 64-bit range; when two candidates are equally close, the smaller one
is returned. Raises `ValueError` if `checkpoint` is not an unsigned 64-bit
integer.

## What it does not do

`wrapseq` only handles sequence-number arithmetic. It has no TCP sender,
receiver, segment parser or connection logic, and it sends and receives
nothing over a network.

## Running the tests

```
pip install -e ".[test]"
pytest
```