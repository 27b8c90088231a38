"""32-bit wrapping sequence numbers relative to an initial sequence number."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["WrappingInt32", "wrap", "unwrap"]

_MOD32 = 1 << 32
_HALF32 = 1 << 31
_MOD64 = 1 << 64


@dataclass(frozen=True)
class WrappingInt32:
    """A 32-bit integer that wraps around, as used for TCP seqnos and acknos.

    Values outside the 32-bit range are reduced modulo 2**32, as an unsigned
    32-bit store would do.
    """

    raw_value: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "raw_value", self.raw_value % _MOD32)

    def __add__(self, other: int) -> WrappingInt32:
        """Step `other` places past this point."""
        if not isinstance(other, int):
            return NotImplemented
        return WrappingInt32(self.raw_value + other)

    def __sub__(self, other: WrappingInt32 | int) -> WrappingInt32 | int:
        """Offset from another point (as a signed 32-bit int), or step back `other` places."""
        if isinstance(other, WrappingInt32):
            diff = (self.raw_value - other.raw_value) % _MOD32
            return diff - _MOD32 if diff >= _HALF32 else diff
        if isinstance(other, int):
            return WrappingInt32(self.raw_value - other)
        return NotImplemented

    def __str__(self) -> str:
        return str(self.raw_value)


def _check_u64(name: str, value: int) -> None:
    if not 0 <= value < _MOD64:
        raise ValueError(f"{name} must be an unsigned 64-bit integer, got {value}")


def wrap(n: int, isn: WrappingInt32) -> WrappingInt32:
    """Turn an absolute 64-bit sequence number into a relative 32-bit one."""
    _check_u64("n", n)
    return isn + n


def unwrap(n: WrappingInt32, isn: WrappingInt32, checkpoint: int) -> int:
    """Return the absolute sequence number that wraps to `n` and is closest to `checkpoint`."""
    _check_u64("checkpoint", checkpoint)
    offset = (n.raw_value - isn.raw_value) % _MOD32
    base = checkpoint - checkpoint % _MOD32 + offset
    candidates = (
        candidate
        for candidate in (base - _MOD32, base, base + _MOD32)
        if 0 <= candidate < _MOD64
    )
    return min(candidates, key=lambda candidate: (abs(candidate - checkpoint), candidate))