"""32-bit wrapping sequence numbers relative to an initial sequence number."""

from __future__ import annotations

from dataclasses import dataclass

_MASK32 = (1 << 32) - 1
_MASK64 = (1 << 64) - 1
_INT_RANGE = 1 << 32


def _to_int32(value: int) -> int:
    """Interpret the low 32 bits of ``value`` as a signed 32-bit integer."""
    value &= _MASK32
    return value - (1 << 32) if value >= (1 << 31) else value


def _distance(a: int, b: int) -> int:
    """Absolute value of ``a - b`` taken modulo 2**64 as a signed 64-bit integer."""
    diff = (a - b) & _MASK64
    if diff >= (1 << 63):
        diff -= 1 << 64
    return abs(diff)


@dataclass(frozen=True)
class WrappingInt32:
    """A 32-bit integer that wraps around, used for TCP seqnos and acknos.

    Values outside the 32-bit range are reduced modulo 2**32.
    """

    raw_value: int

    def __post_init__(self) -> None:
        if not isinstance(self.raw_value, int):
            raise TypeError("raw_value must be an int")
        object.__setattr__(self, "raw_value", self.raw_value & _MASK32)

    def __add__(self, other: int) -> WrappingInt32:
        """The point ``other`` steps past this one."""
        if isinstance(other, WrappingInt32) or not isinstance(other, int):
            return NotImplemented
        return WrappingInt32(self.raw_value + other)

    def __sub__(self, other):
        """With a WrappingInt32, the signed offset of self relative to ``other``.

        The result is negative when the number of decrements needed is less
        than or equal to the number of increments. With an int, the point
        ``other`` steps before this one.
        """
        if isinstance(other, WrappingInt32):
            return _to_int32(self.raw_value - other.raw_value)
        if isinstance(other, int):
            return WrappingInt32(self.raw_value - other)
        return NotImplemented

    def __str__(self) -> str:
        return str(self.raw_value)


def wrap(n: int, isn: WrappingInt32) -> WrappingInt32:
    """Turn an absolute, zero-indexed sequence number into a relative one."""
    return WrappingInt32((n & _MASK32) + isn.raw_value)


def unwrap(n: WrappingInt32, isn: WrappingInt32, checkpoint: int) -> int:
    """Return the absolute sequence number wrapping to ``n`` closest to ``checkpoint``."""
    checkpoint &= _MASK64
    offset = (n.raw_value - isn.raw_value) & _MASK32
    base = (checkpoint & ~_MASK32 & _MASK64) + offset
    result = base

    above = (base + _INT_RANGE) & _MASK64
    if _distance(above, checkpoint) < _distance(result, checkpoint):
        result = above

    below = (base - _INT_RANGE) & _MASK64
    if _distance(below, checkpoint) < _distance(result, checkpoint) and base >= _INT_RANGE:
        result = below

    return result