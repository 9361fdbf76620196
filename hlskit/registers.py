"""A register-mapped accumulator over signed 8-bit operands."""

from __future__ import annotations

from hlskit.bits import wrap_signed

CHAR_BITS = 8

# Register offsets used when the bus layout is fixed by hand.
REGISTER_OFFSETS = {"a": 0x20, "b": 0x28, "c": 0x30}


def accumulate_char(a: int, b: int, c: int) -> int:
    """Return the new value of ``c`` after ``c += a + b`` on signed chars."""
    a, b, c = (wrap_signed(v, CHAR_BITS) for v in (a, b, c))
    return wrap_signed(c + a + b, CHAR_BITS)