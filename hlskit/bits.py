"""Fixed-width integer helpers matching C and arbitrary-precision HLS types."""

from __future__ import annotations


def _check_bits(bits: int) -> None:
    if bits <= 0:
        raise ValueError(f"bit width must be positive, got {bits}")


def wrap_signed(value: int, bits: int) -> int:
    """Reduce ``value`` to a two's-complement integer of ``bits`` bits."""
    _check_bits(bits)
    modulus = 1 << bits
    value &= modulus - 1
    if value >= modulus >> 1:
        value -= modulus
    return value


def wrap_unsigned(value: int, bits: int) -> int:
    """Reduce ``value`` to an unsigned integer of ``bits`` bits."""
    _check_bits(bits)
    return value & ((1 << bits) - 1)


def c_div(a: int, b: int) -> int:
    """Integer division that truncates toward zero, as in C."""
    if b == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def c_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend, as in C."""
    return a - b * c_div(a, b)