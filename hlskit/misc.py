"""Kernels that replace dynamic allocation and wrap a black-box RTL model."""

from __future__ import annotations

from collections.abc import Sequence

from hlskit.bits import wrap_signed

N = 32
DATA_BITS = 10
INT_BITS = 32


def malloc_removed(din: Sequence[int], width: int) -> int:
    """Sum the first N-1 inputs, shifting right by two from index ``width`` on."""
    if len(din) < N:
        raise ValueError(f"expected {N} inputs, got {len(din)}")
    values = (wrap_signed(v, INT_BITS) for v in din[: N - 1])
    return sum(v if i < width else v >> 2 for i, v in enumerate(values))


def rtl_model(a1, a2, a3, a4, b1, b2, b3, b4) -> tuple[int, int, int, int]:
    """Add the operand pairs element-wise in 10-bit signed arithmetic."""
    pairs = ((a1, b1), (a2, b2), (a3, b3), (a4, b4))
    z1, z2, z3, z4 = (
        wrap_signed(wrap_signed(a, DATA_BITS) + wrap_signed(b, DATA_BITS), DATA_BITS)
        for a, b in pairs
    )
    return z1, z2, z3, z4


def rtl_example(a1, a2, a3, a4, b1, b2, b3, b4) -> int:
    """Return the 10-bit sum of the four results of :func:`rtl_model`."""
    return wrap_signed(sum(rtl_model(a1, a2, a3, a4, b1, b2, b3, b4)), DATA_BITS)