"""Kernels that show how arrays map onto on-chip and external memories."""

from __future__ import annotations

import math
from collections.abc import Sequence
from functools import lru_cache

from hlskit.bits import c_div, wrap_signed, wrap_unsigned

INT_BITS = 32

ECC_COUNT = 10
WIDEN_COUNT = 64
MAX_WIDEN_BITWIDTH = 256

ADDR_BITS = 14
NWORDS = 1 << ADDR_BITS
URAM_DATA_BITS = 128

SIN_TABLE_SIZE = 256
SHORT_BITS = 16
INDEX_BITS = 8

AXI_MASTER_COUNT = 50
AXI_MASTER_OFFSET = 100

BOTTLENECK_COUNT = 128
BOTTLENECK_IN_BITS = 7
BOTTLENECK_OUT_BITS = 10


def _int(value: int) -> int:
    return wrap_signed(value, INT_BITS)


def _ints(values: Sequence[int], count: int, name: str) -> list[int]:
    if len(values) != count:
        raise ValueError(f"{name} must hold {count} values, got {len(values)}")
    return [_int(v) for v in values]


def ecc_flags(in1: Sequence[int], in2: Sequence[int], iterations: int) -> list[int]:
    """Add the inputs, divide by ``iterations``, then square and scale by position.

    Each output is ``((in1[i] + in2[i]) / iterations) ** 2 / (i + 1)`` in C
    integer arithmetic. Raises ZeroDivisionError when ``iterations`` is zero.
    """
    a = _ints(in1, ECC_COUNT, "in1")
    b = _ints(in2, ECC_COUNT, "in2")
    divisor = _int(iterations)
    sums = [_int(x + y) for x, y in zip(a, b)]
    scaled = [_int(c_div(x, divisor)) for x in sums]
    return [
        _int(c_div(_int(x * x), position))
        for position, x in enumerate(scaled, start=1)
    ]


def widen_add(a: Sequence[int]) -> list[int]:
    """Return the 64 input ints each increased by 100."""
    return [_int(v + 100) for v in _ints(a, WIDEN_COUNT, "a")]


class UramBuffer:
    """A 16K-word memory of 128-bit words with one read and one write port.

    The buffer persists between accesses and starts out all zero.
    """

    def __init__(self) -> None:
        self._words = [0] * NWORDS

    def access(self, wren, rden, addr_w, data_in, addr_r) -> int | None:
        """Perform one cycle: read ``addr_r`` if ``rden``, then write if ``wren``.

        Returns the word read, or None when reading is disabled. The read sees
        the contents from before this cycle's write.
        """
        data_out = None
        if rden:
            data_out = self._words[wrap_unsigned(addr_r, ADDR_BITS)]
        if wren:
            self._words[wrap_unsigned(addr_w, ADDR_BITS)] = wrap_unsigned(
                data_in, URAM_DATA_BITS
            )
        return data_out


@lru_cache(maxsize=1)
def _sin_table() -> tuple[int, ...]:
    return tuple(
        wrap_signed(int(32768.0 * math.sin(math.pi * (i - 128) / 256.0)), SHORT_BITS)
        for i in range(SIN_TABLE_SIZE)
    )


def init_sin_table() -> list[int]:
    """Return 256 samples of a half sine wave as signed 16-bit fixed point.

    Entry ``i`` holds ``sin(pi * (i - 128) / 256)`` scaled by 32768 and
    truncated toward zero.
    """
    return list(_sin_table())


def lookup_math(inval: int, idx: int) -> int:
    """Multiply a signed 16-bit value by the sine table entry at an 8-bit index."""
    value = wrap_signed(inval, SHORT_BITS)
    index = wrap_unsigned(idx, INDEX_BITS)
    return _int(value * _sin_table()[index])


def axi_master_add(a: Sequence[int]) -> list[int]:
    """Copy 50 ints from memory, add 100 to each and return the updated block."""
    buff = _ints(a, AXI_MASTER_COUNT, "a")
    return [_int(v + AXI_MASTER_OFFSET) for v in buff]


def _bottleneck_input(mem: Sequence[int]) -> list[int]:
    if len(mem) != BOTTLENECK_COUNT:
        raise ValueError(
            f"mem must hold {BOTTLENECK_COUNT} values, got {len(mem)}"
        )
    return [wrap_signed(v, BOTTLENECK_IN_BITS) for v in mem]


def mem_bottleneck(mem: Sequence[int]) -> int:
    """Sum every window of three neighbours, reading each window from memory.

    Inputs are 7-bit signed and the sum is 10-bit signed.
    """
    values = _bottleneck_input(mem)
    total = 0
    for i in range(2, BOTTLENECK_COUNT):
        total = wrap_signed(
            total + values[i] + values[i - 1] + values[i - 2], BOTTLENECK_OUT_BITS
        )
    return total


def mem_bottleneck_resolved(mem: Sequence[int]) -> int:
    """Same sum as :func:`mem_bottleneck`, reading each element only once."""
    values = iter(_bottleneck_input(mem))
    tmp0, tmp1 = next(values), next(values)
    total = 0
    for tmp2 in values:
        total = wrap_signed(total + tmp2 + tmp1 + tmp0, BOTTLENECK_OUT_BITS)
        tmp0, tmp1 = tmp1, tmp2
    return total