"""Kernels over arrays of structures, aggregated into or split out of ports."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field, replace

from hlskit.bits import c_mod, wrap_signed
from hlskit.stream import Stream

CHAR_BITS = 8
SHORT_BITS = 16
INT_BITS = 32
LONG_BITS = 64
BAR_BITS = 23

M_AXI_COUNT = 10
NESTED_COUNT = 8
RECORD_COUNT = 10
DISAGGREGATED_COUNT = 10
AXIS_COUNT = 10
SEXTET_COUNT = 100


def _int(value: int) -> int:
    return wrap_signed(value, INT_BITS)


def _expect_length(items: Sequence, count: int, name: str) -> None:
    if len(items) != count:
        raise ValueError(f"{name} must hold {count} items, got {len(items)}")


@dataclass(frozen=True)
class CharShort:
    """A signed char paired with a signed short."""

    foo: int = 0
    bar: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "foo", wrap_signed(self.foo, CHAR_BITS))
        object.__setattr__(self, "bar", wrap_signed(self.bar, SHORT_BITS))


@dataclass(frozen=True)
class Inner:
    """The nested part of :class:`Outer`: two ints and a flag."""

    m: int = 0
    n: int = 0
    o: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "m", _int(self.m))
        object.__setattr__(self, "n", _int(self.n))
        object.__setattr__(self, "o", bool(self.o))


@dataclass(frozen=True)
class Outer:
    """An int alongside a nested :class:`Inner`."""

    p: int = 0
    q: Inner = field(default_factory=Inner)

    def __post_init__(self) -> None:
        object.__setattr__(self, "p", _int(self.p))


@dataclass(frozen=True)
class Record:
    """Three ints followed by a 23-bit signed field."""

    foo: tuple[int, int, int] = (0, 0, 0)
    bar: int = 0

    def __post_init__(self) -> None:
        if len(self.foo) != 3:
            raise ValueError(f"foo must hold 3 ints, got {len(self.foo)}")
        object.__setattr__(self, "foo", tuple(_int(v) for v in self.foo))
        object.__setattr__(self, "bar", wrap_signed(self.bar, BAR_BITS))


@dataclass(frozen=True)
class CharInt:
    """A signed char paired with an int."""

    c: int = 0
    i: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "c", wrap_signed(self.c, CHAR_BITS))
        object.__setattr__(self, "i", _int(self.i))


@dataclass(frozen=True)
class Sextet:
    """Six ints packed into one 24-byte structure."""

    s_1: int = 0
    s_2: int = 0
    s_3: int = 0
    s_4: int = 0
    s_5: int = 0
    s_6: int = 0

    def __post_init__(self) -> None:
        for name in ("s_1", "s_2", "s_3", "s_4", "s_5", "s_6"):
            object.__setattr__(self, name, _int(getattr(self, name)))


def sum_char_shorts(arr: Sequence[CharShort]) -> int:
    """Return the int sum of ``foo + bar`` over ten structures."""
    _expect_length(arr, M_AXI_COUNT, "arr")
    total = 0
    for item in arr:
        total = _int(total + item.foo + item.bar)
    return total


def combine_nested(a: Sequence[Outer], b: Sequence[Outer]) -> list[Outer]:
    """Combine eight pairs of nested structures field by field.

    The inner ``m`` fields are added, the ``n`` fields subtracted and the
    flags or-ed; ``p`` takes the ``n`` field of ``a``.
    """
    _expect_length(a, NESTED_COUNT, "a")
    _expect_length(b, NESTED_COUNT, "b")
    return [
        Outer(
            p=x.q.n,
            q=Inner(m=x.q.m + y.q.m, n=x.q.n - y.q.n, o=x.q.o or y.q.o),
        )
        for x, y in zip(a, b)
    ]


def sum_records(arr: Sequence[Record]) -> int:
    """Return the int sum of all three ``foo`` values and ``bar`` over ten records."""
    _expect_length(arr, RECORD_COUNT, "arr")
    total = 0
    for record in arr:
        total = _int(total + sum(record.foo) + record.bar)
    return total


def drain_and_sum(stream: Stream, arr: Sequence[int]) -> int:
    """Empty ``stream`` into a 64-bit sum, then add the ten values of ``arr``."""
    _expect_length(arr, DISAGGREGATED_COUNT, "arr")
    total = 0
    while not stream.empty():
        total = wrap_signed(total + stream.read(), LONG_BITS)
    for value in arr:
        total = wrap_signed(total + wrap_signed(value, LONG_BITS), LONG_BITS)
    return total


def copy_char_ints(items: Sequence[CharInt]) -> list[CharInt]:
    """Copy ten structures field by field to a new array."""
    _expect_length(items, AXIS_COUNT, "items")
    return [CharInt(c=item.c, i=item.i) for item in items]


def adjust_sextets(a_in: Sequence[Sextet], size: int) -> list[Sextet]:
    """Add ``size`` to ``s_1`` and reduce ``s_6`` modulo 2, keeping the rest."""
    _expect_length(a_in, SEXTET_COUNT, "a_in")
    buffer_in = list(a_in)
    buffer_out = [
        replace(item, s_1=_int(item.s_1 + size), s_6=c_mod(item.s_6, 2))
        for item in buffer_in
    ]
    return list(buffer_out)