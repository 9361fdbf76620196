import pytest

from hlskit.aggregation import (
    CharInt,
    CharShort,
    Inner,
    Outer,
    Record,
    Sextet,
    adjust_sextets,
    combine_nested,
    copy_char_ints,
    drain_and_sum,
    sum_char_shorts,
    sum_records,
)
from hlskit.stream import Stream


def test_sum_char_shorts_source_case():
    arr = [CharShort(foo=i, bar=i) for i in range(10)]
    assert sum_char_shorts(arr) == 90


def test_sum_char_shorts_wraps_char():
    arr = [CharShort(foo=200, bar=0) for _ in range(10)]
    assert arr[0].foo == -56
    assert sum_char_shorts(arr) == -560


def test_sum_char_shorts_wrong_length():
    with pytest.raises(ValueError):
        sum_char_shorts([CharShort()] * 9)


def _nested_inputs():
    a = [
        Outer(0, Inner(5, 1, False)),
        Outer(1, Inner(5, 2, True)),
        Outer(2, Inner(5, 3, True)),
        Outer(3, Inner(5, 4, False)),
        Outer(4, Inner(5, 5, True)),
        Outer(5, Inner(5, 6, False)),
    ] + [Outer(), Outer()]
    b = [
        Outer(9, Inner(5, 10, True)),
        Outer(10, Inner(5, 11, True)),
        Outer(11, Inner(5, 12, False)),
        Outer(12, Inner(5, 13, False)),
        Outer(13, Inner(5, 14, True)),
        Outer(14, Inner(5, 15, True)),
    ] + [Outer(), Outer()]
    return a, b


def test_combine_nested_source_case():
    a, b = _nested_inputs()
    c = combine_nested(a, b)
    assert c[4].q.m == 10
    assert c[5].q.n == -9


def test_combine_nested_flags_and_p():
    a, b = _nested_inputs()
    c = combine_nested(a, b)
    assert [x.q.o for x in c[:6]] == [True, True, True, False, True, True]
    assert [x.p for x in c] == [1, 2, 3, 4, 5, 6, 0, 0]
    assert c[7] == Outer(0, Inner(0, 0, False))


def test_combine_nested_wrong_length():
    with pytest.raises(ValueError):
        combine_nested([Outer()] * 8, [Outer()] * 7)


def test_sum_records_source_case():
    arr = [Record(foo=(i * 4, i * 4 + 1, i * 4 + 2), bar=i * 4 + 3) for i in range(10)]
    assert sum_records(arr) == 780


def test_record_bar_is_23_bit_signed():
    assert Record(bar=1 << 22).bar == -(1 << 22)


def test_record_requires_three_foo_values():
    with pytest.raises(ValueError):
        Record(foo=(1, 2))


def test_drain_and_sum_source_case():
    stream = Stream(range(10))
    assert drain_and_sum(stream, list(range(10))) == 90
    assert stream.empty()


def test_drain_and_sum_empty_stream():
    assert drain_and_sum(Stream(), [1] * 10) == 10


def test_copy_char_ints_source_case():
    arr = [CharInt(c=i, i=i) for i in range(10)]
    out = copy_char_ints(arr)
    assert [(x.c, x.i) for x in out] == [(i, i) for i in range(10)]


def test_copy_char_ints_wrong_length():
    with pytest.raises(ValueError):
        copy_char_ints([CharInt()] * 11)


def test_adjust_sextets_source_case():
    a_in = [Sextet(i, i + 1, i + 2, i + 3, i + 4, i + 5) for i in range(100)]
    size = 8
    a_out = adjust_sextets(a_in, size)
    assert all(o.s_1 == x.s_1 + size for o, x in zip(a_out, a_in))


def test_adjust_sextets_other_fields():
    a_in = [Sextet(i, i + 1, i + 2, i + 3, i + 4, i + 5) for i in range(100)]
    a_out = adjust_sextets(a_in, 8)
    assert a_out[3] == Sextet(11, 4, 5, 6, 7, 0)
    assert a_out[4].s_6 == 1


def test_adjust_sextets_negative_remainder_follows_dividend():
    a_in = [Sextet(s_6=-3)] * 100
    assert adjust_sextets(a_in, 0)[0].s_6 == -1