import pytest

from hlskit.misc import malloc_removed, rtl_example, rtl_model

N = 32


@pytest.fixture
def ramp():
    return [i + 200 for i in range(N)]


def test_malloc_removed_full_width(ramp):
    assert malloc_removed(ramp, 31) == 6665
    assert malloc_removed(ramp, 31) == sum(ramp[: N - 1])


def test_malloc_removed_zero_width(ramp):
    assert malloc_removed(ramp, 0) == 1655


def test_malloc_removed_ignores_last_element(ramp):
    changed = list(ramp)
    changed[-1] = 999999
    assert malloc_removed(changed, 10) == malloc_removed(ramp, 10)


def test_malloc_removed_negative_shift_is_arithmetic():
    din = [-8] * N
    assert malloc_removed(din, 0) == -2 * (N - 1)


def test_malloc_removed_short_input():
    with pytest.raises(ValueError):
        malloc_removed([1, 2, 3], 0)


def test_rtl_example_testbench():
    sums = [
        rtl_example(i, i - 10, i + 10, i - 20, i, 2 * i, 3 * i, 4 * i)
        for i in range(10)
    ]
    assert sums == [-20, -6, 8, 22, 36, 50, 64, 78, 92, 106]


def test_rtl_model_pairs():
    assert rtl_model(1, 2, 3, 4, 10, 20, 30, 40) == (11, 22, 33, 44)


def test_rtl_model_wraps_to_ten_bits():
    z1, z2, z3, z4 = rtl_model(511, -512, 0, 0, 1, -1, 0, 0)
    assert (z1, z2) == (-512, 511)
    assert (z3, z4) == (0, 0)


def test_rtl_example_wraps_sum():
    assert rtl_example(500, 500, 0, 0, 0, 0, 0, 0) == -24