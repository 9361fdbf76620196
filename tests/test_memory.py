import pytest

from hlskit.memory import (
    NWORDS,
    UramBuffer,
    axi_master_add,
    ecc_flags,
    init_sin_table,
    lookup_math,
    mem_bottleneck,
    mem_bottleneck_resolved,
    widen_add,
)


def test_ecc_flags_source_case():
    data = [1000 * i for i in range(10)]
    out = ecc_flags(data, data, 100)
    assert out[:6] == [0, 200, 533, 900, 1280, 1666]
    assert out[9] == 3240


def test_ecc_flags_zero_iterations():
    with pytest.raises(ZeroDivisionError):
        ecc_flags([1] * 10, [1] * 10, 0)


def test_ecc_flags_wrong_length():
    with pytest.raises(ValueError):
        ecc_flags([1] * 9, [1] * 10, 1)


def test_widen_add_source_case():
    assert widen_add(list(range(64))) == [i + 100 for i in range(64)]


def test_widen_add_wraps_int():
    assert widen_add([2**31 - 1] * 64)[0] == -(2**31) + 99


def test_widen_add_wrong_length():
    with pytest.raises(ValueError):
        widen_add([0] * 63)


def test_uram_write_then_read_source_case():
    ram = UramBuffer()
    for i in range(10):
        assert ram.access(True, False, i, i * i, 0) is None
    assert [ram.access(False, True, 0, 0, j) for j in range(10)] == [
        j * j for j in range(10)
    ]


def test_uram_read_sees_old_value():
    ram = UramBuffer()
    ram.access(True, False, 5, 7, 0)
    assert ram.access(True, True, 5, 9, 5) == 7
    assert ram.access(False, True, 0, 0, 5) == 9


def test_uram_address_and_data_wrap():
    ram = UramBuffer()
    ram.access(True, False, NWORDS + 3, 2**128 + 4, 0)
    assert ram.access(False, True, 0, 0, 3) == 4


def test_uram_starts_zero():
    assert UramBuffer().access(False, True, 0, 0, 1234) == 0


def test_sin_table_pinned_values():
    table = init_sin_table()
    assert len(table) == 256
    assert table[0] == -32768
    assert table[128] == 0
    assert table[64] == -23170
    assert table[192] == 23170


def test_sin_table_is_odd():
    table = init_sin_table()
    assert all(table[128 + k] == -table[128 - k] for k in range(1, 128))


def test_lookup_math_values():
    assert lookup_math(1, 0) == -32768
    assert lookup_math(2, 0) == -65536
    assert lookup_math(29, 128) == 0
    assert lookup_math(1, 256) == -32768


def test_lookup_math_source_transactions_signs():
    results = [lookup_math(1 + i, 100 + i) for i in range(64)]
    assert all(r < 0 for r in results[:28])
    assert results[28] == 0
    assert all(r > 0 for r in results[29:])


def test_axi_master_add_source_case():
    assert axi_master_add(list(range(50))) == [i + 100 for i in range(50)]


def test_axi_master_add_wrong_length():
    with pytest.raises(ValueError):
        axi_master_add([0] * 49)


def test_mem_bottleneck_source_case():
    data = list(range(128))
    assert mem_bottleneck(data) == -189
    assert mem_bottleneck_resolved(data) == -189


def test_mem_bottleneck_ones():
    assert mem_bottleneck([1] * 128) == 378
    assert mem_bottleneck_resolved([1] * 128) == 378


@pytest.mark.parametrize("seed", [3, 17, 40])
def test_mem_bottleneck_versions_agree(seed):
    data = [(i * seed) % 97 - 48 for i in range(128)]
    assert mem_bottleneck(data) == mem_bottleneck_resolved(data)


def test_mem_bottleneck_wrong_length():
    with pytest.raises(ValueError):
        mem_bottleneck([0] * 127)
    with pytest.raises(ValueError):
        mem_bottleneck_resolved([0] * 129)