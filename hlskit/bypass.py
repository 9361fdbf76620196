"""Dataflow pipelines whose channels bypass intermediate processes.

Each pipeline comes in two forms: the original, where a channel skips over a
process, and the solution, where every channel is routed through each stage.
Both compute the same results.
"""

from __future__ import annotations

from collections.abc import Sequence

from hlskit.bits import wrap_signed

BLOCK = 128
INT_BITS = 32


def _block(values: Sequence[int], name: str) -> list[int]:
    if len(values) != BLOCK:
        raise ValueError(f"{name} must hold {BLOCK} values, got {len(values)}")
    return [wrap_signed(v, INT_BITS) for v in values]


def _copy(values: list[int]) -> list[int]:
    return list(values)


def _add(x: list[int], y: list[int]) -> list[int]:
    return [wrap_signed(p + q, INT_BITS) for p, q in zip(x, y)]


def input_bypass(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Add two blocks where ``b`` enters the pipeline at the second stage."""
    a, b = _block(a, "a"), _block(b, "b")
    tmp1 = _copy(a)
    tmp2, tmp4 = _copy(b), _copy(tmp1)
    return _add(tmp4, tmp2)


def input_bypass_solution(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Add two blocks with both inputs read by the first stage."""
    a, b = _block(a, "a"), _block(b, "b")
    tmp1, tmp2 = _copy(a), _copy(b)
    tmp4, tmp5 = _copy(tmp1), _copy(tmp2)
    return _add(tmp4, tmp5)


def middle_bypass(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Add two blocks where one channel skips the middle stage."""
    a, b = _block(a, "a"), _block(b, "b")
    tmp1, tmp2 = _copy(a), _copy(b)
    tmp4 = _copy(tmp2)
    return _add(tmp1, tmp4)


def middle_bypass_solution(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Add two blocks with both channels passing through the middle stage."""
    a, b = _block(a, "a"), _block(b, "b")
    tmp1, tmp2 = _copy(a), _copy(b)
    tmp4, tmp5 = _copy(tmp2), _copy(tmp1)
    return _add(tmp5, tmp4)


def output_bypass(a: Sequence[int]) -> tuple[list[int], list[int]]:
    """Split a block in two, one copy leaving straight from the first stage.

    Returns ``(b, tmp2)``: the copy routed through the second stage and the
    copy taken directly from the split.
    """
    a = _block(a, "a")
    tmp1, tmp2 = _copy(a), _copy(a)
    b = _copy(tmp1)
    return b, tmp2


def output_bypass_solution(a: Sequence[int]) -> tuple[list[int], list[int]]:
    """Split a block in two, both copies leaving through the last stage."""
    a = _block(a, "a")
    tmp1, tmp3 = _copy(a), _copy(a)
    b, tmp2 = _copy(tmp1), _copy(tmp3)
    return b, tmp2