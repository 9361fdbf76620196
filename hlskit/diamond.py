"""Diamond-shaped dataflow networks built on three kinds of channel.

Every network computes the same four stages: ``A`` triples its input and
feeds two branches, ``B`` adds 25, ``C`` doubles, and ``D`` joins the two
branches. The FIFO network joins them as ``B + C`` on vectors of 32-bit
words. The ping-pong and stream-of-blocks networks join them as ``B + 2*C``
on 8-bit data.
"""

from __future__ import annotations

from collections.abc import Sequence

from hlskit.bits import wrap_unsigned
from hlskit.stream import Stream, StreamEmptyError, StreamOfBlocks

TOTAL_NUM_WORDS = 512
WORDS_PER_VECTOR = 16
WORD_BITS = 32

N = 100
NUM_BLOCKS = 10
BYTE_BITS = 8


def _word(value: int) -> int:
    return wrap_unsigned(value, WORD_BITS)


def _byte(value: int) -> int:
    return wrap_unsigned(value, BYTE_BITS)


def _word_vector(values: Sequence[int]) -> list[int]:
    if len(values) != WORDS_PER_VECTOR:
        raise ValueError(
            f"each vector must hold {WORDS_PER_VECTOR} words, got {len(values)}"
        )
    return [_word(v) for v in values]


# FIFO network: every stage is a stream of 16-word vectors.


def _load(vectors: list[list[int]], out: Stream) -> None:
    for vector in vectors:
        out.write(vector)


def _compute_a(inp: Stream, out1: Stream, out2: Stream, size: int) -> None:
    for _ in range(size):
        t = inp.read()
        out1.write([_word(x * 3) for x in t])
        out2.write([_word(x * 3) for x in t])


def _compute_b(inp: Stream, out: Stream, size: int) -> None:
    for _ in range(size):
        out.write([_word(x + 25) for x in inp.read()])


def _compute_c(inp: Stream, out: Stream, size: int) -> None:
    for _ in range(size):
        out.write([_word(x * 2) for x in inp.read()])


def _compute_d(in1: Stream, in2: Stream, out: Stream, size: int) -> None:
    for _ in range(size):
        out.write([_word(x + y) for x, y in zip(in1.read(), in2.read())])


def _store(inp: Stream, size: int) -> list[list[int]]:
    return [inp.read() for _ in range(size)]


def diamond_fifo(vec_in: Sequence[Sequence[int]], size: int) -> list[list[int]]:
    """Run ``size`` vectors of 16 unsigned 32-bit words through FIFO channels.

    ``size`` must be a non-negative multiple of 16 and ``vec_in`` must hold at
    least that many vectors. Returns the ``size`` output vectors.
    """
    if size < 0 or size % WORDS_PER_VECTOR:
        raise ValueError(f"size must be a non-negative multiple of 16, got {size}")
    if len(vec_in) < size:
        raise ValueError(f"expected at least {size} vectors, got {len(vec_in)}")
    vectors = [_word_vector(v) for v in vec_in[:size]]

    c0, c1, c2, c3, c4, c5 = (Stream() for _ in range(6))
    _load(vectors, c0)
    _compute_a(c0, c1, c2, size)
    _compute_b(c1, c3, size)
    _compute_c(c2, c4, size)
    _compute_d(c3, c4, c5, size)
    return _store(c5, size)


# Ping-pong network: every stage reads and writes whole arrays.


def _func_a(data: list[int]) -> tuple[list[int], list[int]]:
    tripled = [_byte(x * 3) for x in data]
    return tripled, list(tripled)


def _func_b(data: list[int]) -> list[int]:
    return [_byte(x + 25) for x in data]


def _func_c(data: list[int]) -> list[int]:
    return [_byte(x * 2) for x in data]


def _func_d(in1: list[int], in2: list[int]) -> list[int]:
    return [_byte(x + y * 2) for x, y in zip(in1, in2)]


def diamond_pipo(vec_in: Sequence[int]) -> list[int]:
    """Run an array of N unsigned 8-bit values through ping-pong buffers."""
    if len(vec_in) != N:
        raise ValueError(f"expected {N} values, got {len(vec_in)}")
    data = [_byte(v) for v in vec_in]
    c1, c2 = _func_a(data)
    c3 = _func_b(c1)
    c4 = _func_c(c2)
    return _func_d(c3, c4)


# Stream-of-blocks network: stages exchange blocks of NUM_BLOCKS bytes.


def _blocks_a(inp: Stream, out1: StreamOfBlocks, out2: StreamOfBlocks) -> None:
    for _ in range(N // NUM_BLOCKS):
        with out1.write_lock() as block1, out2.write_lock() as block2:
            for j in range(NUM_BLOCKS):
                t = _byte(_byte(inp.read()) * 3)
                block1[j] = t
                block2[j] = t


def _blocks_b(inp: StreamOfBlocks, out: StreamOfBlocks) -> None:
    for _ in range(N // NUM_BLOCKS):
        with inp.read_lock() as src, out.write_lock() as dst:
            dst[:] = [_byte(x + 25) for x in src]


def _blocks_c(inp: StreamOfBlocks, out: StreamOfBlocks) -> None:
    for _ in range(N // NUM_BLOCKS):
        with inp.read_lock() as src, out.write_lock() as dst:
            dst[:] = [_byte(x * 2) for x in src]


def _blocks_d(in1: StreamOfBlocks, in2: StreamOfBlocks, out: Stream) -> None:
    for _ in range(N // NUM_BLOCKS):
        with in1.read_lock() as src1, in2.read_lock() as src2:
            for x, y in zip(src1, src2):
                out.write(_byte(x + y * 2))


def diamond_blocks(stream_in: Stream, stream_out: Stream) -> None:
    """Consume N values from ``stream_in`` and write N results to ``stream_out``.

    Raises :class:`StreamEmptyError` without consuming anything when
    ``stream_in`` holds fewer than N values.
    """
    if len(stream_in) < N:
        raise StreamEmptyError(
            f"input stream holds {len(stream_in)} values, {N} are needed"
        )
    c1, c2, c3, c4 = (StreamOfBlocks(NUM_BLOCKS) for _ in range(4))
    _blocks_a(stream_in, c1, c2)
    _blocks_b(c1, c3)
    _blocks_c(c2, c4)
    _blocks_d(c3, c4, stream_out)