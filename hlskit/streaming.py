"""Kernels that move data over AXI4-Stream channels."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import Any

from hlskit.bits import wrap_signed, wrap_unsigned
from hlskit.stream import Stream

INT_BITS = 32
SHORT_BITS = 16
WIDE_BITS = 64

MAX_BURST_LENGTH = 64
BUFFER_FACTOR = 64
DATA_DEPTH = MAX_BURST_LENGTH * BUFFER_FACTOR
COUNT_DEPTH = BUFFER_FACTOR
OUTPUT_WORDS = 1024

STREAM_COUNT = 3
VALUES_PER_STREAM = 10
ARRAY_LENGTH = 50


@dataclass(frozen=True)
class AxisPacket:
    """One beat of an AXI4-Stream: the payload and its side-channel signals."""

    data: Any = 0
    keep: int = 0
    strb: int = 0
    user: int = 0
    last: bool = False
    id: int = 0
    dest: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "last", bool(self.last))


def _get_in_stream(in_stream: Stream, out_stream: Stream, out_counts: Stream) -> None:
    """Forward packets as ``(data, last)`` pairs and emit burst lengths."""
    count = 0
    while True:
        packet = in_stream.read()
        out_stream.write((wrap_signed(int(packet.data), WIDE_BITS), packet.last))
        count += 1
        if count >= MAX_BURST_LENGTH or packet.last:
            out_counts.write(count)
            count = 0
        if packet.last:
            return


def _stream_to_parallel(in_stream: Stream, in_counts: Stream) -> list[int]:
    """Write the forwarded data to memory one burst at a time."""
    memory = [0] * OUTPUT_WORDS
    offset = 0
    last = False
    while not last:
        count = in_counts.read()
        for _ in range(count):
            value, last = in_stream.read()
            if offset >= OUTPUT_WORDS:
                raise ValueError(
                    f"stream carries more than {OUTPUT_WORDS} words of output"
                )
            memory[offset] = wrap_unsigned(value, WIDE_BITS)
            offset += 1
    return memory


def axi_stream_to_master(in_stream: Stream) -> list[int]:
    """Drain packets up to the one marked last into a 1024-word memory.

    Data is written as unsigned 64-bit words in bursts of at most
    ``MAX_BURST_LENGTH`` beats; words never written stay zero.
    """
    buffered = Stream()
    counts = Stream()
    _get_in_stream(in_stream, buffered, counts)
    return _stream_to_parallel(buffered, counts)


def array_of_streams(s_in: Sequence[Stream], s_out: Sequence[Stream]) -> int:
    """Forward ten values from each of three streams, adding 2, and sum the inputs."""
    if len(s_in) != STREAM_COUNT or len(s_out) != STREAM_COUNT:
        raise ValueError(f"expected {STREAM_COUNT} input and output streams")
    total = 0
    for source, sink in zip(s_in, s_out):
        for _ in range(VALUES_PER_STREAM):
            value = wrap_signed(source.read(), INT_BITS)
            sink.write(wrap_signed(value + 2, INT_BITS))
            total = wrap_signed(total + value, INT_BITS)
    return total


def add_five_packet(a: Stream, b: Stream) -> None:
    """Read one packet and write a fresh packet carrying its data plus 5."""
    packet = a.read()
    b.write(AxisPacket(data=wrap_signed(int(packet.data) + 5, INT_BITS)))


def add_five_until_last(a: Stream, b: Stream) -> None:
    """Add 5 to each packet's data, keeping side channels, until the last one."""
    while True:
        packet = a.read()
        packet = replace(
            packet, data=wrap_signed(wrap_signed(int(packet.data), INT_BITS) + 5, INT_BITS)
        )
        b.write(packet)
        if packet.last:
            return


def complex_stream(a: Stream, b: Stream) -> None:
    """Add 5 to the real part and 1 to the imaginary part of complex shorts.

    Packets are consumed up to and including the one marked last.
    """
    while True:
        packet = a.read()
        value = complex(packet.data)
        real = wrap_signed(wrap_signed(int(value.real), SHORT_BITS) + 5, SHORT_BITS)
        imag = wrap_signed(wrap_signed(int(value.imag), SHORT_BITS) + 1, SHORT_BITS)
        b.write(AxisPacket(data=complex(real, imag)))
        if packet.last:
            return


def add_five_array(values: Sequence[int]) -> list[int]:
    """Return the 50 input ints each increased by 5."""
    if len(values) != ARRAY_LENGTH:
        raise ValueError(f"expected {ARRAY_LENGTH} values, got {len(values)}")
    return [wrap_signed(wrap_signed(v, INT_BITS) + 5, INT_BITS) for v in values]