"""Explicit burst transfers over memory-mapped ports."""

from __future__ import annotations

from collections import deque
from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass

from hlskit.bits import c_div, wrap_signed

N = 800
DIN_BITS = 30
DOUT_BITS = 20
INT_BITS = 32

NT = 10
TRANSFER_BUFFER = 8192


@dataclass
class _Burst:
    position: int
    end: int


class BurstPort:
    """A memory-mapped port whose accesses go through explicit burst requests.

    Reads and writes are served in the order their requests were issued.
    Values are held as signed integers of ``bits`` bits.
    """

    def __init__(self, memory: MutableSequence[int], bits: int = INT_BITS) -> None:
        self.memory = memory
        self.bits = bits
        self._reads: deque[_Burst] = deque()
        self._writes: deque[_Burst] = deque()

    def _request(self, queue: deque[_Burst], offset: int, length: int) -> None:
        if offset < 0 or length < 0:
            raise ValueError(
                f"burst offset and length must be non-negative, got {offset}, {length}"
            )
        if offset + length > len(self.memory):
            raise IndexError(
                f"burst [{offset}, {offset + length}) exceeds memory of "
                f"{len(self.memory)} words"
            )
        if length:
            queue.append(_Burst(offset, offset + length))

    @staticmethod
    def _next_index(queue: deque[_Burst], kind: str) -> int:
        if not queue:
            raise RuntimeError(f"{kind} without an outstanding {kind} request")
        burst = queue[0]
        index = burst.position
        burst.position += 1
        if burst.position == burst.end:
            queue.popleft()
        return index

    def read_request(self, offset: int, length: int) -> None:
        """Request ``length`` consecutive words starting at ``offset``."""
        self._request(self._reads, offset, length)

    def read(self) -> int:
        """Return the next word of the oldest outstanding read request."""
        index = self._next_index(self._reads, "read")
        return wrap_signed(self.memory[index], self.bits)

    def write_request(self, offset: int, length: int) -> None:
        """Announce ``length`` consecutive writes starting at ``offset``."""
        self._request(self._writes, offset, length)

    def write(self, value: int) -> None:
        """Store ``value`` at the next position of the oldest write request."""
        index = self._next_index(self._writes, "write")
        self.memory[index] = wrap_signed(value, self.bits)

    def write_response(self) -> None:
        """Wait for all writes; raise if any requested word was never written."""
        if self._writes:
            missing = sum(b.end - b.position for b in self._writes)
            raise RuntimeError(f"write response with {missing} words still unwritten")


def _dout(value: int) -> int:
    return wrap_signed(value, DOUT_BITS)


def _read_accumulated(
    port: BurstPort, factor: int, late_offset: int
) -> list[int]:
    port.read_request(0, N // 4)
    port.read_request(N - N // 4, N // 4)
    aux = [0] * N
    accum = _dout(N // 4)
    for i in range(c_div(factor, 2)):
        if i < N // 4:
            accum = _dout(accum + port.read())
            aux[i] = accum
        else:
            if i == N // 4:
                accum = _dout(i)
            accum = _dout(accum + port.read())
            aux[N - N // 2 + i] = _dout(accum + late_offset)
    return aux


def _process(x_aux: list[int], y_aux: list[int], factor: int) -> None:
    for i in range(N // 4):
        x_aux[i] = _dout(factor + x_aux[i])
        y_aux[i] = _dout(factor + y_aux[i])
    for i in range(N - N // 4, N):
        x_aux[i] = _dout(x_aux[i] - factor)
        y_aux[i] = _dout(y_aux[i] - factor)


def _write_result(port: BurstPort, x_aux: list[int], y_aux: list[int]) -> None:
    port.write_request(0, N // 4)
    port.write_request(N - N // 4, N // 4)
    for i in range(N // 2):
        if i < N // 4:
            port.write(x_aux[i] - y_aux[i])
        else:
            j = N - N // 2 + i
            port.write(x_aux[j] - c_div(y_aux[j], N))
    port.write_response()


def burst_with_conditionals(a: Sequence[int], b: Sequence[int], factor: int) -> list[int]:
    """Accumulate the first and last quarters of two arrays through burst ports.

    Returns the 800-word result memory; only the first and last quarters are
    written, the middle stays zero. ``factor // 2`` elements are read from
    each input, which must not exceed the 400 requested.
    """
    for name, values in (("a", a), ("b", b)):
        if len(values) != N:
            raise ValueError(f"{name} must hold {N} values, got {len(values)}")
    factor = wrap_signed(factor, DIN_BITS)
    if c_div(factor, 2) > N // 2:
        raise ValueError(f"factor / 2 must not exceed {N // 2}, got {factor}")

    port_a = BurstPort([wrap_signed(v, DIN_BITS) for v in a], DIN_BITS)
    port_b = BurstPort([wrap_signed(v, DIN_BITS) for v in b], DIN_BITS)
    result = [0] * N
    port_res = BurstPort(result, DOUT_BITS)

    x_aux = _read_accumulated(port_a, factor, -N)
    y_aux = _read_accumulated(port_b, factor, N)
    _process(x_aux, y_aux, factor)
    _write_result(port_res, x_aux, y_aux)
    return result


def _check_transfer(data: Sequence[int], size: int) -> None:
    if not 0 <= size <= TRANSFER_BUFFER:
        raise ValueError(f"size must lie in 0..{TRANSFER_BUFFER}, got {size}")
    if len(data) < size:
        raise ValueError(f"expected at least {size} values, got {len(data)}")


def krnl_transfer(data: Sequence[int], size: int) -> list[int]:
    """Buffer ``size`` ints and write them out NT times in a row."""
    _check_transfer(data, size)
    buf = [wrap_signed(v, INT_BITS) for v in data[:size]]
    return [value for _ in range(NT) for value in buf]


def transfer_kernel(data: Sequence[int], size: int) -> list[int]:
    """Same as :func:`krnl_transfer`, with explicit burst requests on both ports."""
    _check_transfer(data, size)
    in_port = BurstPort(list(data))
    in_port.read_request(0, size)
    buf = [in_port.read() for _ in range(size)]

    out = [0] * (size * NT)
    out_port = BurstPort(out)
    out_port.write_request(0, size * NT)
    for _ in range(NT):
        for value in buf:
            out_port.write(value)
    out_port.write_response()
    return out