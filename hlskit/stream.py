"""FIFO stream channels and streams of fixed-size blocks."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import Any


class StreamEmptyError(LookupError):
    """Raised when reading from a stream that holds no data."""


class Stream:
    """An unbounded first-in first-out channel."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: deque[Any] = deque(values)

    def write(self, value: Any) -> None:
        """Append ``value`` to the tail of the stream."""
        self._items.append(value)

    def read(self) -> Any:
        """Remove and return the value at the head of the stream."""
        try:
            return self._items.popleft()
        except IndexError:
            raise StreamEmptyError("read from an empty stream") from None

    def empty(self) -> bool:
        """Return True when the stream holds no data."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stream({list(self._items)!r})"


class StreamOfBlocks:
    """A channel that carries whole blocks, accessed through locks.

    A write lock hands out a fresh block which is pushed into the channel when
    the lock is released; a read lock hands out the oldest block and discards
    it when the lock is released.
    """

    def __init__(self, block_size: int, fill: Any = 0) -> None:
        if block_size <= 0:
            raise ValueError(f"block size must be positive, got {block_size}")
        self.block_size = block_size
        self._fill = fill
        self._blocks: deque[list[Any]] = deque()

    @contextmanager
    def write_lock(self) -> Iterator[list[Any]]:
        """Lend a writable block; it enters the channel on release."""
        block = [self._fill] * self.block_size
        try:
            yield block
        finally:
            if len(block) != self.block_size:
                raise ValueError(
                    f"block must keep {self.block_size} items, has {len(block)}"
                )
            self._blocks.append(block)

    @contextmanager
    def read_lock(self) -> Iterator[list[Any]]:
        """Lend the oldest block for reading; it leaves the channel on release."""
        if not self._blocks:
            raise StreamEmptyError("read lock on an empty stream of blocks")
        block = self._blocks[0]
        try:
            yield block
        finally:
            self._blocks.popleft()

    def empty(self) -> bool:
        """Return True when no block is waiting to be read."""
        return not self._blocks

    def __len__(self) -> int:
        return len(self._blocks)