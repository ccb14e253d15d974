"""Byte buffers and a blocking queue for passing them between threads."""

from __future__ import annotations

import threading
from collections import deque


def make_buffer(size: int) -> bytearray:
    """Return a zero-filled, mutable buffer of ``size`` bytes."""
    if size <= 0:
        raise ValueError(f"buffer size must be positive, got {size}")
    return bytearray(size)


class BufferQueue:
    """A thread-safe FIFO of buffers whose ``dequeue`` blocks until data arrives."""

    def __init__(self) -> None:
        self._queue: deque[bytes | bytearray] = deque()
        self._cond = threading.Condition()

    def enqueue(self, buf: bytes | bytearray) -> None:
        """Append a buffer and wake one waiting consumer."""
        with self._cond:
            self._queue.append(buf)
            self._cond.notify()

    def dequeue(self) -> bytes | bytearray:
        """Remove and return the oldest buffer, waiting while the queue is empty."""
        with self._cond:
            self._cond.wait_for(lambda: bool(self._queue))
            return self._queue.popleft()

    def __len__(self) -> int:
        with self._cond:
            return len(self._queue)