"""Streaming MD5 hashing of newline-delimited records."""

from __future__ import annotations

import hashlib
from collections.abc import Callable

from .buffers import BufferQueue

DELIMITER = b"\n"
DIGEST_SIZE = hashlib.md5().digest_size
RESULT_SIZE = DIGEST_SIZE * 2 + 1


def hexencode(digest: bytes) -> bytes:
    """Encode ``digest`` as lower-case ASCII hex."""
    return digest.hex().encode("ascii")


def format_digest(digest: bytes) -> bytes:
    """Return the hex digest followed by the record delimiter."""
    return hexencode(digest) + DELIMITER


class HasherStream:
    """Hash each newline-terminated record of a byte stream fed in arbitrary pieces."""

    def __init__(self) -> None:
        self._ctx = hashlib.md5()

    def feed(self, data: bytes | bytearray) -> list[bytes]:
        """Consume ``data`` and return one formatted digest per completed record."""
        *complete, tail = bytes(data).split(DELIMITER)
        results = []
        for record in complete:
            self._ctx.update(record)
            results.append(format_digest(self._ctx.digest()))
            self._ctx = hashlib.md5()
        if tail:
            self._ctx.update(tail)
        return results

    def work(self, queue: BufferQueue, write: Callable[[bytes], None]) -> None:
        """Take one buffer from ``queue`` and pass each resulting digest to ``write``."""
        for result in self.feed(queue.dequeue()):
            write(result)