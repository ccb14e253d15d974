import hashlib

from hashserve.buffers import BufferQueue
from hashserve.stream import RESULT_SIZE, HasherStream, format_digest, hexencode


def _expected(record: bytes) -> bytes:
    return hashlib.md5(record).hexdigest().encode() + b"\n"


def test_empty_record_digest():
    assert HasherStream().feed(b"\n") == [b"d41d8cd98f00b204e9800998ecf8427e\n"]


def test_single_record():
    assert HasherStream().feed(b"hello\n") == [_expected(b"hello")]


def test_multiple_records_in_one_buffer():
    out = HasherStream().feed(b"a\nbb\nccc\n")
    assert out == [_expected(b"a"), _expected(b"bb"), _expected(b"ccc")]


def test_partial_record_carried_over():
    stream = HasherStream()
    assert stream.feed(b"hel") == []
    assert stream.feed(b"lo") == []
    assert stream.feed(b"\nwor") == [_expected(b"hello")]
    assert stream.feed(b"ld\n") == [_expected(b"world")]


def test_split_anywhere_matches_whole():
    data = b"first line\nsecond\n\nthird one here\n"
    whole = HasherStream().feed(data)
    for cut in range(len(data) + 1):
        stream = HasherStream()
        pieces = stream.feed(data[:cut]) + stream.feed(data[cut:])
        assert pieces == whole


def test_result_size():
    out = HasherStream().feed(b"xyz\n")
    assert len(out[0]) == RESULT_SIZE
    assert out[0].endswith(b"\n")


def test_hexencode_and_format():
    digest = bytes([0x00, 0x0F, 0xA5, 0xFF])
    assert hexencode(digest) == b"000fa5ff"
    assert format_digest(digest) == b"000fa5ff\n"


def test_work_writes_results_from_queue():
    queue = BufferQueue()
    queue.enqueue(bytearray(b"one\ntw"))
    queue.enqueue(bytearray(b"o\n"))
    stream = HasherStream()
    written = []
    stream.work(queue, written.append)
    assert written == [_expected(b"one")]
    stream.work(queue, written.append)
    assert written == [_expected(b"one"), _expected(b"two")]