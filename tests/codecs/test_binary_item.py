import pytest

from fsshttpb.config import DecoderLimits
from fsshttpb.errors import LimitExceeded, UnexpectedEndOfStream
from fsshttpb.reader import Reader
from fsshttpb.types import parse_binary_item
from wire import binary_item, compact_u64


def test_reads_counted_bytes():
    reader = Reader(binary_item(b'\xAA\xBB\xCC\xDD') + b'\x99')
    assert parse_binary_item(reader) == b'\xAA\xBB\xCC\xDD'
    assert reader.remaining == 1


def test_empty_item():
    assert parse_binary_item(Reader(b'\x00')) == b''


def test_declared_length_past_end():
    with pytest.raises(UnexpectedEndOfStream):
        parse_binary_item(Reader(b'\x09\x01\x02'))


def test_length_above_limit():
    reader = Reader(binary_item(b'x' * 20), limits=DecoderLimits(max_blob_bytes=16))
    with pytest.raises(LimitExceeded) as excinfo:
        parse_binary_item(reader)
    assert excinfo.value.value == 20
    assert excinfo.value.limit == 16


def test_oversized_length_in_short_buffer_is_end_of_stream():
    """
    Scenario: a corrupt length above the blob limit, followed by three bytes.
    """
    reader = Reader(compact_u64(300 * 1024 * 1024) + b'abc')
    with pytest.raises(UnexpectedEndOfStream) as excinfo:
        parse_binary_item(reader)
    assert excinfo.value.needed == 300 * 1024 * 1024
    assert excinfo.value.available == 3
    assert excinfo.value.offset == 0
