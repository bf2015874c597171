import struct

import pytest

from fsshttpb.errors import MalformedHeader, UnexpectedEndOfStream
from fsshttpb.reader import Reader
from fsshttpb.types import HeaderForm, ObjectHeader, ObjectType, try_consume_end
from wire import compact_u64, end_8, end_16, start_16, start_32


def test_compact_start_header_fields():
    reader = Reader(start_16(ObjectType.OBJECT_GROUP_OBJECT, length=21, compound=True))
    header = ObjectHeader.parse(reader)
    assert header == ObjectHeader(ObjectType.OBJECT_GROUP_OBJECT, HeaderForm.START_16, compound=True, length=21)
    assert not header.is_end
    assert not header.is_wide
    assert reader.offset == 2


def test_wide_start_header_fields():
    reader = Reader(start_32(ObjectType.OBJECT_GROUP_METADATA, length=3))
    header = ObjectHeader.parse(reader)
    assert header.object_type == ObjectType.OBJECT_GROUP_METADATA
    assert header.form == HeaderForm.START_32
    assert header.is_wide
    assert header.length == 3
    assert reader.offset == 4


def test_wide_header_with_large_length():
    data = start_32(ObjectType.OBJECT_GROUP_METADATA, length=100_000)
    assert data[4:] == compact_u64(100_000)
    header = ObjectHeader.parse(Reader(data))
    assert header.length == 100_000


def test_end_headers():
    short = ObjectHeader.parse(Reader(end_8(ObjectType.DATA_ELEMENT)))
    wide = ObjectHeader.parse(Reader(end_16(ObjectType.OBJECT_GROUP_METADATA_BLOCK)))
    assert short.is_end and short.form == HeaderForm.END_8
    assert short.object_type == ObjectType.DATA_ELEMENT
    assert wide.is_end and wide.is_wide
    assert wide.object_type == ObjectType.OBJECT_GROUP_METADATA_BLOCK


def test_unknown_object_type_is_malformed():
    with pytest.raises(MalformedHeader):
        ObjectHeader.parse(Reader(struct.pack('<H', 0x3F << 3)))
    with pytest.raises(MalformedHeader):
        ObjectHeader.parse(Reader(bytes(((0x3E << 2) | 0x1,))))


def test_parse_32_rejects_compact_header():
    with pytest.raises(MalformedHeader):
        ObjectHeader.parse_32(Reader(start_16(ObjectType.OBJECT_GROUP_DATA) + b'\x00\x00'))


def test_empty_buffer():
    with pytest.raises(UnexpectedEndOfStream):
        ObjectHeader.parse(Reader(b''))


def test_try_consume_end_matches_and_consumes():
    reader = Reader(end_8(ObjectType.OBJECT_GROUP_DATA) + b'\xFF')
    assert try_consume_end(reader, ObjectType.OBJECT_GROUP_DATA)
    assert reader.offset == 1


def test_try_consume_end_uses_wide_marker_for_wide_types():
    reader = Reader(end_16(ObjectType.OBJECT_GROUP_METADATA_BLOCK))
    assert try_consume_end(reader, ObjectType.OBJECT_GROUP_METADATA_BLOCK)
    assert reader.remaining == 0


@pytest.mark.parametrize(
    "data",
    [
        end_8(ObjectType.OBJECT_GROUP_DECLARATION),
        start_16(ObjectType.OBJECT_GROUP_DATA_OBJECT, length=5),
        start_32(ObjectType.OBJECT_GROUP_METADATA),
        end_16(ObjectType.OBJECT_GROUP_DATA),
        b'',
        bytes(((0x3E << 2) | 0x1,)),
    ],
)
def test_try_consume_end_leaves_reader_untouched_on_mismatch(data):
    reader = Reader(data)
    assert not try_consume_end(reader, ObjectType.OBJECT_GROUP_DATA)
    assert reader.offset == 0


def test_try_consume_end_wide_mismatch_rewinds():
    reader = Reader(end_16(ObjectType.OBJECT_GROUP_METADATA))
    assert not try_consume_end(reader, ObjectType.OBJECT_GROUP_METADATA_BLOCK)
    assert reader.offset == 0
