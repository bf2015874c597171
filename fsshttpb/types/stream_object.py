"""Stream object headers (MS-FSSHTTPB 2.2.1.5).

The low two bits of the first byte select one of four forms:

    00  16-bit start: compound(1) type(6)  length(7)
    10  32-bit start: compound(1) type(14) length(15), 0x7FFF = compact length follows
    01  8-bit end:    type(6)
    11  16-bit end:   type(14)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from fsshttpb.errors import DecodeError, MalformedHeader, UnexpectedEndOfStream
from fsshttpb.reader import Reader
from fsshttpb.types.compact_u64 import parse_compact_u64
from fsshttpb.types.object_types import ObjectType

logger = logging.getLogger(__name__)

START_16 = 0x0
END_8 = 0x1
START_32 = 0x2
END_16 = 0x3

# Types above this do not fit the 6-bit field of the compact forms.
MAX_COMPACT_TYPE = 0x3F
_LARGE_LENGTH = 0x7FFF


class HeaderForm(Enum):
    START_16 = "start_16"
    START_32 = "start_32"
    END_8 = "end_8"
    END_16 = "end_16"


@dataclass(frozen=True, slots=True)
class ObjectHeader:
    """A decoded stream object header."""

    object_type: ObjectType
    form: HeaderForm
    compound: bool = False
    length: int = 0

    @property
    def is_end(self) -> bool:
        return self.form in (HeaderForm.END_8, HeaderForm.END_16)

    @property
    def is_wide(self) -> bool:
        return self.form in (HeaderForm.START_32, HeaderForm.END_16)

    @classmethod
    def parse(cls, reader: Reader) -> ObjectHeader:
        """Decode a header of whichever form the next byte announces."""
        first = reader.peek_u8()
        if first is None:
            raise UnexpectedEndOfStream(1, 0, reader.offset)
        header_type = first & 0b11
        if header_type == START_16:
            return cls.parse_16(reader)
        if header_type == START_32:
            return cls.parse_32(reader)
        if header_type == END_8:
            return cls.parse_end_8(reader)
        return cls.parse_end_16(reader)

    @classmethod
    def parse_16(cls, reader: Reader) -> ObjectHeader:
        start = reader.tell()
        data = reader.read_u16()
        _check_header_type(data, START_16, "16-bit start", start)
        return cls(
            object_type=_object_type((data >> 3) & 0x3F, start),
            form=HeaderForm.START_16,
            compound=bool(data & 0x4),
            length=data >> 9,
        )

    @classmethod
    def parse_32(cls, reader: Reader) -> ObjectHeader:
        start = reader.tell()
        data = reader.read_u32()
        _check_header_type(data, START_32, "32-bit start", start)
        object_type = _object_type((data >> 3) & 0x3FFF, start)
        length = data >> 17
        if length == _LARGE_LENGTH:
            length = parse_compact_u64(reader)
        return cls(
            object_type=object_type,
            form=HeaderForm.START_32,
            compound=bool(data & 0x4),
            length=length,
        )

    @classmethod
    def parse_end_8(cls, reader: Reader) -> ObjectHeader:
        start = reader.tell()
        data = reader.read_u8()
        _check_header_type(data, END_8, "8-bit end", start)
        return cls(object_type=_object_type(data >> 2, start), form=HeaderForm.END_8)

    @classmethod
    def parse_end_16(cls, reader: Reader) -> ObjectHeader:
        start = reader.tell()
        data = reader.read_u16()
        _check_header_type(data, END_16, "16-bit end", start)
        return cls(object_type=_object_type(data >> 2, start), form=HeaderForm.END_16)


def try_consume_end(reader: Reader, object_type: ObjectType) -> bool:
    """
    Consume the end marker closing a list of `object_type`, if one is next.

    The marker width follows the list type: 8-bit for types that fit six
    bits, 16-bit otherwise. On any mismatch the reader is rewound to where
    it started and False is returned, so the caller can decode the same
    bytes as an ordinary record.
    """
    start = reader.tell()
    if object_type <= MAX_COMPACT_TYPE:
        parse = ObjectHeader.parse_end_8
    else:
        parse = ObjectHeader.parse_end_16
    try:
        header = parse(reader)
    except DecodeError:
        # Not an end marker; the caller's own parse reports the real error.
        reader.seek(start)
        return False
    if header.object_type != object_type:
        reader.seek(start)
        return False
    logger.debug("End of %s at offset %d", object_type, start)
    return True


def _check_header_type(data: int, expected: int, form: str, offset: int) -> None:
    if data & 0b11 != expected:
        raise MalformedHeader(f"Expected {form} object header, got header type {data & 0b11}", offset)


def _object_type(value: int, offset: int) -> ObjectType:
    try:
        return ObjectType(value)
    except ValueError:
        raise MalformedHeader(f"Unknown stream object type 0x{value:x}", offset) from None
