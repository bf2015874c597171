"""Extended GUIDs (MS-FSSHTTPB 2.2.1.7) and arrays of them."""

from __future__ import annotations

import uuid
from dataclasses import dataclass

from fsshttpb.errors import MalformedHeader, TruncatedArray, UnexpectedEndOfStream
from fsshttpb.reader import Reader
from fsshttpb.types.array import check_array_count
from fsshttpb.types.compact_u64 import parse_compact_u64

GUID_SIZE = 16

# Inside arrays, bit 0 of an entry's first byte marks an entry that omits
# its GUID and reuses the previous entry's.
REUSE_GUID_FLAG = 0x01


@dataclass(frozen=True, slots=True)
class ExGuid:
    """A GUID paired with a 32-bit value."""

    guid: uuid.UUID
    value: int

    @classmethod
    def nil(cls) -> ExGuid:
        return cls(uuid.UUID(int=0), 0)

    @property
    def is_nil(self) -> bool:
        return self.guid.int == 0 and self.value == 0

    def __str__(self) -> str:
        return f"{{{self.guid}}},{self.value}"

    @classmethod
    def parse(cls, reader: Reader) -> ExGuid:
        start = reader.tell()
        first = reader.read_u8()
        if first == 0:
            return cls.nil()
        value = _parse_value(reader, first, start)
        return cls(_parse_guid(reader), value)

    @classmethod
    def parse_array(cls, reader: Reader) -> tuple[ExGuid, ...]:
        """
        Read a compact count followed by that many entries.

        An entry whose first byte carries REUSE_GUID_FLAG is encoded without
        its 16 GUID bytes; it takes the GUID of the entry before it.
        """
        start = reader.tell()
        count = parse_compact_u64(reader)
        check_array_count(reader, count, min_entry_size=1, offset=start)

        values: list[ExGuid] = []
        try:
            for _ in range(count):
                entry_start = reader.tell()
                first = reader.read_u8()
                if first == 0:
                    values.append(cls.nil())
                    continue
                if not first & REUSE_GUID_FLAG:
                    value = _parse_value(reader, first, entry_start)
                    values.append(cls(_parse_guid(reader), value))
                    continue
                if not values:
                    raise MalformedHeader("First ExGuid array entry cannot reuse a GUID", entry_start)
                pattern = first & ~REUSE_GUID_FLAG
                if pattern == 0:
                    raise MalformedHeader("Nil ExGuid cannot reuse a GUID", entry_start)
                value = _parse_value(reader, pattern, entry_start)
                values.append(cls(values[-1].guid, value))
        except UnexpectedEndOfStream as exc:
            raise TruncatedArray(count, f"ExGuid array of {count} entries ends after {len(values)}", start) from exc
        return tuple(values)


def _parse_value(reader: Reader, first: int, offset: int) -> int:
    if first & 0b111 == 0b100:
        return first >> 3
    if first & 0b111111 == 0b100000:
        return (reader.read_u8() << 2) | (first >> 6)
    if first & 0b1111111 == 0b1000000:
        return (reader.read_u16() << 1) | (first >> 7)
    if first == 0x80:
        return reader.read_u32()
    raise MalformedHeader(f"Unexpected ExGuid first byte: 0b{first:08b}", offset)


def _parse_guid(reader: Reader) -> uuid.UUID:
    return uuid.UUID(bytes_le=reader.read(GUID_SIZE))
