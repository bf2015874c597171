"""Variable-width unsigned integers (MS-FSSHTTPB 2.2.1.1)."""

from __future__ import annotations

from fsshttpb.reader import Reader

# 0x80 on its own is followed by a full 64-bit value.
_U64_TAG = 0x80


def parse_compact_u64(reader: Reader) -> int:
    """
    Decode one compact unsigned integer.

    A zero first byte is the value 0. Otherwise the position k of the lowest
    set bit selects a (k + 1)-byte little-endian word carrying a value in its
    upper bits, so 1..7 byte forms hold 7, 14, ... 49-bit values.
    """
    first = reader.read_u8()
    if first == 0:
        return 0
    if first == _U64_TAG:
        return reader.read_u64()

    width = (first & -first).bit_length()
    rest = reader.read(width - 1)
    return int.from_bytes(bytes((first,)) + rest, "little") >> width
