"""Length-prefixed byte strings (MS-FSSHTTPB 2.2.1.3)."""

from __future__ import annotations

from fsshttpb.errors import LimitExceeded, UnexpectedEndOfStream
from fsshttpb.reader import Reader
from fsshttpb.types.compact_u64 import parse_compact_u64


def parse_binary_item(reader: Reader) -> bytes:
    """Read a compact length followed by that many raw bytes."""
    start = reader.tell()
    length = parse_compact_u64(reader)
    if length > reader.remaining:
        raise UnexpectedEndOfStream(length, reader.remaining, start)
    if length > reader.limits.max_blob_bytes:
        raise LimitExceeded("Binary item length", length, reader.limits.max_blob_bytes, start)
    return reader.read(length)
