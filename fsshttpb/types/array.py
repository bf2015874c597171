"""Shared checks for count-prefixed arrays."""

from __future__ import annotations

from fsshttpb.errors import LimitExceeded, TruncatedArray
from fsshttpb.reader import Reader


def check_array_count(reader: Reader, count: int, min_entry_size: int, offset: int) -> None:
    """Reject counts the remaining bytes cannot hold or the limits forbid."""
    if count * min_entry_size > reader.remaining:
        raise TruncatedArray(
            count,
            f"Array declares {count} entries but only {reader.remaining} bytes remain",
            offset,
        )
    limit = reader.limits.max_array_entries
    if count > limit:
        raise LimitExceeded("Array count", count, limit, offset)
