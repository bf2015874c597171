"""Decoder limits loaded from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_MAX_ARRAY_ENTRIES = 1_000_000
DEFAULT_MAX_BLOB_BYTES = 256 * 1024 * 1024


@dataclass(frozen=True)
class DecoderLimits:
    """Upper bounds applied to counts and lengths read from the stream."""

    max_array_entries: int = DEFAULT_MAX_ARRAY_ENTRIES
    max_blob_bytes: int = DEFAULT_MAX_BLOB_BYTES


def limits_from_env() -> DecoderLimits:
    """Read limits from FSSHTTPB_MAX_ARRAY_ENTRIES/FSSHTTPB_MAX_BLOB_BYTES."""
    max_entries = _positive_int(os.getenv("FSSHTTPB_MAX_ARRAY_ENTRIES"), DEFAULT_MAX_ARRAY_ENTRIES)
    max_blob = _positive_int(os.getenv("FSSHTTPB_MAX_BLOB_BYTES"), DEFAULT_MAX_BLOB_BYTES)
    return DecoderLimits(max_array_entries=max_entries, max_blob_bytes=max_blob)


def _positive_int(value: str | None, default: int) -> int:
    if value is None:
        return default
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return default
    return parsed if parsed > 0 else default
