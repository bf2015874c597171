"""Decoder metrics."""

from __future__ import annotations

from .metrics import OBJECT_GROUP_DECODE_SECONDS, OBJECT_GROUP_DECODE_TOTAL, OBJECT_GROUP_RECORDS_TOTAL

__all__ = ["OBJECT_GROUP_DECODE_SECONDS", "OBJECT_GROUP_DECODE_TOTAL", "OBJECT_GROUP_RECORDS_TOTAL"]
