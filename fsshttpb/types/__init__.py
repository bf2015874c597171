"""Primitive FSSHTTPB encodings shared by every stream object."""

from __future__ import annotations

from .binary_item import parse_binary_item
from .cell_id import CellId
from .compact_u64 import parse_compact_u64
from .exguid import ExGuid
from .object_types import ObjectType
from .stream_object import HeaderForm, ObjectHeader, try_consume_end

__all__ = [
    "CellId",
    "ExGuid",
    "HeaderForm",
    "ObjectHeader",
    "ObjectType",
    "parse_binary_item",
    "parse_compact_u64",
    "try_consume_end",
]
