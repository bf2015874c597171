"""Typed payloads carried by data elements (MS-FSSHTTPB 2.2.1.12)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from fsshttpb.data_element.object_group import ObjectGroup, parse_object_group
from fsshttpb.reader import Reader


class DataElementType(IntEnum):
    STORAGE_INDEX = 0x01
    STORAGE_MANIFEST = 0x02
    CELL_MANIFEST = 0x03
    REVISION_MANIFEST = 0x04
    OBJECT_GROUP = 0x05
    DATA_ELEMENT_FRAGMENT = 0x06
    OBJECT_DATA_BLOB = 0x0A


@dataclass(frozen=True, slots=True)
class DataElementValue:
    """
    The decoded payload of one data element.

    Only object groups are decoded here; the envelope that determines the
    element type is read by the caller.
    """

    element_type: DataElementType
    object_group: ObjectGroup | None = None

    @classmethod
    def parse_object_group(cls, reader: Reader) -> DataElementValue:
        return cls(DataElementType.OBJECT_GROUP, object_group=parse_object_group(reader))
