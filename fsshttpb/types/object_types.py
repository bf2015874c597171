"""Stream object type tags (MS-FSSHTTPB 2.2.1.5.1)."""

from __future__ import annotations

from enum import IntEnum


class ObjectType(IntEnum):
    DATA_ELEMENT = 0x01
    OBJECT_DATA_BLOB = 0x02
    OBJECT_GROUP_DATA_EXCLUDED = 0x03
    WATERLINE_KNOWLEDGE_ENTRY = 0x04
    OBJECT_GROUP_DATA_BLOB = 0x05
    DATA_ELEMENT_HASH = 0x06
    STORAGE_MANIFEST_ROOT = 0x07
    REVISION_MANIFEST_ROOT = 0x0A
    CELL_MANIFEST = 0x0B
    STORAGE_MANIFEST = 0x0C
    STORAGE_INDEX_REVISION_MAPPING = 0x0D
    STORAGE_INDEX_CELL_MAPPING = 0x0E
    CELL_KNOWLEDGE_RANGE = 0x0F
    KNOWLEDGE = 0x10
    STORAGE_INDEX_MANIFEST_MAPPING = 0x11
    CELL_KNOWLEDGE = 0x14
    DATA_ELEMENT_PACKAGE = 0x15
    OBJECT_GROUP_DATA_OBJECT = 0x16
    CELL_KNOWLEDGE_ENTRY = 0x17
    OBJECT_GROUP_OBJECT = 0x18
    REVISION_MANIFEST_GROUP_REFERENCE = 0x19
    REVISION_MANIFEST = 0x1A
    OBJECT_GROUP_BLOB_REFERENCE = 0x1C
    OBJECT_GROUP_DECLARATION = 0x1D
    OBJECT_GROUP_DATA = 0x1E
    WATERLINE_KNOWLEDGE = 0x29
    CONTENT_TAG_KNOWLEDGE = 0x2D
    CONTENT_TAG_KNOWLEDGE_ENTRY = 0x2E
    DATA_ELEMENT_FRAGMENT = 0x6A
    OBJECT_GROUP_METADATA = 0x78
    OBJECT_GROUP_METADATA_BLOCK = 0x79

    def __str__(self) -> str:
        return f"{self.name}(0x{self.value:x})"
