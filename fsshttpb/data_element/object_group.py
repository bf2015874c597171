"""Object group data elements (MS-FSSHTTPB 2.2.1.12.6).

An object group is three end-marker terminated lists: the declarations,
an optional metadata block, and the data records. Declaration i describes
data record i; that correspondence is left to the consumer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Union

from fsshttpb.errors import DecodeError, InvalidEnumValue, UnexpectedObjectType
from fsshttpb.monitoring.metrics import (
    OBJECT_GROUP_DECODE_SECONDS,
    OBJECT_GROUP_DECODE_TOTAL,
    OBJECT_GROUP_RECORDS_TOTAL,
)
from fsshttpb.reader import Reader
from fsshttpb.types import (
    CellId,
    ExGuid,
    ObjectHeader,
    ObjectType,
    parse_binary_item,
    parse_compact_u64,
    try_consume_end,
)
from fsshttpb.types.stream_object import END_8

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ObjectDeclaration:
    """Declares an object whose payload travels inline in the data block."""

    object_id: ExGuid
    partition_id: int
    data_size: int
    object_reference_count: int
    cell_reference_count: int


@dataclass(frozen=True, slots=True)
class BlobDeclaration:
    """Declares an object whose payload lives in a separate blob."""

    object_id: ExGuid
    blob_id: ExGuid
    partition_id: int
    object_reference_count: int
    cell_reference_count: int


ObjectGroupDeclaration = Union[ObjectDeclaration, BlobDeclaration]


class ObjectChangeFrequency(IntEnum):
    UNKNOWN = 0
    FREQUENT = 1
    INFREQUENT = 2
    INDEPENDENT = 3
    CUSTOM = 4

    @classmethod
    def parse(cls, value: int, offset: int | None = None) -> ObjectChangeFrequency:
        try:
            return cls(value)
        except ValueError:
            raise InvalidEnumValue("change frequency", value, offset) from None


@dataclass(frozen=True, slots=True)
class ObjectGroupMetadata:
    change_frequency: ObjectChangeFrequency


@dataclass(frozen=True, slots=True)
class ObjectData:
    """Inline object payload."""

    objects: tuple[ExGuid, ...]
    cells: tuple[CellId, ...]
    data: bytes

    def __repr__(self) -> str:
        return f"ObjectData(objects={self.objects!r}, cells={self.cells!r}, data=<{len(self.data)} bytes>)"


@dataclass(frozen=True, slots=True)
class ObjectExcludedData:
    """Object whose payload was left out of this stream."""

    objects: tuple[ExGuid, ...]
    cells: tuple[CellId, ...]
    size: int


@dataclass(frozen=True, slots=True)
class BlobReferenceData:
    """Object whose payload is held by the referenced blob."""

    objects: tuple[ExGuid, ...]
    cells: tuple[CellId, ...]
    blob: ExGuid


ObjectGroupData = Union[ObjectData, ObjectExcludedData, BlobReferenceData]

_DATA_KINDS = {
    ObjectData: "data_object",
    ObjectExcludedData: "data_excluded",
    BlobReferenceData: "data_blob_reference",
}


@dataclass(frozen=True, slots=True)
class ObjectGroup:
    declarations: tuple[ObjectGroupDeclaration, ...]
    metadata: tuple[ObjectGroupMetadata, ...]
    data: tuple[ObjectGroupData, ...]


def parse_object_group(reader: Reader) -> ObjectGroup:
    """
    Decode an object group starting at its declarations header.

    Any structural problem raises a DecodeError; nothing is returned for a
    partially decoded group.
    """
    start = reader.tell()
    with OBJECT_GROUP_DECODE_SECONDS.time():
        try:
            group = ObjectGroupDecoder(reader).decode()
        except DecodeError as exc:
            OBJECT_GROUP_DECODE_TOTAL.labels(outcome=type(exc).__name__).inc()
            logger.debug("Object group at offset %d failed to decode: %s", start, exc)
            raise
    OBJECT_GROUP_DECODE_TOTAL.labels(outcome="ok").inc()
    _count_records(group)
    return group


def _count_records(group: ObjectGroup) -> None:
    for declaration in group.declarations:
        kind = "object" if isinstance(declaration, ObjectDeclaration) else "blob"
        OBJECT_GROUP_RECORDS_TOTAL.labels(kind=kind).inc()
    if group.metadata:
        OBJECT_GROUP_RECORDS_TOTAL.labels(kind="metadata").inc(len(group.metadata))
    for record in group.data:
        OBJECT_GROUP_RECORDS_TOTAL.labels(kind=_DATA_KINDS[type(record)]).inc()


class ObjectGroupDecoder:
    """Walks the declaration, metadata and data lists of one object group."""

    def __init__(self, reader: Reader):
        self._reader = reader

    def decode(self) -> ObjectGroup:
        declarations = self._parse_declarations()

        metadata: tuple[ObjectGroupMetadata, ...] = ()
        header = self._read_header(ObjectType.OBJECT_GROUP_METADATA_BLOCK, ObjectType.OBJECT_GROUP_DATA)
        if header.object_type == ObjectType.OBJECT_GROUP_METADATA_BLOCK:
            metadata = self._parse_metadata()
            self._read_header(ObjectType.OBJECT_GROUP_DATA)

        data = self._parse_data()

        self._expect_end(ObjectType.DATA_ELEMENT)
        logger.debug(
            "Decoded object group: %d declarations, %d metadata entries, %d data records",
            len(declarations),
            len(metadata),
            len(data),
        )
        return ObjectGroup(declarations=declarations, metadata=metadata, data=data)

    def _parse_declarations(self) -> tuple[ObjectGroupDeclaration, ...]:
        reader = self._reader
        self._read_header(ObjectType.OBJECT_GROUP_DECLARATION)

        declarations: list[ObjectGroupDeclaration] = []
        while not try_consume_end(reader, ObjectType.OBJECT_GROUP_DECLARATION):
            header = self._read_header(ObjectType.OBJECT_GROUP_OBJECT, ObjectType.OBJECT_GROUP_DATA_BLOB)
            if header.object_type == ObjectType.OBJECT_GROUP_OBJECT:
                declarations.append(
                    ObjectDeclaration(
                        object_id=ExGuid.parse(reader),
                        partition_id=parse_compact_u64(reader),
                        data_size=parse_compact_u64(reader),
                        object_reference_count=parse_compact_u64(reader),
                        cell_reference_count=parse_compact_u64(reader),
                    )
                )
            else:
                declarations.append(
                    BlobDeclaration(
                        object_id=ExGuid.parse(reader),
                        blob_id=ExGuid.parse(reader),
                        partition_id=parse_compact_u64(reader),
                        object_reference_count=parse_compact_u64(reader),
                        cell_reference_count=parse_compact_u64(reader),
                    )
                )
        return tuple(declarations)

    def _parse_metadata(self) -> tuple[ObjectGroupMetadata, ...]:
        reader = self._reader
        entries: list[ObjectGroupMetadata] = []
        while not try_consume_end(reader, ObjectType.OBJECT_GROUP_METADATA_BLOCK):
            self._read_header(ObjectType.OBJECT_GROUP_METADATA, wide=True)
            offset = reader.tell()
            frequency = ObjectChangeFrequency.parse(parse_compact_u64(reader), offset)
            entries.append(ObjectGroupMetadata(change_frequency=frequency))
        return tuple(entries)

    def _parse_data(self) -> tuple[ObjectGroupData, ...]:
        reader = self._reader
        records: list[ObjectGroupData] = []
        while not try_consume_end(reader, ObjectType.OBJECT_GROUP_DATA):
            header = self._read_header(
                ObjectType.OBJECT_GROUP_DATA_EXCLUDED,
                ObjectType.OBJECT_GROUP_DATA_OBJECT,
                ObjectType.OBJECT_GROUP_BLOB_REFERENCE,
            )
            objects = ExGuid.parse_array(reader)
            cells = CellId.parse_array(reader)
            if header.object_type == ObjectType.OBJECT_GROUP_DATA_EXCLUDED:
                records.append(ObjectExcludedData(objects, cells, size=parse_compact_u64(reader)))
            elif header.object_type == ObjectType.OBJECT_GROUP_DATA_OBJECT:
                records.append(ObjectData(objects, cells, data=parse_binary_item(reader)))
            else:
                records.append(BlobReferenceData(objects, cells, blob=ExGuid.parse(reader)))
        return tuple(records)

    def _read_header(self, *allowed: ObjectType, wide: bool = False) -> ObjectHeader:
        """Read a start header and reject anything not in `allowed`."""
        offset = self._reader.tell()
        header = ObjectHeader.parse_32(self._reader) if wide else ObjectHeader.parse(self._reader)
        if header.is_end or header.object_type not in allowed:
            actual = f"end of {header.object_type}" if header.is_end else header.object_type
            raise UnexpectedObjectType(actual, allowed, offset)
        return header

    def _expect_end(self, object_type: ObjectType) -> None:
        """Read the 8-bit end marker that must close `object_type`."""
        offset = self._reader.tell()
        first = self._reader.peek_u8()
        if first is None or first & 0b11 != END_8:
            header = ObjectHeader.parse(self._reader)
            actual = f"end of {header.object_type}" if header.is_end else header.object_type
            raise UnexpectedObjectType(actual, (f"end of {object_type}",), offset)
        header = ObjectHeader.parse_end_8(self._reader)
        if header.object_type != object_type:
            raise UnexpectedObjectType(f"end of {header.object_type}", (f"end of {object_type}",), offset)
