"""Data element payloads."""

from __future__ import annotations

from .object_group import (
    BlobDeclaration,
    BlobReferenceData,
    ObjectChangeFrequency,
    ObjectData,
    ObjectDeclaration,
    ObjectExcludedData,
    ObjectGroup,
    ObjectGroupData,
    ObjectGroupDeclaration,
    ObjectGroupDecoder,
    ObjectGroupMetadata,
    parse_object_group,
)
from .value import DataElementType, DataElementValue

__all__ = [
    "BlobDeclaration",
    "BlobReferenceData",
    "DataElementType",
    "DataElementValue",
    "ObjectChangeFrequency",
    "ObjectData",
    "ObjectDeclaration",
    "ObjectExcludedData",
    "ObjectGroup",
    "ObjectGroupData",
    "ObjectGroupDeclaration",
    "ObjectGroupDecoder",
    "ObjectGroupMetadata",
    "parse_object_group",
]
