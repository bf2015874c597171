"""Decoder for FSSHTTPB object group data elements."""

from __future__ import annotations

from .config import DecoderLimits, limits_from_env
from .data_element import (
    BlobDeclaration,
    BlobReferenceData,
    DataElementType,
    DataElementValue,
    ObjectChangeFrequency,
    ObjectData,
    ObjectDeclaration,
    ObjectExcludedData,
    ObjectGroup,
    ObjectGroupMetadata,
    parse_object_group,
)
from .errors import (
    DecodeError,
    InvalidEnumValue,
    LimitExceeded,
    MalformedHeader,
    TruncatedArray,
    UnexpectedEndOfStream,
    UnexpectedObjectType,
)
from .reader import Reader
from .types import CellId, ExGuid

__all__ = [
    "BlobDeclaration",
    "BlobReferenceData",
    "CellId",
    "DataElementType",
    "DataElementValue",
    "DecodeError",
    "DecoderLimits",
    "ExGuid",
    "InvalidEnumValue",
    "LimitExceeded",
    "MalformedHeader",
    "ObjectChangeFrequency",
    "ObjectData",
    "ObjectDeclaration",
    "ObjectExcludedData",
    "ObjectGroup",
    "ObjectGroupMetadata",
    "Reader",
    "TruncatedArray",
    "UnexpectedEndOfStream",
    "UnexpectedObjectType",
    "limits_from_env",
    "parse_object_group",
]
