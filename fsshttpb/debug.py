"""JSON summaries of decoded object groups.

Inline payloads are summarized by their size so that dumps of large groups
stay readable.
"""

from __future__ import annotations

from typing import Any

import orjson

from fsshttpb.data_element.object_group import (
    BlobDeclaration,
    BlobReferenceData,
    ObjectData,
    ObjectDeclaration,
    ObjectExcludedData,
    ObjectGroup,
    ObjectGroupData,
    ObjectGroupDeclaration,
)
from fsshttpb.types import CellId


def describe(group: ObjectGroup) -> dict[str, Any]:
    """Return a JSON-ready description of `group`."""
    return {
        "declarations": [_describe_declaration(item) for item in group.declarations],
        "metadata": [{"change_frequency": item.change_frequency.name} for item in group.metadata],
        "data": [_describe_data(item) for item in group.data],
    }


def dumps(group: ObjectGroup, *, indent: bool = False) -> bytes:
    option = orjson.OPT_INDENT_2 if indent else 0
    return orjson.dumps(describe(group), option=option)


def _describe_declaration(declaration: ObjectGroupDeclaration) -> dict[str, Any]:
    if isinstance(declaration, ObjectDeclaration):
        return {
            "type": "object",
            "object_id": str(declaration.object_id),
            "partition_id": declaration.partition_id,
            "data_size": declaration.data_size,
            "object_reference_count": declaration.object_reference_count,
            "cell_reference_count": declaration.cell_reference_count,
        }
    if isinstance(declaration, BlobDeclaration):
        return {
            "type": "blob",
            "object_id": str(declaration.object_id),
            "blob_id": str(declaration.blob_id),
            "partition_id": declaration.partition_id,
            "object_reference_count": declaration.object_reference_count,
            "cell_reference_count": declaration.cell_reference_count,
        }
    raise TypeError(f"Unsupported declaration {type(declaration).__name__}")


def _describe_data(record: ObjectGroupData) -> dict[str, Any]:
    common = {
        "objects": [str(item) for item in record.objects],
        "cells": [_describe_cell(item) for item in record.cells],
    }
    if isinstance(record, ObjectData):
        return {"type": "object", **common, "data": f"{len(record.data)} bytes"}
    if isinstance(record, ObjectExcludedData):
        return {"type": "object_excluded", **common, "size": record.size}
    if isinstance(record, BlobReferenceData):
        return {"type": "blob_reference", **common, "blob": str(record.blob)}
    raise TypeError(f"Unsupported data record {type(record).__name__}")


def _describe_cell(cell: CellId) -> list[str]:
    return [str(cell.id), str(cell.extra)]
