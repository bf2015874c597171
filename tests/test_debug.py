import orjson

from fsshttpb.data_element import parse_object_group
from fsshttpb.debug import describe, dumps
from fsshttpb.reader import Reader
from wire import (
    GUID_A,
    GUID_B,
    blob_declaration,
    cell_id,
    cell_id_array,
    data_blob_reference,
    data_excluded,
    data_object,
    exguid,
    metadata_entry,
    object_declaration,
    object_group,
)


def _group():
    data = object_group(
        [
            object_declaration(exguid(GUID_A, 1), data_size=5),
            blob_declaration(exguid(GUID_A, 2), exguid(GUID_B, 3)),
            object_declaration(exguid(GUID_A, 4), data_size=8),
        ],
        [
            data_object(b'hello', cells=cell_id_array(cell_id(exguid(GUID_B, 1), exguid()))),
            data_blob_reference(exguid(GUID_B, 3)),
            data_excluded(8),
        ],
        metadata=[metadata_entry(1), metadata_entry(2), metadata_entry(3)],
    )
    return parse_object_group(Reader(data))


def test_describe_summarizes_payloads():
    summary = describe(_group())

    assert summary["declarations"][0] == {
        "type": "object",
        "object_id": "{01010101-0101-0101-0101-010101010101},1",
        "partition_id": 0,
        "data_size": 5,
        "object_reference_count": 0,
        "cell_reference_count": 0,
    }
    assert summary["declarations"][1]["type"] == "blob"
    assert summary["declarations"][1]["blob_id"] == "{02020202-0202-0202-0202-020202020202},3"
    assert [m["change_frequency"] for m in summary["metadata"]] == ["FREQUENT", "INFREQUENT", "INDEPENDENT"]
    assert summary["data"][0]["data"] == "5 bytes"
    assert summary["data"][0]["cells"] == [
        [
            "{02020202-0202-0202-0202-020202020202},1",
            "{00000000-0000-0000-0000-000000000000},0",
        ]
    ]
    assert summary["data"][1] == {
        "type": "blob_reference",
        "objects": [],
        "cells": [],
        "blob": "{02020202-0202-0202-0202-020202020202},3",
    }
    assert summary["data"][2]["size"] == 8


def test_dumps_round_trips_through_orjson():
    group = _group()
    assert orjson.loads(dumps(group)) == describe(group)
    assert dumps(group, indent=True).count(b"\n") > 1
