"""Prometheus metrics for object group decoding."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

OBJECT_GROUP_DECODE_TOTAL = Counter(
    "fsshttpb_object_group_decode_total",
    "Object group decode attempts by outcome",
    ["outcome"],
)
OBJECT_GROUP_RECORDS_TOTAL = Counter(
    "fsshttpb_object_group_records_total",
    "Object group records decoded by kind",
    ["kind"],
)
OBJECT_GROUP_DECODE_SECONDS = Histogram(
    "fsshttpb_object_group_decode_seconds",
    "Time taken to decode one object group",
    buckets=(0.00001, 0.0001, 0.001, 0.01, 0.1, 1.0, float("inf")),
)
