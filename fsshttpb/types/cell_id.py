"""Cell IDs (MS-FSSHTTPB 2.2.1.10): two consecutive ExGuids."""

from __future__ import annotations

from dataclasses import dataclass

from fsshttpb.errors import TruncatedArray, UnexpectedEndOfStream
from fsshttpb.reader import Reader
from fsshttpb.types.array import check_array_count
from fsshttpb.types.compact_u64 import parse_compact_u64
from fsshttpb.types.exguid import ExGuid


@dataclass(frozen=True, slots=True)
class CellId:
    id: ExGuid
    extra: ExGuid

    def __str__(self) -> str:
        return f"({self.id}, {self.extra})"

    @classmethod
    def parse(cls, reader: Reader) -> CellId:
        first = ExGuid.parse(reader)
        second = ExGuid.parse(reader)
        return cls(first, second)

    @classmethod
    def parse_array(cls, reader: Reader) -> tuple[CellId, ...]:
        start = reader.tell()
        count = parse_compact_u64(reader)
        check_array_count(reader, count, min_entry_size=2, offset=start)

        values: list[CellId] = []
        try:
            for _ in range(count):
                values.append(cls.parse(reader))
        except UnexpectedEndOfStream as exc:
            raise TruncatedArray(count, f"CellId array of {count} entries ends after {len(values)}", start) from exc
        return tuple(values)
