import pytest

from fsshttpb.config import DecoderLimits
from fsshttpb.errors import LimitExceeded, MalformedHeader, TruncatedArray
from fsshttpb.reader import Reader
from fsshttpb.types import CellId, ExGuid
from wire import GUID_A, GUID_B, cell_id, cell_id_array, compact_u64, exguid


def test_cell_id_is_two_exguids():
    reader = Reader(cell_id(exguid(GUID_A, 1), exguid(GUID_B, 2)))
    parsed = CellId.parse(reader)
    assert parsed == CellId(ExGuid(GUID_A, 1), ExGuid(GUID_B, 2))
    assert parsed.id.value == 1
    assert parsed.extra.guid == GUID_B
    assert reader.remaining == 0


def test_array_of_cells():
    data = cell_id_array(
        cell_id(exguid(GUID_A, 1), exguid()),
        cell_id(exguid(), exguid(GUID_B, 40)),
    )
    cells = CellId.parse_array(Reader(data))
    assert cells == (
        CellId(ExGuid(GUID_A, 1), ExGuid.nil()),
        CellId(ExGuid.nil(), ExGuid(GUID_B, 40)),
    )


def test_cells_do_not_accept_guid_reuse():
    data = cell_id_array(cell_id(exguid(GUID_A, 1), exguid(value=2, reuse=True)))
    with pytest.raises(MalformedHeader):
        CellId.parse_array(Reader(data))


def test_count_needs_two_bytes_per_cell():
    data = compact_u64(3) + b'\x00' * 5
    with pytest.raises(TruncatedArray):
        CellId.parse_array(Reader(data))


def test_cell_cut_short_inside_array():
    data = cell_id_array(cell_id(exguid(GUID_A, 1), exguid(GUID_B, 1)))[:-1]
    with pytest.raises(TruncatedArray):
        CellId.parse_array(Reader(data))


def test_oversized_count_in_short_buffer_is_truncation():
    data = compact_u64(2_000_000) + b'\x00\x00\x00'
    with pytest.raises(TruncatedArray) as excinfo:
        CellId.parse_array(Reader(data))
    assert excinfo.value.count == 2_000_000


def test_count_above_limit_that_fits_the_buffer():
    data = cell_id_array(*[cell_id(exguid(), exguid())] * 3)
    with pytest.raises(LimitExceeded):
        CellId.parse_array(Reader(data, limits=DecoderLimits(max_array_entries=2)))
