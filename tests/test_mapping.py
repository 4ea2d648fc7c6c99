import pytest

from oedoana.mapping import (
    ChargeHit,
    RawHit,
    TimingChargeHit,
    ion_chamber_pairs,
    map_simple,
    map_triggered_list,
)
from oedoana.records import TriggeredListHit


def _det(*hits, type_id=0):
    det = [None] * (type_id + 1)
    det[type_id] = list(hits)
    return det


def _tl(det_id, adc, hi, lo):
    hit = TriggeredListHit(det_id=det_id, adc=adc)
    hit.set_tsi(hi, lo)
    return hit


def test_map_simple_none_category():
    assert map_simple(None) == []


def test_map_simple_sparse_sorted_by_charge():
    cat = [_det(RawHit(3, 50.0)), _det(RawHit(1, 10.0)), _det(RawHit(7, 30.0))]
    out = map_simple(cat, 0, True)
    assert [h.charge for h in out] == [10.0, 30.0, 50.0]
    assert [h.id for h in out] == [1, 7, 3]


def test_map_simple_takes_first_hit_only():
    cat = [_det(RawHit(2, 5.0), RawHit(2, 99.0))]
    out = map_simple(cat, 0, True)
    assert out == [ChargeHit(id=2, charge=5.0)]


def test_map_simple_skips_missing_type():
    cat = [_det(RawHit(1, 1.0), type_id=0), _det(RawHit(4, 2.0), type_id=2)]
    out = map_simple(cat, 2, True)
    assert out == [ChargeHit(id=4, charge=2.0)]


def test_map_simple_not_sparse_indexed_by_id():
    cat = [_det(RawHit(3, 7.0)), _det(RawHit(1, 4.0))]
    out = map_simple(cat, 0, False)
    assert len(out) == 4
    assert out[3] == ChargeHit(id=3, charge=7.0)
    assert out[1] == ChargeHit(id=1, charge=4.0)
    assert out[0] == ChargeHit()
    assert out[2] == ChargeHit()


def test_map_simple_not_sparse_duplicate_stops():
    cat = [_det(RawHit(1, 4.0)), _det(RawHit(1, 8.0)), _det(RawHit(2, 6.0))]
    out = map_simple(cat, 0, False)
    assert [h.charge for h in out] == [None, 4.0]


def test_map_triggered_list_sparse_sorted_by_timing():
    a = _tl(0, 100, 0, 500)
    b = _tl(1, 200, 1, 0)
    c = _tl(2, 300, 0, 20)
    cat = [[None, [a, b]], [None, [c]]]
    out = map_triggered_list(cat, 1, True)
    assert [h.det_id for h in out] == [2, 0, 1]
    assert out[2].timing == float(b.tsi)
    assert out[0].charge == float(c.adc)
    timings = [h.timing for h in out]
    assert timings == sorted(timings)


def test_map_triggered_list_skips_empty():
    cat = [[None, []], [None, None], [None]]
    assert map_triggered_list(cat, 1, True) == []


def test_map_triggered_list_not_sparse_later_replaces():
    first = _tl(2, 10, 0, 1)
    second = _tl(2, 20, 0, 2)
    out = map_triggered_list([[None, [first, second]]], 1, False)
    assert len(out) == 3
    assert out[2] == TimingChargeHit(det_id=2, timing=float(second.tsi), charge=20.0)
    assert out[0] == TimingChargeHit()


def test_ion_chamber_sum_and_difference():
    hits = [ChargeHit(0, 5.0), ChargeHit(1, 2.0), ChargeHit(3, 4.0)]
    summed = ion_chamber_pairs(hits, 4, False)
    diffs = ion_chamber_pairs(hits, 4, True)
    assert summed == [5.0 + 2.0, 0.0 + 4.0]
    assert diffs == [5.0 - 2.0, 0.0 - 4.0]


def test_ion_chamber_default_channel_count():
    out = ion_chamber_pairs([ChargeHit(29, 1.5)])
    assert len(out) == 15
    assert out[14] == 1.5
    assert sum(out[:14]) == 0.0


def test_ion_chamber_ignores_out_of_range():
    out = ion_chamber_pairs([ChargeHit(10, 9.0), ChargeHit(0, 1.0)], 4)
    assert out == [1.0, 0.0]


def test_ion_chamber_empty():
    assert ion_chamber_pairs([], 4) == []


def test_ion_chamber_odd_channels_rejected():
    with pytest.raises(ValueError):
        ion_chamber_pairs([ChargeHit(0, 1.0)], 5)