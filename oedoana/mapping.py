"""Mapping of categorized raw data into charge and timing hits."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, TypeVar

from oedoana.records import TriggeredListHit

_T = TypeVar("_T")

Detector = Sequence[Optional[Sequence[object]]]
Category = Sequence[Detector]


@dataclass
class RawHit:
    """A raw digitizer value belonging to one detector element."""

    det_id: int
    value: float


@dataclass
class ChargeHit:
    """A charge measurement; ``id`` is None for an unfilled slot."""

    id: Optional[int] = None
    charge: Optional[float] = None


@dataclass
class TimingChargeHit:
    """A timing and charge measurement; fields are None for an unfilled slot."""

    det_id: Optional[int] = None
    timing: Optional[float] = None
    charge: Optional[float] = None


def _data_of(detector: Detector, type_id: int) -> Sequence[object]:
    if not 0 <= type_id < len(detector):
        return ()
    return detector[type_id] or ()


def _place(slots: list[Optional[_T]], index: int, item: _T) -> None:
    if index < 0:
        raise IndexError(f"negative slot index {index}")
    if index >= len(slots):
        slots.extend([None] * (index + 1 - len(slots)))
    slots[index] = item


def map_simple(
    category: Optional[Category], data_type_id: int = 0, sparse: bool = True
) -> list[ChargeHit]:
    """Map the first raw hit of each detector to a charge hit.

    Sparse output holds the hits ordered by ascending charge. Otherwise each
    hit sits at the index given by its detector id, empty slots holding an
    unfilled ChargeHit; a second hit for an occupied id ends the mapping.
    """
    if not category:
        return []
    slots: list[Optional[ChargeHit]] = []
    for detector in category:
        data = _data_of(detector, data_type_id)
        if not data:
            continue
        hit: RawHit = data[0]  # type: ignore[assignment]
        index = len(slots) if sparse else hit.det_id
        if not sparse and index < len(slots) and slots[index] is not None:
            break
        _place(slots, index, ChargeHit(id=hit.det_id, charge=hit.value))

    if sparse:
        return sorted((s for s in slots if s is not None), key=lambda h: h.charge)
    return [s if s is not None else ChargeHit() for s in slots]


def map_triggered_list(
    category: Optional[Category], timing_type_id: int = 1, sparse: bool = True
) -> list[TimingChargeHit]:
    """Map every triggered-list hit to a timing (timestamp) and charge (ADC) hit.

    Sparse output is ordered by ascending timing. Otherwise each hit sits at
    the index of its detector id, a later hit replacing an earlier one, and
    empty slots hold an unfilled TimingChargeHit.
    """
    if not category:
        return []
    slots: list[Optional[TimingChargeHit]] = []
    for detector in category:
        for hit in _data_of(detector, timing_type_id):
            assert isinstance(hit, TriggeredListHit)
            index = len(slots) if sparse else hit.det_id
            _place(
                slots,
                index,
                TimingChargeHit(
                    det_id=hit.det_id, timing=float(hit.tsi), charge=float(hit.adc)
                ),
            )

    if sparse:
        return sorted((s for s in slots if s is not None), key=lambda h: h.timing)
    return [s if s is not None else TimingChargeHit() for s in slots]


def ion_chamber_pairs(
    hits: Sequence[ChargeHit], num_channels: int = 30, subtract: bool = False
) -> list[float]:
    """Combine ion-chamber channels pairwise (2i, 2i+1) by sum or difference.

    Element ``i`` of the result belongs to pair ``i``. Channels without a hit
    count as zero; hits with an id outside the channel range are ignored.
    """
    if num_channels % 2:
        raise ValueError(f"number of channels must be even, got {num_channels}")
    if not hits:
        return []
    charges = [0.0] * num_channels
    for hit in hits:
        if hit.id is not None and 0 <= hit.id < num_channels:
            charges[hit.id] = hit.charge
    pairs = zip(charges[0::2], charges[1::2])
    if subtract:
        return [a - b for a, b in pairs]
    return [a + b for a, b in pairs]