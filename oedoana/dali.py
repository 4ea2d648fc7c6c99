"""Reconstruction of DALI gamma-ray events."""

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from oedoana.records import DaliHit

N_CRYSTALS = 256
_THETA = 9.19


class _ChargeLike(Protocol):
    id: Optional[int]
    charge: float


def reconstruct_dali(hits: Sequence[_ChargeLike]) -> Optional[DaliHit]:
    """Report the two largest crystal deposits and the add-back sum.

    Crystals are ranked by descending energy, ties going to the lower id.
    Hits with an id outside the crystal range are ignored. Returns None when
    there are no hits.
    """
    if not hits:
        return None
    energies = [0.0] * N_CRYSTALS
    addback = 0.0
    for hit in hits:
        if hit.id is not None and 0 <= hit.id < N_CRYSTALS:
            energies[hit.id] = hit.charge
            addback += hit.charge

    first, second = sorted(range(N_CRYSTALS), key=lambda i: (-energies[i], i))[:2]
    return DaliHit(
        energy1=energies[first],
        energy2=energies[second],
        pos1=first,
        pos2=second,
        theta=_THETA,
        total_e=addback,
    )