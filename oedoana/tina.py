"""Reconstruction of TINA silicon/CsI telescope hits."""

from __future__ import annotations

import random
from typing import Optional, Protocol, Sequence

from oedoana.records import TinaHit, TinaHit2

N_SI_CHANNELS = 6 * 16
N_STRIPS = 16
SI_THRESHOLD = 0.1
CSI_OVERFLOW = 4000.0
MISSING_TIMING = -10000.0

_THETA = (
    9.19, 10.18, 11.19, 12.21,
    13.26, 14.33, 15.42, 16.52,
    17.65, 18.79, 19.95, 21.13,
    22.32, 23.54, 24.77, 26.00,
)
_PHI = (0.0, 60.0, 120.0, 180.0, 240.0, 300.0)

_THETA2 = (
    170.8, 169.8, 168.8, 167.8,
    166.7, 165.7, 164.6, 163.5,
    162.3, 161.2, 160.0, 158.9,
    157.7, 156.5, 155.2, 154.0,
)
_PHI2 = (75.0, 135.0, 195.0, 255.0, 315.0, 375.0)

_THETA_COVERAGE = (
    1.0, 1.0, 1.0, 1.0,
    1.0, 1.0, 1.1, 1.1,
    1.1, 1.1, 1.2, 1.2,
    1.2, 1.2, 1.2, 1.2,
)
_PHI_COVERAGE = (60.0, 60.0, 60.0, 60.0, 60.0, 60.0)


class _ChargeLike(Protocol):
    id: Optional[int]
    charge: float


class _TimingLike(Protocol):
    id: Optional[int]
    timing: float


class _Uniform(Protocol):
    def random(self) -> float: ...


def _by_channel(hits: Sequence[object], size: int, attr: str, default: float) -> list[float]:
    values = [default] * size
    for hit in hits:
        hit_id = getattr(hit, "id", None)
        if hit_id is not None and 0 <= hit_id < size:
            values[hit_id] = getattr(hit, attr)
    return values


def _first_max(values: list[float]) -> int:
    return max(range(len(values)), key=values.__getitem__)


def _smear(centre: float, width: float, rng: _Uniform) -> float:
    return centre + (rng.random() - 0.5) * width


def reconstruct_tina(
    si_hits: Sequence[_ChargeLike],
    csi_hits: Sequence[_ChargeLike],
    rng: Optional[_Uniform] = None,
) -> Optional[TinaHit]:
    """Build a hit from the largest Si deposit, adding the largest CsI deposit.

    Returns None when there are no Si hits or the largest deposit is below
    threshold. The CsI energy is added only when it does not overflow.
    """
    if not si_hits:
        return None
    rng = rng or random.Random()
    si = _by_channel(si_hits, N_SI_CHANNELS, "charge", 0.0)
    index = _first_max(si)
    si_max = si[index]
    if si_max < SI_THRESHOLD:
        return None

    strip, det = index % N_STRIPS, index // N_STRIPS
    out = TinaHit(
        energy=si_max,
        delta_e=si_max,
        theta=_smear(_THETA[strip], _THETA_COVERAGE[strip], rng),
    )
    out.phi = _smear(_PHI[det], _PHI_COVERAGE[det], rng)

    if not csi_hits:
        return out
    csi = _by_channel(csi_hits, 32, "charge", 0.0)
    csi_max = csi[_first_max(csi)]
    if csi_max > CSI_OVERFLOW:
        return out
    out.energy = si_max + csi_max
    return out


def reconstruct_tina2(
    si_hits: Sequence[_ChargeLike],
    csi_hits: Sequence[_ChargeLike],
    timing_hits: Sequence[_TimingLike],
    rng: Optional[_Uniform] = None,
) -> Optional[TinaHit2]:
    """Build a hit with timing and element ids from the largest Si deposit.

    Si channels are ranked by descending charge, ties going to the lower
    channel. Returns None when there are no Si hits or channel 0 ranks first.
    """
    if not si_hits:
        return None
    rng = rng or random.Random()
    si = _by_channel(si_hits, N_SI_CHANNELS, "charge", 0.0)
    timings = _by_channel(timing_hits, N_SI_CHANNELS, "timing", MISSING_TIMING)

    index = min(range(N_SI_CHANNELS), key=lambda i: (-si[i], i))
    if index < 0.5:
        return None
    si_max = si[index]

    strip, det = index % N_STRIPS, index // N_STRIPS
    out = TinaHit2(
        energy=si_max,
        delta_e=si_max,
        timing=timings[det],
        theta=_smear(_THETA2[strip], _THETA_COVERAGE[strip], rng),
    )
    out.phi = _smear(_PHI2[det], _PHI_COVERAGE[det], rng)
    out.deid = index

    if not csi_hits:
        return out
    csi = _by_channel(csi_hits, 6 * 2, "charge", 0.0)
    csi_index = _first_max(csi)
    csi_max = csi[csi_index]
    if csi_max > CSI_OVERFLOW:
        return out
    out.energy = si_max + csi_max
    out.eid = csi_index
    return out