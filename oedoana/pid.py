"""Particle identification (A/Q and Z) from Brho, beta and energy loss."""

from __future__ import annotations

import math
from dataclasses import dataclass

ATOMIC_MASS_UNIT = 931.494  # MeV
SPEED_OF_LIGHT = 299792458.0  # m/s
_WF = 5907.5
_Z_OFFSET = 1.623
_Z_SLOPE = 7.45113


@dataclass(frozen=True)
class PidResult:
    """Mass-to-charge ratio and atomic number of one particle."""

    aq: float
    z: float


def identify(brho: float, beta: float, de: float) -> PidResult:
    """Compute A/Q from Brho (Tm) and beta, and Z from beta and energy loss.

    Z is NaN when the energy-loss term is negative.
    """
    if not 0.0 < beta < 1.0:
        raise ValueError(f"beta must lie in (0, 1), got {beta}")
    beta2 = beta * beta
    aq = brho * math.sqrt(1.0 - beta2) / beta * SPEED_OF_LIGHT / 1e6 / ATOMIC_MASS_UNIT
    de_v = math.log(_WF * beta2) - math.log(1.0 - beta2) - beta2
    ratio = de / de_v
    z = _Z_OFFSET + _Z_SLOPE * math.sqrt(ratio) * beta if ratio >= 0 else math.nan
    return PidResult(aq=aq, z=z)