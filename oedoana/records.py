"""Per-event detector records: triggered-list hits and TINA/DALI results.

Fields that have not been filled for the current event hold ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF
_TSI_HI_SHIFT = 29


@dataclass
class TriggeredListHit:
    """One hit of a triggered-list digitizer: ADC value and timestamp."""

    det_id: Optional[int] = None
    adc: int = 0
    tsi_hi: int = 0
    tsi_lo: int = 0
    tsi: int = 0
    event_count: int = 0

    def set_tsi(self, hi: int, lo: int) -> None:
        """Store both timestamp words and the combined 64-bit timestamp."""
        self.tsi_hi = hi & _UINT32
        self.tsi_lo = lo & _UINT32
        self.tsi = (self.tsi_lo + (self.tsi_hi << _TSI_HI_SHIFT)) & _UINT64

    def clear(self) -> None:
        """Reset the ADC value, timestamp and event counter to zero."""
        self.adc = 0
        self.tsi_hi = 0
        self.tsi_lo = 0
        self.tsi = 0
        self.event_count = 0


@dataclass
class TinaHit:
    """Reconstructed TINA telescope hit."""

    id: Optional[int] = None
    energy: Optional[float] = None
    delta_e: Optional[float] = None
    theta: Optional[float] = None
    phi: Optional[float] = None

    def clear(self) -> None:
        """Mark every field as unset."""
        self.id = None
        self.energy = None
        self.delta_e = None
        self.theta = None
        self.phi = None


@dataclass
class TinaHit2:
    """Reconstructed TINA hit with timing and the ids of the hit elements."""

    id: Optional[int] = None
    energy: Optional[float] = None
    delta_e: Optional[float] = None
    timing: Optional[float] = None
    theta: Optional[float] = None
    phi: Optional[float] = None
    deid: Optional[float] = None
    eid: Optional[float] = None

    def clear(self) -> None:
        """Mark every field as unset."""
        self.id = None
        self.energy = None
        self.delta_e = None
        self.timing = None
        self.theta = None
        self.phi = None
        self.deid = None
        self.eid = None


@dataclass
class DaliHit:
    """Reconstructed DALI gamma event: two largest deposits and their sum."""

    id: Optional[int] = None
    energy1: Optional[float] = None
    energy2: Optional[float] = None
    total_e: Optional[float] = None
    theta: Optional[float] = None
    pos1: Optional[int] = None
    pos2: Optional[int] = None

    def clear(self) -> None:
        """Mark every field as unset."""
        self.id = None
        self.energy1 = None
        self.energy2 = None
        self.total_e = None
        self.theta = None
        self.pos1 = None
        self.pos2 = None