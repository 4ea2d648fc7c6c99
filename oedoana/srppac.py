"""Position reconstruction for one plane of a strip-readout PPAC."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Optional

_log = logging.getLogger(__name__)

_CHARGE_SCALE = 12.0


@dataclass
class StripHit:
    """Calibrated charge and timing of one strip."""

    id: int
    charge: float
    timing: float


@dataclass
class PlaneHit:
    """A strip of the plane in the output.

    Only the leading (largest-charge) strip carries ``position`` and
    ``processed``; for the others they are None. An event without strips is
    reported as a single PlaneHit with id -1 and no other fields.
    """

    id: int
    charge: Optional[float] = None
    timing: Optional[float] = None
    position: Optional[float] = None
    processed: Optional[bool] = None


@dataclass
class SRPPACPlane:
    """Geometry of one SR-PPAC plane and its per-event reconstruction."""

    n_strip: int = 0
    strip_width: float = 0.0
    center: float = 0.0
    det_offset: float = 0.0
    z: float = 0.0
    turned: bool = False
    verbose: int = 0

    def _position(self, hits: list[StripHit]) -> tuple[float, bool]:
        if len(hits) < 2:
            if self.verbose:
                _log.info("multiplicity is %d, cannot process", len(hits))
            return math.nan, False
        first, second = hits[0], hits[1]
        sign = -1.0 if self.turned else 1.0
        cdiff = first.charge - second.charge
        if second.id == first.id + 1:
            shift = -cdiff / _CHARGE_SCALE * 0.5 + 0.5
        elif second.id == first.id - 1:
            shift = cdiff / _CHARGE_SCALE * 0.5 - 0.5
        else:
            if self.verbose:
                _log.info(
                    "strip #0 is %d, strip #1 is %d, cannot process",
                    first.id,
                    second.id,
                )
            return math.nan, False
        if self.verbose:
            _log.info(
                "center = %g, cdiff = %g, strip width = %g, offset = %g",
                self.center,
                cdiff,
                self.strip_width,
                self.det_offset,
            )
        position = sign * (
            (first.id - self.center + shift) * self.strip_width - self.det_offset
        )
        return position, True

    def process(self, hits: Iterable[StripHit]) -> list[PlaneHit]:
        """Order strips by descending charge and reconstruct the hit position.

        The position comes from the two largest strips when they are
        neighbours; otherwise it is NaN and the event is not processed.
        """
        ordered = sorted(hits, key=lambda h: h.charge, reverse=True)
        if not ordered:
            return [PlaneHit(id=-1)]
        position, processed = self._position(ordered)
        result = [
            PlaneHit(id=h.id, charge=h.charge, timing=h.timing) for h in ordered
        ]
        result[0].position = position
        result[0].processed = processed
        return result