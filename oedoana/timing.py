"""Timing analysis: anode averaging, time of flight, beta and time windows."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Iterable, Optional, Sequence, TypeVar

from oedoana.pid import SPEED_OF_LIGHT

_COMMENT = "#"
_DELIMITERS = re.compile(r"[,\s]+")
_FLOAT = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


@dataclass
class TimingHit:
    """A timing measurement of one detector element.

    ``valid`` is false when the hit failed its quality condition (for a PPAC
    anode, the timing-sum gate).
    """

    id: int
    timing: float
    valid: bool = True


_Hit = TypeVar("_Hit", bound=TimingHit)


@dataclass(frozen=True)
class TimeWindow:
    """Accepted timing range ``[offset + minimum, offset + maximum]``."""

    minimum: float = 0.0
    maximum: float = 0.0
    offset: float = 0.0

    def __post_init__(self) -> None:
        if self.minimum > self.maximum:
            raise ValueError("time range: min > max")

    @property
    def lower(self) -> float:
        return self.offset + self.minimum

    @property
    def upper(self) -> float:
        return self.offset + self.maximum

    def validate(self, hits: Iterable[_Hit]) -> list[_Hit]:
        """Return the hits whose timing is not outside the window, in order.

        Hits without a timing are dropped; a NaN timing is not rejected.
        """
        accepted = []
        for hit in hits:
            timing = getattr(hit, "timing", None)
            if timing is None:
                continue
            if timing < self.lower or self.upper < timing:
                continue
            accepted.append(hit)
        return accepted


def _tokens(text: str) -> Iterable[str]:
    for line in text.splitlines():
        content = line.split(_COMMENT, 1)[0]
        yield from (tok for tok in _DELIMITERS.split(content) if tok)


def load_timing_offsets(path: str | PathLike[str], count: int) -> list[float]:
    """Read ``count`` timing offsets from a parameter file.

    Values are separated by commas, spaces, tabs or line breaks; ``#`` starts
    a comment. Raises ValueError when a value is missing or not a number.
    """
    tokens = _tokens(Path(path).read_text())
    offsets = []
    for _ in range(count):
        token = next(tokens, "")
        if not _FLOAT.fullmatch(token):
            raise ValueError(f"invalid parameter value: '{token}'")
        offsets.append(float(token))
    return offsets


def anode_timing(
    hits: Sequence[Sequence[TimingHit]],
    offsets: Sequence[float],
    use_tsum_gate: bool = True,
) -> Optional[float]:
    """Average the first hit of each anode collection, each with its offset.

    Hits failing the gate (when ``use_tsum_gate``) and non-finite timings are
    skipped. Returns None when no anode gave a usable timing.
    """
    if len(hits) != len(offsets):
        raise ValueError(
            f"{len(hits)} anode collections but {len(offsets)} timing offsets"
        )
    total = 0.0
    n_valid = 0
    for collection, offset in zip(hits, offsets):
        if not collection:
            continue
        hit = collection[0]
        if use_tsum_gate and not hit.valid:
            continue
        if math.isfinite(hit.timing):
            n_valid += 1
            total += hit.timing + offset
    if not n_valid:
        return None
    return total / n_valid


def find_by_id(hits: Iterable[_Hit], hit_id: Optional[int]) -> Optional[_Hit]:
    """Return the first hit with ``hit_id``, or the first hit if ``hit_id`` is None."""
    for hit in hits:
        if hit_id is None or hit.id == hit_id:
            return hit
    return None


def time_of_flight(
    start_hits: Iterable[TimingHit],
    stop_hits: Iterable[TimingHit],
    start_id: Optional[int] = None,
    stop_id: Optional[int] = None,
) -> Optional[float]:
    """Return stop minus start timing, or None if either hit is missing."""
    start = find_by_id(start_hits, start_id)
    stop = find_by_id(stop_hits, stop_id)
    if start is None or stop is None:
        return None
    return stop.timing - start.timing


def tof_to_beta(tof: float, flight_length: float = 1.0) -> float:
    """Velocity in units of c from a time of flight (ns) over a length (mm)."""
    if tof == 0:
        raise ValueError("time of flight must be non-zero")
    return flight_length / (tof * SPEED_OF_LIGHT) * 1e6


def average_timing(collections: Sequence[Sequence[TimingHit]]) -> Optional[float]:
    """Mean timing of the first hit of every collection.

    Returns None as soon as one collection is empty; raises ValueError when
    no collection is given.
    """
    if not collections:
        raise ValueError("at least one input is required")
    timings = []
    for collection in collections:
        if not collection:
            return None
        timings.append(collection[0].timing)
    return sum(timings) / len(timings)