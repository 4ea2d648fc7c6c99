"""Decoder for SIS3301 flash-ADC event data."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

MODULE_ID = 8

MASK_GEOMETRY = 0x1FFF0000
SHIFT_GEOMETRY = 16
MASK_CHANNEL = 0x000000FF
SHIFT_CHANNEL = 0
MASK_PAGESIZE = 0x3FFFFFFF
MASK_DATA_1ST = 0x0000FFFF
SHIFT_DATA_1ST = 0
MASK_DATA_2ND = 0xFFFF0000
SHIFT_DATA_2ND = 16

_HEADER_TAG = 0x3
_TRAILER_TAG = 0x2


@dataclass
class FadcWaveform:
    """Samples of one channel, with its geometry and page information."""

    segment_id: int
    geo: int
    channel: int
    page_size: int = 0
    event_id: int = 0
    clock: int = 0
    samples: list[int] = field(default_factory=list)


class DecodeError(ValueError):
    """Raised on malformed SIS3301 data; holds the waveforms decoded so far."""

    def __init__(self, message: str, waveforms: list[FadcWaveform] | None = None):
        super().__init__(message)
        self.waveforms = list(waveforms or [])


def decode_sis3301(buffer: bytes, segment_id: int) -> list[FadcWaveform]:
    """Decode a buffer of little-endian 32-bit words into waveforms.

    Trailing bytes that do not form a whole word are ignored. A header or
    trailer that is not followed by its data block yields no waveform.
    """
    count = len(buffer) // 4
    words = struct.unpack(f"<{count}I", buffer[: count * 4])
    waveforms: list[FadcWaveform] = []
    current: FadcWaveform | None = None
    have_trailer = False
    pos = 0

    while pos < count:
        word = words[pos]
        tag = (word & 0xC0000000) >> 30
        if current is None and tag == _HEADER_TAG:
            current = FadcWaveform(
                segment_id=segment_id,
                geo=(word & MASK_GEOMETRY) >> SHIFT_GEOMETRY,
                channel=(word & MASK_CHANNEL) >> SHIFT_CHANNEL,
            )
            pos += 1
        elif current is not None and not have_trailer and tag == _TRAILER_TAG:
            current.page_size = word & MASK_PAGESIZE
            current.event_id = 0
            current.clock = 0
            have_trailer = True
            pos += 1
        elif current is not None and have_trailer:
            nwords = current.page_size // 2
            if pos + nwords > count:
                raise DecodeError(
                    f"truncated data block: need {nwords} words, {count - pos} left",
                    waveforms,
                )
            for data in words[pos : pos + nwords]:
                current.samples.append((data & MASK_DATA_1ST) >> SHIFT_DATA_1ST)
                current.samples.append((data & MASK_DATA_2ND) >> SHIFT_DATA_2ND)
            waveforms.append(current)
            pos += nwords
            current = None
            have_trailer = False
        else:
            raise DecodeError(f"unknown header 0x{word:08x}", waveforms)

    return waveforms