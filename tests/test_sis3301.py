import struct

import pytest

from oedoana.sis3301 import DecodeError, FadcWaveform, decode_sis3301


def words(*values):
    return struct.pack(f"<{len(values)}I", *values)


def test_single_waveform():
    buf = words(0xC0050003, 0x80000004, 0x00020001, 0x00040003)
    result = decode_sis3301(buf, 7)
    assert result == [
        FadcWaveform(segment_id=7, geo=5, channel=3, page_size=4, samples=[1, 2, 3, 4])
    ]


def test_sample_count_matches_page_size():
    data = [0x00010001] * 8
    buf = words(0xC0010000, 0x80000010, *data)
    (wave,) = decode_sis3301(buf, 0)
    assert len(wave.samples) == wave.page_size
    assert wave.event_id == 0 and wave.clock == 0


def test_two_waveforms_in_order():
    buf = words(
        0xC0020001, 0x80000002, 0xBBBBAAAA,
        0xC0020002, 0x80000002, 0xDDDDCCCC,
    )
    result = decode_sis3301(buf, 1)
    assert [w.channel for w in result] == [1, 2]
    assert result[0].samples == [0xAAAA, 0xBBBB]
    assert result[1].samples == [0xCCCC, 0xDDDD]


def test_zero_page_size_gives_empty_waveform():
    buf = words(0xC0030004, 0x80000000, 0xC0030005, 0x80000002, 0x00000009)
    result = decode_sis3301(buf, 0)
    assert [w.samples for w in result] == [[], [9, 0]]


def test_header_without_data_yields_nothing():
    assert decode_sis3301(words(0xC0050003, 0x80000004), 0) == []
    assert decode_sis3301(words(0xC0050003), 0) == []


def test_trailing_partial_word_ignored():
    buf = words(0xC0050003, 0x80000002, 0x00020001) + b"\x01\x02"
    (wave,) = decode_sis3301(buf, 0)
    assert wave.samples == [1, 2]


def test_unknown_header_raises_with_partial_result():
    buf = words(0xC0050003, 0x80000002, 0x00020001, 0x12345678)
    with pytest.raises(DecodeError) as info:
        decode_sis3301(buf, 0)
    assert "0x12345678" in str(info.value)
    assert [w.samples for w in info.value.waveforms] == [[1, 2]]


def test_trailer_before_header_raises():
    with pytest.raises(DecodeError):
        decode_sis3301(words(0x80000002), 0)


def test_truncated_block_raises():
    buf = words(0xC0050003, 0x80000008, 0x00020001)
    with pytest.raises(DecodeError):
        decode_sis3301(buf, 0)


def test_empty_buffer():
    assert decode_sis3301(b"", 3) == []