# oedoana

Event-by-event analysis routines for detectors on the OEDO beamline. Each
routine takes the hits of one event and returns the reconstructed quantities.
The package is pure Python and needs nothing outside the standard library.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Modules

### `oedoana.records`

Hit records as dataclasses.

- `TriggeredListHit`: `det_id`, `adc`, `tsi_hi`, `tsi_lo`, `tsi`,
  `event_count`. `set_tsi(hi, lo)` stores both 32-bit words and the combined
  timestamp `lo + (hi << 29)`. `clear()` sets the ADC value, timestamp fields
  and event counter to zero.
- `TinaHit`, `TinaHit2` and `DaliHit`: reconstructed TINA and DALI results.
  Unfilled fields are `None`, and `clear()` sets every field back to `None`.

### `oedoana.sis3301`

`decode_sis3301(buffer, segment_id)` reads a buffer of little-endian 32-bit
words (trailing partial words are ignored) and returns a list of
`FadcWaveform` objects with `geo`, `channel`, `page_size` and `samples` (two
16-bit samples per data word). An unknown header word or a data block that
runs past the end of the buffer raises `DecodeError`, whose `waveforms`
attribute holds the waveforms decoded before the error.

### `oedoana.pid`

`identify(brho, beta, de)` returns a `PidResult` with `aq` (A/Q from Brho in
Tm and beta) and `z` (from beta and the energy loss). `z` is NaN when the
energy-loss term is negative; a `beta` outside (0, 1) raises `ValueError`.

### `oedoana.timing`

Helpers built on `TimingHit(id, timing, valid=True)`.

- `load_timing_offsets(path, count)` reads `count` numbers from a text file;
  values are separated by commas, spaces, tabs or line breaks and `#` starts
  a comment. A missing or non-numeric value raises `ValueError`.
- `anode_timing(hits, offsets, use_tsum_gate=True)` averages the first hit of
  each anode collection plus its offset, skipping invalid (when gated) and
  non-finite timings. Returns `None` if no anode contributes; raises
  `ValueError` if the numbers of collections and offsets differ.
- `find_by_id(hits, hit_id)` returns the first hit with that id, or the first
  hit when `hit_id` is `None`.
- `time_of_flight(start_hits, stop_hits, start_id=None, stop_id=None)`
  returns stop minus start timing, or `None` if a hit is missing.
- `tof_to_beta(tof, flight_length=1.0)` converts a TOF in ns over a length in
  mm to beta; a zero TOF raises `ValueError`.
- `average_timing(collections)` averages the first hit of every collection,
  returns `None` if any collection is empty, and raises `ValueError` when no
  collection is given.
- `TimeWindow(minimum, maximum, offset).validate(hits)` keeps the hits whose
  timing lies within `[offset + minimum, offset + maximum]`. A window with
  `minimum > maximum` raises `ValueError`.

### `oedoana.mapping`

Maps categorized raw data (a sequence of detectors, each a sequence of
per-data-type hit lists) onto output hits.

- `map_simple(category, data_type_id=0, sparse=True)` turns the first
  `RawHit` of each detector into a `ChargeHit`. Sparse output is ordered by
  ascending charge; otherwise hits sit at the index of their detector id.
- `map_triggered_list(category, timing_type_id=1, sparse=True)` turns each
  `TriggeredListHit` into a `TimingChargeHit` (timestamp as timing, ADC as
  charge). Sparse output is ordered by ascending timing.
- `ion_chamber_pairs(hits, num_channels=30, subtract=False)` combines
  channels `2i` and `2i+1` by sum or difference; an odd channel count raises
  `ValueError`.

### `oedoana.srppac`

`SRPPACPlane(n_strip, strip_width, center, det_offset, z, turned, verbose)`
describes one plane. `process(hits)` orders `StripHit`s by descending charge
and returns `PlaneHit`s; the leading strip carries the position, computed
from the two largest strips when they are neighbours (NaN otherwise), and a
`processed` flag. An event without strips gives one `PlaneHit` with id -1.

### `oedoana.tina`

- `reconstruct_tina(si_hits, csi_hits, rng=None)` builds a `TinaHit` from the
  largest Si deposit, adding the largest CsI deposit unless it exceeds 4000.
  Returns `None` without Si hits or below the Si threshold.
- `reconstruct_tina2(si_hits, csi_hits, timing_hits, rng=None)` builds a
  `TinaHit2` with timing and the ids of the Si and CsI elements. Returns
  `None` without Si hits or when channel 0 ranks first.

Angles are smeared over the element coverage using `rng.random()`; any object
with that method works, and a fresh `random.Random()` is used by default.

### `oedoana.dali`

`reconstruct_dali(hits)` returns a `DaliHit` with the two largest crystal
energies and their ids and the add-back sum of all crystals, or `None` when
there are no hits.

## Example

```python
from oedoana.pid import identify
from oedoana.timing import tof_to_beta

beta = tof_to_beta(tof=250.0, flight_length=46000.0)
result = identify(brho=7.0, beta=beta, de=120.0)
print(result.aq, result.z)
```

## What the package does not do

There is no event loop, no reader for run files, no output storage and no
command-line program. The caller supplies the hits of each event and decides
what to do with the results.

## Running the tests

```
pytest
```