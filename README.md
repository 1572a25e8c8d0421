# squeezer

The signal-processing parts of a general-purpose audio dynamic range
compressor, in pure Python with no dependencies.

## Modules

### `squeezer.side_chain`

`SideChain(sample_rate)` computes the gain reduction of one channel from
input levels given in decibels.

- `process_sample(input_level)` feeds one level through the gain computer,
  an RMS level-detection filter and the selected envelope detector.
- `gain_reduction(auto_makeup_gain)` returns the current gain reduction in
  decibels, passed through the selected gain stage. With
  `auto_makeup_gain=True` the automatic make-up gain (`gain_compensation`)
  is subtracted.
- `query_gain_computer(input_level)` returns the static gain reduction for a
  level, with a hard knee or a quadratic soft knee.
- `reset()` clears the envelopes and the make-up gain.
- Settings are properties: `threshold` (dB, default -12), `ratio`
  (default 2), `knee_width` (dB, default 0), `attack_rate` (ms, default 10),
  `release_rate` (ms, default 100), `detector_rms_filter` (ms, default 10),
  `detector` (a `Detector`, default `SMOOTH_BRANCHING`) and `gain_stage`
  (a `GainStageType`, default `FET`).

The enums are `Detector` (`LINEAR`, `SMOOTH_DECOUPLED`, `SMOOTH_BRANCHING`),
`GainStageType` (`FET`, `OPTICAL`) and `Design` (`FEED_FORWARD`,
`FEED_BACK`). `Design` is used as a parameter value only; `SideChain` does
not read it.

`level_to_decibel(level)` converts a linear level to decibels and never
returns less than -70.01 dB; `decibel_to_level(decibels)` converts back.

### `squeezer.gain_stage`

- `GainStage` / `GainStageFET` pass the new gain reduction straight through.
- `GainStageOptical` models an optical cell: attack and release
  coefficients depend on the amount of gain reduction, and the result
  saturates softly when it lags behind the ideal gain reduction.

Each has `reset(gain_reduction)` and
`process(gain_reduction_new, gain_reduction_ideal)`.

### `squeezer.chebyshev`

`ChebyshevStage(relative_cutoff, high_pass, percent_ripple, poles, pole_pair)`
is one two-pole stage of a recursive Chebyshev low-pass or high-pass filter.
`filter_sample(value)` filters one sample, `change_parameters(...)`
recalculates the `coefficients` while keeping the filter state, and
`reset()` clears the history. A tiny constant is added to every output to
keep the recursion away from denormal numbers. On each sample both delay
taps of input and output are set to the newest value.

### `squeezer.parameters`

The compressor's parameter set. `squeezer_parameters(stereo)` returns a
tuple of `ParameterSpec` in index order for the mono or stereo layout (the
stereo layout adds `stereo_link`). Every continuous (`COMBINED`) parameter is
preceded by a `MODE` entry whose key ends in `_switch`.
`parameter_index(stereo, key)` returns a parameter's position and raises
`KeyError` for unknown keys.

A `ParameterSpec` has `key`, `name`, `kind` (a `ParameterKind`), `default`,
`presets` (a tuple of `Preset(value, label)`), and for continuous parameters
`minimum`, `maximum`, `step`, `decimal_places` and `suffix`.
`preset_label(value)` returns the text shown for a value (for a `SWITCH`,
a value that is not a preset raises `ValueError`), and `clamp(value)`
returns the nearest value the parameter can take.

## Example

```python
from squeezer.side_chain import SideChain, decibel_to_level, level_to_decibel

side_chain = SideChain(44100)
for _ in range(4410):
    side_chain.process_sample(-6.0)   # input level in dB

print(side_chain.gain_reduction(False))  # gain reduction in dB
print(level_to_decibel(0.5), decibel_to_level(-6.0))
```

```python
from squeezer.chebyshev import ChebyshevStage

stage = ChebyshevStage(0.1, False, 0.5, 2, 1)
filtered = [stage.filter_sample(x) for x in (1.0, 0.0, 0.0, 0.0)]
```

```python
from squeezer.parameters import parameter_index, squeezer_parameters

specs = squeezer_parameters(stereo=False)
ratio = specs[parameter_index(False, "ratio")]
print(ratio.preset_label(2.0), ratio.clamp(3.33))
```

## What it does not do

The package computes gain reduction; it does not apply it to audio. It has
no multichannel compressor that combines side chains, filters, make-up gain
and wet mix over sample buffers, no level meters, no audio file or device
input and output, no stored settings, no user interface and no command-line
tool.

## Installation

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```