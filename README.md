# iirkit

Pure-Python pieces for designing infinite impulse response (IIR) filters. It covers
second-order sections, chains of those sections, and analogue low-pass and low-shelf
prototypes.

## Modules

- `iirkit.biquad`
  - `Biquad` is a second-order section. Its coefficients are readable as the
    properties `a0`, `a1`, `a2`, `b0`, `b1` and `b2`, and they are stored normalised
    by `a0`.
  - The methods `set_coefficients`, `set_one_pole`, `set_two_pole`,
    `set_pole_zero_pair`, `set_pole_zero_form`, `set_identity` and `apply_scale`
    set or change the coefficients.
  - `response(f)` gives the complex response at a frequency given as a fraction of
    the sample rate.
  - `pole_zeros()` gives the section back as a `BiquadPoleState`.
  - `PoleZeroPair` holds up to two poles and two zeros.
  - `BiquadPoleState` extends `PoleZeroPair` with a gain.
    `BiquadPoleState.from_biquad(biquad)` computes one from a section.
- `iirkit.cascade`
  - `Layout` collects poles and zeros. Use `add` for a single real pole and zero,
    and `add_pole_zero_conjugate_pairs` for a conjugate pair. `set_normal(w, gain)`
    sets the angular frequency and the gain to normalise to.
  - `Cascade` is a chain of `Biquad` stages. `set_layout(layout)` builds the stages
    from a layout and scales the first stage so that the response at the layout's
    normal frequency has the layout's gain.
  - `Cascade.response(f)` accepts only `0 <= f <= 0.5` and raises `ValueError`
    otherwise.
  - `Cascade.pole_zeros()` lists the poles and zeros of every stage.
  - Indexing a `Cascade` returns its stages.
- `iirkit.butterworth`, `iirkit.chebyshev1`, `iirkit.chebyshev2`
  - Each module provides `AnalogLowPass` and `AnalogLowShelf`, layouts in the s-plane
    that `design(...)` fills with poles and zeros.
  - Butterworth: `design(num_poles)` for the low-pass and `design(num_poles, gain_db)`
    for the shelf.
  - Chebyshev type I: `design(num_poles, ripple_db)` for the low-pass and
    `design(num_poles, gain_db, ripple_db)` for the shelf.
  - Chebyshev type II: `design(num_poles, stop_band_db)` for the low-pass and
    `design(num_poles, gain_db, stop_band_db)` for the shelf.

Invalid arguments raise `ValueError`. This covers NaN coefficients, poles that are
neither real nor a conjugate pair, a non-positive ripple and similar cases. Indexing
past the end of a `Layout` or `Cascade` raises `IndexError`.

## Installation

```
pip install .
```

## Example

```python
from iirkit.biquad import Biquad
from iirkit.cascade import Cascade, Layout

section = Biquad()
section.set_coefficients(1.0, -0.5, 0.0, 1.0, 0.0, 0.0)
print(abs(section.response(0.0)))  # 2.0

layout = Layout()
layout.add_pole_zero_conjugate_pairs(0.5 + 0.5j, -1.0)
layout.set_normal(0.0, 1.0)

cascade = Cascade()
cascade.set_layout(layout)
print(abs(cascade.response(0.0)))  # 1.0 after normalisation
```

## What it does not do

- There is no command-line program.
- No function runs samples through a filter. The package builds and inspects
  coefficients and frequency responses only.
- There is no transform from the analogue prototypes to digital low-pass, high-pass,
  band-pass or band-stop designs. The prototypes are s-plane layouts, and their poles
  and zeros are not mapped into the z-plane for you.

## Tests

```
pip install .[test]
pytest
```