"""IIR filter design: biquad sections, cascades and analogue Butterworth/Chebyshev prototypes."""

__version__ = "0.1.0"

__all__ = [
    "biquad",
    "cascade",
    "butterworth",
    "chebyshev1",
    "chebyshev2",
]