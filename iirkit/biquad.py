"""Second-order sections: coefficients, pole/zero form and frequency response."""

from __future__ import annotations

import cmath
import math
from dataclasses import dataclass


def _divide(numerator: float, denominator: float) -> float:
    """Divide as IEEE floating point does, giving inf or nan on a zero divisor."""
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _complex_divide(value: complex, denominator: float) -> complex:
    if denominator != 0:
        return value / denominator
    return complex(_divide(value.real, denominator), _divide(value.imag, denominator))


def _complex_is_nan(value: complex) -> bool:
    return math.isnan(value.real) or math.isnan(value.imag)


@dataclass
class PoleZeroPair:
    """Up to two poles and two zeros; a single pole leaves the second slots at zero."""

    poles: tuple[complex, complex] = (0j, 0j)
    zeros: tuple[complex, complex] = (0j, 0j)

    def is_single_pole(self) -> bool:
        """True if only the first pole and zero are in use."""
        return self.poles[1] == 0 and self.zeros[1] == 0

    def is_nan(self) -> bool:
        """True if any pole or zero has a NaN component."""
        return any(_complex_is_nan(complex(v)) for v in (*self.poles, *self.zeros))


@dataclass
class BiquadPoleState(PoleZeroPair):
    """A biquad as poles, zeros and a gain, from which its coefficients can be rebuilt."""

    gain: float = 1.0

    @classmethod
    def from_biquad(cls, biquad: Biquad) -> BiquadPoleState:
        """Compute the poles, zeros and gain of ``biquad``."""
        a0, a1, a2 = biquad.a0, biquad.a1, biquad.a2
        b0, b1, b2 = biquad.b0, biquad.b1, biquad.b2

        if a2 == 0 and b2 == 0:
            poles = (complex(-a1), 0j)
            zeros = (complex(_divide(-b0, b1)), 0j)
        else:
            c = cmath.sqrt(complex(a1 * a1 - 4 * a0 * a2, 0))
            d = 2.0 * a0
            poles = (_complex_divide(-(a1 + c), d), _complex_divide(c - a1, d))
            if any(_complex_is_nan(p) for p in poles):
                raise ValueError("poles are NaN")

            c = cmath.sqrt(complex(b1 * b1 - 4 * b0 * b2, 0))
            d = 2.0 * b0
            zeros = (_complex_divide(-(b1 + c), d), _complex_divide(c - b1, d))
            if any(_complex_is_nan(z) for z in zeros):
                raise ValueError("zeros are NaN")

        return cls(poles=poles, zeros=zeros, gain=_divide(b0, a0))


class Biquad:
    """Coefficients of a second-order IIR section, kept normalised by a0."""

    def __init__(self) -> None:
        self._a0 = 1.0
        self._a1 = 0.0
        self._a2 = 0.0
        self._b0 = 1.0
        self._b1 = 0.0
        self._b2 = 0.0

    def __repr__(self) -> str:
        return (
            f"Biquad(a0={self.a0!r}, a1={self.a1!r}, a2={self.a2!r}, "
            f"b0={self.b0!r}, b1={self.b1!r}, b2={self.b2!r})"
        )

    @property
    def a0(self) -> float:
        return self._a0

    @property
    def a1(self) -> float:
        return self._a1 * self._a0

    @property
    def a2(self) -> float:
        return self._a2 * self._a0

    @property
    def b0(self) -> float:
        return self._b0 * self._a0

    @property
    def b1(self) -> float:
        return self._b1 * self._a0

    @property
    def b2(self) -> float:
        return self._b2 * self._a0

    def response(self, normalized_frequency: float) -> complex:
        """Complex response at a frequency given as a fraction of the sample rate."""
        a0 = self.a0
        w = 2 * math.pi * normalized_frequency
        czn1 = cmath.rect(1.0, -w)
        czn2 = cmath.rect(1.0, -2 * w)
        top = complex(self.b0 / a0) + (self.b1 / a0) * czn1 + (self.b2 / a0) * czn2
        bottom = 1 + (self.a1 / a0) * czn1 + (self.a2 / a0) * czn2
        return top / bottom

    def pole_zeros(self) -> list[BiquadPoleState]:
        """Return the pole/zero pairs of this section."""
        return [BiquadPoleState.from_biquad(self)]

    def set_coefficients(
        self, a0: float, a1: float, a2: float, b0: float, b1: float, b2: float
    ) -> None:
        """Set all six coefficients; they are stored divided by a0."""
        for name, value in (("a0", a0), ("a1", a1), ("a2", a2),
                            ("b0", b0), ("b1", b1), ("b2", b2)):
            if math.isnan(value):
                raise ValueError(f"{name} is NaN")
        if a0 == 0:
            raise ValueError("a0 is zero")
        self._a0 = float(a0)
        self._a1 = a1 / a0
        self._a2 = a2 / a0
        self._b0 = b0 / a0
        self._b1 = b1 / a0
        self._b2 = b2 / a0

    def set_one_pole(self, pole: complex, zero: complex) -> None:
        """Set one real pole and one real zero."""
        pole = complex(pole)
        zero = complex(zero)
        if pole.imag != 0:
            raise ValueError("Imaginary part of pole is non-zero.")
        if zero.imag != 0:
            raise ValueError("Imaginary part of zero is non-zero.")
        self.set_coefficients(1.0, -pole.real, 0.0, 1.0, -zero.real, 0.0)

    def set_two_pole(
        self, pole1: complex, zero1: complex, pole2: complex, zero2: complex
    ) -> None:
        """Set two poles and two zeros, each pair real or complex conjugate."""
        pole1, pole2 = complex(pole1), complex(pole2)
        zero1, zero2 = complex(zero1), complex(zero2)
        pole_error = "imaginary parts of both poles need to be 0 or complex conjugate"
        zero_error = "imaginary parts of both zeros need to be 0 or complex conjugate"

        if pole1.imag != 0:
            if pole2 != pole1.conjugate():
                raise ValueError(pole_error)
            a1 = -2 * pole1.real
            a2 = abs(pole1) ** 2
        else:
            if pole2.imag != 0:
                raise ValueError(pole_error)
            a1 = -(pole1.real + pole2.real)
            a2 = pole1.real * pole2.real

        if zero1.imag != 0:
            if zero2 != zero1.conjugate():
                raise ValueError(zero_error)
            b1 = -2 * zero1.real
            b2 = abs(zero1) ** 2
        else:
            if zero2.imag != 0:
                raise ValueError(zero_error)
            b1 = -(zero1.real + zero2.real)
            b2 = zero1.real * zero2.real

        self.set_coefficients(1.0, a1, a2, 1.0, b1, b2)

    def set_pole_zero_pair(self, pair: PoleZeroPair) -> None:
        """Set the section from a pole/zero pair."""
        if pair.is_single_pole():
            self.set_one_pole(pair.poles[0], pair.zeros[0])
        else:
            self.set_two_pole(pair.poles[0], pair.zeros[0], pair.poles[1], pair.zeros[1])

    def set_pole_zero_form(self, state: BiquadPoleState) -> None:
        """Set the section from poles, zeros and gain."""
        self.set_pole_zero_pair(state)
        self.apply_scale(state.gain)

    def set_identity(self) -> None:
        """Make the section pass its input through unchanged."""
        self.set_coefficients(1.0, 0.0, 0.0, 1.0, 0.0, 0.0)

    def apply_scale(self, scale: float) -> None:
        """Multiply the b coefficients by ``scale``."""
        self._b0 *= scale
        self._b1 *= scale
        self._b2 *= scale