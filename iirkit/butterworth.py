"""Analogue Butterworth prototypes (s-plane) as pole/zero layouts."""

from __future__ import annotations

import cmath
import math

from iirkit.cascade import Layout

_INFINITY = complex(math.inf, 0.0)


class AnalogLowPass(Layout):
    """Butterworth low-pass prototype with unit cutoff, normalised to unity gain at DC."""

    def __init__(self, max_poles: int | None = None) -> None:
        super().__init__(max_poles)
        self._designed_poles = -1
        self.set_normal(0.0, 1.0)

    def design(self, num_poles: int) -> None:
        """Place ``num_poles`` poles on the left half of the unit circle."""
        if num_poles < 0:
            raise ValueError(f"num_poles must be non-negative, got {num_poles}")
        if self._designed_poles == num_poles:
            return
        self._designed_poles = -1
        self.reset()

        n2 = 2 * num_poles
        for i in range(num_poles // 2):
            pole = cmath.rect(1.0, math.pi / 2 + (2 * i + 1) * math.pi / n2)
            self.add_pole_zero_conjugate_pairs(pole, _INFINITY)
        if num_poles & 1:
            self.add(-1.0, _INFINITY)
        self._designed_poles = num_poles


class AnalogLowShelf(Layout):
    """Butterworth low-shelf prototype, normalised to unity gain at the top of the band."""

    def __init__(self, max_poles: int | None = None) -> None:
        super().__init__(max_poles)
        self._designed_poles = -1
        self._designed_gain_db = 0.0
        self.set_normal(math.pi, 1.0)

    def design(self, num_poles: int, gain_db: float) -> None:
        """Place poles and zeros for a shelf of ``gain_db`` below the cutoff."""
        if num_poles < 1:
            raise ValueError(f"num_poles must be at least 1, got {num_poles}")
        if self._designed_poles == num_poles and self._designed_gain_db == gain_db:
            return
        self._designed_poles = -1
        self.reset()

        n2 = num_poles * 2
        g = math.pow(math.pow(10.0, gain_db / 20), 1.0 / n2)
        gp = -1.0 / g
        gz = -g

        for i in range(1, num_poles // 2 + 1):
            theta = math.pi * (0.5 - (2 * i - 1) / n2)
            self.add_pole_zero_conjugate_pairs(cmath.rect(gp, theta), cmath.rect(gz, theta))
        if num_poles & 1:
            self.add(gp, gz)

        self._designed_poles = num_poles
        self._designed_gain_db = gain_db