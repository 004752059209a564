"""Analogue Chebyshev type II prototypes (s-plane) as pole/zero layouts."""

from __future__ import annotations

import math

from iirkit.cascade import Layout

_INFINITY = complex(math.inf, 0.0)
_LN10 = math.log(10.0)


class AnalogLowPass(Layout):
    """Chebyshev II low-pass prototype with at least ``stop_band_db`` of stop-band rejection."""

    def __init__(self, max_poles: int | None = None) -> None:
        super().__init__(max_poles)
        self._designed_poles = -1
        self._designed_stop_band_db = 0.0
        self.set_normal(0.0, 1.0)

    def design(self, num_poles: int, stop_band_db: float) -> None:
        """Place ``num_poles`` poles and the matching zeros on the imaginary axis."""
        if num_poles < 1:
            raise ValueError(f"num_poles must be at least 1, got {num_poles}")
        if stop_band_db <= 0:
            raise ValueError(f"stop_band_db must be positive, got {stop_band_db}")
        if (
            self._designed_poles == num_poles
            and self._designed_stop_band_db == stop_band_db
        ):
            return
        self._designed_poles = -1
        self.reset()

        eps = math.sqrt(1.0 / (math.exp(stop_band_db * 0.1 * _LN10) - 1))
        v0 = math.asinh(1 / eps) / num_poles
        sinh_v0 = -math.sinh(v0)
        cosh_v0 = math.cosh(v0)
        fn = math.pi / (2 * num_poles)

        for k in range(1, 2 * (num_poles // 2), 2):
            a = sinh_v0 * math.cos((k - num_poles) * fn)
            b = cosh_v0 * math.sin((k - num_poles) * fn)
            d2 = a * a + b * b
            im = 1 / math.cos(k * fn)
            self.add_pole_zero_conjugate_pairs(complex(a / d2, b / d2), complex(0.0, im))

        if num_poles & 1:
            self.add(1 / sinh_v0, _INFINITY)

        self._designed_poles = num_poles
        self._designed_stop_band_db = stop_band_db


class AnalogLowShelf(Layout):
    """Chebyshev II low-shelf prototype with a gain and a stop-band ripple."""

    def __init__(self, max_poles: int | None = None) -> None:
        super().__init__(max_poles)
        self._designed_poles = -1
        self._designed_stop_band_db = 0.0
        self._designed_gain_db = 0.0
        self.set_normal(math.pi, 1.0)

    def design(self, num_poles: int, gain_db: float, stop_band_db: float) -> None:
        """Place poles and zeros for a shelf of ``gain_db`` with ``stop_band_db`` ripple."""
        if (
            self._designed_poles == num_poles
            and self._designed_stop_band_db == stop_band_db
            and self._designed_gain_db == gain_db
        ):
            return
        if num_poles < 1:
            raise ValueError(f"num_poles must be at least 1, got {num_poles}")
        self._designed_poles = -1
        self.reset()

        requested_gain_db, requested_stop_band_db = gain_db, stop_band_db
        gain_db = -gain_db
        if stop_band_db >= abs(gain_db):
            stop_band_db = abs(gain_db)
        if gain_db < 0:
            stop_band_db = -stop_band_db

        g = math.pow(10.0, gain_db / 20.0)
        gb = math.pow(10.0, (gain_db - stop_band_db) / 20.0)
        g0 = 1.0
        g0_root = math.pow(g0, 1.0 / num_poles)

        if gb != g0:
            eps = math.sqrt((g * g - gb * gb) / (gb * gb - g0 * g0))
        else:
            eps = g - 1
        if eps == 0:
            raise ValueError("gain and stop-band ripple give a degenerate shelf")

        root = math.sqrt(1 + 1 / (eps * eps))
        b = math.pow(g / eps + gb * root, 1.0 / num_poles)
        u = math.log(b / g0_root)
        v = math.log(math.pow(1.0 / eps + root, 1.0 / num_poles))

        sinh_u, cosh_u = math.sinh(u), math.cosh(u)
        sinh_v, cosh_v = math.sinh(v), math.cosh(v)
        n2 = 2 * num_poles
        for i in range(1, num_poles // 2 + 1):
            a = math.pi * (2 * i - 1) / n2
            sn, cs = math.sin(a), math.cos(a)
            self.add_pole_zero_conjugate_pairs(
                complex(-sn * sinh_u, cs * cosh_u),
                complex(-sn * sinh_v, cs * cosh_v),
            )
        if num_poles & 1:
            self.add(-sinh_u, -sinh_v)

        self._designed_poles = num_poles
        self._designed_stop_band_db = requested_stop_band_db
        self._designed_gain_db = requested_gain_db