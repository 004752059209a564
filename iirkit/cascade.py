"""Pole/zero layouts and cascades of second-order sections built from them."""

from __future__ import annotations

import math
from collections.abc import Iterator

from iirkit.biquad import Biquad, BiquadPoleState, PoleZeroPair

_MAX_F_ERROR = "The normalised frequency needs to be =< 0.5."
_MIN_F_ERROR = "The normalised frequency needs to be >= 0."


class Layout:
    """Poles and zeros of a filter, grouped in pairs, with a normalisation point."""

    def __init__(self, max_poles: int | None = None) -> None:
        self.max_poles = max_poles
        self.num_poles = 0
        self.normal_w = 0.0
        self.normal_gain = 1.0
        self._pairs: list[PoleZeroPair] = []

    def reset(self) -> None:
        """Remove all poles and zeros."""
        self.num_poles = 0
        self._pairs = []

    def _check_room(self, extra: int) -> None:
        if self.max_poles is not None and self.num_poles + extra > self.max_poles:
            raise ValueError("Number of poles exceeds the maximum of the layout.")

    def add(self, pole: complex, zero: complex) -> None:
        """Add one real pole and zero; it must come after all pairs."""
        if self.num_poles % 2:
            raise ValueError("Can't add a pole after a single pole.")
        self._check_room(1)
        self._pairs.append(PoleZeroPair(poles=(complex(pole), 0j), zeros=(complex(zero), 0j)))
        self.num_poles += 1

    def add_pole_zero_conjugate_pairs(self, pole: complex, zero: complex) -> None:
        """Add a pole and a zero together with their complex conjugates."""
        if self.num_poles % 2:
            raise ValueError("Can't add a pole pair after a single pole.")
        self._check_room(2)
        pole, zero = complex(pole), complex(zero)
        self._pairs.append(
            PoleZeroPair(poles=(pole, pole.conjugate()), zeros=(zero, zero.conjugate()))
        )
        self.num_poles += 2

    def set_normal(self, w: float, gain: float) -> None:
        """Set the angular frequency and the gain the filter is normalised to."""
        self.normal_w = w
        self.normal_gain = gain

    def __getitem__(self, index: int) -> PoleZeroPair:
        if not 0 <= index < (self.num_poles + 1) // 2:
            raise IndexError("Pair index out of bounds.")
        return self._pairs[index]

    def __len__(self) -> int:
        return len(self._pairs)

    def __iter__(self) -> Iterator[PoleZeroPair]:
        return iter(self._pairs)


class Cascade:
    """A chain of biquads, set up from a layout and normalised to its gain."""

    def __init__(self, max_stages: int | None = None) -> None:
        self.max_stages = max_stages
        self._stages: list[Biquad] = [Biquad() for _ in range(max_stages or 0)]
        self._num_stages = 0

    @property
    def num_stages(self) -> int:
        return self._num_stages

    def __len__(self) -> int:
        return self._num_stages

    def __getitem__(self, index: int) -> Biquad:
        if not 0 <= index < self._num_stages:
            raise IndexError("Index out of bounds.")
        return self._stages[index]

    def __iter__(self) -> Iterator[Biquad]:
        return iter(self._stages[: self._num_stages])

    def response(self, normalized_frequency: float) -> complex:
        """Complex response of the whole chain at a frequency from 0 to 0.5."""
        if normalized_frequency > 0.5:
            raise ValueError(_MAX_F_ERROR)
        if normalized_frequency < 0.0:
            raise ValueError(_MIN_F_ERROR)
        result = complex(1)
        for stage in self:
            result *= stage.response(normalized_frequency)
        return result

    def pole_zeros(self) -> list[BiquadPoleState]:
        """Pole/zero pairs of every stage in the chain."""
        return [BiquadPoleState.from_biquad(stage) for stage in self]

    def apply_scale(self, scale: float) -> None:
        """Scale the first stage, and with it the whole chain."""
        if self._num_stages < 1:
            return
        self._stages[0].apply_scale(scale)

    def set_layout(self, layout: Layout) -> None:
        """Build the stages from ``layout`` and normalise to its gain."""
        num_stages = (layout.num_poles + 1) // 2
        if self.max_stages is not None and num_stages > self.max_stages:
            raise ValueError("Number of stages is larger than the max stages.")
        if self.max_stages is None:
            self._stages = [Biquad() for _ in range(num_stages)]
        self._num_stages = num_stages

        for stage in self._stages:
            stage.set_identity()
        for index in range(num_stages):
            self._stages[index].set_pole_zero_pair(layout[index])

        self.apply_scale(
            layout.normal_gain / abs(self.response(layout.normal_w / (2 * math.pi)))
        )