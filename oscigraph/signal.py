"""Abstract stereo signals and basic waveforms."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Iterator

PI = math.pi

SAMPLE_RATE = 48000
"""Sample rate of all signals, in samples per second."""

Sample = tuple[float, float]


class Signal(ABC):
    """A playable stereo signal producing one (left, right) sample at a time."""

    @abstractmethod
    def generate(self) -> Sample:
        """Return the next (left, right) sample."""

    def __iter__(self) -> Iterator[Sample]:
        while True:
            yield self.generate()


def _fract(value: float) -> float:
    return value - math.trunc(value)


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


class Square(Signal):
    """Pure square wave at the given frequency, identical on both channels."""

    def __init__(self, frequency: float) -> None:
        self.frequency = float(frequency)
        self._time = 0.0

    def generate(self) -> Sample:
        self._time += 1.0 / SAMPLE_RATE
        phase = _round_half_away(_fract(self._time * self.frequency))
        value = phase * 2.0 - 1.0
        return (value, value)


class Silence(Signal):
    """A signal that is always zero."""

    def generate(self) -> Sample:
        return (0.0, 0.0)