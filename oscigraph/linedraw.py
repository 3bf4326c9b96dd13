"""Signal that traces polylines with an oscilloscope beam."""

from __future__ import annotations

import math
from collections.abc import Iterable

from oscigraph.signal import Sample, Signal

DRAW_RATE = 0.007
"""Distance to move the beam each sample while drawing."""

DIST_THRESH = 0.000001
"""Distance to a line endpoint at which it is considered reached."""

Point = tuple[float, float]


class Drawer(Signal):
    """Moves the beam along each line in turn, looping over all lines forever."""

    def __init__(self, lines: Iterable[Iterable[Point]]) -> None:
        self.lines: list[list[Point]] = [
            [(float(x), float(y)) for x, y in line] for line in lines
        ]
        if not self.lines:
            raise ValueError("Drawer needs at least one line")
        if any(not line for line in self.lines):
            raise ValueError("Lines must contain at least one point")
        self._line_index = 0
        self._segment_index = 0
        self._beam_x = 0.0
        self._beam_y = 0.0

    def generate(self) -> Sample:
        line = self.lines[self._line_index]
        target_x, target_y = line[self._segment_index]

        delta_x = target_x - self._beam_x
        delta_y = target_y - self._beam_y
        distance = math.hypot(delta_x, delta_y)
        if distance != 0.0:
            factor = distance / min(distance, DRAW_RATE)
            self._beam_x += delta_x / factor
            self._beam_y += delta_y / factor

        if abs(delta_x) < DIST_THRESH and abs(delta_y) < DIST_THRESH:
            self._segment_index += 1
            if self._segment_index >= len(line):
                self._segment_index = 1
                self._line_index = (self._line_index + 1) % len(self.lines)
                self._beam_x, self._beam_y = self.lines[self._line_index][0]

        return (self._beam_x, self._beam_y)