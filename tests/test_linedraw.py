import math
from itertools import islice

import pytest

from oscigraph.linedraw import DRAW_RATE, Drawer


def test_rejects_no_lines():
    with pytest.raises(ValueError):
        Drawer([])


def test_rejects_empty_line():
    with pytest.raises(ValueError):
        Drawer([[(0.0, 0.0), (1.0, 0.0)], []])


def test_first_samples_from_origin():
    drawer = Drawer([[(0.0, 0.0), (1.0, 0.0)]])
    assert drawer.generate() == (0.0, 0.0)
    x, y = drawer.generate()
    assert x == pytest.approx(0.007)
    assert y == 0.0


def test_step_never_exceeds_draw_rate_within_line():
    drawer = Drawer([[(0.0, 0.0), (0.3, 0.4), (-0.2, 0.1)]])
    previous = drawer.generate()
    for _ in range(100):
        current = drawer.generate()
        step = math.dist(previous, current)
        assert step <= DRAW_RATE + 1e-9
        previous = current


def test_jumps_to_next_line_start():
    drawer = Drawer([[(0.0, 0.0), (0.01, 0.0)], [(0.5, 0.5), (0.6, 0.5)]])
    samples = list(islice(drawer, 4))
    assert samples[0] == (0.0, 0.0)
    assert samples[1][0] == pytest.approx(DRAW_RATE)
    assert samples[2] == pytest.approx((0.01, 0.0))
    assert samples[3] == (0.5, 0.5)


def test_loops_back_to_first_line():
    drawer = Drawer([[(0.2, 0.0), (0.21, 0.0)], [(0.5, 0.5), (0.51, 0.5)]])
    samples = list(islice(drawer, 400))
    starts = [s for s in samples if s == (0.2, 0.0)]
    seconds = [s for s in samples if s == (0.5, 0.5)]
    assert len(starts) >= 2
    assert len(seconds) >= 2


def test_beam_stays_on_segment():
    drawer = Drawer([[(0.0, 0.0), (1.0, 0.0)]])
    for x, y in islice(drawer, 500):
        assert y == 0.0
        assert -1e-9 <= x <= 1.0 + 1e-9


def test_accepts_generic_iterables():
    drawer = Drawer(iter([iter([(0, 0), (1, 1)])]))
    assert drawer.lines == [[(0.0, 0.0), (1.0, 1.0)]]