import random
import statistics

import pytest

from mcoptions.gaussian import gaussian_by_box_muller, gaussian_by_summation


class _Sequence:
    """Uniform source replaying a fixed list of values."""

    def __init__(self, values):
        self._values = list(values)
        self.used = 0

    def random(self):
        value = self._values[self.used]
        self.used += 1
        return value


def test_summation_of_midpoints_is_zero():
    source = _Sequence([0.5] * 12)
    assert gaussian_by_summation(source) == pytest.approx(0.0)
    assert source.used == 12


def test_summation_is_bounded():
    rng = random.Random(1)
    draws = [gaussian_by_summation(rng) for _ in range(2000)]
    assert all(-6.0 <= d <= 6.0 for d in draws)


def test_summation_is_deterministic_for_a_seed():
    first = [gaussian_by_summation(random.Random(42)) for _ in range(3)]
    second = [gaussian_by_summation(random.Random(42)) for _ in range(3)]
    assert first == second


def test_box_muller_rejects_points_outside_disc():
    # first pair maps to (1, 1) - rejected; second to (0.5, 0) - accepted
    source = _Sequence([1.0, 1.0, 0.75, 0.5])
    result = gaussian_by_box_muller(source)
    assert source.used == 4
    assert result > 0


def test_box_muller_rejects_origin():
    source = _Sequence([0.5, 0.5, 0.25, 0.5])
    result = gaussian_by_box_muller(source)
    assert source.used == 4
    assert result < 0


def test_box_muller_is_deterministic_for_a_seed():
    a = random.Random(7)
    b = random.Random(7)
    assert [gaussian_by_box_muller(a) for _ in range(5)] == [
        gaussian_by_box_muller(b) for _ in range(5)
    ]


@pytest.mark.parametrize("draw", [gaussian_by_box_muller, gaussian_by_summation])
def test_moments_are_close_to_standard_normal(draw):
    rng = random.Random(2024)
    samples = [draw(rng) for _ in range(20000)]
    assert statistics.fmean(samples) == pytest.approx(0.0, abs=0.05)
    assert statistics.pvariance(samples) == pytest.approx(1.0, abs=0.05)