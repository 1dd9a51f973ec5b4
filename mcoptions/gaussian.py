"""Standard normal draws built from a uniform random source."""

from __future__ import annotations

import math
import random
from typing import Optional, Protocol


class UniformSource(Protocol):
    """Anything with a ``random()`` method returning floats in [0, 1)."""

    def random(self) -> float: ...


_SUMMATION_TERMS = 12


def _source(rng: Optional[UniformSource]) -> UniformSource:
    return rng if rng is not None else random


def gaussian_by_summation(rng: Optional[UniformSource] = None) -> float:
    """Approximate an N(0, 1) draw as the sum of twelve uniforms minus six."""
    source = _source(rng)
    return sum(source.random() for _ in range(_SUMMATION_TERMS)) - 6.0


def gaussian_by_box_muller(rng: Optional[UniformSource] = None) -> float:
    """Draw an N(0, 1) variate with the polar Box-Muller method.

    Points are drawn uniformly in the square [-1, 1]^2 and rejected until
    one falls strictly inside the unit disc (the origin is rejected too,
    since the transform is undefined there).
    """
    source = _source(rng)
    while True:
        x = 2.0 * source.random() - 1.0
        y = 2.0 * source.random() - 1.0
        size_squared = x * x + y * y
        if 0.0 < size_squared < 1.0:
            break
    return x * math.sqrt(-2.0 * math.log(size_squared) / size_squared)