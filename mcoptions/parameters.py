"""Time-dependent model parameters such as volatility and short rate."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterable, Tuple


class Parameters(ABC):
    """A parameter that can be integrated over time."""

    @abstractmethod
    def integral(self, time1: float, time2: float) -> float:
        """Definite integral of the parameter from ``time1`` to ``time2``."""

    @abstractmethod
    def integral_square(self, time1: float, time2: float) -> float:
        """Definite integral of the squared parameter from ``time1`` to ``time2``."""

    def mean(self, time1: float, time2: float) -> float:
        """Average of the parameter between the two times."""
        return self.integral(time1, time2) / (time2 - time1)

    def root_mean_square(self, time1: float, time2: float) -> float:
        """Average of the squared parameter between the two times.

        No square root is taken: the result is the mean square.
        """
        return self.integral_square(time1, time2) / (time2 - time1)

    def clone(self) -> "Parameters":
        """Return an independent deep copy of this parameter."""
        return copy.deepcopy(self)


@dataclass(frozen=True)
class ParametersConstant(Parameters):
    """A parameter that keeps the same value at all times."""

    constant: float
    constant_square: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "constant_square", self.constant * self.constant)

    def integral(self, time1: float, time2: float) -> float:
        return self.constant * (time2 - time1)

    def integral_square(self, time1: float, time2: float) -> float:
        return self.constant_square * (time2 - time1)


class ParametersPiecewiseConstant(Parameters):
    """A parameter constant on consecutive intervals.

    ``pieces`` is a sequence of ``(time, value)`` pairs: the first value holds
    on ``[0, T_0]``, the i-th on ``[T_{i-1}, T_i]``.  The integrals always run
    from zero to the last breakpoint; the time arguments are not used.
    """

    def __init__(self, pieces: Iterable[Tuple[float, float]]) -> None:
        self.pieces: Tuple[Tuple[float, float], ...] = tuple(
            (time, value) for time, value in pieces
        )
        if not self.pieces:
            raise ValueError("a piecewise constant parameter needs at least one piece")
        self.square_pieces: Tuple[Tuple[float, float], ...] = tuple(
            (time, value * value) for time, value in self.pieces
        )

    @staticmethod
    def _integrate(pieces: Tuple[Tuple[float, float], ...]) -> float:
        previous_time = 0.0
        total = 0.0
        for time, value in pieces:
            total += value * (time - previous_time)
            previous_time = time
        return total

    def integral(self, time1: float, time2: float) -> float:
        return self._integrate(self.pieces)

    def integral_square(self, time1: float, time2: float) -> float:
        return self._integrate(self.square_pieces)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParametersPiecewiseConstant):
            return NotImplemented
        return self.pieces == other.pieces

    def __hash__(self) -> int:
        return hash(self.pieces)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.pieces)!r})"

    def __str__(self) -> str:
        return "".join(
            f"(time={time:g}, value={value:g})\n" for time, value in self.pieces
        )