"""Gatherers of Monte Carlo results."""

from __future__ import annotations

import copy
import math
from abc import ABC, abstractmethod
from typing import List


class StatisticsMC(ABC):
    """Collects one result per path and reports statistics on them."""

    @abstractmethod
    def dump_one_result(self, result: float) -> None:
        """Record the result of one path."""

    @abstractmethod
    def results_so_far(self) -> List[List[float]]:
        """Statistics gathered so far, as a list of rows."""

    def clone(self) -> "StatisticsMC":
        """Return an independent deep copy of this gatherer."""
        return copy.deepcopy(self)


class StatisticsMean(StatisticsMC):
    """Keeps the running mean of the results."""

    def __init__(self) -> None:
        self.running_sum = 0.0
        self.paths_done = 0

    def dump_one_result(self, result: float) -> None:
        self.paths_done += 1
        self.running_sum += result

    def results_so_far(self) -> List[List[float]]:
        """A single row holding the mean; NaN when no path has been recorded."""
        if self.paths_done == 0:
            return [[math.nan]]
        return [[self.running_sum / self.paths_done]]


class ConvergenceTable(StatisticsMC):
    """Decorates a gatherer, snapshotting its results at every power of two.

    Each snapshot row is the inner gatherer's row followed by the number of
    paths done so far.  The inner gatherer is copied on construction, so the
    one passed in is left untouched.
    """

    def __init__(self, inner: StatisticsMC) -> None:
        self.inner = inner.clone()
        self._rows: List[List[float]] = []
        self._stopping_point = 2
        self.paths_done = 0

    def _inner_rows(self) -> List[List[float]]:
        return [[*row, float(self.paths_done)] for row in self.inner.results_so_far()]

    def dump_one_result(self, result: float) -> None:
        self.inner.dump_one_result(result)
        self.paths_done += 1
        if self.paths_done == self._stopping_point:
            self._stopping_point *= 2
            self._rows.extend(self._inner_rows())

    def results_so_far(self) -> List[List[float]]:
        """All snapshots, plus the current state if it was not just snapshotted."""
        table = [list(row) for row in self._rows]
        if self.paths_done * 2 != self._stopping_point:
            table.extend(self._inner_rows())
        return table