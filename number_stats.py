"""
Basic statistics over a dataset of numbers.

    >>> stats = Stats(1, 2, 3, 4, 5)
    >>> stats.average, stats.median, stats.range
    (3.0, 3.0, 4.0)

Values that do not parse as numbers are dropped at construction. Sums
are accumulated with mpmath at the configured working precision and
rounded to float once.
"""
from __future__ import annotations

import math
from typing import List

from mpmath import mp

from arithmetic import average, median
from number_helpers import parse_num, requires
from number_types import MathValue
from utils.precision_manager import get_dps


class Stats:
    """Statistical measures of a non-empty dataset."""

    def __init__(self, *data: MathValue):
        parsed = [parse_num(num) for num in data]
        self.data: List[float] = [num for num in parsed if not math.isnan(num)]
        requires(self.data)
        self.average: float = average(*self.data)
        self.sum_value: float = self._fsum(self.data)

    @staticmethod
    def _fsum(values) -> float:
        with mp.workdps(get_dps()):
            return float(mp.fsum(mp.mpf(v) for v in values))

    @property
    def median(self) -> float:
        """Middle value, or mean of the two middle values for even counts."""
        return median(*self.data)

    @property
    def geometric_average(self) -> float:
        """n-th root of the product of all values."""
        with mp.workdps(get_dps()):
            product = mp.fprod(mp.mpf(v) for v in self.data)
            if product < 0:
                return math.nan
            return float(mp.root(product, len(self.data)))

    @property
    def harmonic_average(self) -> float:
        """Reciprocal of the mean of the reciprocals."""
        if any(v == 0 for v in self.data):
            return 0.0
        reciprocal_sum = self._fsum(1 / v for v in self.data)
        if reciprocal_sum == 0:
            return math.nan
        return len(self.data) / reciprocal_sum

    @property
    def range(self) -> float:
        return max(self.data) - min(self.data)

    @property
    def mid_range(self) -> float:
        """Half of the range."""
        return self.range / 2
