# Based on https://www.johndcook.com/blog/skewness_kurtosis/
# and Knuth, TAOCP vol. 2, 3rd edition, p. 232.

import math
from typing import Iterable, Tuple


def _ieee_div(numerator: float, denominator: float) -> float:
    """Float division with IEEE-754 results instead of ZeroDivisionError."""
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


class RunningStats:
    """Incrementally compute mean, variance, skewness and kurtosis.

    Only the count and the first four central moment sums are kept, so
    memory use is constant no matter how many samples are pushed.
    Two accumulators built from disjoint samples can be merged with
    `combine` (in place), `+=` (in place) or `+` (new accumulator).
    """

    def __init__(self) -> None:
        self.clear()

    def __add__(self: "RunningStats", other: "RunningStats") -> "RunningStats":
        return combined(self, other)

    def __iadd__(self: "RunningStats", other: "RunningStats") -> "RunningStats":
        self.combine(other)
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RunningStats):
            return NotImplemented
        return self.moments() == other.moments()

    def __repr__(self) -> str:
        return (
            f"RunningStats(n={self._n}, m1={self._m1!r}, m2={self._m2!r}, "
            f"m3={self._m3!r}, m4={self._m4!r})"
        )

    def __str__(self) -> str:
        return self.describe()

    def clear(self) -> None:
        """Reset for new samples"""
        self._n = 0
        self._m1 = self._m2 = self._m3 = self._m4 = 0.0

    def push(self, x: float) -> None:
        """Add a sample"""
        n1 = self._n
        self._n += 1
        delta = x - self._m1
        delta_n = delta / self._n
        delta_n2 = delta_n * delta_n
        term1 = delta * delta_n * n1
        self._m1 += delta_n
        # m4 and m3 must see the previous m2 (and m3), so update m2 last.
        self._m4 += (
            term1 * delta_n2 * (self._n * self._n - 3 * self._n + 3)
            + 6 * delta_n2 * self._m2
            - 4 * delta_n * self._m3
        )
        self._m3 += term1 * delta_n * (self._n - 2) - 3 * delta_n * self._m2
        self._m2 += term1

    def extend(self, values: Iterable[float]) -> None:
        """Add every sample from an iterable, in order."""
        for x in values:
            self.push(x)

    def combine(self, other: "RunningStats") -> None:
        """Merge the samples summarized by other into this accumulator.

        other is left untouched.
        """
        (self._n, self._m1, self._m2, self._m3, self._m4) = combined(
            self, other
        ).moments()

    def copy(self) -> "RunningStats":
        """An independent accumulator with the same state."""
        s = RunningStats()
        s._n, s._m1, s._m2, s._m3, s._m4 = self.moments()
        return s

    def moments(self) -> Tuple[int, float, float, float, float]:
        """The raw state: (count, mean, and the 2nd to 4th central moment sums)."""
        return (self._n, self._m1, self._m2, self._m3, self._m4)

    def size(self) -> int:
        """The number of samples"""
        return self._n

    def mean(self) -> float:
        """Arithmetic mean, a.k.a. average"""
        return self._m1

    def var(self) -> float:
        """Sample variance (Bessel-corrected); 0 for fewer than two samples."""
        if self._n > 1:
            return self._m2 / (self._n - 1.0)
        return 0.0

    def std(self) -> float:
        """Standard deviation"""
        return math.sqrt(self.var())

    def sem(self) -> float:
        """Standard error of the mean"""
        return _ieee_div(self.std(), math.sqrt(self._n))

    def skewness(self) -> float:
        """Skewness, a measure of the asymmetry of the distribution.

        Positive values mean the right tail is longer, negative values
        the left one. NaN when the samples have no spread (including
        fewer than two samples).

        Note that this uses the population-style normalization
        sqrt(n) * m3 / m2^1.5 over the sample moment sums and does not
        apply any small-sample bias correction.
        """
        # m2 * sqrt(m2) goes to inf on overflow where m2**1.5 would raise.
        return _ieee_div(
            math.sqrt(self._n) * self._m3, self._m2 * math.sqrt(self._m2)
        )

    def excess_kurtosis(self) -> float:
        """Kurtosis minus 3, i.e. how tail-heavy the samples are compared
        to a normal distribution. NaN when the samples have no spread."""
        return _ieee_div(self._n * self._m4, self._m2 * self._m2) - 3.0

    variance = var
    standard_deviation = std

    def describe(self) -> str:
        """One-line human-readable summary, for logs and debugging."""
        return (
            f"N={self._n} μ={self.mean():f} σ={self.std():f} "
            f"skew={self.skewness():f} ek={self.excess_kurtosis():f}"
        )


def combined(a: RunningStats, b: RunningStats) -> RunningStats:
    """Return a new accumulator equivalent to pushing the samples of a and b.

    Neither argument is modified.
    """
    if b._n == 0:
        return a.copy()
    if a._n == 0:
        return b.copy()

    c = RunningStats()
    c._n = a._n + b._n
    an = float(a._n)
    bn = float(b._n)
    cn = float(c._n)

    delta = b._m1 - a._m1
    delta2 = delta * delta
    delta3 = delta * delta2
    delta4 = delta2 * delta2

    c._m1 = (an * a._m1 + bn * b._m1) / cn
    c._m2 = a._m2 + b._m2 + delta2 * an * bn / cn

    c._m3 = a._m3 + b._m3 + delta3 * an * bn * (an - bn) / (cn * cn)
    c._m3 += 3.0 * delta * (an * b._m2 - bn * a._m2) / cn

    c._m4 = a._m4 + b._m4 + delta4 * an * bn * (an * an - an * bn + bn * bn) / (
        cn * cn * cn
    )
    c._m4 += 6.0 * delta2 * (an * an * b._m2 + bn * bn * a._m2) / (
        cn * cn
    ) + 4.0 * delta * (an * b._m3 - bn * a._m3) / cn
    return c
