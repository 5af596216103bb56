"""Map-reduce style helpers built on RunningStats.

Each worker accumulates its own partition, then the partial results
are merged pairwise:

    parts = partitioned(values, 4)
    total = combine_all(parts)
"""

from typing import Iterable, List, Sequence

from runningmoments.runningstats import RunningStats, combined


def from_values(values: Iterable[float]) -> RunningStats:
    """Accumulate all of values into a fresh RunningStats."""
    s = RunningStats()
    s.extend(values)
    return s


def combine_all(stats: Sequence[RunningStats]) -> RunningStats:
    """Merge any number of accumulators by recursively combining halves.

    The inputs are not modified; an empty sequence yields an empty accumulator.
    """
    n = len(stats)
    if n == 0:
        return RunningStats()
    if n == 1:
        return stats[0].copy()
    h = n // 2
    return combined(combine_all(stats[:h]), combine_all(stats[h:]))


def partitioned(values: Sequence[float], partitions: int) -> List[RunningStats]:
    """Split values into contiguous chunks and accumulate each one separately.

    Returns exactly `partitions` accumulators; trailing ones are empty
    when there are fewer values than partitions.
    """
    if partitions < 1:
        raise ValueError(f"partitions must be at least 1, got {partitions}")
    chunk, extra = divmod(len(values), partitions)
    parts = []
    start = 0
    for i in range(partitions):
        end = start + chunk + (1 if i < extra else 0)
        parts.append(from_values(values[start:end]))
        start = end
    return parts
