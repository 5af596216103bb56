"""Streaming mean, variance, skewness and kurtosis in constant memory."""

from runningmoments.moments_config import moments_version as __version__
from runningmoments.reduction import combine_all, from_values, partitioned
from runningmoments.runningstats import RunningStats, combined

__all__ = [
    "RunningStats",
    "combined",
    "combine_all",
    "from_values",
    "partitioned",
    "__version__",
]
