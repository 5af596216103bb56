import argparse
from typing import List

from runningmoments.moments_config import DEFAULT_PRECISION


class MomentsArguments(argparse.Namespace):
    """Encapsulates all arguments and default values for the command line."""

    def __init__(self) -> None:
        super().__init__()
        # input files; "-" (or no files at all) means stdin
        self.files: List[str] = []
        self.format = "table"
        # number of chunks each source is accumulated in before combining
        self.partitions = 1
        self.precision = DEFAULT_PRECISION
        self.version = False
