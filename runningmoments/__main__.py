import sys
import traceback
from typing import IO, List, Optional

from rich.console import Console

from runningmoments.moments_arguments import MomentsArguments
from runningmoments.moments_output import MomentsOutput, Summary
from runningmoments.moments_parseargs import MomentsParseArgs
from runningmoments.reduction import combine_all, partitioned
from runningmoments.runningstats import RunningStats


class SampleParseError(ValueError):
    """A token in the input is not a number."""


def read_samples(stream: IO[str], name: str) -> List[float]:
    """Parse whitespace-separated numbers from a text stream."""
    samples = []
    for lineno, line in enumerate(stream, start=1):
        for token in line.split():
            try:
                samples.append(float(token))
            except ValueError:
                raise SampleParseError(
                    f"{name}:{lineno}: not a number: {token!r}"
                ) from None
    return samples


def accumulate(samples: List[float], partitions: int) -> RunningStats:
    if partitions == 1:
        s = RunningStats()
        s.extend(samples)
        return s
    return combine_all(partitioned(samples, partitions))


def summarize(args: MomentsArguments) -> Summary:
    summary: Summary = []
    for name in args.files or ["-"]:
        if name == "-":
            samples = read_samples(sys.stdin, "<stdin>")
        else:
            with open(name, encoding="utf-8") as f:
                samples = read_samples(f, name)
        summary.append((name, accumulate(samples, args.partitions)))
    return summary


def run(args: MomentsArguments) -> None:
    summary = summarize(args)
    total = combine_all([s for _, s in summary])
    if args.format == "json":
        print(MomentsOutput.output_json(summary, total))
    elif args.format == "line":
        print(MomentsOutput.output_lines(summary, total))
    else:
        MomentsOutput.output_table(Console(), summary, total, args.precision)


def main(argv: Optional[List[str]] = None) -> None:
    args = MomentsParseArgs.parse_args(argv)
    try:
        run(args)
    except KeyboardInterrupt:
        print("runningmoments interrupted.", file=sys.stderr)
        sys.exit(1)
    except (OSError, SampleParseError) as exc:
        sys.stderr.write(f"ERROR: {exc}\n")
        sys.exit(1)
    except Exception as exc:
        sys.stderr.write(f"ERROR: runningmoments failed: {exc}\n")
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
