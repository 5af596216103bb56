import argparse
import re
import sys
from textwrap import dedent
from typing import Any, Callable, List, Optional

from runningmoments.moments_arguments import MomentsArguments
from runningmoments.moments_config import OUTPUT_FORMATS, moments_date, moments_version


def _colorize_help_for_rich(text: str) -> str:
    """Apply argparse-style colors (as in Python 3.14) using Rich markup."""
    text = re.sub(
        r"^(usage:|options:|positional arguments:|optional arguments:)",
        r"[bold blue]\1[/bold blue]",
        text,
        flags=re.MULTILINE,
    )
    text = re.sub(
        r"(\[bold blue\]usage:\[/bold blue\] )(\S+)",
        r"\1[bold magenta]\2[/bold magenta]",
        text,
    )
    # Long options, at line start or after ", " (as in "-h, --help")
    text = re.sub(
        r"(^  |, )(--[a-zA-Z][a-zA-Z0-9_-]*)",
        r"\1[bold cyan]\2[/bold cyan]",
        text,
        flags=re.MULTILINE,
    )
    text = re.sub(
        r"(^  )(-[a-zA-Z])(,|\s)",
        r"\1[bold green]\2[/bold green]\3",
        text,
        flags=re.MULTILINE,
    )
    # Metavars following an option
    text = re.sub(
        r"(\[/bold cyan\] )([A-Z][A-Z0-9_]*)\b",
        r"\1[bold yellow]\2[/bold yellow]",
        text,
    )
    return text


class RichArgParser(argparse.ArgumentParser):
    """ArgumentParser that uses Rich for colored output on Python < 3.14."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        if sys.version_info < (3, 14):
            from rich.console import Console

            self._console: Optional[Any] = Console()
        else:
            self._console = None
        super().__init__(*args, **kwargs)

    def _print_message(self, message: Optional[str], file: Any = None) -> None:
        if message:
            if self._console is not None:
                self._console.print(_colorize_help_for_rich(message), highlight=False)
            else:
                print(message, end="", file=file)


def _int_at_least(minimum: int) -> Callable[[str], int]:
    def check(value: str) -> int:
        n = int(value)
        if n < minimum:
            raise argparse.ArgumentTypeError(f"must be at least {minimum}, got {n}")
        return n

    return check


class MomentsParseArgs:
    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        defaults = MomentsArguments()
        usage = dedent(
            f"""runningmoments: streaming mean, variance, skewness and kurtosis, version {moments_version} ({moments_date})

command-line:
  % runningmoments [options] [file ...]
or
  % python3 -m runningmoments [options] [file ...]

Numbers are read whitespace-separated from each file ("-" or no file reads stdin).
Each file is summarized separately and all of them are combined into a total.
"""
        )
        parser = RichArgParser(
            prog="runningmoments",
            description=usage,
            formatter_class=argparse.RawTextHelpFormatter,
            allow_abbrev=False,
        )
        parser.add_argument(
            "files",
            nargs="*",
            default=defaults.files,
            help="files holding the samples (default: stdin)",
        )
        parser.add_argument(
            "--version",
            dest="version",
            action="store_const",
            const=True,
            default=defaults.version,
            help="prints the version number and exits",
        )
        parser.add_argument(
            "--format",
            dest="format",
            choices=OUTPUT_FORMATS,
            default=defaults.format,
            help=f"output format (default: {defaults.format})",
        )
        parser.add_argument(
            "--partitions",
            dest="partitions",
            type=_int_at_least(1),
            default=defaults.partitions,
            help="accumulate each source in this many chunks, then combine them "
            f"(default: {defaults.partitions})",
        )
        parser.add_argument(
            "--precision",
            dest="precision",
            type=_int_at_least(0),
            default=defaults.precision,
            help=f"decimal places in table output (default: {defaults.precision})",
        )
        return parser

    @staticmethod
    def parse_args(argv: Optional[List[str]] = None) -> MomentsArguments:
        parser = MomentsParseArgs.build_parser()
        args = parser.parse_args(argv, namespace=MomentsArguments())
        if args.version:
            print(f"runningmoments version {moments_version} ({moments_date})")
            sys.exit(0)
        return args
