import json
import math
from typing import Any, Dict, List, Optional, Tuple

from rich import box
from rich.console import Console
from rich.table import Table

from runningmoments.runningstats import RunningStats

Summary = List[Tuple[str, RunningStats]]


class MomentsOutput:
    @staticmethod
    def _json_float(x: float) -> Optional[float]:
        # JSON has no NaN or Infinity.
        return x if math.isfinite(x) else None

    @staticmethod
    def as_dict(stats: RunningStats) -> Dict[str, Any]:
        """Derived statistics of one accumulator, JSON-ready."""
        f = MomentsOutput._json_float
        return {
            "count": stats.size(),
            "mean": f(stats.mean()),
            "variance": f(stats.var()),
            "stddev": f(stats.std()),
            "sem": f(stats.sem()),
            "skewness": f(stats.skewness()),
            "excess_kurtosis": f(stats.excess_kurtosis()),
        }

    @staticmethod
    def output_json(summary: Summary, total: RunningStats) -> str:
        payload: Dict[str, Any] = {
            "sources": {name: MomentsOutput.as_dict(s) for name, s in summary},
            "total": MomentsOutput.as_dict(total),
        }
        return json.dumps(payload, indent=4)

    @staticmethod
    def output_lines(summary: Summary, total: RunningStats) -> str:
        lines = [f"{name}: {s.describe()}" for name, s in summary]
        if len(summary) != 1:
            lines.append(f"total: {total.describe()}")
        return "\n".join(lines)

    @staticmethod
    def output_table(
        console: Console, summary: Summary, total: RunningStats, precision: int
    ) -> None:
        tbl = Table(
            box=box.MINIMAL_HEAVY_HEAD,
            title="running moments",
            collapse_padding=True,
        )
        tbl.add_column("source", style="bold", no_wrap=True)
        tbl.add_column("N", justify="right", style="dim")
        for heading in ("mean", "stddev", "sem", "skew", "ek"):
            tbl.add_column(heading, justify="right", style="blue", no_wrap=True)

        def row(name: str, s: RunningStats, style: Optional[str] = None) -> None:
            values = (s.mean(), s.std(), s.sem(), s.skewness(), s.excess_kurtosis())
            tbl.add_row(
                name,
                str(s.size()),
                *[f"{v:.{precision}f}" for v in values],
                style=style,
            )

        for name, s in summary:
            row(name, s)
        if len(summary) != 1:
            tbl.add_section()
            row("total", total, style="bold")
        console.print(tbl)
