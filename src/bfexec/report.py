from __future__ import annotations

from typing import List

from .engine import RunResult
from .stats import ExecutionStats


def _format_seconds(value: float) -> str:
    return f"{value:.3g}"


def format_stats(stats: ExecutionStats) -> str:
    lines: List[str] = [
        f"Operator count:        {stats.operator_count}",
        f"Operations performed:  {stats.instructions_executed}",
        f"Cells used:            {stats.cells_used} ({stats.leftmost} : {stats.rightmost})",
        f"Shift operations:      {stats.shift_operations} "
        f"({stats.left_shifts} left, {stats.right_shifts} right)",
        f"Time taken:            {_format_seconds(stats.elapsed_seconds)}s",
        f"Operations per second: {_format_seconds(stats.operations_per_second)}",
    ]
    return "\n".join(lines)


def format_report(result: RunResult) -> str:
    """Render the outcome of a run: the error (if any) then statistics (if collected)."""
    parts: List[str] = []
    if result.error is not None:
        parts.append(str(result.error))
    if result.stats is not None:
        parts.append(format_stats(result.stats))
    return "\n\n".join(parts)
