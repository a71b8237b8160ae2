from __future__ import annotations

import time
from dataclasses import dataclass, field


@dataclass
class ExecutionStats:
    """Counters observed during a run. Never consulted for control flow."""

    operator_count: int = 0
    instructions_executed: int = 0
    left_shifts: int = 0
    right_shifts: int = 0
    leftmost: int = 0
    rightmost: int = 0
    elapsed_seconds: float = 0.0
    operations_per_second: float = 0.0
    _started: float = field(default=0.0, repr=False, compare=False)

    @property
    def cells_used(self) -> int:
        return abs(self.leftmost) + abs(self.rightmost) + 1

    @property
    def shift_operations(self) -> int:
        return self.left_shifts + self.right_shifts

    def start(self) -> None:
        self._started = time.perf_counter()

    def finish(self, *, leftmost: int, rightmost: int) -> None:
        self.leftmost = leftmost
        self.rightmost = rightmost
        self.elapsed_seconds = time.perf_counter() - self._started
        if self.elapsed_seconds > 0:
            self.operations_per_second = self.instructions_executed / self.elapsed_seconds
        else:
            self.operations_per_second = 0.0
