from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class EngineState:
    cursor: int = 0
    index: int = 0
    loop_stack: List[int] = field(default_factory=list)
    # True extremes of cursor travel: leftmost via '<', rightmost via '>'.
    leftmost: int = 0
    rightmost: int = 0

    @property
    def span(self) -> int:
        return abs(self.leftmost) + abs(self.rightmost)
