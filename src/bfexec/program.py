from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

OPERATORS = frozenset('+-<>.,[]')


def is_operator(ch: str) -> bool:
    return ch in OPERATORS


def count_operators(instructions: str) -> int:
    """Count the meaningful operator characters in ``instructions``."""
    return sum(1 for ch in instructions if is_operator(ch))


@dataclass(frozen=True)
class Program:
    """An instruction sequence, kept verbatim.

    Non-operator characters are not filtered out: they are no-ops at run
    time but still count as executed instructions.
    """

    instructions: str

    def __len__(self) -> int:
        return len(self.instructions)

    def __getitem__(self, index: int) -> str:
        return self.instructions[index]

    @property
    def operator_count(self) -> int:
        return count_operators(self.instructions)

    @classmethod
    def from_file(cls, path: str | Path, *, encoding: str = "utf-8") -> "Program":
        return cls(Path(path).read_text(encoding=encoding))
