from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .console import Console
from .engine import DEFAULT_CELL_LIMIT, Engine, RunResult, validate_cell_limit
from .program import Program


@dataclass(frozen=True)
class RunOptions:
    cell_limit: int = DEFAULT_CELL_LIMIT
    verbose: bool = False

    def __post_init__(self) -> None:
        validate_cell_limit(self.cell_limit)


def run_string(instructions: str, *, options: Optional[RunOptions] = None,
               console: Optional[Console] = None) -> RunResult:
    opts = RunOptions() if options is None else options
    engine = Engine(Program(instructions), cell_limit=opts.cell_limit, verbose=opts.verbose, console=console)
    return engine.run()


def run_file(path: str | Path, *, options: Optional[RunOptions] = None,
             console: Optional[Console] = None, encoding: str = "utf-8") -> RunResult:
    p = Path(path)
    return run_string(p.read_text(encoding=encoding), options=options, console=console)
