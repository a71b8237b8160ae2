from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

from .console import Console, StreamConsole
from .errors import (
    BFExecError,
    InputError,
    MalformedProgram,
    ResourceLimitExceeded,
    UnbalancedLoop,
    make_error,
)
from .program import Program
from .state import EngineState
from .stats import ExecutionStats
from .tape import Tape

logger = logging.getLogger(__name__)

DEFAULT_CELL_LIMIT = 256

# Printable ASCII; anything else is written as '?'.
PRINTABLE_MIN = ord(' ')
PRINTABLE_MAX = ord('~')


class RunStatus(enum.Enum):
    COMPLETED = 'Completed'
    FAILED = 'Failed'


@dataclass(frozen=True)
class RunResult:
    status: RunStatus
    error: Optional[BFExecError] = None
    stats: Optional[ExecutionStats] = None
    tape: Dict[int, int] = field(default_factory=dict)
    cursor: int = 0

    @property
    def ok(self) -> bool:
        return self.status is RunStatus.COMPLETED

    @property
    def error_kind(self) -> Optional[str]:
        return None if self.error is None else self.error.kind


def validate_cell_limit(cell_limit: int) -> int:
    if isinstance(cell_limit, bool) or not isinstance(cell_limit, int) or cell_limit <= 0:
        raise ValueError(f"cell_limit must be a positive integer, got {cell_limit!r}")
    return cell_limit


class Engine:
    """
    Interpreter for one run of a program.

    Owns all mutable run state: tape, cursor, instruction index, the
    loop-resolution stack, cursor extremes and statistics. An instance runs
    exactly once; construct a fresh one per run.

    Loop handling:
    - '[' on a zero cell scans forward to its matching ']' (nesting aware)
      and resumes after it; the loop stack is not touched.
    - '[' on a non-zero cell pushes its own index, unless that index is
      already on top (re-evaluation after a repeat).
    - ']' on a non-zero cell jumps back to the index on top of the stack
      without popping, so that '[' is evaluated again.
    - ']' on a zero cell pops the stack and falls through.

    Program defects end the run with a failed ``RunResult``; they are not
    raised to the caller.
    """

    def __init__(self, program, *, cell_limit: int = DEFAULT_CELL_LIMIT, verbose: bool = False,
                 console: Optional[Console] = None):
        self.program = program if isinstance(program, Program) else Program(program)
        self.cell_limit = validate_cell_limit(cell_limit)
        self.verbose = verbose
        self.console = console if console is not None else StreamConsole()
        self.tape = Tape()
        self.state = EngineState()
        self.stats = ExecutionStats()
        self._ran = False

    # ===== Public entry point =====

    def run(self) -> RunResult:
        if self._ran:
            raise RuntimeError("Engine has already run; create a new Engine for each run")
        self._ran = True

        self.stats.operator_count = self.program.operator_count
        logger.debug("run start: %d instructions, cell limit %d", len(self.program), self.cell_limit)
        self.stats.start()
        error: Optional[BFExecError] = None
        try:
            self._execute()
        except BFExecError as exc:
            error = exc
            logger.info("run failed with %s at instruction %d", exc.kind, exc.index)
        self.stats.finish(leftmost=self.state.leftmost, rightmost=self.state.rightmost)

        status = RunStatus.COMPLETED if error is None else RunStatus.FAILED
        logger.debug("run finished: %s after %d instructions", status.value, self.stats.instructions_executed)
        return RunResult(
            status=status,
            error=error,
            stats=self.stats if self.verbose else None,
            tape=self.tape.snapshot(),
            cursor=self.state.cursor,
        )

    # ===== Main loop =====

    def _execute(self) -> None:
        state = self.state
        code = self.program.instructions
        length = len(code)

        while state.index < length:
            self.stats.instructions_executed += 1
            if state.span > self.cell_limit:
                raise self._error(
                    ResourceLimitExceeded,
                    f"cell span {state.span} exceeds limit {self.cell_limit} "
                    f"(cells {state.leftmost} : {state.rightmost})",
                )

            ch = code[state.index]
            if ch == '+':
                self.tape.increment(state.cursor)
            elif ch == '-':
                self.tape.decrement(state.cursor)
            elif ch == '>':
                state.cursor += 1
                self.stats.right_shifts += 1
                state.rightmost = max(state.rightmost, state.cursor)
            elif ch == '<':
                state.cursor -= 1
                self.stats.left_shifts += 1
                state.leftmost = min(state.leftmost, state.cursor)
            elif ch == '.':
                self._output()
            elif ch == ',':
                self._input()
            elif ch == '[':
                self._open_loop()
            elif ch == ']':
                if self._close_loop():
                    continue
            state.index += 1

    # ===== I/O =====

    def _output(self) -> None:
        value = self.tape.read(self.state.cursor)
        if value < PRINTABLE_MIN or value > PRINTABLE_MAX:
            self.console.write_char('?')
        else:
            self.console.write_char(chr(value))

    def _input(self) -> None:
        try:
            line = self.console.read_line()
        except (OSError, EOFError, ValueError) as exc:
            raise self._error(InputError, f"console read failed: {exc}") from exc
        if not line:
            raise self._error(InputError, "empty input line")
        self.tape.write(self.state.cursor, line[0])

    # ===== Loop resolution =====

    def _open_loop(self) -> None:
        state = self.state
        if self.tape.read(state.cursor) == 0:
            state.index = self._find_matching_close(state.index)
            return
        stack = state.loop_stack
        if not stack or stack[-1] != state.index:
            stack.append(state.index)

    def _find_matching_close(self, open_index: int) -> int:
        code = self.program.instructions
        depth = 1
        index = open_index
        while depth:
            index += 1
            if index >= len(code):
                raise self._error(MalformedProgram, "no matching ']' for '['", index=open_index)
            if code[index] == '[':
                depth += 1
            elif code[index] == ']':
                depth -= 1
        return index

    def _close_loop(self) -> bool:
        """Resolve ']'. Returns True when execution jumped back to '['."""
        state = self.state
        stack = state.loop_stack
        if self.tape.read(state.cursor) != 0:
            if not stack:
                raise self._error(UnbalancedLoop, "']' repeats a loop that was never entered")
            state.index = stack[-1]
            return True
        if not stack:
            raise self._error(UnbalancedLoop, "']' closes a loop that was never entered")
        stack.pop()
        return False

    def _error(self, cls, message: str, *, index: Optional[int] = None) -> BFExecError:
        return make_error(
            cls,
            message=message,
            instructions=self.program.instructions,
            index=self.state.index if index is None else index,
        )
