from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


def _build_context(instructions: str, index: int, *, context: int = 12) -> str:
    if not instructions:
        return ""
    idx = min(max(0, index), len(instructions) - 1)
    start = max(0, idx - context)
    end = min(len(instructions), idx + context + 1)

    window = instructions[start:end].replace('\n', ' ').replace('\t', ' ')
    marker = ' ' * (idx - start) + '^'
    return f"  {start:6d} | {window}\n         | {marker}"


def _hint_for(kind: str) -> Optional[str]:
    if kind == 'UnbalancedLoop':
        return 'Check for a "]" without a preceding "[" on the active loop path.'
    if kind == 'MalformedProgram':
        return 'Check for a missing closing "]".'
    if kind == 'ResourceLimitExceeded':
        return 'The program may be looping endlessly; raise the cell limit (-l) if it really needs more cells.'
    if kind == 'InputError':
        return 'Each "," reads one line; provide a non-empty line for every read.'
    return None


@dataclass
class BFExecError(Exception):
    message: str
    index: int = -1

    kind = 'Error'

    def __str__(self) -> str:
        return self.message


@dataclass
class InputError(BFExecError):
    kind = 'InputError'


@dataclass
class ResourceLimitExceeded(BFExecError):
    kind = 'ResourceLimitExceeded'


@dataclass
class UnbalancedLoop(BFExecError):
    kind = 'UnbalancedLoop'


@dataclass
class MalformedProgram(BFExecError):
    kind = 'MalformedProgram'


def make_error(cls: type, *, message: str, instructions: str, index: int) -> BFExecError:
    ctx = _build_context(instructions, index)
    hint = _hint_for(cls.kind)
    ctx_block = f"\n{ctx}" if ctx else ""
    hint_block = f"\nHint: {hint}" if hint else ""
    return cls(
        message=f"{cls.kind}: {message} (instruction {index}){ctx_block}{hint_block}",
        index=index,
    )
