from .api import RunOptions, run_file, run_string
from .console import BufferedConsole, Console, StreamConsole
from .engine import DEFAULT_CELL_LIMIT, Engine, RunResult, RunStatus
from .errors import (
    BFExecError,
    InputError,
    MalformedProgram,
    ResourceLimitExceeded,
    UnbalancedLoop,
)
from .program import OPERATORS, Program, count_operators
from .report import format_report, format_stats
from .stats import ExecutionStats
from .tape import Tape

__all__ = [
    'Engine',
    'RunResult',
    'RunStatus',
    'RunOptions',
    'run_string',
    'run_file',
    'DEFAULT_CELL_LIMIT',
    'Program',
    'OPERATORS',
    'count_operators',
    'Tape',
    'Console',
    'StreamConsole',
    'BufferedConsole',
    'ExecutionStats',
    'format_report',
    'format_stats',
    'BFExecError',
    'InputError',
    'ResourceLimitExceeded',
    'UnbalancedLoop',
    'MalformedProgram',
]
