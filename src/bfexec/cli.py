from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .api import RunOptions, run_string
from .console import StreamConsole
from .engine import DEFAULT_CELL_LIMIT
from .program import Program
from .report import format_stats

logger = logging.getLogger(__name__)

INPUT_PROMPT = "\n> "


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"cell limit value non-parse-able: {text!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"cell limit must be positive, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bfexec",
        description="Run a tape-based eight-operator program with a cell-span safety limit.",
    )
    parser.add_argument("instructions", nargs="*", help="Instructions given literally (concatenated)")
    parser.add_argument("-f", "--file", help="Read the instructions from FILE instead")
    parser.add_argument("-l", "--cell-limit", type=_positive_int, default=DEFAULT_CELL_LIMIT,
                        help=f"Limit on the cell span a program may use (default {DEFAULT_CELL_LIMIT})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Report execution statistics")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Logging level (default WARNING)")
    return parser


def load_instructions(args: argparse.Namespace) -> str:
    """Resolve the instruction text from a file or the literal arguments."""
    literal = "".join(args.instructions)
    if args.file is None:
        if not literal:
            raise ValueError("No arguments provided")
        return literal
    if literal:
        raise ValueError("Both file and literal instructions provided")
    try:
        return Program.from_file(args.file).instructions
    except (OSError, UnicodeDecodeError) as exc:
        raise ValueError(f"Couldn't open file: {args.file}") from exc


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    sys.stdout.write("\n")
    try:
        instructions = load_instructions(args)
    except ValueError as exc:
        logger.debug("could not load instructions", exc_info=True)
        sys.stderr.write(f"{exc}\n")
        return 1

    prompt = INPUT_PROMPT if sys.stdin.isatty() else ""
    console = StreamConsole(sys.stdin, sys.stdout, prompt=prompt)
    options = RunOptions(cell_limit=args.cell_limit, verbose=args.verbose)

    result = run_string(instructions, options=options, console=console)
    sys.stdout.write("\n\n")

    if result.error is not None:
        sys.stderr.write(f"{result.error}\n")
    if result.stats is not None:
        sys.stdout.write(format_stats(result.stats) + "\n")
    return 0 if result.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
