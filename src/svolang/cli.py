from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

import numpy as np

from .api import RunOptions, RunResult, run_file, translate_file
from .errors import SvoError
from .interpreter import DEFAULT_START_POINTER, DEFAULT_TAPE_SIZE

logger = logging.getLogger(__name__)

DUMP_ROWS = 4
DUMP_WIDTH = 8


def format_dump(tape: np.ndarray, pointer: int, *, rows: int = DUMP_ROWS, width: int = DUMP_WIDTH) -> str:
    """Rows of cells around the pointer; the pointed-to cell is bracketed."""
    span = rows * width
    lo = max(0, (pointer // width) * width - (rows // 2) * width)
    hi = min(len(tape), lo + span)
    window = tape[lo:hi]

    out: List[str] = []
    for row_start in range(0, len(window), width):
        cells = []
        for k, value in enumerate(window[row_start:row_start + width]):
            addr = lo + row_start + k
            cells.append(f"[{int(value):3d}]" if addr == pointer else f" {int(value):3d} ")
        out.append(f"{lo + row_start:5d} |" + "".join(cells))
    return "\n".join(out)


def _dump(result: RunResult, stream: TextIO) -> None:
    nonzero = int(np.count_nonzero(result.tape))
    stream.write(f"pointer={result.pointer} steps={result.steps} nonzero_cells={nonzero}\n")
    stream.write(format_dump(result.tape, result.pointer) + "\n")


def _cmd_run(args: argparse.Namespace) -> int:
    options = RunOptions(tape_size=args.tape_size, start_pointer=args.start)
    result = run_file(args.file, options=options)
    sys.stdout.flush()
    if args.dump:
        _dump(result, sys.stderr)
    return 0


def _cmd_translate(args: argparse.Namespace) -> int:
    translate_file(args.src, args.dst)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="svolang", description="svo interpreter and translator.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_run = sub.add_parser("run", help="Run a .svo program")
    p_run.add_argument("file", help="Program source")
    p_run.add_argument("--tape-size", type=int, default=DEFAULT_TAPE_SIZE, help=f"Number of cells (default {DEFAULT_TAPE_SIZE})")
    p_run.add_argument("--start", type=int, default=DEFAULT_START_POINTER, help=f"Initial data pointer (default {DEFAULT_START_POINTER})")
    p_run.add_argument("--dump", action="store_true", help="Print the tape around the pointer to stderr after the run")
    p_run.set_defaults(func=_cmd_run)

    p_tr = sub.add_parser("translate", help="Translate +-[]<>., source to svo tokens")
    p_tr.add_argument("src", help="Input file in the symbol encoding")
    p_tr.add_argument("dst", help="Output .svo file")
    p_tr.set_defaults(func=_cmd_translate)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )

    try:
        return args.func(args)
    except (SvoError, OSError, ValueError) as e:
        logger.debug("%s failed", args.command, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    except RecursionError:
        # parse and execute recurse once per loop nesting level
        print(f"error: loops nested deeper than the recursion limit ({sys.getrecursionlimit()})", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
