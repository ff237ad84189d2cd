from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, List, Optional

import numpy as np

from .errors import SvoParseError, make_source_error
from .interpreter import DEFAULT_START_POINTER, DEFAULT_TAPE_SIZE, MachineState, execute
from .ir import Instruction
from .lexer import scan_spans
from .parser import parse
from .translator import translate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunOptions:
    tape_size: int = DEFAULT_TAPE_SIZE
    start_pointer: int = DEFAULT_START_POINTER


@dataclass(frozen=True)
class RunResult:
    tape: np.ndarray
    pointer: int
    steps: int


def compile_string(source: str) -> List[Instruction]:
    spans = scan_spans(source)
    logger.debug("scanned %d tokens from %d characters", len(spans), len(source))
    try:
        return parse([op for op, _ in spans])
    except SvoParseError as e:
        raise make_source_error(error=e, source=source, offset=spans[e.position][1]) from e


def compile_file(path: str | Path, *, encoding: str = "utf-8") -> List[Instruction]:
    p = Path(path)
    logger.debug("compiling %s", p)
    return compile_string(p.read_text(encoding=encoding))


def run_program(
    program: List[Instruction],
    *,
    options: Optional[RunOptions] = None,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
) -> RunResult:
    opts = options or RunOptions()
    state = MachineState.create(opts.tape_size, opts.start_pointer)
    logger.debug("running on a %d-cell tape from cell %d", opts.tape_size, opts.start_pointer)
    execute(
        program,
        state,
        sys.stdin.buffer if stdin is None else stdin,
        sys.stdout.buffer if stdout is None else stdout,
    )
    logger.debug("halted at cell %d after %d steps", state.pointer, state.steps)
    return RunResult(tape=state.tape, pointer=state.pointer, steps=state.steps)


def run_string(
    source: str,
    *,
    options: Optional[RunOptions] = None,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
) -> RunResult:
    return run_program(compile_string(source), options=options, stdin=stdin, stdout=stdout)


def run_file(
    path: str | Path,
    *,
    options: Optional[RunOptions] = None,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
    encoding: str = "utf-8",
) -> RunResult:
    program = compile_file(path, encoding=encoding)
    return run_program(program, options=options, stdin=stdin, stdout=stdout)


def translate_file(src: str | Path, dst: str | Path, *, encoding: str = "utf-8") -> str:
    # newline="" keeps line endings byte-for-byte
    with open(src, encoding=encoding, newline="") as f:
        text = translate(f.read())
    with open(dst, "w", encoding=encoding, newline="") as f:
        f.write(text)
    logger.debug("translated %s -> %s (%d characters)", src, dst, len(text))
    return text
