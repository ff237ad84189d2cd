from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


def _build_context(lines: List[str], line_no_1: int, *, context: int = 2) -> str:
    idx = max(1, line_no_1)
    start = max(1, idx - context)
    end = min(len(lines), idx + context)

    out: List[str] = []
    for i in range(start, end + 1):
        prefix = '>' if i == idx else ' '
        out.append(f"{prefix} {i:4d} | {lines[i - 1]}")
    return "\n".join(out)


def _hint_for(error: 'SvoParseError') -> Optional[str]:
    if isinstance(error, UnmatchedLoopEnd):
        return 'Every svoooo must close an earlier svooo. Remove it or add the missing loop start.'
    if isinstance(error, UnterminatedLoop):
        return 'Add a closing svoooo for this loop. Note that svooooo (5) is a pointer move, not a loop end.'
    return None


def _line_col(source: str, offset: int) -> tuple:
    line = source.count('\n', 0, offset) + 1
    col = offset - (source.rfind('\n', 0, offset) + 1) + 1
    return line, col


@dataclass
class SvoError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class SvoParseError(SvoError):
    position: int


@dataclass
class UnmatchedLoopEnd(SvoParseError):
    pass


@dataclass
class UnterminatedLoop(SvoParseError):
    pass


@dataclass
class SvoSourceError(SvoError):
    """A parse error located in the source text it came from."""
    cause: SvoParseError
    line: int
    column: int
    context: str


@dataclass
class SvoRuntimeError(SvoError):
    pointer: int


@dataclass
class PointerOutOfBounds(SvoRuntimeError):
    tape_size: int


@dataclass
class InputExhausted(SvoRuntimeError):
    pass


def unmatched_loop_end(position: int) -> UnmatchedLoopEnd:
    return UnmatchedLoopEnd(message=f"loop end at #{position} has no beginning", position=position)


def unterminated_loop(position: int) -> UnterminatedLoop:
    return UnterminatedLoop(message=f"loop starting at #{position} has no matching end", position=position)


def pointer_out_of_bounds(pointer: int, tape_size: int) -> PointerOutOfBounds:
    return PointerOutOfBounds(
        message=f"data pointer moved to {pointer}, outside the tape [0, {tape_size})",
        pointer=pointer,
        tape_size=tape_size,
    )


def input_exhausted(pointer: int) -> InputExhausted:
    return InputExhausted(message=f"read at cell {pointer} but input is exhausted", pointer=pointer)


def make_source_error(*, error: SvoParseError, source: str, offset: int) -> SvoSourceError:
    line, col = _line_col(source, offset)
    ctx = _build_context(source.split('\n'), line)
    hint = _hint_for(error)
    hint_block = f"\nHint: {hint}" if hint else ""
    return SvoSourceError(
        message=f"ParseError: {error.message} (line {line}, column {col})\n{ctx}{hint_block}",
        cause=error,
        line=line,
        column=col,
        context=ctx,
    )
