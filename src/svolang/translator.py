from __future__ import annotations

from typing import Dict, List, Sequence

from .ir import Instruction, Loop, OpCode
from .parser import flatten

SYMBOLS: Dict[str, OpCode] = {
    "+": OpCode.INC,
    "-": OpCode.DEC,
    "[": OpCode.LOOP_BEGIN,
    "]": OpCode.LOOP_END,
    "<": OpCode.MOVE_LEFT,
    ">": OpCode.MOVE_RIGHT,
    ".": OpCode.WRITE,
    ",": OpCode.READ,
}

_TO_TOKENS = str.maketrans({sym: op.token for sym, op in SYMBOLS.items()})
_TO_SYMBOL = {op: sym for sym, op in SYMBOLS.items()}


def translate(text: str) -> str:
    """Replace each of ``+-[]<>.,`` with its token; everything else is kept as is."""
    return text.translate(_TO_TOKENS)


def emit(program: Sequence[Instruction]) -> str:
    """Render an instruction tree as space-separated tokens."""
    return " ".join(op.token for op in flatten(program))


def emit_symbols(program: Sequence[Instruction]) -> str:
    out: List[str] = []
    for instr in program:
        if isinstance(instr, Loop):
            out.append("[" + emit_symbols(instr.body) + "]")
        else:
            out.append(_TO_SYMBOL[flatten([instr])[0]])
    return "".join(out)
