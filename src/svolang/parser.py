from __future__ import annotations

from typing import List, Optional, Sequence

from .errors import unmatched_loop_end, unterminated_loop
from .ir import SIMPLE_INSTRUCTIONS, Instruction, Loop, OpCode


def parse(opcodes: Sequence[OpCode]) -> List[Instruction]:
    """
    Structure a flat opcode sequence into an instruction tree.

    Matched LOOP_BEGIN/LOOP_END pairs become Loop nodes whose bodies are
    structured by recursing over the enclosed index range. Positions in
    errors are indices into ``opcodes``.

    Raises:
        UnmatchedLoopEnd: a loop end with no open loop.
        UnterminatedLoop: a loop start still open at end of input.
    """
    return _parse_range(opcodes, 0, len(opcodes))


def _parse_range(opcodes: Sequence[OpCode], start: int, end: int) -> List[Instruction]:
    program: List[Instruction] = []
    depth = 0
    loop_start: Optional[int] = None

    for i in range(start, end):
        op = opcodes[i]
        if depth == 0:
            if op is OpCode.LOOP_BEGIN:
                loop_start = i
                depth = 1
            elif op is OpCode.LOOP_END:
                raise unmatched_loop_end(i)
            else:
                program.append(SIMPLE_INSTRUCTIONS[op])
            continue

        # inside a loop: only track nesting, the body is parsed on close
        if op is OpCode.LOOP_BEGIN:
            depth += 1
        elif op is OpCode.LOOP_END:
            depth -= 1
            if depth == 0:
                body = _parse_range(opcodes, loop_start + 1, i)
                program.append(Loop(tuple(body)))

    if depth != 0:
        raise unterminated_loop(loop_start)

    return program


def flatten(program: Sequence[Instruction]) -> List[OpCode]:
    """Inverse of parse(): depth-first opcodes of an instruction tree."""
    out: List[OpCode] = []
    for instr in program:
        if isinstance(instr, Loop):
            out.append(OpCode.LOOP_BEGIN)
            out.extend(flatten(instr.body))
            out.append(OpCode.LOOP_END)
        else:
            out.append(_OPCODE_FOR[type(instr)])
    return out


_OPCODE_FOR = {type(instr): op for op, instr in SIMPLE_INSTRUCTIONS.items()}
