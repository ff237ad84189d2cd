from __future__ import annotations

from dataclasses import dataclass, field
from typing import BinaryIO, Sequence

import numpy as np

from .errors import input_exhausted, pointer_out_of_bounds
from .ir import Dec, Inc, Instruction, Loop, MoveLeft, MoveRight, Read, Write

DEFAULT_TAPE_SIZE = 1024
DEFAULT_START_POINTER = 512


@dataclass
class MachineState:
    tape: np.ndarray = field(default_factory=lambda: np.zeros(DEFAULT_TAPE_SIZE, dtype=np.uint8))
    pointer: int = DEFAULT_START_POINTER
    steps: int = 0

    @classmethod
    def create(cls, tape_size: int = DEFAULT_TAPE_SIZE, start_pointer: int = DEFAULT_START_POINTER) -> "MachineState":
        if tape_size < 1:
            raise ValueError(f"tape size must be positive, got {tape_size}")
        if not 0 <= start_pointer < tape_size:
            raise ValueError(f"start pointer {start_pointer} is outside the tape [0, {tape_size})")
        return cls(tape=np.zeros(tape_size, dtype=np.uint8), pointer=start_pointer)

    @property
    def cell(self) -> int:
        return int(self.tape[self.pointer])


def execute(program: Sequence[Instruction], state: MachineState, stdin: BinaryIO, stdout: BinaryIO) -> None:
    """
    Run an instruction tree against ``state``.

    Cells wrap modulo 256. Moving the pointer off either end of the tape
    raises PointerOutOfBounds and leaves the pointer where it was; a read
    with no input left raises InputExhausted. Loops re-check whatever cell
    the pointer addresses after each full pass over the body.
    """
    tape = state.tape
    size = len(tape)

    for instr in program:
        state.steps += 1
        if isinstance(instr, MoveRight):
            if state.pointer + 1 >= size:
                raise pointer_out_of_bounds(state.pointer + 1, size)
            state.pointer += 1
        elif isinstance(instr, MoveLeft):
            if state.pointer - 1 < 0:
                raise pointer_out_of_bounds(state.pointer - 1, size)
            state.pointer -= 1
        elif isinstance(instr, Inc):
            tape[state.pointer] = (int(tape[state.pointer]) + 1) & 0xFF
        elif isinstance(instr, Dec):
            tape[state.pointer] = (int(tape[state.pointer]) - 1) & 0xFF
        elif isinstance(instr, Write):
            stdout.write(bytes((int(tape[state.pointer]),)))
            stdout.flush()
        elif isinstance(instr, Read):
            data = stdin.read(1)
            if not data:
                raise input_exhausted(state.pointer)
            tape[state.pointer] = data[0]
        elif isinstance(instr, Loop):
            while tape[state.pointer] != 0:
                execute(instr.body, state, stdin, stdout)
        else:
            raise TypeError(f"not an instruction: {instr!r}")
