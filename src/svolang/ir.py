from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union


# ---------------- Opcodes (scanner output) ----------------
class OpCode(Enum):
    INC = 1          # svo
    DEC = 2          # svoo
    LOOP_BEGIN = 3   # svooo
    LOOP_END = 4     # svoooo
    MOVE_LEFT = 5    # svooooo
    MOVE_RIGHT = 6   # svoooooo
    WRITE = 7        # svooooooo
    READ = 8         # svoooooooo

    @property
    def token(self) -> str:
        return "sv" + "o" * self.value


# ---------------- Instructions (parser output) ----------------
@dataclass(frozen=True)
class MoveRight:
    pass

@dataclass(frozen=True)
class MoveLeft:
    pass

@dataclass(frozen=True)
class Inc:
    pass

@dataclass(frozen=True)
class Dec:
    pass

@dataclass(frozen=True)
class Write:
    pass

@dataclass(frozen=True)
class Read:
    pass

@dataclass(frozen=True)
class Loop:
    body: Tuple["Instruction", ...]

Instruction = Union[MoveRight, MoveLeft, Inc, Dec, Write, Read, Loop]

# Opcodes that map one-to-one onto a leaf instruction.
SIMPLE_INSTRUCTIONS = {
    OpCode.MOVE_RIGHT: MoveRight(),
    OpCode.MOVE_LEFT: MoveLeft(),
    OpCode.INC: Inc(),
    OpCode.DEC: Dec(),
    OpCode.WRITE: Write(),
    OpCode.READ: Read(),
}
