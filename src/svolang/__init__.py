from .api import (
    RunOptions,
    RunResult,
    compile_file,
    compile_string,
    run_file,
    run_program,
    run_string,
    translate_file,
)
from .errors import (
    InputExhausted,
    PointerOutOfBounds,
    SvoError,
    SvoParseError,
    SvoRuntimeError,
    SvoSourceError,
    UnmatchedLoopEnd,
    UnterminatedLoop,
)
from .interpreter import MachineState, execute
from .ir import Instruction, OpCode
from .lexer import scan, scan_spans
from .parser import flatten, parse
from .translator import emit, emit_symbols, translate

__all__ = [
    'RunOptions',
    'RunResult',
    'compile_string',
    'compile_file',
    'run_program',
    'run_string',
    'run_file',
    'translate_file',
    'SvoError',
    'SvoParseError',
    'SvoRuntimeError',
    'SvoSourceError',
    'UnmatchedLoopEnd',
    'UnterminatedLoop',
    'PointerOutOfBounds',
    'InputExhausted',
    'MachineState',
    'execute',
    'Instruction',
    'OpCode',
    'scan',
    'scan_spans',
    'parse',
    'flatten',
    'translate',
    'emit',
    'emit_symbols',
]
