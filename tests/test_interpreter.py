#!/usr/bin/env python3
"""
Evaluator tests: cell arithmetic, pointer bounds, I/O and loops.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import io

import pytest

from svolang.errors import InputExhausted, PointerOutOfBounds, SvoRuntimeError
from svolang.interpreter import MachineState, execute
from svolang.ir import Dec, Inc, Loop, MoveLeft, MoveRight, Read, Write


def run(program, state=None, input_data=b""):
    state = state or MachineState.create()
    stdout = io.BytesIO()
    execute(program, state, io.BytesIO(input_data), stdout)
    return state, stdout.getvalue()


def test_default_state():
    state = MachineState.create()
    assert len(state.tape) == 1024
    assert state.pointer == 512
    assert not state.tape.any()


def test_increment_and_write():
    state, out = run([Inc(), Write()])
    assert out == b"\x01"
    assert state.tape[512] == 1


def test_decrement_wraps_to_255():
    state, out = run([Dec(), Write()])
    assert out == b"\xff"


def test_256_increments_restore_any_value():
    for start in (0, 1, 127, 128, 254, 255):
        state = MachineState.create()
        state.tape[state.pointer] = start
        run([Inc()] * 256, state)
        assert state.cell == start


def test_countdown_loop_runs_exactly_five_times():
    state = MachineState.create()
    state.tape[state.pointer] = 5
    # every pass decrements the cell and bumps the next cell as a counter
    run([Loop((Dec(), MoveRight(), Inc(), MoveLeft()))], state)
    assert state.cell == 0
    assert state.tape[state.pointer + 1] == 5


def test_loop_skipped_when_cell_is_zero():
    state, out = run([Loop((Write(),)), Inc(), Write()])
    assert out == b"\x01"


def test_loop_condition_follows_the_pointer():
    # [>] walks right until it finds a zero cell
    state = MachineState.create()
    state.tape[512:515] = [1, 1, 1]
    run([Loop((MoveRight(),))], state)
    assert state.pointer == 515


def test_moving_left_513_times_fails_on_the_last_move():
    state = MachineState.create()
    run([MoveLeft()] * 512, state)
    assert state.pointer == 0
    with pytest.raises(PointerOutOfBounds) as exc:
        run([MoveLeft()], state)
    assert exc.value.pointer == -1
    assert exc.value.tape_size == 1024
    assert state.pointer == 0


def test_moving_off_the_right_end():
    state = MachineState.create(tape_size=4, start_pointer=3)
    with pytest.raises(PointerOutOfBounds):
        run([MoveRight()], state)
    assert state.pointer == 3


def test_read_stores_one_byte():
    state, out = run([Read(), Write(), Read(), Write()], input_data=b"hi!")
    assert out == b"hi"
    assert state.cell == ord("i")


def test_read_after_input_exhausted():
    with pytest.raises(InputExhausted) as exc:
        run([Read(), Read()], input_data=b"x")
    assert isinstance(exc.value, SvoRuntimeError)
    assert exc.value.pointer == 512


def test_steps_are_counted():
    state, _ = run([Inc(), Inc(), Loop((Dec(),))])
    # three top-level instructions plus two passes of one instruction
    assert state.steps == 5


def test_invalid_machine_configuration():
    with pytest.raises(ValueError):
        MachineState.create(tape_size=0)
    with pytest.raises(ValueError):
        MachineState.create(tape_size=16, start_pointer=16)
