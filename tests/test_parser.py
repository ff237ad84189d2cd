#!/usr/bin/env python3
"""
Structurer tests: loop nesting and structural errors.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from svolang.errors import SvoParseError, UnmatchedLoopEnd, UnterminatedLoop
from svolang.ir import Dec, Inc, Loop, MoveLeft, MoveRight, OpCode, Read, Write
from svolang.parser import flatten, parse

B = OpCode.LOOP_BEGIN
E = OpCode.LOOP_END


def test_empty_program():
    assert parse([]) == []


def test_flat_program():
    ops = [OpCode.INC, OpCode.DEC, OpCode.MOVE_LEFT, OpCode.MOVE_RIGHT, OpCode.WRITE, OpCode.READ]
    assert parse(ops) == [Inc(), Dec(), MoveLeft(), MoveRight(), Write(), Read()]


def test_single_loop():
    assert parse([OpCode.INC, B, OpCode.DEC, E, OpCode.WRITE]) == [Inc(), Loop((Dec(),)), Write()]


def test_empty_loop():
    assert parse([B, E]) == [Loop(())]


def test_nested_and_adjacent_loops():
    ops = [B, OpCode.INC, B, OpCode.DEC, E, E, B, E]
    assert parse(ops) == [Loop((Inc(), Loop((Dec(),)))), Loop(())]


def test_deep_nesting():
    depth = 200
    program = parse([B] * depth + [OpCode.INC] + [E] * depth)
    node = program[0]
    for _ in range(depth - 1):
        assert isinstance(node, Loop)
        node = node.body[0]
    assert node == Loop((Inc(),))


def test_flatten_round_trip():
    ops = [OpCode.READ, B, OpCode.MOVE_RIGHT, B, B, OpCode.INC, E, OpCode.DEC, E, E, OpCode.WRITE, B, E]
    assert flatten(parse(ops)) == ops


def test_loop_body_flattens_to_enclosed_opcodes():
    inner = [OpCode.INC, B, OpCode.DEC, E, OpCode.WRITE]
    (loop,) = parse([B] + inner + [E])
    assert flatten(loop.body) == inner


def test_lone_loop_end():
    with pytest.raises(UnmatchedLoopEnd) as exc:
        parse([E])
    assert exc.value.position == 0


def test_unmatched_end_reports_its_position():
    with pytest.raises(UnmatchedLoopEnd) as exc:
        parse([OpCode.INC, B, E, E, OpCode.INC])
    assert exc.value.position == 3
    assert "#3" in str(exc.value)


def test_lone_loop_begin():
    with pytest.raises(UnterminatedLoop) as exc:
        parse([B])
    assert exc.value.position == 0


def test_unterminated_reports_outermost_start():
    with pytest.raises(UnterminatedLoop) as exc:
        parse([OpCode.INC, OpCode.INC, B, B, E])
    assert exc.value.position == 2
    assert isinstance(exc.value, SvoParseError)


def test_first_error_wins():
    # unmatched end comes before the unterminated loop
    with pytest.raises(UnmatchedLoopEnd):
        parse([E, B])
