from __future__ import annotations

import pytest
from pydantic import ValidationError

from tapevm.instruction import Instruction
from tapevm.program import Program, build, to_text

PROGRAM_STRING = "[->+<],."


def _program() -> Program:
    return Program.from_instructions(
        [
            Instruction.LOOP_START,
            Instruction.DECREMENT,
            Instruction.MOVE_RIGHT,
            Instruction.INCREMENT,
            Instruction.MOVE_LEFT,
            Instruction.LOOP_END,
            Instruction.INPUT,
            Instruction.OUTPUT,
        ]
    )


def test_simple_program_from_string() -> None:
    assert build(PROGRAM_STRING) == _program()


def test_simple_program_to_string() -> None:
    assert to_text(_program()) == PROGRAM_STRING
    assert str(_program()) == PROGRAM_STRING


def test_text_round_trip_preserves_instructions() -> None:
    p = _program()
    assert build(to_text(p)) == p
    assert build(to_text(Program())) == Program()


def test_comments_are_dropped_wherever_they_appear() -> None:
    commented = "copy cell [\n  - decrement\n  >+< move one right\n] then read, echo."
    assert build(commented) == build(PROGRAM_STRING)
    assert build(commented).to_text() == PROGRAM_STRING


def test_build_is_deterministic() -> None:
    src = "hello + world [>-<] ."
    assert build(src) == build(src)


def test_unbalanced_brackets_are_accepted_at_build_time() -> None:
    p = build("]][")
    assert len(p) == 3
    assert p[0] is Instruction.LOOP_END


def test_indexing_past_either_end_is_none() -> None:
    p = build("+-")
    assert p.get(0) is Instruction.INCREMENT
    assert p.get(1) is Instruction.DECREMENT
    assert p.get(2) is None
    assert p.get(-1) is None
    assert list(p) == [Instruction.INCREMENT, Instruction.DECREMENT]


def test_program_is_immutable() -> None:
    p = build("+")
    with pytest.raises(ValidationError):
        p.instructions = (Instruction.DECREMENT,)  # type: ignore[misc]
