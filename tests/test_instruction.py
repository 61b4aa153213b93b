from __future__ import annotations

import string

from tapevm.instruction import INSTRUCTION_CHARS, Instruction, from_symbol, to_text


def test_eight_symbols_round_trip_through_text() -> None:
    assert len(Instruction) == 8
    for character in "><+-[],.":
        instruction = from_symbol(character)
        assert instruction is not None
        assert to_text(instruction) == character


def test_instruction_to_char_to_instruction_matches() -> None:
    for instruction in Instruction:
        assert Instruction.from_symbol(instruction.to_text()) is instruction


def test_other_characters_are_not_instructions() -> None:
    candidates = set(string.printable) | {"", "++", "é", "【", "\x00"}
    for character in candidates - INSTRUCTION_CHARS:
        assert from_symbol(character) is None


def test_symbol_table() -> None:
    assert Instruction.MOVE_RIGHT.to_text() == ">"
    assert Instruction.MOVE_LEFT.to_text() == "<"
    assert Instruction.INCREMENT.to_text() == "+"
    assert Instruction.DECREMENT.to_text() == "-"
    assert Instruction.LOOP_START.to_text() == "["
    assert Instruction.LOOP_END.to_text() == "]"
    assert Instruction.INPUT.to_text() == ","
    assert Instruction.OUTPUT.to_text() == "."
