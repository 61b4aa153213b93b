from __future__ import annotations

from enum import Enum


class Instruction(str, Enum):
    """The eight atomic operations; each value is its canonical source character."""

    MOVE_RIGHT = ">"
    MOVE_LEFT = "<"
    INCREMENT = "+"
    DECREMENT = "-"
    LOOP_START = "["
    LOOP_END = "]"
    INPUT = ","
    OUTPUT = "."

    def to_text(self) -> str:
        return self.value

    @classmethod
    def from_symbol(cls, character: str) -> Instruction | None:
        return _BY_SYMBOL.get(character)


_BY_SYMBOL: dict[str, Instruction] = {i.value: i for i in Instruction}

INSTRUCTION_CHARS = frozenset(_BY_SYMBOL)


def from_symbol(character: str) -> Instruction | None:
    return Instruction.from_symbol(character)


def to_text(instruction: Instruction) -> str:
    return instruction.to_text()
