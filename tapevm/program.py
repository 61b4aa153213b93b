from __future__ import annotations

from collections.abc import Iterable, Iterator

from pydantic import BaseModel, ConfigDict, Field

from tapevm.instruction import Instruction


class Program(BaseModel):
    """Ordered instruction sequence, immutable once built.

    Bracket balance is not checked here; an unmatched bracket only surfaces as a
    fault when the machine tries to jump across it.
    """

    model_config = ConfigDict(frozen=True)

    instructions: tuple[Instruction, ...] = Field(default_factory=tuple)

    @classmethod
    def from_instructions(cls, instructions: Iterable[Instruction]) -> Program:
        return cls(instructions=tuple(instructions))

    @classmethod
    def from_text(cls, source: str) -> Program:
        # Anything that is not one of the eight symbols is a comment.
        found: list[Instruction] = []
        for character in source:
            instruction = Instruction.from_symbol(character)
            if instruction is not None:
                found.append(instruction)
        return cls(instructions=tuple(found))

    def to_text(self) -> str:
        return "".join(i.to_text() for i in self.instructions)

    def get(self, index: int) -> Instruction | None:
        if index < 0 or index >= len(self.instructions):
            return None
        return self.instructions[index]

    def __len__(self) -> int:
        return len(self.instructions)

    def __iter__(self) -> Iterator[Instruction]:  # type: ignore[override]
        return iter(self.instructions)

    def __getitem__(self, index: int) -> Instruction:
        return self.instructions[index]

    def __str__(self) -> str:
        return self.to_text()


def build(source: str) -> Program:
    return Program.from_text(source)


def to_text(program: Program) -> str:
    return program.to_text()
