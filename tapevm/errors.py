from __future__ import annotations


class VMFault(Exception):
    """Terminal, non-retriable condition that ends a run."""

    def __init__(
        self,
        message: str,
        *,
        program_counter: int | None = None,
        data_pointer: int | None = None,
    ) -> None:
        self.program_counter = program_counter
        self.data_pointer = data_pointer
        prefix = ""
        if program_counter is not None:
            prefix = f"pc {program_counter}: "
        super().__init__(prefix + str(message))


class MissingMatchingLoopEnd(VMFault):
    pass


class MissingMatchingLoopStart(VMFault):
    pass


class InputFault(VMFault):
    pass


class InputExhausted(InputFault):
    pass


class OutputFault(VMFault):
    pass


class DataPointerUnderflow(VMFault):
    pass
