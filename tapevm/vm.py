from __future__ import annotations

from tapevm.errors import (
    DataPointerUnderflow,
    InputExhausted,
    InputFault,
    MissingMatchingLoopEnd,
    MissingMatchingLoopStart,
    OutputFault,
)
from tapevm.instruction import Instruction
from tapevm.program import Program
from tapevm.schemas import EofPolicy, MachineSnapshot, VMSettings, VMStatus
from tapevm.streams import ByteSink, ByteSource, EndOfStream, flush, read_byte, write_byte
from tapevm.tape import Tape


class VirtualMachine:
    """Executes a Program against a sparse tape and borrowed byte streams.

    The streams belong to the caller; the machine never closes them. Loop jumps
    rescan the program on every crossing instead of using a jump table, so an
    unmatched bracket is only reported when execution actually reaches it.
    """

    def __init__(
        self,
        program: Program,
        input: ByteSource,
        output: ByteSink,
        *,
        settings: VMSettings | None = None,
    ) -> None:
        self._program = program
        self._input = input
        self._output = output
        self._settings = settings or VMSettings()
        self._tape = Tape()
        self._program_counter = 0
        self._data_pointer = 0
        self._steps_executed = 0

    @property
    def program_counter(self) -> int:
        return self._program_counter

    @property
    def data_pointer(self) -> int:
        return self._data_pointer

    @property
    def steps_executed(self) -> int:
        return self._steps_executed

    @property
    def status(self) -> VMStatus:
        if self._program.get(self._program_counter) is None:
            return VMStatus.TERMINATED
        return VMStatus.RUNNING

    def get_data(self, address: int | None = None) -> int:
        return self._tape.get(self._data_pointer if address is None else address)

    def tape_footprint(self) -> int:
        return len(self._tape)

    def snapshot(self) -> MachineSnapshot:
        return MachineSnapshot(
            status=self.status,
            program_counter=self._program_counter,
            data_pointer=self._data_pointer,
            steps_executed=self._steps_executed,
            cells=self._tape.nonzero_cells(),
        )

    def step(self) -> VMStatus:
        """Execute the instruction at the program counter.

        Returns TERMINATED without touching any state once the counter has run
        off the end. Faults are raised and leave the state as it was before the
        step, so repeating the call raises the same fault again.
        """
        instruction = self._program.get(self._program_counter)
        if instruction is None:
            return VMStatus.TERMINATED

        pc = self._program_counter
        cell = self._tape.get(self._data_pointer)

        if instruction is Instruction.MOVE_RIGHT:
            self._data_pointer += 1
            next_pc = pc + 1
        elif instruction is Instruction.MOVE_LEFT:
            if self._data_pointer == 0:
                raise DataPointerUnderflow(
                    "cannot move data pointer left of address 0",
                    program_counter=pc,
                    data_pointer=self._data_pointer,
                )
            self._data_pointer -= 1
            next_pc = pc + 1
        elif instruction is Instruction.INCREMENT:
            self._tape.add(self._data_pointer, 1)
            next_pc = pc + 1
        elif instruction is Instruction.DECREMENT:
            self._tape.add(self._data_pointer, -1)
            next_pc = pc + 1
        elif instruction is Instruction.LOOP_START:
            next_pc = self._find_loop_end(pc) + 1 if cell == 0 else pc + 1
        elif instruction is Instruction.LOOP_END:
            next_pc = self._find_loop_start(pc) if cell != 0 else pc + 1
        elif instruction is Instruction.INPUT:
            value = self._read_input(pc)
            if value is not None:
                self._tape.set(self._data_pointer, value)
            next_pc = pc + 1
        elif instruction is Instruction.OUTPUT:
            self._write_output(pc, cell)
            next_pc = pc + 1
        else:
            raise AssertionError(f"unhandled instruction: {instruction!r}")

        self._program_counter = next_pc
        self._steps_executed += 1
        return VMStatus.RUNNING

    def run(self) -> None:
        while self.step() is VMStatus.RUNNING:
            pass

    def _find_loop_end(self, start: int) -> int:
        depth = 1
        pc = start
        while depth > 0:
            pc += 1
            instruction = self._program.get(pc)
            if instruction is None:
                raise MissingMatchingLoopEnd(
                    "no matching ']' for '['",
                    program_counter=start,
                    data_pointer=self._data_pointer,
                )
            if instruction is Instruction.LOOP_START:
                depth += 1
            elif instruction is Instruction.LOOP_END:
                depth -= 1
        return pc

    def _find_loop_start(self, end: int) -> int:
        depth = 1
        pc = end
        while depth > 0:
            pc -= 1
            instruction = self._program.get(pc)
            if instruction is None:
                raise MissingMatchingLoopStart(
                    "no matching '[' for ']'",
                    program_counter=end,
                    data_pointer=self._data_pointer,
                )
            if instruction is Instruction.LOOP_START:
                depth -= 1
            elif instruction is Instruction.LOOP_END:
                depth += 1
        return pc

    def _read_input(self, pc: int) -> int | None:
        try:
            # Interactive programs should see their prompt before we block.
            flush(self._output)
        except (OSError, ValueError) as e:
            raise OutputFault(
                f"failed to flush output: {e}", program_counter=pc, data_pointer=self._data_pointer
            ) from e
        try:
            return read_byte(self._input)
        except EndOfStream as e:
            policy = self._settings.eof_policy
            if policy is EofPolicy.ZERO:
                return 0
            if policy is EofPolicy.UNCHANGED:
                return None
            raise InputExhausted(
                "input stream exhausted", program_counter=pc, data_pointer=self._data_pointer
            ) from e
        except (OSError, ValueError) as e:
            raise InputFault(
                f"failed to read input: {e}", program_counter=pc, data_pointer=self._data_pointer
            ) from e

    def _write_output(self, pc: int, value: int) -> None:
        try:
            write_byte(self._output, value & 0xFF)
        except (OSError, ValueError) as e:
            raise OutputFault(
                f"failed to write output: {e}", program_counter=pc, data_pointer=self._data_pointer
            ) from e
