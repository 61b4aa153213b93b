from __future__ import annotations

from tapevm.api import build_program, program_to_text, run_file, run_program, run_source
from tapevm.errors import (
    DataPointerUnderflow,
    InputExhausted,
    InputFault,
    MissingMatchingLoopEnd,
    MissingMatchingLoopStart,
    OutputFault,
    VMFault,
)
from tapevm.instruction import Instruction
from tapevm.program import Program
from tapevm.schemas import EofPolicy, MachineSnapshot, VMSettings, VMStatus
from tapevm.tape import Tape
from tapevm.vm import VirtualMachine

__all__ = [
    "DataPointerUnderflow",
    "EofPolicy",
    "InputExhausted",
    "InputFault",
    "Instruction",
    "MachineSnapshot",
    "MissingMatchingLoopEnd",
    "MissingMatchingLoopStart",
    "OutputFault",
    "Program",
    "Tape",
    "VMFault",
    "VMSettings",
    "VMStatus",
    "VirtualMachine",
    "build_program",
    "program_to_text",
    "run_file",
    "run_program",
    "run_source",
]
