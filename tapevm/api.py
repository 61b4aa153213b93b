from __future__ import annotations

import io
from pathlib import Path

from tapevm.program import Program
from tapevm.schemas import VMSettings
from tapevm.vm import VirtualMachine


def build_program(src: str) -> Program:
    return Program.from_text(src)


def program_to_text(program: Program) -> str:
    return program.to_text()


def run_program(
    program: Program, *, input: bytes = b"", settings: VMSettings | None = None
) -> bytes:
    out = io.BytesIO()
    vm = VirtualMachine(program, io.BytesIO(input), out, settings=settings)
    vm.run()
    return out.getvalue()


def run_source(*, src: str, input: bytes = b"", settings: VMSettings | None = None) -> bytes:
    return run_program(build_program(src), input=input, settings=settings)


def run_file(path: Path, *, input: bytes = b"", settings: VMSettings | None = None) -> bytes:
    return run_source(src=path.read_text(encoding="utf-8"), input=input, settings=settings)
