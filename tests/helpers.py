from __future__ import annotations

import io

from tapevm.program import Program
from tapevm.schemas import VMSettings
from tapevm.vm import VirtualMachine

HELLO_WORLD = (
    "++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]>>.>---.+++++++..+++.>>.<-.<.+++."
    "------.--------.>>+.>++."
)


class CountingSource:
    """Byte source that records how many reads were issued."""

    def __init__(self, data: bytes) -> None:
        self._buf = io.BytesIO(data)
        self.reads = 0

    def read(self, size: int = -1, /) -> bytes:
        self.reads += 1
        return self._buf.read(size)


class BrokenSource:
    def read(self, size: int = -1, /) -> bytes:
        raise OSError("device unplugged")


class ShortWriteSink:
    def __init__(self) -> None:
        self.attempts = 0

    def write(self, data: bytes, /) -> int:
        self.attempts += 1
        return 0


class BrokenSink:
    def write(self, data: bytes, /) -> int:
        raise OSError("broken pipe")


def make_vm(
    src: str, *, input: bytes = b"", settings: VMSettings | None = None
) -> tuple[VirtualMachine, io.BytesIO]:
    out = io.BytesIO()
    vm = VirtualMachine(Program.from_text(src), io.BytesIO(input), out, settings=settings)
    return vm, out
