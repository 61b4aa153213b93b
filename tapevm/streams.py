from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ByteSource(Protocol):
    """Anything with a binary ``read``: files, ``sys.stdin.buffer``, ``io.BytesIO``."""

    def read(self, size: int = ..., /) -> bytes: ...


@runtime_checkable
class ByteSink(Protocol):
    """Anything with a binary ``write``: files, ``sys.stdout.buffer``, ``io.BytesIO``."""

    def write(self, data: bytes, /) -> int | None: ...


class EndOfStream(Exception):
    pass


def read_byte(source: ByteSource) -> int:
    """Block for exactly one byte.

    Raises EndOfStream when the source has nothing left; OSError propagates.
    """
    chunk = source.read(1)
    if not chunk:
        raise EndOfStream("input stream exhausted")
    if len(chunk) != 1:
        raise OSError(f"expected 1 byte from input, got {len(chunk)}")
    return chunk[0]


def write_byte(sink: ByteSink, value: int) -> None:
    written = sink.write(bytes((value & 0xFF,)))
    # Raw streams report short writes with 0; buffered ones return None or 1.
    if written is not None and written != 1:
        raise OSError(f"short write to output: {written} of 1 bytes")


def flush(sink: ByteSink) -> None:
    flush_fn = getattr(sink, "flush", None)
    if callable(flush_fn):
        flush_fn()
