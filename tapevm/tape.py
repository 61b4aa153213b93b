from __future__ import annotations

CELL_BITS = 64
_CELL_MOD = 1 << CELL_BITS
_CELL_MIN = -(1 << (CELL_BITS - 1))
_CELL_MAX = (1 << (CELL_BITS - 1)) - 1


def wrap_cell(value: int) -> int:
    """Fold an integer into the signed 64-bit cell domain."""
    if _CELL_MIN <= value <= _CELL_MAX:
        return value
    value = value % _CELL_MOD
    if value > _CELL_MAX:
        value -= _CELL_MOD
    return value


class Tape:
    """Sparse memory: an absent address reads as zero.

    Zero is never stored. Writing zero drops the entry, so the footprint tracks
    the number of non-zero cells rather than how far the pointer has wandered.
    """

    def __init__(self) -> None:
        self._cells: dict[int, int] = {}

    def get(self, address: int) -> int:
        return self._cells.get(address, 0)

    def set(self, address: int, value: int) -> None:
        if address < 0:
            raise ValueError(f"tape address must be non-negative: {address}")
        value = wrap_cell(value)
        if value == 0:
            self._cells.pop(address, None)
        else:
            self._cells[address] = value

    def add(self, address: int, delta: int) -> int:
        value = wrap_cell(self.get(address) + delta)
        self.set(address, value)
        return value

    def nonzero_cells(self) -> dict[int, int]:
        return dict(sorted(self._cells.items()))

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, address: object) -> bool:
        return address in self._cells
