from __future__ import annotations

from typing import Dict

import numpy as np

CELL_MIN = -128
CELL_MAX = 127


def wrap_cell(value: int) -> int:
    """Wrap an integer into the signed byte range."""
    return ((value - CELL_MIN) % 256) + CELL_MIN


class Tape:
    """Signed-byte memory addressable by any integer.

    Cells live in a contiguous int8 buffer; ``_origin`` is the buffer offset
    of address 0. The buffer grows on demand in either direction, so an
    address never written reads as zero.
    """

    def __init__(self, initial_size: int = 64):
        if initial_size < 1:
            raise ValueError("initial_size must be positive")
        self._cells = np.zeros(initial_size, dtype=np.int8)
        self._origin = initial_size // 2

    def __len__(self) -> int:
        return len(self._cells)

    def _offset(self, address: int) -> int:
        return address + self._origin

    def _ensure(self, address: int) -> int:
        pos = self._offset(address)
        size = len(self._cells)
        if pos < 0:
            grow = max(-pos, size)
            self._cells = np.concatenate((np.zeros(grow, dtype=np.int8), self._cells))
            self._origin += grow
            pos += grow
        elif pos >= size:
            grow = max(pos - size + 1, size)
            self._cells = np.concatenate((self._cells, np.zeros(grow, dtype=np.int8)))
        return pos

    def read(self, address: int) -> int:
        pos = self._offset(address)
        if pos < 0 or pos >= len(self._cells):
            return 0
        return int(self._cells[pos])

    def write(self, address: int, value: int) -> None:
        pos = self._ensure(address)
        self._cells[pos] = np.int8(wrap_cell(value))

    def increment(self, address: int) -> None:
        self.write(address, self.read(address) + 1)

    def decrement(self, address: int) -> None:
        self.write(address, self.read(address) - 1)

    def snapshot(self) -> Dict[int, int]:
        """Return ``{address: value}`` for every non-zero cell."""
        nonzero = np.nonzero(self._cells)[0]
        return {int(pos) - self._origin: int(self._cells[pos]) for pos in nonzero}
