"""Set-backed container of live cells."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Set

from lifesim.core.coordinate import Coordinate
from lifesim.interfaces.cell_set import ICellSet


class CellSet(ICellSet):
    """ICellSet backed by a built-in set.

    Iteration order is whatever the underlying set yields; it is stable
    for a fixed membership and insertion history within one process.
    """

    def __init__(self, cells: Optional[Iterable[Coordinate]] = None):
        self._cells: Set[Coordinate] = set()
        if cells is not None:
            for cell in cells:
                self.insert(cell)

    def contains(self, cell: Coordinate) -> bool:
        return cell in self._cells

    def insert(self, cell: Coordinate) -> bool:
        if cell in self._cells:
            return False
        self._cells.add(cell)
        return True

    def remove(self, cell: Coordinate) -> bool:
        if cell not in self._cells:
            return False
        self._cells.remove(cell)
        return True

    def clear(self) -> None:
        self._cells.clear()

    def size(self) -> int:
        return len(self._cells)

    def iterate(self) -> Iterator[Coordinate]:
        return iter(self._cells)

    def __repr__(self) -> str:
        return f"CellSet(size={len(self._cells)})"
