"""Cell set abstraction - behavioral contract.

A cell set holds the live cells of one generation. The simulation engine
only depends on this contract, so alternative backings can be swapped in.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from lifesim.core.coordinate import Coordinate


class ICellSet(ABC):
    """Container of unique coordinates with average O(1) operations."""

    @abstractmethod
    def contains(self, cell: "Coordinate") -> bool:
        """Return True if cell is a member."""
        ...

    @abstractmethod
    def insert(self, cell: "Coordinate") -> bool:
        """Add cell. Returns True if it was not already present."""
        ...

    @abstractmethod
    def remove(self, cell: "Coordinate") -> bool:
        """Remove cell. Returns True if it was present."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Remove every member."""
        ...

    @abstractmethod
    def size(self) -> int:
        """Current cardinality."""
        ...

    @abstractmethod
    def iterate(self) -> Iterator["Coordinate"]:
        """Return a fresh traversal producing every member exactly once."""
        ...

    def __contains__(self, cell: object) -> bool:
        return self.contains(cell)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator["Coordinate"]:
        return self.iterate()
