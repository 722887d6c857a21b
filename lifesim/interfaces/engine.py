"""Engine interface for drivers and presentation layers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, FrozenSet, Iterable, List, Tuple

if TYPE_CHECKING:
    from lifesim.core.coordinate import Coordinate


class IEngine(ABC):
    """Simulation engine abstraction consumed by an external driver."""

    @abstractmethod
    def seed(self, cells: Iterable[Tuple[int, int]], interval: float) -> None:
        """Replace the whole state with the given live cells."""
        ...

    @abstractmethod
    def step(self) -> None:
        """Advance one generation."""
        ...

    @abstractmethod
    def reset(self) -> None:
        """Clear the board and all counters."""
        ...

    @abstractmethod
    def is_alive(self, cell: Tuple[int, int]) -> bool:
        """Return True if cell is live in the current generation."""
        ...

    @abstractmethod
    def live_cells(self) -> List["Coordinate"]:
        """Return a copy of the live cells of the current generation."""
        ...

    @abstractmethod
    def get_snapshot(self) -> "EngineSnapshot":
        """Return an immutable snapshot of counters and live cells."""
        ...

    def tick(self, cycles: int = 1) -> None:
        """Advance by the given number of generations (default: step cycles)."""
        for _ in range(cycles):
            self.step()


@dataclass(frozen=True)
class EngineSnapshot:
    """Snapshot of engine state for drivers and display layers."""

    generation: int
    population: int
    elapsed_time: float
    cells: FrozenSet["Coordinate"]
