"""Simulation engine for sparse Game of Life generations.

The engine owns two cell sets: ``current`` holds the live cells of the
present generation and ``next`` is the working buffer the transition is
written into. After each step the two are exchanged by reference, so the
swap costs O(1) regardless of population.

Only the live cells and their Moore neighbourhoods are ever visited, which
keeps a step proportional to the population instead of a board area.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Set, Tuple

from lifesim.core.cell_set import CellSet
from lifesim.core.coordinate import Coordinate, as_coordinate
from lifesim.interfaces.cell_set import ICellSet
from lifesim.interfaces.engine import EngineSnapshot, IEngine
from lifesim.utils.consts import LifeRules

logger = logging.getLogger(__name__)


class SimulationEngine(IEngine):
    """Double-buffered B3/S23 engine on an unbounded grid.

    THREAD SAFETY: Not thread-safe. Calls to seed/step/reset must be
    serialized by the driver.
    """

    def __init__(self, cell_set_factory: Callable[[], ICellSet] = CellSet):
        self._current: ICellSet = cell_set_factory()
        self._next: ICellSet = cell_set_factory()
        self._candidates: Set[Coordinate] = set()
        self._interval = 0.0
        self._population = 0
        self._generation = 0
        self._elapsed_time = 0.0
        self._seeded = False

    # State ---------------------------------------------------------------

    @property
    def is_seeded(self) -> bool:
        return self._seeded

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def population(self) -> int:
        return self._population

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def elapsed_time(self) -> float:
        return self._elapsed_time

    def get_population(self) -> int:
        return self._population

    def get_generation(self) -> int:
        return self._generation

    def get_elapsed_time(self) -> float:
        return self._elapsed_time

    # Lifecycle -----------------------------------------------------------

    def seed(self, cells: Iterable[Tuple[int, int]], interval: float) -> None:
        """Load a starting pattern and zero every counter.

        Args:
            cells: Live cell coordinates. Duplicates collapse.
            interval: Simulated seconds added to elapsed_time per step.

        Raises:
            ValueError: If interval is negative
        """
        if interval < 0:
            raise ValueError("interval must be >= 0")

        self._clear()
        for cell in cells:
            self._current.insert(as_coordinate(cell))

        self._interval = float(interval)
        self._population = self._current.size()
        self._seeded = True
        logger.debug(f"Seeded {self._population} live cells (interval={self._interval}s)")

    def reset(self) -> None:
        """Empty the board, keeping the configured interval."""
        self.seed((), self._interval)

    def step(self) -> None:
        """Compute generation N+1 from generation N."""
        current = self._current
        nxt = self._next
        candidates = self._candidates

        candidates.clear()
        for cell in current.iterate():
            candidates.update(cell.block())

        for cell in candidates:
            neighbors = self.count_live_neighbors(cell)
            if current.contains(cell):
                if LifeRules.SURVIVE_MIN <= neighbors <= LifeRules.SURVIVE_MAX:
                    nxt.insert(cell)
            elif neighbors == LifeRules.BIRTH:
                nxt.insert(cell)
        candidates.clear()

        self._current, self._next = nxt, current
        self._next.clear()

        self._population = self._current.size()
        self._generation += 1
        self._elapsed_time += self._interval

    def count_live_neighbors(self, cell: Tuple[int, int]) -> int:
        """Count live cells among the 8 Moore neighbours of cell."""
        current = self._current
        return sum(
            1 for neighbor in as_coordinate(cell).neighbors() if current.contains(neighbor)
        )

    def run(self, generations: int = 1) -> None:
        """Advance the given number of generations."""
        if generations < 0:
            raise ValueError("generations must be >= 0")
        for _ in range(generations):
            self.step()
        logger.debug(
            f"Ran {generations} generations: generation={self._generation}, "
            f"population={self._population}"
        )

    def tick(self, cycles: int = 1) -> None:
        self.run(cycles)

    # Queries -------------------------------------------------------------

    def is_alive(self, cell: Tuple[int, int]) -> bool:
        return self._current.contains(as_coordinate(cell))

    def live_cells(self) -> List[Coordinate]:
        return list(self._current.iterate())

    def get_snapshot(self) -> EngineSnapshot:
        return EngineSnapshot(
            generation=self._generation,
            population=self._population,
            elapsed_time=self._elapsed_time,
            cells=frozenset(self._current.iterate()),
        )

    # Private helpers -----------------------------------------------------

    def _clear(self) -> None:
        self._current.clear()
        self._next.clear()
        self._candidates.clear()
        self._population = 0
        self._generation = 0
        self._elapsed_time = 0.0
