"""Core modules for lifesim.

- coordinate: Coordinate value type and neighbourhood offsets
- cell_set: Set-backed live cell container
- simulation_engine: Double-buffered generation stepping
- clock: Caller-owned fixed-interval clock
- exceptions: Package exception hierarchy
"""

from lifesim.core.cell_set import CellSet
from lifesim.core.clock import GenerationClock
from lifesim.core.coordinate import BLOCK_OFFSETS, MOORE_OFFSETS, Coordinate
from lifesim.core.exceptions import ConfigurationError, LifeSimError
from lifesim.core.simulation_engine import SimulationEngine

__all__ = [
    "Coordinate",
    "BLOCK_OFFSETS",
    "MOORE_OFFSETS",
    "CellSet",
    "GenerationClock",
    "SimulationEngine",
    "LifeSimError",
    "ConfigurationError",
]
