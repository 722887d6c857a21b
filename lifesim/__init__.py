"""Sparse Game of Life simulation engine.

Live cells are stored in a hash set, so the cost of a generation scales
with the population and its neighbourhoods rather than with a board size.
The grid is unbounded; coordinates may be negative.

Getting started:
    from lifesim import SimulationEngine, get_pattern

    engine = SimulationEngine()
    engine.seed(get_pattern("glider").centered().cells, interval=0.05)
    engine.step()
    engine.population, engine.generation, engine.live_cells()
"""

from lifesim.core.cell_set import CellSet
from lifesim.core.clock import GenerationClock
from lifesim.core.coordinate import Coordinate
from lifesim.core.exceptions import ConfigurationError, LifeSimError
from lifesim.core.simulation_engine import SimulationEngine
from lifesim.interfaces.engine import EngineSnapshot
from lifesim.utils.config_loader import LifeSimConfig, SimulationConfig, get_config, load_config
from lifesim.utils.pattern import Pattern, get_pattern, list_patterns

__all__ = [
    # Core
    "CellSet",
    "Coordinate",
    "GenerationClock",
    "SimulationEngine",
    "EngineSnapshot",
    # Errors
    "LifeSimError",
    "ConfigurationError",
    # Driver helpers
    "Pattern",
    "get_pattern",
    "list_patterns",
    "LifeSimConfig",
    "SimulationConfig",
    "get_config",
    "load_config",
]
