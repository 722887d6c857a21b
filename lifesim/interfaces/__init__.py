"""Interface abstractions for lifesim.

Defines behavioral contracts that implementations must satisfy:
- ICellSet: Live cell container
- IEngine: Engine seed/step/query surface, plus EngineSnapshot
- IClock, ClockSubscriber: Generation pacing
"""

from lifesim.interfaces.cell_set import ICellSet
from lifesim.interfaces.clock import ClockSubscriber, IClock
from lifesim.interfaces.engine import EngineSnapshot, IEngine

__all__ = [
    "ICellSet",
    "IEngine",
    "EngineSnapshot",
    "IClock",
    "ClockSubscriber",
]
