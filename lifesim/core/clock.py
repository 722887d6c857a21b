"""Fixed-interval generation clock.

The clock is the caller-owned timing loop: it knows the interval between
generations and notifies subscribers (usually a SimulationEngine) on each
tick. It never reaches into a subscriber's state.

How a subscriber is called is decided once, when it subscribes:

- ``tick(cycles)`` receives the whole batch in one call
- ``tick()`` without a cycles parameter is called once per cycle
- objects with only ``step()`` are stepped once per cycle

Exceptions raised by a subscriber propagate to the caller of tick().
"""

from __future__ import annotations

import inspect
import logging
import time
from typing import Callable, List, Tuple

from lifesim.interfaces.clock import IClock

logger = logging.getLogger(__name__)

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.VAR_POSITIONAL,
)


def _accepts_cycles(fn: Callable[..., None]) -> bool:
    """Return True if fn can be called with one positional argument."""
    try:
        params = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError):
        # No introspectable signature (some builtins); assume the protocol shape.
        return True
    return any(p.kind in _POSITIONAL_KINDS for p in params)


def _repeat(fn: Callable[[], None]) -> Callable[[int], None]:
    def deliver(cycles: int) -> None:
        for _ in range(cycles):
            fn()

    return deliver


class GenerationClock(IClock):
    """Pub/sub clock that notifies subscribers once per tick() batch."""

    def __init__(self, interval: float = 0.05):
        if interval <= 0:
            raise ValueError("Clock interval must be positive")
        self._interval = float(interval)
        self._tick_count = 0
        self._subscribers: List[Tuple[object, Callable[[int], None]]] = []

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def tick_count(self) -> int:
        return self._tick_count

    @property
    def elapsed(self) -> float:
        return self._tick_count * self._interval

    def subscribe(self, subscriber: object) -> None:
        """Subscribe a component; duplicates are ignored.

        Raises:
            TypeError: If subscriber has neither tick() nor step()
        """
        if self._is_subscribed(subscriber):
            return
        self._subscribers.append((subscriber, self._resolve_delivery(subscriber)))

    def unsubscribe(self, subscriber: object) -> None:
        self._subscribers = [
            (sub, deliver) for sub, deliver in self._subscribers if sub is not subscriber
        ]

    def _is_subscribed(self, subscriber: object) -> bool:
        return any(sub is subscriber for sub, _ in self._subscribers)

    @staticmethod
    def _resolve_delivery(subscriber: object) -> Callable[[int], None]:
        tick_fn = getattr(subscriber, "tick", None)
        if callable(tick_fn):
            if _accepts_cycles(tick_fn):
                return tick_fn
            return _repeat(tick_fn)

        step_fn = getattr(subscriber, "step", None)
        if callable(step_fn):
            return _repeat(step_fn)

        raise TypeError(f"{subscriber!r} has no tick() or step() method")

    def _validate_cycles(self, cycles: int) -> None:
        if cycles < 0:
            raise ValueError("cycles must be >= 0")

    def tick(self, cycles: int = 1) -> None:
        self._validate_cycles(cycles)
        if cycles == 0:
            return

        self._tick_count += cycles

        for _subscriber, deliver in list(self._subscribers):
            deliver(cycles)

    def run(
        self,
        generations: int,
        realtime: bool = False,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Tick one generation at a time.

        Args:
            generations: Number of ticks to issue.
            realtime: Sleep ``interval`` seconds after every tick.
            sleep: Sleep function, injectable for tests.
        """
        self._validate_cycles(generations)
        logger.debug(f"Running {generations} generations at {self._interval}s")
        for _ in range(generations):
            self.tick()
            if realtime:
                sleep(self._interval)

    def reset(self) -> None:
        self._tick_count = 0
