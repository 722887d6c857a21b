"""Starting patterns for drivers.

A pattern is a list of offsets relative to its own origin plus a centering
rule. Translating a pattern into plain coordinates is a driver concern; the
engine only ever sees the result.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from lifesim.core.coordinate import Coordinate, as_coordinate
from lifesim.core.exceptions import ConfigurationError
from lifesim.utils.consts import BUILTIN_PATTERNS


def _midpoint(lo: int, hi: int) -> int:
    # Truncates toward zero, matching integer vector division.
    return int((lo + hi) / 2)


@dataclass(frozen=True)
class Pattern:
    """Named, immutable collection of cell offsets."""

    name: str
    cells: Tuple[Coordinate, ...]

    @classmethod
    def from_offsets(cls, name: str, offsets: Iterable[Tuple[int, int]]) -> "Pattern":
        return cls(name=name, cells=tuple(as_coordinate(c) for c in offsets))

    def __len__(self) -> int:
        return len(self.cells)

    def center(self) -> Coordinate:
        """Midpoint of the bounding box spanned by the offsets and the origin."""
        if not self.cells:
            return Coordinate(0, 0)

        min_x = min_y = max_x = max_y = 0
        for x, y in self.cells:
            min_x, max_x = min(min_x, x), max(max_x, x)
            min_y, max_y = min(min_y, y), max(max_y, y)

        return Coordinate(_midpoint(min_x, max_x), _midpoint(min_y, max_y))

    def translated(self, dx: int, dy: int) -> "Pattern":
        return Pattern(self.name, tuple(c.translate(dx, dy) for c in self.cells))

    def centered(self) -> "Pattern":
        """Return the pattern shifted so its center sits on (0, 0)."""
        cx, cy = self.center()
        return self.translated(-cx, -cy)


def get_pattern(name: str) -> Pattern:
    """Return a built-in pattern by name.

    Raises:
        ConfigurationError: If no built-in pattern has that name
    """
    try:
        offsets = BUILTIN_PATTERNS[name]
    except KeyError:
        raise ConfigurationError(
            "pattern",
            f"Unknown pattern '{name}'. Available: {sorted(BUILTIN_PATTERNS)}",
        ) from None
    return Pattern.from_offsets(name, offsets)


def list_patterns() -> list[str]:
    """List the built-in pattern names."""
    return sorted(BUILTIN_PATTERNS)
