"""Coordinate value type for the unbounded grid."""

from __future__ import annotations

from typing import Iterator, NamedTuple, Tuple


class Coordinate(NamedTuple):
    """Immutable (x, y) cell address. Values may be negative."""

    x: int
    y: int

    def __add__(self, other: Tuple[int, int]) -> "Coordinate":  # type: ignore[override]
        dx, dy = other
        return Coordinate(self.x + dx, self.y + dy)

    def __sub__(self, other: Tuple[int, int]) -> "Coordinate":
        dx, dy = other
        return Coordinate(self.x - dx, self.y - dy)

    def translate(self, dx: int, dy: int) -> "Coordinate":
        return Coordinate(self.x + dx, self.y + dy)

    def neighbors(self) -> Iterator["Coordinate"]:
        """Yield the 8 Moore neighbours (never the cell itself)."""
        for dx, dy in MOORE_OFFSETS:
            yield Coordinate(self.x + dx, self.y + dy)

    def block(self) -> Iterator["Coordinate"]:
        """Yield the 3x3 block centered on this cell, the cell included."""
        for dx, dy in BLOCK_OFFSETS:
            yield Coordinate(self.x + dx, self.y + dy)


# 3x3 block around a cell, (0, 0) included
BLOCK_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1)
)

MOORE_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    offset for offset in BLOCK_OFFSETS if offset != (0, 0)
)


def as_coordinate(cell: Tuple[int, int]) -> Coordinate:
    """Normalise an (x, y) pair to a Coordinate."""
    if isinstance(cell, Coordinate):
        return cell
    x, y = cell
    return Coordinate(x, y)
