"""Constants and reference patterns for lifesim."""


class LifeRules:
    """B3/S23 neighbour thresholds."""

    BIRTH = 3
    """A dead cell with exactly this many live neighbours is born."""

    SURVIVE_MIN = 2
    SURVIVE_MAX = 3
    """A live cell survives with SURVIVE_MIN..SURVIVE_MAX live neighbours."""


DEFAULT_UPDATE_INTERVAL = 0.05
"""Seconds of simulated time per generation."""

DEFAULT_PATTERN = "glider"
DEFAULT_GENERATIONS = 100


# Offsets relative to the pattern origin; x grows right, y grows down.
BUILTIN_PATTERNS: dict[str, tuple[tuple[int, int], ...]] = {
    "block": ((0, 0), (1, 0), (0, 1), (1, 1)),
    "blinker": ((0, 1), (1, 1), (2, 1)),
    "toad": ((1, 0), (2, 0), (3, 0), (0, 1), (1, 1), (2, 1)),
    "beacon": ((0, 0), (1, 0), (0, 1), (3, 2), (2, 3), (3, 3)),
    "glider": ((1, 0), (2, 1), (0, 2), (1, 2), (2, 2)),
    "r_pentomino": ((1, 0), (2, 0), (0, 1), (1, 1), (1, 2)),
}
