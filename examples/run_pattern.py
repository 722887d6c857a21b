import argparse
import logging
import sys
from pathlib import Path

# Ensure local repo package is used even if another "lifesim" is on PYTHONPATH.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from lifesim import GenerationClock, SimulationEngine, get_pattern, list_patterns, load_config


class GenerationPrinter:
    """Clock subscriber that prints engine counters after every generation."""

    def __init__(self, engine: SimulationEngine):
        self.engine = engine

    def tick(self) -> None:
        print(
            f"gen={self.engine.generation:5d} "
            f"pop={self.engine.population:5d} "
            f"time={self.engine.elapsed_time:8.2f}s"
        )


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a Game of Life pattern.")
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config.yaml (defaults to the bundled config)",
    )
    parser.add_argument(
        "--pattern",
        choices=list_patterns(),
        default=None,
        help="Built-in pattern (overrides the config)",
    )
    parser.add_argument(
        "--generations",
        type=int,
        default=None,
        help="Number of generations to run (overrides the config)",
    )
    parser.add_argument(
        "--realtime",
        action="store_true",
        help="Sleep update_interval seconds between generations",
    )
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    cfg = load_config(args.config).simulation
    pattern = get_pattern(args.pattern or cfg.pattern)
    if cfg.center:
        pattern = pattern.centered()
    generations = cfg.generations if args.generations is None else args.generations

    engine = SimulationEngine()
    engine.seed(pattern.cells, interval=cfg.update_interval)

    clock = GenerationClock(interval=cfg.update_interval)
    clock.subscribe(engine)
    clock.subscribe(GenerationPrinter(engine))
    clock.run(generations, realtime=args.realtime)

    print("live cells:", sorted(engine.live_cells()))


if __name__ == "__main__":
    main()
