import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Optional, Sequence, TextIO

from sparse_life.config import SimulationConfig, load_simulation_config
from sparse_life.simulator import InvalidSeed, SimulationEngine
from sparse_life.simulator.draw import count_outside, render_engine
from sparse_life.simulator.patterns import get_pattern
from sparse_life.simulator.seed import load_seed_file

DEFAULT_CONFIG = Path("dataset/simulation.json")
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def setup_logging(config: SimulationConfig) -> None:
    logging.basicConfig(
        filename=config.logging.log_file,
        level=config.logging.level.value,
        format=LOG_FORMAT,
    )


def build_engine(config: SimulationConfig) -> SimulationEngine:
    if config.seed_file is not None:
        logging.info("Loading seed from %s", config.seed_file)
        seed = load_seed_file(config.seed_file)
    else:
        logging.info("Using built-in pattern %r", config.pattern)
        try:
            seed = get_pattern(config.pattern)
        except KeyError as e:
            raise InvalidSeed(e.args[0]) from e
    return SimulationEngine(seed)


def show(engine: SimulationEngine, config: SimulationConfig, out: TextIO) -> None:
    out.write(
        render_engine(
            engine,
            live_glyph=config.render.live_glyph,
            dead_glyph=config.render.dead_glyph,
        )
    )
    out.write("\n")
    out.flush()


def run(
    engine: SimulationEngine,
    config: SimulationConfig,
    out: Optional[TextIO] = None,
) -> int:
    """
    Print, advance and wait until ``max_generations`` advances have been made.

    The final generation is printed as well. Runs indefinitely when no limit
    is configured. Writes to ``sys.stdout`` unless ``out`` is given. Returns
    the number of generations advanced.
    """
    if out is None:
        out = sys.stdout
    rows, cols = engine.dimensions()
    escaped = False
    logging.info(
        "Starting simulation: delay=%.3fs, max_generations=%s",
        config.delay,
        config.max_generations,
    )

    while (
        config.max_generations is None
        or engine.generation < config.max_generations
    ):
        # Print out the current state of the system
        show(engine, config, out)

        # Transition to the next generation by applying the rule
        engine.advance()

        if not escaped and count_outside(engine.live_cells(), rows, cols):
            escaped = True
            logging.warning(
                "Live cells left the %dx%d viewport at generation %d",
                rows,
                cols,
                engine.generation,
            )

        if config.delay:
            time.sleep(config.delay)

    show(engine, config, out)
    logging.info(
        "Simulation finished after %d generations, population=%d",
        engine.generation,
        engine.population,
    )
    return engine.generation


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run Conway's Game of Life on an unbounded grid."
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"JSON configuration file (default: {DEFAULT_CONFIG} if it exists)",
    )
    parser.add_argument("--pattern", type=str, help="Built-in seed pattern name")
    parser.add_argument(
        "--seed-file", type=Path, help="Seed file of 0/1 rows, overrides --pattern"
    )
    parser.add_argument(
        "--generations", type=int, help="Stop after this many generations"
    )
    parser.add_argument(
        "--delay", type=float, help="Seconds to wait between generations"
    )
    return parser.parse_args(argv)


def load_config(args: argparse.Namespace) -> SimulationConfig:
    if args.config is not None:
        config = load_simulation_config(args.config)
    elif DEFAULT_CONFIG.exists():
        config = load_simulation_config(DEFAULT_CONFIG)
    else:
        config = SimulationConfig()

    overrides = {}
    if args.pattern is not None:
        overrides["pattern"] = args.pattern
        overrides["seed_file"] = None
    if args.seed_file is not None:
        overrides["seed_file"] = args.seed_file
    if args.generations is not None:
        overrides["max_generations"] = args.generations
    if args.delay is not None:
        overrides["delay"] = args.delay
    if overrides:
        config = SimulationConfig.model_validate(
            {**config.model_dump(), **overrides}
        )
    return config


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the application."""
    args = parse_args(argv)
    try:
        config = load_config(args)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(config)

    try:
        engine = build_engine(config)
    except (FileNotFoundError, InvalidSeed) as e:
        logging.error("Cannot build the initial generation: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        run(engine, config)
    except KeyboardInterrupt:
        logging.info("Interrupted at generation %d", engine.generation)
    return 0


if __name__ == "__main__":
    sys.exit(main())
