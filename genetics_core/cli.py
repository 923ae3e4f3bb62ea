"""
CLI interface for genetics.
Provides commands for managing settings and running the demo problem.
"""

import argparse
import json
import math
import sys
import time
from pathlib import Path
from typing import Optional

from genetics import (
    Chromosome,
    EvolverConfiguration,
    Evolver,
    EvolverError,
    GenerationHistory,
    Population,
    RandomSource,
    stop_after,
)
from genetics_core.config import (
    DEFAULT_STATE_DIR,
    Config,
    build_evolver_configuration,
    get_config,
)
from genetics_core.logging_config import configure_logging, get_logger
from genetics_core.serializers import serialize_population


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="genetics",
        description="Generic genetic algorithm engine",
    )
    parser.add_argument("--version", action="version", version="%(prog)s 0.1.0")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Init command
    init_parser = subparsers.add_parser(
        "init", help="Write a default configuration file"
    )
    init_parser.add_argument(
        "--state-dir",
        type=Path,
        default=Path(DEFAULT_STATE_DIR),
        help="State directory path",
    )

    # Config command
    config_parser = subparsers.add_parser("config", help="Show configuration")
    config_parser.add_argument(
        "--show", action="store_true", help="Show current configuration"
    )
    config_parser.add_argument(
        "--state-dir",
        type=Path,
        default=Path(DEFAULT_STATE_DIR),
        help="State directory path",
    )
    config_parser.add_argument("--config", type=Path, help="Explicit config file")

    # Run command
    run_parser = subparsers.add_parser(
        "run", help="Maximize sin(pi*x)*sin(pi*y) over [0, 1]^2"
    )
    run_parser.add_argument(
        "--state-dir",
        type=Path,
        default=Path(DEFAULT_STATE_DIR),
        help="State directory path",
    )
    run_parser.add_argument("--config", type=Path, help="Explicit config file")
    run_parser.add_argument(
        "--generations", "-g", type=int, help="Override max_generations"
    )
    run_parser.add_argument("--seed", type=int, help="Override the random seed")
    run_parser.add_argument(
        "--step", type=float, default=0.01, help="Mutation step size"
    )
    run_parser.add_argument(
        "--format", choices=["table", "json"], default="table", help="Output format"
    )
    run_parser.add_argument("--top", type=int, default=5, help="Chromosomes to show")
    run_parser.add_argument(
        "--history", type=Path, help="Write the generation history to this JSON file"
    )
    run_parser.add_argument("--log-level", help="Override the log level")

    return parser


def demo_fitness(chromosome: Chromosome) -> float:
    """sin(pi*x) * sin(pi*y), maximal at (0.5, 0.5)."""
    return math.sin(math.pi * chromosome[0]) * math.sin(math.pi * chromosome[1])


def make_step_mutation(step: float, random_source: RandomSource):
    """Move one gene up or down by ``step``, clamped to [0, 1]."""

    def mutate(chromosome: Chromosome, index: int) -> float:
        value = chromosome[index] + (step if random_source.coin() else -step)
        return min(1.0, max(0.0, value))

    return mutate


def cmd_init(args: argparse.Namespace) -> int:
    """Write a default configuration file."""
    config_file = args.state_dir / "config.json"

    if config_file.exists():
        print(f"Already initialized at {args.state_dir}")
        return 0

    config = Config(state_dir=str(args.state_dir))
    config.save(config_file)

    print(f"Initialized genetics at {args.state_dir}")
    return 0


def cmd_config(args: argparse.Namespace) -> int:
    """Show the effective configuration."""
    config = get_config(config_path=args.config, state_dir=args.state_dir)

    print("Current Configuration")
    print("-" * 40)
    for section, values in config.to_dict().items():
        if isinstance(values, dict):
            for key, value in values.items():
                print(f"{section}.{key}: {value}")
        else:
            print(f"{section}: {values}")

    return 0


def cmd_run(args: argparse.Namespace) -> int:
    """Evolve the demo problem and print the result."""
    overrides = {
        "evolution": {
            key: value
            for key, value in [
                ("max_generations", args.generations),
                ("seed", args.seed),
            ]
            if value is not None
        },
        "logging": {"level": args.log_level.upper()} if args.log_level else {},
    }
    config = get_config(
        config_path=args.config, state_dir=args.state_dir, overrides=overrides
    )
    settings = config.evolution

    configure_logging(
        level=config.logging.level,
        json_output=config.logging.json_output,
        log_file=Path(config.logging.log_file) if config.logging.log_file else None,
        use_colors=config.logging.use_colors,
    )
    log = get_logger("genetics_core.cli", population_size=settings.population_size)

    if settings.chromosome_length < 2:
        print("The demo problem needs chromosome_length >= 2", file=sys.stderr)
        return 1

    random_source = RandomSource(settings.seed)
    population = Population.generate(
        settings.population_size,
        settings.chromosome_length,
        lambda _i, _j: random_source.uniform(),
    )
    evolver = Evolver(
        configuration=build_evolver_configuration(settings),
        fitness_function=demo_fitness,
        mutation_function=make_step_mutation(args.step, random_source),
        random_source=random_source,
    )

    history = GenerationHistory()
    stop = stop_after(
        settings.max_generations,
        fitness_threshold=settings.fitness_threshold,
        history=history,
        convergence_generations=settings.convergence_generations,
        convergence_threshold=settings.convergence_threshold,
    )
    last_tick = [time.monotonic()]

    def should_continue(configuration: EvolverConfiguration, pop: Population) -> bool:
        keep_going = stop(configuration, pop)
        now = time.monotonic()
        log.generation_complete(history.records[-1], int((now - last_tick[0]) * 1000))
        last_tick[0] = now
        return keep_going

    log.run_started()
    started = time.monotonic()
    try:
        evolver.evolve(population, should_continue)
    except EvolverError as e:
        print(f"Evolution failed: {e}", file=sys.stderr)
        return 1

    best = population.fittest
    log.run_complete(
        population.generation,
        best.fitness if best is not None else float("nan"),
        int((time.monotonic() - started) * 1000),
    )

    if args.history:
        history.export_to_json(str(args.history))

    result = serialize_population(population, limit=args.top)
    if args.format == "json":
        print(json.dumps(result, indent=2))
    else:
        print(f"Generation: {result['generation']}")
        print(f"Best fitness: {result['best_fitness']:.6f}")
        print(f"{'Fitness':<14} Genes")
        print("-" * 40)
        for entry in result["chromosomes"]:
            genes = ", ".join(f"{g:.4f}" for g in entry["genes"][:4])
            if len(entry["genes"]) > 4:
                genes += ", ..."
            print(f"{entry['fitness']:<14.6f} [{genes}]")

    return 0


def main(argv: Optional[list] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "init": cmd_init,
        "config": cmd_config,
        "run": cmd_run,
    }

    handler = commands.get(args.command)
    if handler:
        try:
            return handler(args)
        except EvolverError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
