"""
Main entry point for tracing letter paths.

Usage:
    python -m src.main --file map.txt
    python -m src.main -f map.txt --verbose --show-grid
    python -m src.main -f map.txt --config tracer.yaml --output results/map.json
"""

import argparse
import itertools
import sys
from pathlib import Path
from typing import Callable

import yaml

from .tracer import TracerConfig, Step, load_grid, trace_grid


def load_config(config_path: str) -> TracerConfig:
    """Load tracer configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return TracerConfig(**data)


def step_printer() -> Callable[[Step], None]:
    """Build a callback printing each step with its index."""
    counter = itertools.count()

    def print_step(step: Step) -> None:
        heading = step.direction.value if step.direction else "-"
        print(f"  {next(counter):>4}  {step.char}  ({step.position.x}, {step.position.y})  {heading}")

    return print_step


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Trace a letter path drawn on a character grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example map.txt:
  @---A---+
          |
  x-B-+   C
      |   |
      +---+

Example tracer.yaml:
  verbose: true
  show_grid: false
  output: results/map.json
        """
    )
    parser.add_argument(
        "--file", "-f",
        help="Path to the grid file"
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save the trace result as JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print every step of the walk"
    )
    parser.add_argument(
        "--show-grid",
        action="store_true",
        help="Print the visited cells after a successful walk"
    )

    args = parser.parse_args(argv)

    if not args.file:
        print("Error: You must specify a file using the -f or --file option.", file=sys.stderr)
        sys.exit(1)

    if args.config:
        try:
            config = load_config(args.config)
        except Exception as e:
            print(f"Error loading config: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        config = TracerConfig()

    # Command-line flags win over the config file
    if args.verbose:
        config.verbose = True
    if args.show_grid:
        config.show_grid = True
    if args.output:
        config.output = args.output

    try:
        grid = load_grid(args.file)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading {args.file}: {e}", file=sys.stderr)
        sys.exit(1)

    if config.verbose:
        print(f"Grid: {args.file} ({grid.height} rows)")
        print("Steps:")

    result = trace_grid(grid, on_step=step_printer() if config.verbose else None)

    if config.output:
        output_path = Path(config.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w") as f:
            f.write(result.model_dump_json(indent=2))
        if config.verbose:
            print(f"Results saved to: {output_path}")

    if not result.valid:
        print(result.error.message, file=sys.stderr)
        sys.exit(1)

    if config.show_grid:
        print(result.grid)
        print()

    print(f"Letters: {result.letters}")
    print(f"Path: {result.path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
