#!/usr/bin/env python3
"""
CLI: print random colors for a scheme and luminosity, or dump the bounds table.
Usage:
  python scripts/random_colors.py --scheme blue --luminosity dark --count 5
  python scripts/random_colors.py --scheme red --seed 42 --format json
  python scripts/random_colors.py --table
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse
import json
import logging

from random_color import ColorScheme, Luminosity, RandomColorGenerator, default_table
from random_color.config import load_config


def _print_table() -> None:
    table = default_table()
    for scheme, entry in table.items():
        hue = f"[{entry.hue_range.lower}, {entry.hue_range.upper}]" if entry.hue_range else "none"
        curve = " ".join(f"({s},{v})" for s, v in entry.lower_bounds)
        print(
            f"{scheme.value:<10} hue={hue:<12} "
            f"sat=[{entry.saturation_range.lower}, {entry.saturation_range.upper}] "
            f"bri=[{entry.brightness_range.lower}, {entry.brightness_range.upper}]  {curve}"
        )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Generate random colors constrained by a hue family and luminosity profile."
    )
    parser.add_argument(
        "--scheme",
        "-s",
        default=None,
        choices=[s.value for s in ColorScheme],
        help="Hue family (default: from config, usually 'random').",
    )
    parser.add_argument(
        "--luminosity",
        "-l",
        default=None,
        choices=[lum.value for lum in Luminosity],
        help="Brightness/saturation profile (default: from config, usually 'bright').",
    )
    parser.add_argument(
        "--count",
        "-n",
        type=int,
        default=1,
        help="Number of colors (default: 1).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for reproducible output (overrides config random.seed).",
    )
    parser.add_argument(
        "--format",
        "-f",
        choices=["hex", "rgb", "json"],
        default="hex",
        help="Output format (default: hex).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Config YAML (default: the packaged default.yaml).",
    )
    parser.add_argument(
        "--table",
        action="store_true",
        help="Print the built-in bounds table and exit.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Debug logging to stderr.",
    )
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    if args.table:
        _print_table()
        return 0

    if args.count < 0:
        print("Error: --count must be >= 0", file=sys.stderr)
        return 2

    try:
        generator = RandomColorGenerator.from_config(load_config(args.config))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.seed is not None:
        generator.seed(args.seed)

    # None falls back to sampling.scheme / sampling.luminosity from the config
    colors = generator.get_colors(args.scheme, args.luminosity, args.count)

    if args.format == "json":
        print(json.dumps([c.to_dict() for c in colors], indent=2))
    elif args.format == "rgb":
        for c in colors:
            print(f"{c.r} {c.g} {c.b}")
    else:
        for c in colors:
            print(c.to_hex())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
