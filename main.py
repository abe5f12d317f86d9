"""Command line entry point for compiling API documentation sites."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from apisite.errors import ApisiteError
from apisite.run_generation import run_generation


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Generate a static HTML API reference from a type model."
    )
    parser.add_argument("model", type=Path, help="Path to the YAML model file")
    parser.add_argument("out_dir", type=Path, help="Output directory")
    parser.add_argument(
        "--config",
        help="Path to configuration file",
    )
    parser.add_argument(
        "--no-wipe",
        dest="wipe",
        action="store_false",
        help="Keep files generated by a previous run",
    )
    parser.add_argument(
        "--no-progressbar",
        action="store_true",
        help="Do not draw the progress bar",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every generated file",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the documentation generation pipeline."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return run_generation(args)
    except ApisiteError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
