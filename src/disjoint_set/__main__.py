"""Command line entry point for the disjoint_set library."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .pipeline import ConnectivityConfig
from .runner import analyze_file


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Merge elements pair by pair and report group sizes.")
    parser.add_argument("input", type=Path, help="Path to the CSV or Excel file of index pairs")
    parser.add_argument("output", type=Path, help="Path where per-element connectedness will be written")
    parser.add_argument("--left-column", default="left", help="Column holding the first index (default: left)")
    parser.add_argument("--right-column", default="right", help="Column holding the second index (default: right)")
    parser.add_argument(
        "--size",
        type=int,
        default=None,
        help="Number of elements in the universe (default: largest index + 1)",
    )
    parser.add_argument(
        "--disable-tqdm",
        action="store_true",
        help="Disable progress bars",
    )
    parser.add_argument("--quiet", action="store_true", help="Suppress progress output")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)

    config = ConnectivityConfig(
        left_column=args.left_column,
        right_column=args.right_column,
        size=args.size,
        use_tqdm=False if args.disable_tqdm else None,
        verbose=not args.quiet,
    )

    result = analyze_file(args.input, args.output, config)
    return 0 if result is not None else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
