#!/usr/bin/env python3
"""Fuzz the code-point reverser with random inputs.

Usage:
    python scripts/fuzz_reverse.py
    python scripts/fuzz_reverse.py --iterations 100000 --seed 42

Runs the seed corpus followed by random inputs through runerev.reverse and
prints every input that violates a reversal property. Exits with status 1
if any failure was found.
"""
import argparse
import sys
from typing import List, Optional

from runerev.fuzz import (
    DEFAULT_ITERATIONS,
    DEFAULT_MAX_LENGTH,
    SEED_CORPUS,
    ReverseFunc,
    fuzz,
)
from runerev.reverser import reverse


def non_negative_int(value: str) -> int:
    """argparse type for counts and sizes that cannot be negative."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or greater, got {number}")
    return number


def main(argv: Optional[List[str]] = None, reverse_func: ReverseFunc = reverse) -> int:
    """Parse arguments, run the fuzzer and print a report.

    Args:
        argv: Command-line arguments, defaults to sys.argv[1:]
        reverse_func: Function under test, defaults to runerev.reverse

    Returns:
        0 if every input passed, 1 if any failure was found
    """
    parser = argparse.ArgumentParser(description="Fuzz runerev.reverse")
    parser.add_argument("--iterations", type=non_negative_int, default=DEFAULT_ITERATIONS,
                        help=f"Number of random inputs (default: {DEFAULT_ITERATIONS})")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for a reproducible run")
    parser.add_argument("--max-length", type=non_negative_int, default=DEFAULT_MAX_LENGTH,
                        help=f"Maximum size of each random input (default: {DEFAULT_MAX_LENGTH})")
    args = parser.parse_args(argv)

    total = len(SEED_CORPUS) + args.iterations
    print(f"Checking {total} inputs ({len(SEED_CORPUS)} seed, {args.iterations} random)"
          f"{'' if args.seed is None else f' with seed {args.seed}'}")

    failures = fuzz(iterations=args.iterations, seed=args.seed,
                    max_length=args.max_length, reverse_func=reverse_func)

    if not failures:
        print("✅ All inputs passed")
        return 0

    print(f"\n{'='*60}")
    print(f"{len(failures)} FAILING INPUTS")
    print(f"{'='*60}")
    for failure in failures:
        print(f"\nInput: {failure.data!r}")
        for problem in failure.problems:
            print(f"  - {problem}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
