"""Console demo: reverse a string, then reverse the result again.

Usage:
    python -m runerev.demo [text]
    python -m runerev.demo --hex HEXBYTES

Examples:
    python -m runerev.demo                   # The quick brown fox ...
    python -m runerev.demo "日本語"
    python -m runerev.demo --hex 616263e697  # truncated input, reports an error
"""

import argparse
import sys
from typing import List, Optional

from .reverser import Text, reverse

DEFAULT_INPUT = "The quick brown fox jumped over the lazy dog"


def run_demo(text: Text) -> int:
    """Print the original text, its reversal and the reversal of that.

    Args:
        text: str or bytes to reverse

    Returns:
        0 if the first reversal succeeded, 1 if it reported an error
    """
    rev, rev_err = reverse(text)
    double_rev, double_rev_err = reverse(rev)
    print(f"original: {text!r}")
    print(f"reversed: {rev!r}, err: {rev_err}")
    print(f"reversed again: {double_rev!r}, err: {double_rev_err}")
    return 0 if rev_err is None else 1


def main(argv: Optional[List[str]] = None) -> int:
    """Parse command-line arguments and run the demo.

    Returns:
        Exit status from run_demo
    """
    parser = argparse.ArgumentParser(
        description="Reverse text by code point and show the result of reversing twice."
    )
    parser.add_argument(
        "text",
        nargs="?",
        default=DEFAULT_INPUT,
        help=f"Text to reverse (default: {DEFAULT_INPUT!r})",
    )
    parser.add_argument(
        "--hex",
        action="store_true",
        help="Treat text as hex-encoded bytes, which may be malformed UTF-8",
    )
    args = parser.parse_args(argv)

    text: Text = args.text
    if args.hex:
        try:
            text = bytes.fromhex(args.text)
        except ValueError as e:
            parser.error(f"invalid hex input: {e}")

    return run_demo(text)


if __name__ == "__main__":
    sys.exit(main())
