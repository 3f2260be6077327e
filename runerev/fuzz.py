"""Randomized property checks for code-point reversal.

The harness feeds a fixed seed corpus and then random inputs through a
reverse function and reports every input for which one of the reversal
properties does not hold. Random inputs mix well-formed text from several
Unicode ranges with raw bytes and truncated encodings, so both the success
and the error path get exercised.
"""

import random
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from .reverser import InvalidEncodingError, is_valid_utf8, reverse

ReverseFunc = Callable[[bytes], Tuple[bytes, Optional[InvalidEncodingError]]]

DEFAULT_ITERATIONS = 1000
DEFAULT_MAX_LENGTH = 32

SEED_CORPUS: List[bytes] = [
    b"Hello, world",
    b" ",
    b"!12345",
    b"",
    "日本語".encode("utf-8"),
    "héllo 🎉".encode("utf-8"),
    b"abc\xe6\x97",
    b"\xbd\xb2\x3d\xbc\x20\xe2\x8c\x98",
]

# (low, high) inclusive code point ranges, none of them containing surrogates
CODE_POINT_RANGES = [
    (0x20, 0x7E),       # ASCII printable
    (0xA0, 0x24F),      # Latin-1 supplement and extended Latin
    (0x3040, 0x30FF),   # Hiragana and Katakana
    (0x4E00, 0x9FFF),   # CJK unified ideographs
    (0x1F300, 0x1F64F), # Pictographs and emoticons
]


@dataclass
class FuzzFailure:
    """An input together with the properties it violated."""
    data: bytes
    problems: List[str]


def random_text(rng: random.Random, max_length: int) -> str:
    """Generate well-formed text of up to max_length code points."""
    length = rng.randint(0, max_length)
    chars = []
    for _ in range(length):
        low, high = rng.choice(CODE_POINT_RANGES)
        chars.append(chr(rng.randint(low, high)))
    return "".join(chars)


def random_input(rng: random.Random, max_length: int = DEFAULT_MAX_LENGTH) -> bytes:
    """Generate a random input for the reverser.

    Args:
        rng: Random number generator to draw from
        max_length: Upper bound on the number of code points (or bytes)

    Returns:
        Either well-formed UTF-8 text, raw random bytes, or well-formed text
        whose final multi-byte sequence has been cut short
    """
    kind = rng.random()
    if kind < 0.5:
        return random_text(rng, max_length).encode("utf-8")
    if kind < 0.8:
        return bytes(rng.randrange(256) for _ in range(rng.randint(0, max_length)))

    data = random_text(rng, max_length).encode("utf-8")
    if data and data[-1] >= 0x80:
        return data[:-1]
    # Append the first byte of a 3-byte sequence with nothing after it
    return data + b"\xe6"


def check_reverse(data: bytes, reverse_func: ReverseFunc = reverse) -> List[str]:
    """Check the reversal properties for a single input.

    Args:
        data: Input bytes, well-formed or not
        reverse_func: Function under test, defaults to reverse()

    Returns:
        Descriptions of violated properties, empty if all of them hold
    """
    problems = []
    valid = is_valid_utf8(data)
    result, error = reverse_func(data)

    if error is not None:
        if valid:
            problems.append("well-formed input was rejected")
        if result != data:
            problems.append("rejected input was not returned unchanged")
        return problems

    if not valid:
        problems.append("malformed input was accepted")
        return problems
    if not is_valid_utf8(result):
        problems.append("output is not valid UTF-8")
        return problems
    if result.decode("utf-8") != data.decode("utf-8")[::-1]:
        problems.append("output is not the input's code points in reverse order")

    twice, error = reverse_func(result)
    if error is not None:
        problems.append(f"reversing the output failed: {error}")
    elif twice != data:
        problems.append("reversing twice did not restore the input")
    return problems


def fuzz(
    iterations: int = DEFAULT_ITERATIONS,
    seed: Optional[int] = None,
    max_length: int = DEFAULT_MAX_LENGTH,
    reverse_func: ReverseFunc = reverse,
) -> List[FuzzFailure]:
    """Run the seed corpus and random inputs through check_reverse.

    Args:
        iterations: Number of random inputs to try after the seed corpus
        seed: Seed for the random generator; the same seed yields the same
              inputs
        max_length: Upper bound on the size of each random input
        reverse_func: Function under test, defaults to reverse()

    Returns:
        One FuzzFailure per input that violated any property

    Raises:
        ValueError: If iterations or max_length is negative
    """
    if iterations < 0:
        raise ValueError(f"iterations must be 0 or greater, got {iterations}")
    if max_length < 0:
        raise ValueError(f"max_length must be 0 or greater, got {max_length}")

    rng = random.Random(seed)
    inputs = list(SEED_CORPUS)
    inputs.extend(random_input(rng, max_length) for _ in range(iterations))

    failures = []
    for data in inputs:
        problems = check_reverse(data, reverse_func)
        if problems:
            failures.append(FuzzFailure(data=data, problems=problems))
    return failures
