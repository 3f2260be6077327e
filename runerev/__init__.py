"""runerev - Code-point-aware reversal of UTF-8 text."""

__version__ = "0.1.0"

from .codec import Codec
from .reverser import InvalidEncodingError, is_valid_utf8, reverse
from .reversing_codec import RuneReversingCodec
from .fuzz import FuzzFailure, check_reverse, fuzz

__all__ = [
    "Codec",
    "RuneReversingCodec",
    "InvalidEncodingError",
    "is_valid_utf8",
    "reverse",
    "FuzzFailure",
    "check_reverse",
    "fuzz",
]
