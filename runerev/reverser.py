"""Code-point-aware reversal of UTF-8 text.

Reversing the raw bytes of UTF-8 text corrupts every multi-byte character,
so this module decodes the input into code points, reverses those and
encodes the result again. Malformed input is never partially processed:
it comes back unchanged together with an error value.

Functions:
    is_valid_utf8: Check whether bytes (or a str) are well-formed UTF-8
    reverse: Reverse text by code point, returning (output, error)
"""

from typing import List, Optional, Tuple, Union

Text = Union[str, bytes]


class InvalidEncodingError(ValueError):
    """Raised or returned when input is not well-formed UTF-8.

    Attributes:
        start: Offset of the first offending byte (or character for str
               input), or None if unknown
        end: Offset just past the offending sequence, or None if unknown
        reason: Reason reported by the UTF-8 codec, or None if unknown
    """

    def __init__(
        self,
        message: str = "input is not valid UTF-8",
        start: Optional[int] = None,
        end: Optional[int] = None,
        reason: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.start = start
        self.end = end
        self.reason = reason

    @classmethod
    def from_unicode_error(cls, error: UnicodeError) -> "InvalidEncodingError":
        """Build an InvalidEncodingError from a UnicodeDecodeError/EncodeError."""
        return cls(
            start=getattr(error, "start", None),
            end=getattr(error, "end", None),
            reason=getattr(error, "reason", None),
        )


def _check_text(text: object) -> None:
    if not isinstance(text, (str, bytes)):
        raise TypeError(
            f"expected str or bytes, got {type(text).__name__}"
        )


def _utf8_error(text: Text) -> Optional[InvalidEncodingError]:
    """Return the encoding error for text, or None if it is well-formed."""
    try:
        if isinstance(text, bytes):
            text.decode("utf-8")
        else:
            # Lone surrogates are the only str content UTF-8 cannot carry
            text.encode("utf-8")
    except UnicodeError as e:
        return InvalidEncodingError.from_unicode_error(e)
    return None


def is_valid_utf8(text: Text) -> bool:
    """Check whether text is well-formed UTF-8.

    Args:
        text: Bytes to validate, or a str (valid unless it holds lone
              surrogates)

    Returns:
        True if every sequence decodes to a valid code point, False for
        truncated sequences, stray continuation bytes, overlong forms,
        encoded surrogates or values above U+10FFFF

    Raises:
        TypeError: If text is neither str nor bytes
    """
    _check_text(text)
    return _utf8_error(text) is None


def reverse(text: Text) -> Tuple[Text, Optional[InvalidEncodingError]]:
    """Reverse text by code point.

    Args:
        text: UTF-8 bytes or a str. Any value is accepted, including
              malformed byte sequences.

    Returns:
        Tuple of (output, error). For well-formed input the output is a new
        object of the same type holding the code points in reverse order and
        error is None. For malformed input the original object is returned
        unchanged together with an InvalidEncodingError.

    Raises:
        TypeError: If text is neither str nor bytes

    Examples:
        >>> reverse("ab")
        ('ba', None)
        >>> reverse("日本語".encode("utf-8"))[0].decode("utf-8")
        '語本日'
        >>> out, err = reverse(b"abc\\xe6\\x97")
        >>> out, str(err)
        (b'abc\\xe6\\x97', 'input is not valid UTF-8')
    """
    _check_text(text)
    error = _utf8_error(text)
    if error is not None:
        return text, error

    is_bytes = isinstance(text, bytes)
    runes: List[str] = list(text.decode("utf-8") if is_bytes else text)

    i, j = 0, len(runes) - 1
    while i < j:
        runes[i], runes[j] = runes[j], runes[i]
        i += 1
        j -= 1

    result = "".join(runes)
    if is_bytes:
        return result.encode("utf-8"), None
    return result, None
