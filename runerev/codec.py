"""Abstract base class for text codecs."""

from abc import ABC, abstractmethod

from .reverser import Text


class Codec(ABC):
    """Base codec interface for transforming text in both directions.

    A codec here maps text to text rather than str to bytes: encode turns
    readable text into its coded form and decode undoes it, so
    decode(encode(x)) == x. str input is transformed as a sequence of code
    points; bytes input is treated as UTF-8 and the result is UTF-8 bytes.
    Implementations return the same type they were given.
    """

    @abstractmethod
    def encode(self, text: Text) -> Text:
        """Transform text into its coded form.

        Args:
            text: A str, or UTF-8 bytes

        Returns:
            The coded text, a str for str input and UTF-8 bytes for bytes input
        """
        pass

    @abstractmethod
    def decode(self, text: Text) -> Text:
        """Recover text from its coded form.

        Args:
            text: A str, or UTF-8 bytes, as produced by encode

        Returns:
            The original text, of the same type as the input
        """
        pass
