"""Implementation of a code-point reversing codec."""

from .codec import Codec
from .reverser import Text, reverse


class RuneReversingCodec(Codec):
    """A codec that reverses text by code point for both encoding and decoding.

    Unlike reverse(), which reports malformed input as a returned error
    value, this codec raises InvalidEncodingError.
    """

    def _reverse(self, text: Text) -> Text:
        result, error = reverse(text)
        if error is not None:
            raise error
        return result

    def encode(self, text: Text) -> Text:
        """Encode text by reversing its code points.

        Args:
            text: The str or UTF-8 bytes to encode

        Returns:
            The reversed text

        Raises:
            InvalidEncodingError: If text is not well-formed UTF-8
        """
        return self._reverse(text)

    def decode(self, text: Text) -> Text:
        """Decode text by reversing its code points.

        Args:
            text: The str or UTF-8 bytes to decode

        Returns:
            The reversed text

        Raises:
            InvalidEncodingError: If text is not well-formed UTF-8
        """
        return self._reverse(text)
