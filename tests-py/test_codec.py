"""Tests for the Codec abstract interface."""

import unittest
from runerev import Codec, RuneReversingCodec


class TestCodecInterface(unittest.TestCase):
    """Test cases for the Codec abstract interface."""

    def test_cannot_instantiate_abstract_class(self):
        """Codec is abstract and cannot be instantiated directly."""
        with self.assertRaises(TypeError):
            Codec()

    def test_subclass_must_implement_decode(self):
        """Subclasses must implement both encode and decode."""

        class EncodeOnlyCodec(Codec):
            def encode(self, text):
                return text

        with self.assertRaises(TypeError):
            EncodeOnlyCodec()

    def test_reversing_codec_is_a_codec(self):
        self.assertIsInstance(RuneReversingCodec(), Codec)

    def test_codec_returns_input_type(self):
        """str in gives str out, UTF-8 bytes in gives UTF-8 bytes out."""
        codec = RuneReversingCodec()
        self.assertEqual(codec.encode("日本"), "本日")
        self.assertEqual(codec.encode("日本".encode("utf-8")), "本日".encode("utf-8"))
        self.assertEqual(codec.decode(codec.encode("日本")), "日本")


if __name__ == "__main__":
    unittest.main()
