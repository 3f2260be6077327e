"""Tests for the fuzz_reverse command-line driver."""

import importlib.util
import io
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

from runerev.fuzz import SEED_CORPUS

SCRIPT_PATH = Path(__file__).resolve().parent.parent / "scripts" / "fuzz_reverse.py"


def load_script():
    """Import scripts/fuzz_reverse.py as a module."""
    spec = importlib.util.spec_from_file_location("fuzz_reverse", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def byte_reverse(data):
    """A broken reverser that ignores character boundaries."""
    return data[::-1], None


class TestFuzzReverseScript(unittest.TestCase):
    """Test cases for the fuzz driver's report and exit status."""

    def setUp(self):
        self.script = load_script()

    def run_main(self, argv, **kwargs):
        out = io.StringIO()
        with redirect_stdout(out):
            status = self.script.main(argv, **kwargs)
        return status, out.getvalue().splitlines()

    def test_success_summary(self):
        status, lines = self.run_main(["--iterations", "20", "--seed", "3"])
        self.assertEqual(status, 0)
        self.assertEqual(
            lines[0],
            f"Checking {len(SEED_CORPUS) + 20} inputs ({len(SEED_CORPUS)} seed, 20 random) with seed 3",
        )
        self.assertEqual(lines[-1], "✅ All inputs passed")

    def test_failures_listed(self):
        status, lines = self.run_main(["--iterations", "0"], reverse_func=byte_reverse)
        self.assertEqual(status, 1)
        self.assertIn("4 FAILING INPUTS", lines)
        index = lines.index(r"Input: b'abc\xe6\x97'")
        self.assertEqual(lines[index + 1], "  - malformed input was accepted")
        self.assertIn("  - output is not valid UTF-8", lines)

    def test_negative_values_are_usage_errors(self):
        for argv in (["--max-length", "-1"], ["--iterations", "-5"]):
            with self.subTest(argv=argv):
                err = io.StringIO()
                with redirect_stderr(err), redirect_stdout(io.StringIO()):
                    with self.assertRaises(SystemExit) as ctx:
                        self.script.main(argv)
                self.assertEqual(ctx.exception.code, 2)
                self.assertIn("must be 0 or greater", err.getvalue())

    def test_non_int_is_usage_error(self):
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                self.script.main(["--iterations", "many"])
        self.assertEqual(ctx.exception.code, 2)

    def test_zero_is_accepted(self):
        status, lines = self.run_main(["--iterations", "0", "--max-length", "0"])
        self.assertEqual(status, 0)
        self.assertTrue(lines[0].startswith(f"Checking {len(SEED_CORPUS)} inputs"))


if __name__ == "__main__":
    unittest.main()
