"""Tests for catalog/line_reader.py"""

import io
import unittest

from catalog.line_reader import LineReader


class TestReadLine(unittest.TestCase):
    """Verify one line is returned per call with the terminator stripped."""

    def test_reads_lines_in_order(self):
        reader = LineReader(io.BytesIO(b"first\nsecond\n"))
        self.assertEqual(reader.read_line(), "first")
        self.assertEqual(reader.read_line(), "second")
        self.assertIsNone(reader.read_line())

    def test_empty_stream(self):
        reader = LineReader(io.BytesIO(b""))
        self.assertIsNone(reader.read_line())

    def test_adjacent_terminators_give_empty_line(self):
        reader = LineReader(io.BytesIO(b"a\n\nb\n"))
        self.assertEqual(reader.read_line(), "a")
        self.assertEqual(reader.read_line(), "")
        self.assertEqual(reader.read_line(), "b")
        self.assertIsNone(reader.read_line())

    def test_lone_terminator(self):
        reader = LineReader(io.BytesIO(b"\n"))
        self.assertEqual(reader.read_line(), "")
        self.assertIsNone(reader.read_line())

    def test_final_line_without_terminator(self):
        reader = LineReader(io.BytesIO(b"one\nlast"))
        self.assertEqual(reader.read_line(), "one")
        self.assertEqual(reader.read_line(), "last")
        self.assertIsNone(reader.read_line())
        self.assertIsNone(reader.read_line())

    def test_carriage_return_kept(self):
        reader = LineReader(io.BytesIO(b"dos\r\n"))
        self.assertEqual(reader.read_line(), "dos\r")

    def test_decodes_utf8(self):
        reader = LineReader(io.BytesIO("Amélie\n".encode("utf-8")))
        self.assertEqual(reader.read_line(), "Amélie")


class TestBufferGrowth(unittest.TestCase):
    """Verify the buffer doubles when a line outgrows it."""

    def test_starts_at_initial_capacity(self):
        reader = LineReader(io.BytesIO(b""), initial_capacity=4)
        self.assertEqual(reader.capacity, 4)

    def test_doubles_for_long_line(self):
        reader = LineReader(io.BytesIO(b"x" * 9 + b"\n"), initial_capacity=4)
        self.assertEqual(reader.read_line(), "x" * 9)
        self.assertEqual(reader.capacity, 16)

    def test_exact_fit_does_not_grow(self):
        reader = LineReader(io.BytesIO(b"abcd\n"), initial_capacity=4)
        self.assertEqual(reader.read_line(), "abcd")
        self.assertEqual(reader.capacity, 4)

    def test_long_line_then_short_line(self):
        reader = LineReader(io.BytesIO(b"a" * 100 + b"\nbc\n"), initial_capacity=2)
        self.assertEqual(reader.read_line(), "a" * 100)
        self.assertEqual(reader.read_line(), "bc")


class TestIteration(unittest.TestCase):
    def test_iterates_until_exhausted(self):
        reader = LineReader(io.BytesIO(b"a\nb\n\nc"))
        self.assertEqual(list(reader), ["a", "b", "", "c"])


if __name__ == "__main__":
    unittest.main()
