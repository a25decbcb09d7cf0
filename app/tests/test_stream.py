from __future__ import annotations

import unittest
from io import StringIO

from rowmat import FLOAT, INT, TextStream
from rowmat.io import skip_hws


class TestTextStream(unittest.TestCase):
    def test_peek_does_not_consume(self) -> None:
        s = TextStream("ab")
        self.assertEqual(s.peek(), "a")
        self.assertEqual(s.peek(), "a")
        self.assertEqual(s.get(), "a")
        self.assertEqual(s.get(), "b")
        self.assertTrue(s.good())

    def test_get_past_end_fails(self) -> None:
        s = TextStream("a")
        s.get()
        self.assertEqual(s.peek(), "")
        self.assertTrue(s.eof)
        self.assertFalse(s.fail)
        self.assertEqual(s.get(), "")
        self.assertTrue(s.fail)
        self.assertFalse(s)

    def test_unget(self) -> None:
        s = TextStream("xy")
        self.assertEqual(s.get(), "x")
        s.unget()
        self.assertEqual(s.get(), "x")
        self.assertEqual(s.peek(), "y")
        s.unget()
        self.assertEqual(s.get(), "x")
        self.assertEqual(s.get(), "y")

    def test_unget_without_char_fails(self) -> None:
        s = TextStream("xy")
        s.unget()
        self.assertTrue(s.fail)

    def test_failure_is_sticky(self) -> None:
        s = TextStream("1 2")
        s.fail = True
        self.assertEqual(s.peek(), "")
        self.assertEqual(s.get(), "")
        self.assertIsNone(s.extract(INT))
        s.clear()
        self.assertEqual(s.extract(INT), 1)

    def test_extract_skips_all_whitespace(self) -> None:
        s = TextStream(" \n\t 42 7")
        self.assertEqual(s.extract(INT), 42)
        self.assertEqual(s.extract(INT), 7)
        self.assertFalse(s.fail)
        self.assertTrue(s.eof)
        self.assertIsNone(s.extract(INT))
        self.assertTrue(s.fail)

    def test_extract_malformed(self) -> None:
        s = TextStream("12abc")
        self.assertIsNone(s.extract(INT))
        self.assertTrue(s.fail)

    def test_extract_float(self) -> None:
        self.assertEqual(TextStream("2.5\n").extract(FLOAT), 2.5)

    def test_wraps_file_objects(self) -> None:
        s = TextStream(StringIO("5\n"))
        self.assertEqual(s.extract(INT), 5)
        self.assertEqual(s.get(), "\n")

    def test_skip_hws_stops_at_newline(self) -> None:
        s = TextStream(" \t \nx")
        skip_hws(s)
        self.assertEqual(s.peek(), "\n")


if __name__ == "__main__":
    unittest.main()
