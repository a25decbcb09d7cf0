from __future__ import annotations

import unittest

from rowmat import (
    FLOAT, RaggedMatrixError, diagonal, diagonal_range, eye, from_array,
    is_rectangular, matrix, shape, zeros,
)


class TestMatrix(unittest.TestCase):
    def test_fill_value(self) -> None:
        self.assertEqual(matrix(2, 3, 9), [[9, 9, 9], [9, 9, 9]])

    def test_default_value(self) -> None:
        self.assertEqual(matrix(2, 2), [[0, 0], [0, 0]])
        self.assertEqual(matrix(1, 2, element=FLOAT), [[0.0, 0.0]])
        self.assertEqual(matrix(0, 3), [])

    def test_rows_are_independent(self) -> None:
        M = matrix(2, 2, 0)
        M[0][0] = 1
        self.assertEqual(M[1][0], 0)

    def test_negative(self) -> None:
        with self.assertRaises(ValueError):
            matrix(-1, 2)

    def test_eye_and_zeros(self) -> None:
        self.assertEqual(eye(2), [[1, 0], [0, 1]])
        self.assertEqual(zeros(2, 1), [[0], [0]])


class TestFromArray(unittest.TestCase):
    def test_copies_rows(self) -> None:
        src = [[1, 2], [3, 4]]
        M = from_array(src)
        self.assertEqual(M, src)
        src[0][0] = 99
        self.assertEqual(M[0][0], 1)

    def test_tuples(self) -> None:
        self.assertEqual(from_array(((1, 2, 3),)), [[1, 2, 3]])
        self.assertEqual(from_array([]), [])

    def test_ragged_rejected(self) -> None:
        with self.assertRaises(RaggedMatrixError):
            from_array([[1, 2], [3]])
        with self.assertRaises(ValueError):
            from_array([[1], [2, 3]])

    def test_not_nested(self) -> None:
        with self.assertRaises(TypeError):
            from_array([1, 2])


class TestDiagonal(unittest.TestCase):
    def test_size_and_value(self) -> None:
        self.assertEqual(diagonal(3, 7), [[7, 0, 0], [0, 7, 0], [0, 0, 7]])
        self.assertEqual(diagonal(0, 7), [])
        self.assertEqual(diagonal(2, 1.5), [[1.5, 0.0], [0.0, 1.5]])

    def test_values(self) -> None:
        self.assertEqual(diagonal([1, 2, 3]), [[1, 0, 0], [0, 2, 0], [0, 0, 3]])
        self.assertEqual(diagonal((4, 5)), [[4, 0], [0, 5]])
        self.assertEqual(diagonal(range(1, 3)), [[1, 0], [0, 2]])
        self.assertEqual(diagonal(["a", "b"]), [["a", ""], ["", "b"]])
        self.assertEqual(diagonal([]), [])

    def test_identity_property(self) -> None:
        values = [3, -1, 4, 1, 5]
        M = diagonal(values)
        self.assertEqual(shape(M), (5, 5))
        self.assertTrue(is_rectangular(M))
        for i in range(5):
            for j in range(5):
                self.assertEqual(M[i][j], values[i] if i == j else 0)

    def test_explicit_element(self) -> None:
        M = diagonal([1, 2], element=FLOAT)
        self.assertIsInstance(M[0][1], float)

    def test_single_pass_rejected(self) -> None:
        with self.assertRaises(TypeError):
            diagonal(iter([1, 2]))
        with self.assertRaises(TypeError):
            diagonal(x for x in (1, 2))
        with self.assertRaises(TypeError):
            diagonal_range(iter([1, 2]))
        with self.assertRaises(TypeError):
            diagonal_range({1, 2})

    def test_bad_arguments(self) -> None:
        with self.assertRaises(TypeError):
            diagonal(3)
        with self.assertRaises(TypeError):
            diagonal([1, 2], 3)
        with self.assertRaises(ValueError):
            diagonal(-1, 3)

    def test_range(self) -> None:
        values = [1, 2, 3, 4]
        self.assertEqual(diagonal_range(values, 1, 3), [[2, 0], [0, 3]])
        self.assertEqual(diagonal_range(values), diagonal(values))
        self.assertEqual(diagonal_range(values, 2, 2), [])


if __name__ == "__main__":
    unittest.main()
