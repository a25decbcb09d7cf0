from __future__ import annotations
import logging
from typing import Any, Optional

from .elements import Element, default_for
from .schemas import Matrix, Row

logger = logging.getLogger(__name__)


def rows(M: Matrix) -> int:
    return len(M)


def cols(M: Matrix) -> int:
    # first row only; assumes M is rectangular
    return len(M[0]) if M else 0


def shape(M: Matrix) -> tuple[int, int]:
    return (rows(M), cols(M))


def is_rectangular(M: Matrix) -> bool:
    return len({len(r) for r in M}) <= 1


def rectangularize(M: Matrix, element: Optional[Element[Any]] = None) -> Matrix:
    """Pad every row to the longest row's length with the default value.

    A matrix whose rows are all empty (or that has no rows) is cleared.
    Works in place and returns ``M``.
    """
    max_len = max((len(r) for r in M), default=0)
    if max_len == 0:
        M.clear()
        return M
    zero = default_for(M, element)
    padded = 0
    for row in M:
        if len(row) < max_len:
            padded += 1
            row.extend([zero] * (max_len - len(row)))
    if padded:
        logger.debug("rectangularize: padded %d of %d rows to %d columns", padded, len(M), max_len)
    return M


def reshape(M: Matrix, r: int, c: int, element: Optional[Element[Any]] = None) -> Matrix:
    """Resize ``M`` in place to ``r`` rows of ``c`` columns.

    Rows are added empty or dropped from the end, then every row is padded
    with the default value or truncated to ``c``.
    """
    if r < 0 or c < 0:
        raise ValueError(f"reshape: negative size {r}x{c}")
    # the default comes from values present before any truncation
    zero = default_for(M, element)
    del M[r:]
    M.extend([] for _ in range(r - len(M)))
    for row in M:
        if len(row) > c:
            del row[c:]
        else:
            row.extend([zero] * (c - len(row)))
    return M


def fill_row(row: Row, value: Any) -> Row:
    row[:] = [value] * len(row)
    return row


def fill(M: Matrix, value: Any) -> Matrix:
    for row in M:
        fill_row(row, value)
    return M


def row_consists_of(row: Row, value: Any) -> bool:
    return all(v == value for v in row)


def consists_of(M: Matrix, value: Any) -> bool:
    return all(row_consists_of(row, value) for row in M)
