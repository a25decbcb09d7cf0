"""
Matrix builders.

Every builder returns a freshly allocated rectangular matrix; no row object
is shared between rows or between matrices.
"""
from __future__ import annotations
from collections.abc import Collection, Iterator, Sequence
from typing import Any, Optional, overload

from .elements import Element, default_for, default_of
from .schemas import Matrix, check_literal


def _check_size(name: str, n: int) -> None:
    if n < 0:
        raise ValueError(f"{name}: negative size {n}")


def matrix(rows: int, cols: int, value: Any = None, element: Optional[Element[Any]] = None) -> Matrix:
    """rows x cols matrix with every element set to ``value``.

    Without ``value`` the element default is used (``element`` if given,
    otherwise the configured default element).
    """
    _check_size("matrix", rows)
    _check_size("matrix", cols)
    if value is None:
        value = default_for([], element)
    return [[value] * cols for _ in range(rows)]


def from_array(array: Sequence[Sequence[Any]]) -> Matrix:
    """Copy a nested N x M literal row by row; ragged literals are rejected."""
    return [list(r) for r in check_literal(array).root]


def _diagonal_of(values: Sequence[Any], zero: Any) -> Matrix:
    n = len(values)
    out = [[zero] * n for _ in range(n)]
    for i, v in enumerate(values):
        out[i][i] = v
    return out


def _require_multipass(name: str, values: Any, kind: type) -> None:
    # the side length is measured before the values are read
    if isinstance(values, Iterator) or not isinstance(values, kind):
        raise TypeError(
            f"{name} needs a multi-pass {kind.__name__}, got {type(values).__name__}; "
            "materialize single-pass iterables with list() first"
        )


def _zero(values: Sequence[Any], element: Optional[Element[Any]]) -> Any:
    if element is not None:
        return element.default()
    if len(values):
        return default_of(values[0])
    return default_for([], None)


@overload
def diagonal(size: int, value: Any, *, element: Optional[Element[Any]] = None) -> Matrix: ...
@overload
def diagonal(values: Collection[Any], *, element: Optional[Element[Any]] = None) -> Matrix: ...

def diagonal(size_or_values, value=None, *, element=None):
    """Square diagonal matrix.

    ``diagonal(n, v)`` puts ``v`` on each of the ``n`` diagonal positions;
    ``diagonal(values)`` puts ``values[i]`` at ``(i, i)``. Off-diagonal
    positions hold the element default.
    """
    if isinstance(size_or_values, int) and not isinstance(size_or_values, bool):
        if value is None:
            raise TypeError("diagonal(size, value) needs a value")
        _check_size("diagonal", size_or_values)
        zero = element.default() if element is not None else default_of(value)
        return _diagonal_of([value] * size_or_values, zero)
    if value is not None:
        raise TypeError("diagonal(values) takes no value argument")
    _require_multipass("diagonal", size_or_values, Collection)
    values = size_or_values if isinstance(size_or_values, Sequence) else list(size_or_values)
    return _diagonal_of(values, _zero(values, element))


def diagonal_range(values: Sequence[Any], start: int = 0, stop: Optional[int] = None,
                   *, element: Optional[Element[Any]] = None) -> Matrix:
    """Diagonal matrix from ``values[start:stop]``."""
    _require_multipass("diagonal_range", values, Sequence)
    picked = values[start:stop]
    return _diagonal_of(picked, _zero(picked, element))


def eye(n: int) -> Matrix:
    return diagonal(n, 1)


def zeros(r: int, c: int) -> Matrix:
    return matrix(r, c, 0)
