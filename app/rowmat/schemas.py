from __future__ import annotations
from typing import Any, List, TypeVar
from pydantic import RootModel, ValidationError, field_validator

T = TypeVar("T")

Row = List[T]
Matrix = List[List[T]]


class RaggedMatrixError(ValueError):
    """A nested literal whose rows do not all have the same length."""


class MatrixLiteral(RootModel[List[List[Any]]]):
    """Nested-list literal accepted by ``builders.from_array``.

    Rows may hold any element values; the only requirement is that every row
    has the same length, which makes the literal an N x M array.
    """

    @field_validator("root")
    @classmethod
    def check_rectangular(cls, v):
        if not v:
            return v
        n = len(v[0])
        for i, r in enumerate(v):
            if len(r) != n:
                raise ValueError(f"ragged rows at row {i} (len {len(r)} != {n})")
        return v


def check_literal(array: Any) -> MatrixLiteral:
    """Validate ``array`` as a rectangular literal.

    Raises TypeError when ``array`` is not a sequence of row sequences and
    RaggedMatrixError when its rows differ in length.
    """
    if not isinstance(array, (list, tuple)) or not all(isinstance(r, (list, tuple)) for r in array):
        raise TypeError(f"expected a sequence of row sequences, got {type(array).__name__}")
    try:
        return MatrixLiteral.model_validate([list(r) for r in array])
    except ValidationError as e:
        raise RaggedMatrixError(e.errors()[0]["msg"]) from e
