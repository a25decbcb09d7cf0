# app/rowmat/__init__.py
from . import config
from . import schemas
from . import elements
from . import stream
from . import linalg
from . import builders
from . import io

from .config import APP_VERSION, CodecConfig, get_config, load_config, reset_config
from .schemas import Matrix, MatrixLiteral, RaggedMatrixError, Row
from .elements import BOOL, COMPLEX, DECIMAL, FLOAT, INT, STR, Element, ScalarElement, element_for
from .stream import TextStream
from .linalg import (
    rows, cols, shape, is_rectangular, rectangularize, reshape,
    fill, fill_row, consists_of, row_consists_of,
)
from .builders import matrix, from_array, diagonal, diagonal_range, eye, zeros
from .io import (
    read_row, write_row, read_matrix, write_matrix,
    loads_row, dumps_row, loads_matrix, dumps_matrix, load_matrix, save_matrix,
)

__all__ = [
    "config", "schemas", "elements", "stream", "linalg", "builders", "io",
    "APP_VERSION", "CodecConfig", "get_config", "load_config", "reset_config",
    "Matrix", "MatrixLiteral", "RaggedMatrixError", "Row",
    "BOOL", "COMPLEX", "DECIMAL", "FLOAT", "INT", "STR", "Element", "ScalarElement", "element_for",
    "TextStream",
    "rows", "cols", "shape", "is_rectangular", "rectangularize", "reshape",
    "fill", "fill_row", "consists_of", "row_consists_of",
    "matrix", "from_array", "diagonal", "diagonal_range", "eye", "zeros",
    "read_row", "write_row", "read_matrix", "write_matrix",
    "loads_row", "dumps_row", "loads_matrix", "dumps_matrix", "load_matrix", "save_matrix",
]
