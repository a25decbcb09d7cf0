"""
Text codec for rows and matrices.

Row format: whitespace-separated tokens ended by "\\n"; an all-blank line is
an empty row. Matrix format: row lines followed by one blank line.

Parse failures (malformed token, end of input) never raise here: they set the
stream's ``fail`` flag and the caller inspects it after each read.
"""
from __future__ import annotations
import logging
import os
from io import StringIO
from pathlib import Path
from typing import Any, Optional, TextIO, Tuple

from .config import CodecConfig, get_config
from .elements import INT, Element
from .linalg import rectangularize
from .schemas import Matrix, Row
from .stream import TextStream

logger = logging.getLogger(__name__)


def skip_hws(stream: TextStream, chars: str = " \t") -> TextStream:
    """Skip horizontal whitespace; line terminators are left in place."""
    while stream.peek() and stream.peek() in chars:
        stream.get()
    return stream


# ---------- rows ----------

def write_row(out: TextIO, row: Row, element: Optional[Element[Any]] = None,
              *, config: Optional[CodecConfig] = None) -> None:
    cfg = config or get_config()
    fmt = element.format if element is not None else str
    for item in row:
        out.write(cfg.separator)
        out.write(fmt(item))
    out.write("\n")


def read_row(stream: TextStream, element: Element[Any] = INT,
             *, config: Optional[CodecConfig] = None) -> Row:
    """Read one line of elements.

    Returns the row read so far when the line terminator is reached, or when
    extraction fails, in which case ``stream.fail`` is set.
    """
    cfg = config or get_config()
    row: Row = []
    if stream.fail:
        return row
    while True:
        skip_hws(stream, cfg.horizontal_whitespace)
        ch = stream.peek()
        if ch == "\n":
            stream.ignore()
            return row
        if ch == "":
            if cfg.strict_terminator:
                stream.fail = True
                logger.debug("read_row: end of input before line terminator (%d elements read)", len(row))
            return row
        item = stream.extract(element)
        if stream.fail:
            logger.debug("read_row: malformed token after %d elements", len(row))
            return row
        row.append(item)


def dumps_row(row: Row, element: Optional[Element[Any]] = None,
              *, config: Optional[CodecConfig] = None) -> str:
    buf = StringIO()
    write_row(buf, row, element, config=config)
    return buf.getvalue()


def loads_row(text: str, element: Element[Any] = INT,
              *, config: Optional[CodecConfig] = None) -> Tuple[Row, TextStream]:
    stream = TextStream(text)
    return read_row(stream, element, config=config), stream


# ---------- matrices ----------

def write_matrix(out: TextIO, M: Matrix, element: Optional[Element[Any]] = None,
                 *, config: Optional[CodecConfig] = None) -> None:
    for row in M:
        write_row(out, row, element, config=config)
    out.write("\n")  # end-of-matrix marker


def read_matrix(stream: TextStream, element: Element[Any] = INT,
                *, config: Optional[CodecConfig] = None) -> Matrix:
    """Read rows up to the first blank line, then rectangularize.

    On a failed stream the rows collected before the failure are returned,
    rectangularized; the row that failed is dropped.
    """
    M: Matrix = []
    while True:
        row = read_row(stream, element, config=config)
        if stream.fail or not row:
            break
        M.append(row)
    if stream.fail:
        logger.debug("read_matrix: stream failed after %d rows", len(M))
    return rectangularize(M, element)


def dumps_matrix(M: Matrix, element: Optional[Element[Any]] = None,
                 *, config: Optional[CodecConfig] = None) -> str:
    buf = StringIO()
    write_matrix(buf, M, element, config=config)
    return buf.getvalue()


def loads_matrix(text: str, element: Element[Any] = INT,
                 *, config: Optional[CodecConfig] = None) -> Tuple[Matrix, TextStream]:
    stream = TextStream(text)
    return read_matrix(stream, element, config=config), stream


def load_matrix(path: str | Path, element: Element[Any] = INT,
                *, config: Optional[CodecConfig] = None) -> Tuple[Matrix, TextStream]:
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        stream = TextStream(f)
        M = read_matrix(stream, element, config=config)
    return M, stream


def save_matrix(path: str | Path, M: Matrix, element: Optional[Element[Any]] = None,
                *, config: Optional[CodecConfig] = None) -> None:
    p = Path(path)
    os.makedirs(p.parent, exist_ok=True)
    with p.open("w", encoding="utf-8", newline="\n") as f:
        write_matrix(f, M, element, config=config)
