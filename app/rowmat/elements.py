"""
Element types.

An element type bundles the three things the codec and the builders need to
know about T: its default ("zero") value, how to parse a token into a value
and how to format a value back into text. ``ScalarElement`` covers any Python
type that pydantic can validate from a string.
"""
from __future__ import annotations
import re
from decimal import Decimal
from typing import Any, Callable, Dict, Generic, Optional, Protocol, TypeVar, Union, runtime_checkable

from pydantic import TypeAdapter

from .config import get_config

T = TypeVar("T")


@runtime_checkable
class Element(Protocol[T]):
    python_type: type

    def default(self) -> T: ...

    def parse(self, token: str) -> T: ...

    def format(self, value: T) -> str: ...


class ScalarElement(Generic[T]):
    """Element type backed by a default-constructible Python type.

    ``parse`` raises ValueError (pydantic's ValidationError is one) for a
    malformed token. ``pattern`` restricts the accepted token shape before
    the value is converted; pydantic's lax string coercion alone would read
    "1.0" or "1_000" as an int.
    """

    def __init__(self, tp: type, name: Optional[str] = None,
                 parser: Optional[Callable[[str], T]] = None,
                 pattern: Optional[str] = None):
        self.python_type = tp
        self.name = name or tp.__name__
        self._parser = parser
        self._pattern = re.compile(pattern) if pattern else None
        self._adapter: Optional[TypeAdapter[T]] = None

    def default(self) -> T:
        return self.python_type()

    def parse(self, token: str) -> T:
        if self._pattern is not None and not self._pattern.fullmatch(token):
            raise ValueError(f"malformed {self.name} token {token!r}")
        if self._parser is not None:
            return self._parser(token)
        # built on first use; the schema build fails for types pydantic cannot validate
        if self._adapter is None:
            self._adapter = TypeAdapter(self.python_type)
        return self._adapter.validate_strings(token)

    def format(self, value: T) -> str:
        return str(value)

    def __repr__(self) -> str:
        return f"ScalarElement({self.name})"


_INT_TOKEN = r"[+-]?\d+"
_REAL_TOKEN = r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?"

INT: ScalarElement[int] = ScalarElement(int, pattern=_INT_TOKEN)
# str(float) writes inf and nan for the special values
FLOAT: ScalarElement[float] = ScalarElement(float, pattern=_REAL_TOKEN + r"|[+-]?(inf|nan)")
BOOL: ScalarElement[bool] = ScalarElement(bool)
DECIMAL: ScalarElement[Decimal] = ScalarElement(Decimal, name="decimal", pattern=_REAL_TOKEN)
# str(complex) writes "(1+2j)", which complex() reads back
COMPLEX: ScalarElement[complex] = ScalarElement(complex, parser=complex)
STR: ScalarElement[str] = ScalarElement(str)

ELEMENTS: Dict[str, Element[Any]] = {
    e.name: e for e in (INT, FLOAT, BOOL, DECIMAL, COMPLEX, STR)
}


def register_element(element: Element[Any], name: Optional[str] = None) -> None:
    ELEMENTS[name or getattr(element, "name", element.python_type.__name__)] = element


def element_for(kind: Union[str, type, Element[Any]]) -> Element[Any]:
    """Resolve an element from a registered name, a Python type or an Element."""
    if isinstance(kind, str):
        try:
            return ELEMENTS[kind]
        except KeyError:
            raise KeyError(f"unknown element type '{kind}'; known: {sorted(ELEMENTS)}") from None
    if isinstance(kind, type):
        for e in ELEMENTS.values():
            if e.python_type is kind:
                return e
        return ScalarElement(kind)
    if isinstance(kind, Element):
        return kind
    raise TypeError(f"cannot build an element type from {kind!r}")


def default_of(value: Any) -> Any:
    return type(value)()


def default_for(matrix, element: Optional[Element[Any]] = None) -> Any:
    """Padding value for ``matrix``.

    Explicit element wins; otherwise the type of the first stored value;
    otherwise the configured default element.
    """
    if element is not None:
        return element.default()
    for row in matrix:
        if row:
            return default_of(row[0])
    return element_for(get_config().default_element).default()
