from __future__ import annotations
from io import StringIO
from typing import Any, List, Optional, TextIO, Union

from .elements import Element


class TextStream:
    """Character input stream with one-character lookahead.

    Wraps a text file object (or a string) and keeps two state flags:
    ``eof`` once end of input has been seen and ``fail`` once a read could
    not be satisfied. ``fail`` is sticky: every read on a failed stream
    returns ``""`` (characters) or ``None`` (values) until ``clear()``.
    """

    def __init__(self, source: Union[str, TextIO]):
        # strings get universal newlines, like files opened in text mode
        self._src: TextIO = StringIO(source, newline=None) if isinstance(source, str) else source
        self._pushback: List[str] = []
        self._last = ""
        self.eof = False
        self.fail = False

    def __bool__(self) -> bool:
        return not self.fail

    def good(self) -> bool:
        return not (self.fail or self.eof)

    def clear(self) -> None:
        self.eof = False
        self.fail = False

    def _next(self) -> str:
        if self._pushback:
            return self._pushback.pop()
        return self._src.read(1)

    def peek(self) -> str:
        if self.fail:
            return ""
        if not self._pushback:
            ch = self._src.read(1)
            if not ch:
                self.eof = True
                return ""
            self._pushback.append(ch)
        return self._pushback[-1]

    def get(self) -> str:
        if self.fail:
            return ""
        ch = self._next()
        if not ch:
            self.eof = True
            self.fail = True
            self._last = ""
            return ""
        self._last = ch
        return ch

    def ignore(self) -> None:
        self.get()

    def unget(self) -> None:
        if self.fail or not self._last:
            self.fail = True
            return
        self._pushback.append(self._last)
        self._last = ""
        self.eof = False

    def read_token(self) -> str:
        """Skip any leading whitespace, then read a run of non-whitespace."""
        while True:
            ch = self.peek()
            if not ch or not ch.isspace():
                break
            self.get()
        chars: List[str] = []
        while True:
            ch = self.peek()
            if not ch or ch.isspace():
                break
            chars.append(self.get())
        return "".join(chars)

    def extract(self, element: Element[Any]) -> Optional[Any]:
        """Formatted extraction of one value; sets ``fail`` and returns None on error."""
        if self.fail:
            return None
        token = self.read_token()
        if not token:
            self.fail = True
            return None
        try:
            return element.parse(token)
        except ValueError:
            self.fail = True
            return None

    def __repr__(self) -> str:
        return f"TextStream(eof={self.eof}, fail={self.fail})"
