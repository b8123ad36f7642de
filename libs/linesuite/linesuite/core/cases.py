"""Test case values and the field cursor test bodies parse them with."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

_SIMPLE_ESCAPES: dict[str, str] = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "\\": "\\",
    "'": "'",
    '"': '"',
    "?": "?",
}

_OCTAL_DIGITS = "01234567"
_HEX_DIGITS = "0123456789abcdefABCDEF"

_TRUE_WORDS = {"1", "true", "yes"}
_FALSE_WORDS = {"0", "false", "no"}


def _is_decimal(token: str) -> bool:
    """True for an optional sign followed by ASCII digits only."""
    digits = token[1:] if token[0] in "+-" else token
    return digits.isascii() and digits.isdigit()


class FieldError(ValueError):
    """Raised when a field cannot be read from a test case."""

    def __init__(self, message: str, column: int | None = None) -> None:
        super().__init__(message if column is None else f"column {column}: {message}")
        self.column = column


@dataclass(frozen=True)
class TestCase:
    """One test case: its number within the current test, its line, and its text."""

    __test__ = False  # not a pytest test class

    number: int  # 1-based, restarts for every test section
    line: int  # line of the data stream the case was read from
    text: str

    def data(self) -> FieldReader:
        """Return a fresh cursor positioned at the start of the case text."""
        return FieldReader(self.text)


class FieldReader:
    """Read whitespace-delimited fields from a line of text, left to right.

    Every ``read`` method skips leading whitespace first and raises
    :class:`FieldError` if the requested field is missing or malformed.  A
    failed read leaves the cursor where the field started.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _peek(self, offset: int = 0) -> str:
        idx = self._pos + offset
        if idx < len(self._text):
            return self._text[idx]
        return ""

    def _skip_space(self) -> None:
        while self._pos < len(self._text) and self._text[self._pos].isspace():
            self._pos += 1

    def _column(self) -> int:
        return self._pos + 1

    # ------------------------------------------------------------------
    # Cursor state
    # ------------------------------------------------------------------

    def at_end(self) -> bool:
        """True when only whitespace remains."""
        self._skip_space()
        return self._pos >= len(self._text)

    def rest(self) -> str:
        """Consume and return everything left, with surrounding whitespace trimmed."""
        self._skip_space()
        text = self._text[self._pos :].rstrip()
        self._pos = len(self._text)
        return text

    def remaining(self) -> Iterator[str]:
        """Yield the remaining words one at a time."""
        while not self.at_end():
            yield self.word()

    # ------------------------------------------------------------------
    # Typed reads
    # ------------------------------------------------------------------

    def word(self) -> str:
        """Read the next whitespace-delimited word."""
        self._skip_space()
        begin = self._pos
        while self._pos < len(self._text) and not self._text[self._pos].isspace():
            self._pos += 1
        if begin == self._pos:
            raise FieldError("expected a field but reached the end of the test case", begin + 1)
        return self._text[begin : self._pos]

    def integer(self) -> int:
        """Read a signed decimal integer."""
        self._skip_space()
        begin = self._pos
        token = self.word()
        if not _is_decimal(token):
            self._pos = begin
            raise FieldError(f"expected an integer, got {token!r}", begin + 1)
        return int(token, 10)

    def unsigned(self) -> int:
        """Read a non-negative decimal integer."""
        self._skip_space()
        begin = self._pos
        value = self.integer()
        if value < 0:
            self._pos = begin
            raise FieldError(f"expected an unsigned integer, got {value}", begin + 1)
        return value

    def number(self) -> float:
        """Read a floating-point number."""
        self._skip_space()
        begin = self._pos
        token = self.word()
        # float() alone would also take digit separators and non-ASCII digits.
        if token.isascii() and "_" not in token:
            try:
                return float(token)
            except ValueError:
                pass
        self._pos = begin
        raise FieldError(f"expected a number, got {token!r}", begin + 1)

    def boolean(self) -> bool:
        """Read ``1``/``0`` (or ``true``/``false``, ``yes``/``no``)."""
        self._skip_space()
        begin = self._pos
        token = self.word()
        if token.lower() in _TRUE_WORDS:
            return True
        if token.lower() in _FALSE_WORDS:
            return False
        self._pos = begin
        raise FieldError(f"expected a boolean, got {token!r}", begin + 1)

    def quoted(self) -> str:
        """Read a double-quoted string, decoding C-style escape sequences."""
        self._skip_space()
        begin = self._pos
        if self._peek() != '"':
            raise FieldError("expected an opening '\"'", begin + 1)
        self._pos += 1
        chars: list[str] = []
        while self._pos < len(self._text):
            ch = self._text[self._pos]
            self._pos += 1
            if ch == '"':
                return "".join(chars)
            if ch != "\\":
                chars.append(ch)
                continue
            chars.append(self._read_escape(begin))
        self._pos = begin
        raise FieldError("unterminated quoted string", begin + 1)

    def _read_escape(self, begin: int) -> str:
        """Decode the escape whose backslash has just been consumed."""
        esc = self._peek()
        if esc == "":
            self._pos = begin
            raise FieldError("unterminated escape in quoted string", begin + 1)
        if esc in _SIMPLE_ESCAPES:
            self._pos += 1
            return _SIMPLE_ESCAPES[esc]
        if esc in _OCTAL_DIGITS:
            digits = ""
            while len(digits) < 3 and self._peek() != "" and self._peek() in _OCTAL_DIGITS:
                digits += self._peek()
                self._pos += 1
            return chr(int(digits, 8))
        if esc == "x":
            self._pos += 1
            digits = ""
            while len(digits) < 2 and self._peek() != "" and self._peek() in _HEX_DIGITS:
                digits += self._peek()
                self._pos += 1
            if not digits:
                column = self._column()
                self._pos = begin
                raise FieldError("\\x used with no following hex digits", column)
            return chr(int(digits, 16))
        # Unknown escapes keep the escaped character.
        self._pos += 1
        return esc
