"""Classification of test data lines.

Every line of a test data stream is exactly one of:

- a comment: ``//`` as the first non-whitespace characters;
- blank: nothing but whitespace;
- a test name marker: ``:`` as the first non-whitespace character;
- a test case: anything else.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

COMMENT_PREFIX = "//"
NAME_PREFIX = ":"


class LineKind(Enum):
    """The four kinds of line in a test data stream."""

    COMMENT = auto()
    BLANK = auto()
    NAME = auto()
    CASE = auto()


@dataclass(frozen=True)
class Line:
    """A classified line.

    ``text`` is the test name for ``NAME`` lines, the case payload for
    ``CASE`` lines and the whitespace-trimmed line otherwise.
    """

    kind: LineKind
    text: str
    number: int = 0  # 1-indexed; 0 when not read from a stream


def is_test_name(text: str) -> bool:
    return text.startswith(NAME_PREFIX)


def is_comment(text: str) -> bool:
    return text.startswith(COMMENT_PREFIX)


def classify(raw: str, number: int = 0) -> Line:
    """Classify one raw line (without its newline)."""
    data = raw.lstrip()
    if not data.strip():
        return Line(LineKind.BLANK, "", number)
    if is_comment(data):
        return Line(LineKind.COMMENT, data.rstrip(), number)
    if is_test_name(data):
        return Line(LineKind.NAME, data[len(NAME_PREFIX) :].strip(), number)
    # Case payloads keep trailing content for the test body, except a CR
    # left over from CRLF line endings.
    return Line(LineKind.CASE, data.removesuffix("\r"), number)
