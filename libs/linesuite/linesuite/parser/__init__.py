"""linesuite parser subpackage (Layer 2 -- reads test data; used by the engine and the checker)."""

from linesuite.parser.lines import Line, LineKind, classify
from linesuite.parser.reader import LineReader, LineSource
from linesuite.parser.stream import TestData

__all__ = [
    "LineSource",
    "LineReader",
    "LineKind",
    "Line",
    "classify",
    "TestData",
]
