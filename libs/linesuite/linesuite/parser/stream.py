"""The test data stream: test name markers and the test cases under them.

Names and cases alternate under the control of the test suite::

    name = data.read_test_name()      # ":basicRead"
    case = data.read_test_case()      # "1 1"
    case = data.read_test_case()      # "2 2"
    case = data.read_test_case()      # None -- next name marker is pushed back
    name = data.read_test_name()      # ... and returned here

When a case read runs into a name marker, the marker is held in a single
pushback slot so the following :meth:`TestData.read_test_name` sees it.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Iterator

from linesuite.parser.lines import Line, LineKind, classify
from linesuite.parser.reader import LineReader, LineSource


class TestData:
    """Reads test names and test cases from a :class:`LineSource`."""

    __test__ = False  # not a pytest test class

    def __init__(self, source: LineSource, name: str = "<string>") -> None:
        self._reader = LineReader(source)
        self._name = name
        self._pending: Line | None = None
        self._owned: io.TextIOBase | None = None

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_text(cls, text: str, name: str = "<string>") -> TestData:
        """Build a stream over in-memory text."""
        return cls(io.StringIO(text), name)

    @classmethod
    def open(cls, path: str | Path, encoding: str = "utf-8") -> TestData:
        """Open a test data file. The file is closed by :meth:`close`."""
        handle = open(path, encoding=encoding, newline="")
        data = cls(handle, str(path))
        data._owned = handle
        return data

    def close(self) -> None:
        if self._owned is not None:
            self._owned.close()
            self._owned = None

    def __enter__(self) -> TestData:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Position
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        """Name of the stream for messages (file path or ``"<string>"``)."""
        return self._name

    @property
    def raw(self) -> LineReader:
        """The underlying line reader, for test cases that span several lines."""
        return self._reader

    @property
    def line_counter(self) -> int:
        return self._reader.line_counter

    def reset(self) -> None:
        """Rewind to the first line and forget any pushed-back name."""
        self._reader.reset()
        self._pending = None

    def _next_line(self) -> Line | None:
        raw = self._reader.read_line()
        if raw is None:
            return None
        return classify(raw, self._reader.line_counter)

    # ------------------------------------------------------------------
    # Names and cases
    # ------------------------------------------------------------------

    def read_test_name(self) -> str | None:
        """Advance to the next test name marker and return its name.

        Comments, blank lines and any test cases in the way are skipped.
        Returns None at the end of the stream.
        """
        if self._pending is not None:
            line: Line | None = self._pending
            self._pending = None
        else:
            line = self._next_line()

        while line is not None:
            if line.kind is LineKind.NAME:
                return line.text
            line = self._next_line()
        return None

    def read_test_case(self) -> str | None:
        """Return the next test case of the current section.

        Returns None when the section ends, either at the end of the stream
        or at the next test name marker, which is kept for
        :meth:`read_test_name`.
        """
        if self._pending is not None:
            raise RuntimeError(
                f"{self._name}:{self._pending.number}: read_test_case() called "
                f"while test name {self._pending.text!r} is pending"
            )

        line = self._next_line()
        while line is not None:
            if line.kind is LineKind.CASE:
                return line.text
            if line.kind is LineKind.NAME:
                self._pending = line
                return None
            line = self._next_line()
        return None

    def lines(self) -> Iterator[Line]:
        """Yield every remaining line, classified.

        Bypasses the pushback slot; meant for whole-stream scans made after a
        :meth:`reset`.
        """
        line = self._next_line()
        while line is not None:
            yield line
            line = self._next_line()
