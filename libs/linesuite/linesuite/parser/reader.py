"""Line-at-a-time reading of a resettable text source."""

from __future__ import annotations

from typing import Protocol


class LineSource(Protocol):
    """Any readable, seekable text source: an open file, ``io.StringIO``, ..."""

    def readline(self) -> str:
        ...

    def seek(self, offset: int) -> int:
        ...


class LineReader:
    """Read one line at a time from a :class:`LineSource`, counting lines.

    Lines are returned without their terminating ``"\\n"``; any other
    character (including a ``"\\r"`` from CRLF data) is left in place.
    """

    def __init__(self, source: LineSource) -> None:
        self._source = source
        self._line_counter = 0
        self._source.seek(0)

    @property
    def source(self) -> LineSource:
        return self._source

    @property
    def line_counter(self) -> int:
        """Number of lines read since construction or the last :meth:`reset`."""
        return self._line_counter

    def read_line(self) -> str | None:
        """Return the next line, or None once the source is exhausted.

        A last line with no terminating newline is still a line.
        """
        line = self._source.readline()
        if line == "":
            return None
        self._line_counter += 1
        if line.endswith("\n"):
            return line[:-1]
        return line

    def reset(self) -> None:
        """Rewind to the start of the source."""
        self._source.seek(0)
        self._line_counter = 0
