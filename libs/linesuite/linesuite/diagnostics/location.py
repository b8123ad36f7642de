"""Locations inside a test data stream or a run plan."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceLocation:
    """A line (and optionally a column) in a named text source."""

    file: str
    line: int  # 1-indexed
    column: int | None = None  # 1-indexed

    def __str__(self) -> str:
        if self.column is None:
            return f"{self.file}:{self.line}"
        return f"{self.file}:{self.line}:{self.column}"
