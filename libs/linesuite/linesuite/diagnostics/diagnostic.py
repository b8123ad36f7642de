"""Diagnostic message representation."""

from __future__ import annotations

from dataclasses import dataclass

from linesuite.diagnostics.location import SourceLocation
from linesuite.diagnostics.severity import DiagnosticSeverity


@dataclass(frozen=True)
class Diagnostic:
    """A single diagnostic message.

    ``code`` is a short stable identifier (``"unknown-test"``,
    ``"stray-case"``, ...) so callers can filter without matching on the
    human-readable message.
    """

    severity: DiagnosticSeverity
    message: str
    location: SourceLocation | None = None
    code: str = ""
    notes: tuple[str, ...] = ()

    def __str__(self) -> str:
        loc = f"{self.location}: " if self.location else ""
        code = f" [{self.code}]" if self.code else ""
        text = f"{loc}{self.severity}{code}: {self.message}"
        for note in self.notes:
            text += f"\n    note: {note}"
        return text
