"""Diagnostic collector used by the data checker and the run-plan loader."""

from __future__ import annotations

from typing import Iterator

from linesuite.diagnostics.diagnostic import Diagnostic
from linesuite.diagnostics.location import SourceLocation
from linesuite.diagnostics.severity import DiagnosticSeverity


class DiagnosticCollector:
    """Accumulates diagnostics in the order they are reported."""

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def _add(
        self,
        severity: DiagnosticSeverity,
        message: str,
        location: SourceLocation | None,
        code: str,
        notes: tuple[str, ...],
    ) -> None:
        self._diagnostics.append(Diagnostic(severity, message, location, code, notes))

    def error(
        self,
        message: str,
        location: SourceLocation | None = None,
        *,
        code: str = "",
        notes: tuple[str, ...] = (),
    ) -> None:
        """Record an error diagnostic."""
        self._add(DiagnosticSeverity.ERROR, message, location, code, notes)

    def warning(
        self,
        message: str,
        location: SourceLocation | None = None,
        *,
        code: str = "",
        notes: tuple[str, ...] = (),
    ) -> None:
        """Record a warning diagnostic."""
        self._add(DiagnosticSeverity.WARNING, message, location, code, notes)

    def info(
        self,
        message: str,
        location: SourceLocation | None = None,
        *,
        code: str = "",
        notes: tuple[str, ...] = (),
    ) -> None:
        """Record an informational diagnostic."""
        self._add(DiagnosticSeverity.INFO, message, location, code, notes)

    def has_errors(self) -> bool:
        """Return True if any error diagnostics have been recorded."""
        return any(d.severity == DiagnosticSeverity.ERROR for d in self._diagnostics)

    def count(self, severity: DiagnosticSeverity | None = None) -> int:
        """Number of diagnostics, optionally only those of *severity*."""
        if severity is None:
            return len(self._diagnostics)
        return sum(1 for d in self._diagnostics if d.severity == severity)

    def with_code(self, code: str) -> list[Diagnostic]:
        """Return the diagnostics recorded under *code*."""
        return [d for d in self._diagnostics if d.code == code]

    def get_all(self) -> list[Diagnostic]:
        """Return a copy of all collected diagnostics."""
        return list(self._diagnostics)

    def format_all(self) -> str:
        """Format all diagnostics as a newline-separated string."""
        return "\n".join(str(d) for d in self._diagnostics)

    def __len__(self) -> int:
        return len(self._diagnostics)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(list(self._diagnostics))
