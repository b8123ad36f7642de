"""Shared fixtures for the linesuite unit tests."""

from __future__ import annotations

import pytest

from linesuite.core.cases import TestCase
from linesuite.core.registry import Test
from linesuite.engine.report import Reporter
from linesuite.engine.suite import RunTotals


class RecordingReporter(Reporter):
    """Records every report event as a tuple, in order."""

    def __init__(self) -> None:
        self.events: list[tuple] = []

    def log_header(self) -> None:
        self.events.append(("header",))

    def log_footer(self, totals: RunTotals) -> None:
        self.events.append(("footer", totals.applied, totals.failed))

    def log_no_valid_tests(self) -> None:
        self.events.append(("no_valid_tests",))

    def log_unknown_test_name(self, name: str) -> None:
        self.events.append(("unknown", name))

    def log_test_header(self, test: Test) -> None:
        self.events.append(("test_header", test.name))

    def log_test_case_passed(self, test: Test, case: TestCase) -> None:
        self.events.append(("passed", test.name, case.number, case.line))

    def log_test_case_failed(self, test: Test, case: TestCase) -> None:
        self.events.append(("failed", test.name, case.number, case.line))

    def log_test_aborted(self, test: Test) -> None:
        self.events.append(("test_aborted", test.name))

    def log_all_tests_aborted(self) -> None:
        self.events.append(("all_aborted",))

    def log_test_footer(self, test: Test, applied: int, failed: int) -> None:
        self.events.append(("test_footer", test.name, applied, failed))

    def kinds(self, *kinds: str) -> list[tuple]:
        """Events whose kind is one of *kinds*."""
        return [e for e in self.events if e[0] in kinds]


@pytest.fixture
def recorder() -> RecordingReporter:
    return RecordingReporter()
