"""Report hooks called by the test suite while it runs.

:class:`Reporter` defines every event as a no-op; renderers override the
events they care about.  :class:`TextReporter` produces the classic
plain-text report.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

from linesuite.core.cases import TestCase
from linesuite.core.registry import Test

if TYPE_CHECKING:
    from linesuite.engine.suite import RunTotals

RULE = "-" * 79


class Reporter:
    """Receives the events of a run. Every hook does nothing by default."""

    def log_header(self) -> None:
        """Called once before a run starts."""

    def log_footer(self, totals: RunTotals) -> None:
        """Called once after a run ends, aborted or not."""

    def log_no_valid_tests(self) -> None:
        """None of the requested names matched a registered test."""

    def log_unknown_test_name(self, name: str) -> None:
        """A requested test name is not registered."""

    def log_test_header(self, test: Test) -> None:
        """Cases are about to be applied to *test*."""

    def log_test_case_passed(self, test: Test, case: TestCase) -> None:
        pass

    def log_test_case_failed(self, test: Test, case: TestCase) -> None:
        pass

    def log_test_aborted(self, test: Test) -> None:
        """The remaining cases of *test* will be skipped."""

    def log_all_tests_aborted(self) -> None:
        """No further tests will be run."""

    def log_test_footer(self, test: Test, applied: int, failed: int) -> None:
        """All cases that will be applied to *test* have been."""


class TextReporter(Reporter):
    """Plain-text report written to *stream*."""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    def _write(self, *lines: str) -> None:
        for line in lines:
            self.stream.write(line + "\n")

    def log_no_valid_tests(self) -> None:
        self._write("*** No valid test names were provided! ***", "")

    def log_unknown_test_name(self, name: str) -> None:
        self._write(RULE, f'"{name}" is not a registered test object.', "")

    def log_test_header(self, test: Test) -> None:
        self._write(RULE, f'Test name:  "{test.name}"', "")

    def log_test_case_failed(self, test: Test, case: TestCase) -> None:
        self._write(
            "",
            f'Test case failed -- "{test.name}"[{case.number}] (line {case.line})',
            "",
        )

    def log_test_aborted(self, test: Test) -> None:
        self._write("*** The remaining test cases have been skipped. ***", "")

    def log_all_tests_aborted(self) -> None:
        self._write("*** Testing has been aborted. ***", "")

    def log_test_footer(self, test: Test, applied: int, failed: int) -> None:
        plural = " that was" if applied == 1 else "s that were"
        self._write(
            f'{failed} of {applied} test case{plural} applied to test "{test.name}" failed.',
            "",
        )


class SummaryReporter(TextReporter):
    """:class:`TextReporter` plus a run banner and a run-total footer."""

    def log_header(self) -> None:
        self._write("=" * 79)

    def log_footer(self, totals: RunTotals) -> None:
        plural = "" if totals.applied == 1 else "s"
        self._write(
            "=" * 79,
            f"Total: {totals.failed} of {totals.applied} test case{plural} failed.",
            "",
        )


REPORTERS: dict[str, type[Reporter]] = {
    "quiet": Reporter,
    "text": TextReporter,
    "summary": SummaryReporter,
}


def make_reporter(kind: str, stream: TextIO) -> Reporter:
    """Build the reporter called *kind* (``quiet``, ``text`` or ``summary``)."""
    try:
        cls = REPORTERS[kind]
    except KeyError:
        raise ValueError(
            f"unknown report kind {kind!r} (expected one of: {', '.join(REPORTERS)})"
        ) from None
    if cls is Reporter:
        return Reporter()
    return cls(stream)
