"""The test suite: drives registered tests through the cases in a test data stream.

Tests always run in the order their name markers appear in the stream,
never in the order they were requested.  For each section whose name is one
of the requested tests, every case is applied to the test until the section
ends or the test body escalates:

- ``FAIL``             -- count the failure, carry on with the next case;
- ``ABORT_THIS_TEST``  -- skip the rest of this section, carry on with the next;
- ``ABORT_ALL_TESTS``  -- stop the whole run.

Sections for tests that were not requested are skipped without reading
their cases; the next name search steps over them.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, TextIO

from linesuite.core.cases import TestCase
from linesuite.core.registry import REGISTRY, RegistryError, Test, TestRegistry
from linesuite.core.results import TestResult
from linesuite.engine.report import Reporter, TextReporter
from linesuite.parser.reader import LineSource
from linesuite.parser.stream import TestData


@dataclass(frozen=True)
class RunTotals:
    """Number of test cases applied and failed over one run."""

    applied: int = 0
    failed: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.failed <= self.applied:
            raise ValueError(f"invalid totals: {self.failed} failed of {self.applied} applied")

    @property
    def passed(self) -> int:
        return self.applied - self.failed

    def plus(self, applied: int, failed: int) -> RunTotals:
        return RunTotals(self.applied + applied, self.failed + failed)


class TestSuite:
    """Runs registered tests against the cases in a test data stream.

    Args:
        data: The test data, as a :class:`TestData` or any resettable text source.
        log: Stream handed to test bodies for their own messages; also where
            the default :class:`TextReporter` writes.
        registry: Where tests are looked up (the process-wide one by default).
        reporter: Receives run events (a :class:`TextReporter` on *log* by default).
    """

    __test__ = False  # not a pytest test class

    def __init__(
        self,
        data: TestData | LineSource,
        log: TextIO | None = None,
        *,
        registry: TestRegistry | None = None,
        reporter: Reporter | None = None,
    ) -> None:
        self._data = data if isinstance(data, TestData) else TestData(data)
        self._log = log if log is not None else sys.stdout
        self._registry = registry if registry is not None else REGISTRY
        self._reporter = reporter if reporter is not None else TextReporter(self._log)
        self._totals = RunTotals()

    @property
    def log(self) -> TextIO:
        return self._log

    @property
    def data(self) -> TestData:
        return self._data

    @property
    def registry(self) -> TestRegistry:
        return self._registry

    @property
    def reporter(self) -> Reporter:
        return self._reporter

    @property
    def totals(self) -> RunTotals:
        """Totals of the most recent (or current) run."""
        return self._totals

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def one(self, name: str) -> RunTotals:
        """Apply every case of the test called *name*."""
        if not isinstance(name, str) or not name:
            raise ValueError(f"a test name is required, got {name!r}")
        return self._run_named([name])

    def group(self, names: Iterable[str]) -> RunTotals:
        """Apply the cases of every test named in *names*.

        Repeated names are looked up, and reported if unknown, once per
        occurrence.
        """
        if isinstance(names, str):
            raise ValueError("group() takes a collection of test names, not a single string")
        names = list(names)
        if not names:
            raise ValueError("group() needs at least one test name")
        for name in names:
            if not isinstance(name, str) or not name:
                raise ValueError(f"invalid test name {name!r} in group()")
        return self._run_named(names)

    def all(self) -> RunTotals:
        """Apply the cases of every registered test."""
        self._prepare()
        self._reporter.log_header()
        self._run_tests(list(self._registry))
        self._reporter.log_footer(self._totals)
        return self._totals

    # ------------------------------------------------------------------
    # Running
    # ------------------------------------------------------------------

    def _prepare(self) -> None:
        if len(self._registry) == 0:
            raise RegistryError("no tests have been registered")
        self._totals = RunTotals()
        self._data.reset()

    def _run_named(self, names: list[str]) -> RunTotals:
        self._prepare()
        self._reporter.log_header()
        tests, unknown = self._registry.resolve(names)
        for name in unknown:
            self._reporter.log_unknown_test_name(name)
        self._run_tests(tests)
        self._reporter.log_footer(self._totals)
        return self._totals

    def _run_tests(self, tests: list[Test]) -> None:
        """Run each section of the stream whose name is in *tests*."""
        if not tests:
            self._reporter.log_no_valid_tests()
            return

        name = self._data.read_test_name()
        while name is not None:
            test = self._registry.lookup(name, tests)
            if test is not None and not self._run_test(test):
                return
            name = self._data.read_test_name()

    def _run_test(self, test: Test) -> bool:
        """Apply the cases of the current section to *test*.

        Returns False if the test asked for all testing to stop.
        """
        self._reporter.log_test_header(test)
        applied = 0
        failed = 0
        keep_running = True

        text = self._data.read_test_case()
        while text is not None:
            applied += 1
            case = TestCase(applied, self._data.line_counter, text)
            result = test.test_method(case, self._data.raw, self._log)
            if not isinstance(result, TestResult):
                raise TypeError(
                    f"test {test.name!r} returned {result!r}, expected a TestResult"
                )

            if result.failed:
                failed += 1
                self._reporter.log_test_case_failed(test, case)
            else:
                self._reporter.log_test_case_passed(test, case)

            if result.stops_run:
                self._reporter.log_all_tests_aborted()
                keep_running = False
                break
            if result.stops_test:
                self._reporter.log_test_aborted(test)
                break
            text = self._data.read_test_case()

        self._reporter.log_test_footer(test, applied, failed)
        self._totals = self._totals.plus(applied, failed)
        return keep_running
