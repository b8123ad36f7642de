"""Severity outcomes returned by test bodies."""

from __future__ import annotations

from enum import Enum


class TestResult(Enum):
    """Result code returned by a test body for one test case."""

    __test__ = False  # not a pytest test class

    PASS = "pass"
    FAIL = "fail"
    # The case failed, and the remaining cases of this test should be skipped.
    ABORT_THIS_TEST = "abortThisTest"
    # The case failed, and testing should cease altogether.
    ABORT_ALL_TESTS = "abortAllTests"

    @classmethod
    def from_name(cls, name: str) -> TestResult | None:
        """Look up a result by its data-stream spelling (``"abortThisTest"`` etc.)."""
        for member in cls:
            if member.value == name:
                return member
        return None

    @property
    def failed(self) -> bool:
        return self is not TestResult.PASS

    @property
    def stops_test(self) -> bool:
        return self in (TestResult.ABORT_THIS_TEST, TestResult.ABORT_ALL_TESTS)

    @property
    def stops_run(self) -> bool:
        return self is TestResult.ABORT_ALL_TESTS

    def __str__(self) -> str:
        return self.value
