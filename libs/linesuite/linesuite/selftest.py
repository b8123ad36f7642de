"""Tests that exercise linesuite with linesuite.

They double as examples of writing test bodies.  Run them with::

    python -m linesuite --selftest

The matching data is ``linesuite/data/selftest.txt``.
"""

from __future__ import annotations

from importlib import resources
from typing import TextIO

from linesuite.core.cases import TestCase
from linesuite.core.registry import ExtraLines, FunctionTest, TestRegistry
from linesuite.core.results import TestResult

DATA_RESOURCE = "selftest.txt"

# Indexed by the first field of every ``stringPulling`` case.
STRINGS = (
    "No escape characters.",
    "Escaped letters:  \a \b \f \n \r \t \v",
    "Hex chars:  \x05 \x65 \xBC",
    "Octal chars:  \007 \111 \247 \248",
    "Escaped symbols:  \' \" \\",
)


def basic_read(case: TestCase, data: ExtraLines, log: TextIO) -> TestResult:
    """Two equal integers per case; anything else means cases are not being read."""
    fields = case.data()
    first = fields.integer()
    second = fields.integer()
    if first == second:
        return TestResult.PASS
    log.write(f"  {first} != {second}\n")
    return TestResult.ABORT_ALL_TESTS


def test_test_name(case: TestCase, data: ExtraLines, log: TextIO) -> TestResult:
    """The quoted name in the case must be the name of this test."""
    name = case.data().quoted()
    if name != "testTestName":
        log.write(f'  Expected "testTestName" but got "{name}".\n')
        return TestResult.FAIL
    return TestResult.PASS


def test_test_case_num(case: TestCase, data: ExtraLines, log: TextIO) -> TestResult:
    """Each case holds its own case number, counting from 1."""
    number = case.data().unsigned()
    if number != case.number:
        log.write(f"  Expected {case.number}, but got {number}.\n")
        return TestResult.FAIL
    return TestResult.PASS


def test_test_result(case: TestCase, data: ExtraLines, log: TextIO) -> TestResult:
    """Return the quoted result named by the case.

    The second field says whether the case should be applied at all; a case
    marked 0 is one that an earlier abort should have skipped.
    """
    fields = case.data()
    wanted = fields.quoted()
    should_apply = fields.boolean()
    if not should_apply:
        log.write(f"  Something went wrong -- test case {case.number} shouldn't have been applied.\n")
        return TestResult.FAIL
    result = TestResult.from_name(wanted) or TestResult.PASS
    messages = {
        TestResult.PASS: "should pass...",
        TestResult.FAIL: "should fail...",
        TestResult.ABORT_THIS_TEST: "should fail and abort this test...",
        TestResult.ABORT_ALL_TESTS: "should fail and abort all testing...",
    }
    log.write(f"  Test case {case.number} {messages[result]}\n")
    return result


def string_pulling(case: TestCase, data: ExtraLines, log: TextIO) -> TestResult:
    """Quoted strings decode C escapes into the expected entry of ``STRINGS``."""
    fields = case.data()
    selector = fields.unsigned()
    text = fields.quoted()
    if selector >= len(STRINGS):
        log.write(f"  No string number {selector}.\n")
        return TestResult.ABORT_THIS_TEST
    if text == STRINGS[selector]:
        return TestResult.PASS
    log.write(f"  Test case string = {text!r}; expected = {STRINGS[selector]!r}\n")
    return TestResult.FAIL


def multi_line(case: TestCase, data: ExtraLines, log: TextIO) -> TestResult:
    """``<rows> <columns>`` followed by *rows* raw lines of *columns* characters."""
    fields = case.data()
    rows = fields.unsigned()
    columns = fields.unsigned()
    result = TestResult.PASS
    # Every row is read even after a bad one so the next case starts in the right place.
    for row in range(1, rows + 1):
        line = data.read_line()
        if line is None:
            log.write(f"  Data ended after {row - 1} of {rows} rows.\n")
            return TestResult.ABORT_THIS_TEST
        width = len(line.strip())
        if width != columns:
            log.write(
                f"  Row {row} (line {data.line_counter}) is {width} wide, expected {columns}.\n"
            )
            result = TestResult.FAIL
    return result


TESTS = {
    "basicRead": basic_read,
    "testTestName": test_test_name,
    "testTestCaseNum": test_test_case_num,
    "testTestResult": test_test_result,
    "stringPulling": string_pulling,
    "multiLine": multi_line,
}


def register(registry: TestRegistry) -> None:
    """Register every self-test with *registry*."""
    for name, body in TESTS.items():
        registry.register(FunctionTest(name, body))


def data_text() -> str:
    """Return the bundled self-test data."""
    return resources.files("linesuite.data").joinpath(DATA_RESOURCE).read_text("utf-8")
