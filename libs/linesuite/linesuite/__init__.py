"""linesuite: black-box testing driven by line-oriented test data files.

Tests are registered by name; a test data file holds ``:name`` sections of
test cases, one per line; a :class:`TestSuite` applies each section's cases
to the matching test and reports the outcome.
"""

from linesuite.core import (
    REGISTRY,
    FieldError,
    FieldReader,
    FunctionTest,
    RegistrationError,
    RegistryError,
    Test,
    TestCase,
    TestRegistry,
    TestResult,
)
from linesuite.engine import Reporter, RunTotals, SummaryReporter, TestSuite, TextReporter
from linesuite.parser import LineReader, TestData

__version__ = "0.1.0"

__all__ = [
    "TestResult",
    "TestCase",
    "FieldReader",
    "FieldError",
    "Test",
    "FunctionTest",
    "TestRegistry",
    "REGISTRY",
    "RegistrationError",
    "RegistryError",
    "LineReader",
    "TestData",
    "Reporter",
    "TextReporter",
    "SummaryReporter",
    "RunTotals",
    "TestSuite",
]
