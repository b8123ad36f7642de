"""linesuite engine subpackage (Layer 3 -- depends on core, parser)."""

from linesuite.engine.report import (
    REPORTERS,
    Reporter,
    SummaryReporter,
    TextReporter,
    make_reporter,
)
from linesuite.engine.suite import RunTotals, TestSuite

__all__ = [
    "Reporter",
    "TextReporter",
    "SummaryReporter",
    "REPORTERS",
    "make_reporter",
    "RunTotals",
    "TestSuite",
]
