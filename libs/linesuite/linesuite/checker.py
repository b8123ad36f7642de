"""Static checks over a test data stream.

Scans the whole stream without running any test and reports lines that a
run would silently skip or could never use.
"""

from __future__ import annotations

from linesuite.core.registry import REGISTRY, TestRegistry
from linesuite.diagnostics.collector import DiagnosticCollector
from linesuite.diagnostics.location import SourceLocation
from linesuite.parser.lines import Line, LineKind
from linesuite.parser.stream import TestData


def check_data(data: TestData, registry: TestRegistry | None = None) -> DiagnosticCollector:
    """Check *data* against *registry* (the process-wide one by default).

    Reports:

    - ``stray-case`` (warning): a test case before the first test name;
    - ``empty-name`` (error): a ``:`` marker with no name after it;
    - ``unknown-test`` (warning): a section naming no registered test;
    - ``empty-section`` (info): a section with no test cases.

    The stream is rewound before and after the scan.
    """
    registry = registry if registry is not None else REGISTRY
    diag = DiagnosticCollector()

    def loc(line: Line) -> SourceLocation:
        return SourceLocation(data.name, line.number)

    section: Line | None = None
    cases_in_section = 0

    def close_section() -> None:
        if section is not None and section.text and cases_in_section == 0:
            diag.info(
                f'test "{section.text}" has no test cases',
                loc(section),
                code="empty-section",
            )

    data.reset()
    try:
        for line in data.lines():
            if line.kind is LineKind.NAME:
                close_section()
                section, cases_in_section = line, 0
                if not line.text:
                    diag.error("test name marker without a name", loc(line), code="empty-name")
                elif line.text not in registry:
                    diag.warning(
                        f'"{line.text}" is not a registered test object',
                        loc(line),
                        code="unknown-test",
                        notes=(f"registered tests: {', '.join(registry.names()) or '(none)'}",),
                    )
            elif line.kind is LineKind.CASE:
                if section is None:
                    diag.warning(
                        "test case before the first test name is never applied",
                        loc(line),
                        code="stray-case",
                    )
                else:
                    cases_in_section += 1
        close_section()
    finally:
        data.reset()
    return diag
