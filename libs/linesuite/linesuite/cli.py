"""Command-line entry point.

Usage:
    linesuite DATA [NAME ...] [-m MODULE ...] [--report KIND]
    linesuite DATA --check [-m MODULE ...]
    linesuite --plan PLAN.yaml
    linesuite --selftest

Exit status is 0 when every applied test case passed, 1 when any failed (or
``--check`` found errors) and 2 when the command line or run plan is invalid.
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence, TextIO

from linesuite import selftest
from linesuite.checker import check_data
from linesuite.config import ConfigError, load_plan
from linesuite.core.registry import REGISTRY, RegistryError, TestRegistry
from linesuite.diagnostics.severity import DiagnosticSeverity
from linesuite.engine.report import REPORTERS, make_reporter
from linesuite.engine.suite import RunTotals, TestSuite
from linesuite.parser.stream import TestData

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linesuite",
        description="Apply the test cases in a test data file to registered tests.",
    )
    parser.add_argument("data", nargs="?", help="test data file ('-' for standard input)")
    parser.add_argument("names", nargs="*", help="tests to run (default: every registered test)")
    parser.add_argument(
        "-m",
        "--module",
        dest="modules",
        action="append",
        default=[],
        metavar="MODULE",
        help="import MODULE so it registers its tests (repeatable)",
    )
    parser.add_argument(
        "--report",
        choices=sorted(REPORTERS),
        default="text",
        help="report style (default: text)",
    )
    parser.add_argument("--check", action="store_true", help="check the data file, run nothing")
    parser.add_argument("--plan", metavar="PLAN", help="run the YAML run plan PLAN")
    parser.add_argument(
        "--selftest", action="store_true", help="run linesuite's own tests on its bundled data"
    )
    return parser


def _open_data(path: str) -> TestData:
    if path == "-":
        # Standard input cannot be rewound, so keep a copy in memory.
        return TestData.from_text(sys.stdin.read(), "<stdin>")
    return TestData.open(path)


def _exit_status(totals: Sequence[RunTotals]) -> int:
    return EXIT_FAILED if any(t.failed for t in totals) else EXIT_OK


def _run_selftest(out: TextIO, report: str) -> int:
    registry = TestRegistry()
    selftest.register(registry)
    data = TestData.from_text(selftest.data_text(), selftest.DATA_RESOURCE)
    suite = TestSuite(data, out, registry=registry, reporter=make_reporter(report, out))
    # The bundled data ends by aborting all tests on purpose, so only the
    # totals of the runs that avoid it decide the exit status.
    totals = [
        suite.one("basicRead"),
        suite.group(["stringPulling", "testTestName", "multiLine"]),
        suite.one("testTestCaseNum"),
    ]
    suite.all()
    return _exit_status(totals)


def _run_plan(path: str, out: TextIO) -> int:
    try:
        plan = load_plan(path)
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_USAGE
    try:
        return _exit_status(plan.execute(out, REGISTRY))
    except ImportError as e:
        print(f"ERROR: cannot import test module: {e}", file=sys.stderr)
    except OSError as e:
        print(f"ERROR: cannot open {plan.data}: {e.strerror}", file=sys.stderr)
    except RegistryError as e:
        print(f"ERROR: {e} (list test modules under 'modules')", file=sys.stderr)
    return EXIT_USAGE


def main(argv: Sequence[str] | None = None, out: TextIO | None = None) -> int:
    out = out if out is not None else sys.stdout
    parser = build_parser()
    # Test names may follow options such as -m.
    args = parser.parse_intermixed_args(argv)

    if args.selftest:
        return _run_selftest(out, args.report)

    if args.plan:
        return _run_plan(args.plan, out)

    if args.data is None:
        parser.print_usage(sys.stderr)
        print("linesuite: error: a test data file is required", file=sys.stderr)
        return EXIT_USAGE

    try:
        REGISTRY.load(args.modules)
    except ImportError as e:
        print(f"ERROR: cannot import test module: {e}", file=sys.stderr)
        return EXIT_USAGE

    try:
        data = _open_data(args.data)
    except OSError as e:
        print(f"ERROR: cannot open {args.data}: {e.strerror}", file=sys.stderr)
        return EXIT_USAGE

    with data:
        if args.check:
            diag = check_data(data, REGISTRY)
            if len(diag):
                print(diag.format_all(), file=out)
                print(
                    f"{diag.count(DiagnosticSeverity.ERROR)} error(s), "
                    f"{diag.count(DiagnosticSeverity.WARNING)} warning(s)",
                    file=out,
                )
            return EXIT_FAILED if diag.has_errors() else EXIT_OK

        suite = TestSuite(data, out, registry=REGISTRY, reporter=make_reporter(args.report, out))
        try:
            if len(args.names) == 1:
                totals = suite.one(args.names[0])
            elif args.names:
                totals = suite.group(args.names)
            else:
                totals = suite.all()
        except RegistryError as e:
            print(f"ERROR: {e} (use -m to import test modules)", file=sys.stderr)
            return EXIT_USAGE
    return _exit_status([totals])


if __name__ == "__main__":
    sys.exit(main())
