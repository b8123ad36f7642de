"""Run plans: YAML files describing which data to use and which runs to make.

Example::

    data: selftest.txt          # relative to this file
    modules: [linesuite.selftest]
    report: summary             # quiet | text | summary
    runs:
      - one: basicRead
      - group: [stringPulling, testTestName]
      - all
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any, TextIO

import jsonschema
import yaml

from linesuite.core.registry import REGISTRY, TestRegistry
from linesuite.diagnostics.collector import DiagnosticCollector
from linesuite.diagnostics.location import SourceLocation
from linesuite.engine.report import make_reporter
from linesuite.engine.suite import RunTotals, TestSuite
from linesuite.parser.stream import TestData

SCHEMA_RESOURCE = "run_plan.schema.json"


class ConfigError(Exception):
    """Raised when a run plan cannot be loaded; details are in ``diagnostics``."""

    def __init__(self, message: str, diagnostics: DiagnosticCollector | None = None) -> None:
        super().__init__(message)
        self.diagnostics = diagnostics or DiagnosticCollector()

    def __str__(self) -> str:
        details = self.diagnostics.format_all()
        return f"{self.args[0]}\n{details}" if details else self.args[0]


@dataclass(frozen=True)
class RunSpec:
    """One run of a plan: ``one`` / ``group`` with names, or ``all``."""

    kind: str
    names: tuple[str, ...] = ()

    def execute(self, suite: TestSuite) -> RunTotals:
        if self.kind == "one":
            return suite.one(self.names[0])
        if self.kind == "group":
            return suite.group(self.names)
        return suite.all()

    def __str__(self) -> str:
        if self.kind == "all":
            return "all"
        return f"{self.kind} {' '.join(self.names)}"


@dataclass(frozen=True)
class RunPlan:
    """A loaded, validated run plan."""

    data: Path
    runs: tuple[RunSpec, ...]
    modules: tuple[str, ...] = ()
    report: str = "text"
    source: Path | None = field(default=None, compare=False)

    def execute(self, log: TextIO, registry: TestRegistry | None = None) -> list[RunTotals]:
        """Register the plan's modules, then perform its runs in order."""
        registry = registry if registry is not None else REGISTRY
        registry.load(self.modules)
        with TestData.open(self.data) as data:
            suite = TestSuite(
                data,
                log,
                registry=registry,
                reporter=make_reporter(self.report, log),
            )
            return [run.execute(suite) for run in self.runs]


def load_schema() -> dict[str, Any]:
    """Return the packaged run-plan JSON schema."""
    text = resources.files("linesuite.schema").joinpath(SCHEMA_RESOURCE).read_text("utf-8")
    return json.loads(text)


def _run_spec(item: Any) -> RunSpec:
    if item == "all":
        return RunSpec("all")
    if "one" in item:
        return RunSpec("one", (item["one"],))
    return RunSpec("group", tuple(item["group"]))


def parse_plan(text: str, path: Path | None = None) -> RunPlan:
    """Parse and validate run-plan YAML.

    Relative ``data`` paths are resolved against the directory of *path*
    (the current directory when *path* is None).
    """
    filename = str(path) if path is not None else "<string>"
    diag = DiagnosticCollector()

    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        if mark is not None:
            location = SourceLocation(filename, mark.line + 1, mark.column + 1)
        else:
            location = SourceLocation(filename, 1)
        diag.error(f"invalid YAML: {e}", location, code="yaml")
        raise ConfigError(f"cannot load run plan {filename}", diag) from e

    validator = jsonschema.Draft202012Validator(load_schema())
    for error in sorted(validator.iter_errors(raw), key=lambda e: [str(p) for p in e.path]):
        where = "/".join(str(p) for p in error.path) or "(top level)"
        diag.error(f"{where}: {error.message}", code="schema")
    if diag.has_errors():
        raise ConfigError(f"run plan {filename} does not match the schema", diag)

    base = path.parent if path is not None else Path.cwd()
    return RunPlan(
        data=base / raw["data"],
        runs=tuple(_run_spec(item) for item in raw["runs"]),
        modules=tuple(raw.get("modules", ())),
        report=raw.get("report", "text"),
        source=path,
    )


def load_plan(path: str | Path) -> RunPlan:
    """Load a run plan from a YAML file."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        diag = DiagnosticCollector()
        diag.error(f"cannot read run plan: {e.strerror}", code="io")
        raise ConfigError(f"cannot load run plan {path}", diag) from e
    return parse_plan(text, path)
