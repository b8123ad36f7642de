"""linesuite diagnostics subpackage (Layer 0 -- zero internal dependencies)."""

from linesuite.diagnostics.collector import DiagnosticCollector
from linesuite.diagnostics.diagnostic import Diagnostic
from linesuite.diagnostics.location import SourceLocation
from linesuite.diagnostics.severity import DiagnosticSeverity

__all__ = ["SourceLocation", "DiagnosticSeverity", "Diagnostic", "DiagnosticCollector"]
