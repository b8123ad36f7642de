"""linesuite core subpackage (Layer 1 -- no internal dependencies beyond itself)."""

from linesuite.core.cases import FieldError, FieldReader, TestCase
from linesuite.core.registry import (
    REGISTRY,
    ExtraLines,
    FunctionTest,
    RegistrationError,
    RegistryError,
    Test,
    TestBody,
    TestRegistry,
)
from linesuite.core.results import TestResult

__all__ = [
    "TestResult",
    "TestCase",
    "FieldReader",
    "FieldError",
    "Test",
    "FunctionTest",
    "TestBody",
    "ExtraLines",
    "TestRegistry",
    "REGISTRY",
    "RegistrationError",
    "RegistryError",
]
