"""Test objects and the registry that holds them.

A test is a named body that receives one :class:`~linesuite.core.cases.TestCase`
at a time and answers with a :class:`~linesuite.core.results.TestResult`.
Tests are registered during start-up, before any run begins; after that the
registry is only read.
"""

from __future__ import annotations

import importlib
from abc import ABC, abstractmethod
from typing import Callable, Iterable, Iterator, Protocol, TextIO, TypeVar

from linesuite.core.cases import TestCase
from linesuite.core.results import TestResult

_T = TypeVar("_T", bound="Test")


class RegistrationError(Exception):
    """Raised when something that is not a valid test is registered."""


class RegistryError(Exception):
    """Raised when a run is requested against a registry with no tests."""


class ExtraLines(Protocol):
    """Raw line access handed to test bodies for multi-line payloads."""

    @property
    def line_counter(self) -> int:
        ...

    def read_line(self) -> str | None:
        ...


TestBody = Callable[[TestCase, ExtraLines, TextIO], TestResult]


class Test(ABC):
    """Base class for class-style tests.

    Subclasses set ``name`` and implement :meth:`test_method`::

        class BasicRead(Test):
            name = "basicRead"

            def test_method(self, case, data, log):
                ...
                return TestResult.PASS
    """

    __test__ = False  # not a pytest test class

    name: str = ""

    @abstractmethod
    def test_method(self, case: TestCase, data: ExtraLines, log: TextIO) -> TestResult:
        """Apply *case* and report the outcome.

        Args:
            case: The test case being applied.
            data: The raw line reader, for tests whose cases span several lines.
            log: Where human-readable detail about the case should be written.
        """

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"


class FunctionTest(Test):
    """Adapts a plain function ``body(case, data, log)`` into a :class:`Test`."""

    def __init__(self, name: str, body: TestBody) -> None:
        self.name = name
        self.body = body

    def test_method(self, case: TestCase, data: ExtraLines, log: TextIO) -> TestResult:
        return self.body(case, data, log)


class TestRegistry:
    """Ordered, append-only collection of registered tests.

    Duplicate names are kept; lookups return the first one registered.
    """

    __test__ = False  # not a pytest test class

    def __init__(self) -> None:
        self._tests: list[Test] = []
        self._loaded: set[str] = set()

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, test: _T) -> _T:
        """Append *test* to the registry and return it."""
        if not isinstance(test, Test):
            raise RegistrationError(f"{test!r} is not a linesuite Test")
        if not isinstance(test.name, str) or not test.name.strip():
            raise RegistrationError(f"{type(test).__name__} has no test name")
        if test.name != test.name.strip():
            raise RegistrationError(
                f"test name {test.name!r} has surrounding whitespace and could never match"
            )
        self._tests.append(test)
        return test

    def test(self, name: str | TestBody | None = None):
        """Decorator registering a function as a test.

        Usable bare (``@registry.test``, the function name is the test name)
        or with an explicit name (``@registry.test("basicRead")``).
        """
        if callable(name):
            return self.register(FunctionTest(name.__name__, name))

        def decorator(body: TestBody) -> FunctionTest:
            return self.register(FunctionTest(name or body.__name__, body))

        return decorator

    def load(self, modules: Iterable[str]) -> None:
        """Import each module and let it register its tests.

        A module registers either at import time (decorators on this
        registry) or by defining ``register(registry)``, which is called with
        this registry.  A module already loaded into this registry is skipped.
        """
        for module_name in modules:
            if module_name in self._loaded:
                continue
            module = importlib.import_module(module_name)
            register = getattr(module, "register", None)
            if callable(register):
                register(self)
            self._loaded.add(module_name)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def lookup(self, name: str, candidates: Iterable[Test] | None = None) -> Test | None:
        """Return the first test in *candidates* (default: all) named *name*."""
        for test in self._tests if candidates is None else candidates:
            if test.name == name:
                return test
        return None

    def resolve(self, names: Iterable[str]) -> tuple[list[Test], list[str]]:
        """Split *names* into the tests they name and the names that match nothing.

        Every requested name is looked up on its own, so a repeated name
        yields a repeated entry in whichever list it lands in.
        """
        matched: list[Test] = []
        unmatched: list[str] = []
        for name in names:
            test = self.lookup(name)
            if test is None:
                unmatched.append(name)
            else:
                matched.append(test)
        return matched, unmatched

    def names(self) -> list[str]:
        return [test.name for test in self._tests]

    def __len__(self) -> int:
        return len(self._tests)

    def __iter__(self) -> Iterator[Test]:
        return iter(list(self._tests))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.lookup(name) is not None


REGISTRY = TestRegistry()
"""The process-wide registry used when no other registry is given."""
