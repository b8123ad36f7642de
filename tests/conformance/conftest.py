"""Pytest configuration for conformance tests."""

import pytest
from tests.conformance.runners.engine_runner import InProcessRunner


def get_available_runners():
    """Return list of available conformance runners."""
    runners = [InProcessRunner()]
    return runners


@pytest.fixture(params=get_available_runners(), ids=lambda r: r.name)
def runner(request):
    """Provide conformance runner for testing.

    This fixture is parametrized to run tests against all available runners.
    Currently includes:
    - in-process: drives linesuite's TestSuite directly
    """
    return request.param
