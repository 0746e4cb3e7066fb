"""Pytest configuration shared by the pattern catalog tests.

Run pytest from this project's root; pythonpath in pyproject.toml puts src/
on the import path.
"""

import pytest

from pattern_catalog.domain.trace import Trace


@pytest.fixture
def trace() -> Trace:
    """Fresh narration sink for driving pattern participants directly."""
    return Trace()
