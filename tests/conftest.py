"""Pytest configuration.

Run pytest from the project root; pythonpath in pyproject.toml puts src/ and
the root on sys.path so `aabha_linter` and `tests.*` helpers import directly.
"""

import pytest

from aabha_linter.infrastructure.di.container import AabhaContainer


@pytest.fixture(autouse=True)
def _reset_container():
    """Each test gets a fresh composition root."""
    AabhaContainer.reset()
    yield
    AabhaContainer.reset()
