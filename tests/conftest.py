"""Pytest configuration and shared fixtures for klaw-outcome tests."""

import pytest


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch):
    """Keep KLAW_OUTCOME_* variables and init() state from leaking between tests."""
    from klaw_outcome._config import reset

    for name in ('KLAW_OUTCOME_LOG_LEVEL', 'KLAW_OUTCOME_JSON_LOGS', 'KLAW_OUTCOME_TRACE'):
        monkeypatch.delenv(name, raising=False)
    reset()
    yield
    reset()


@pytest.fixture
def sample_success():
    """Sample Success value for testing."""
    from klaw_outcome import Success

    return Success(42)


@pytest.fixture
def sample_failure():
    """Sample Failure value for testing."""
    from klaw_outcome import Failure

    return Failure('test error')


@pytest.fixture
def calls():
    """A list producers append to, for counting side effects."""
    return []
