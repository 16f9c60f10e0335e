import pytest

from model import Feature
from session import DiagnosisSession


@pytest.fixture
def age_fever():
    """
    Minimal two-feature patient used across predictor tests.
    """
    return [Feature("age", "30"), Feature("fever", "1")]


@pytest.fixture
def sleeps():
    """Records every simulated wait instead of sleeping."""
    return []


@pytest.fixture
def session(sleeps) -> DiagnosisSession:
    return DiagnosisSession(sleep=sleeps.append)


@pytest.fixture
def trained_session(session) -> DiagnosisSession:
    session.train("dataset.csv", latency=0)
    return session
