import pytest
from fastapi.testclient import TestClient

from leaderboard_places.main import app
from leaderboard_places.models.data import MinScores


@pytest.fixture
def min_scores():
    """The 100 / 50 / 10 thresholds most reference scenarios use."""
    return MinScores(100, 50, 10)


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
