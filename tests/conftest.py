"""Shared fixtures for the Colleges API tests."""

import pytest
from fastapi.testclient import TestClient

from college_api.app.core.config import Settings
from college_api.app.core.dataset import build_dataset
from college_api.app.main import create_app

SCENARIO_ROWS = [
    {"name": "ABC College (Id:12)", "state": "X", "district": "D1"},
    {"name": "XYZ Inst", "state": "X", "district": "D2"},
    {"name": "ABC Tech", "state": "Y", "district": "D3"},
]


def make_rows(count, state="S", district="D"):
    return [
        {"name": f"College {i:02d} (Id: C-{i:04d})", "state": state, "district": district, "type": "Affiliated"}
        for i in range(1, count + 1)
    ]


@pytest.fixture
def dataset():
    """Three-record dataset used by most scenarios."""
    return build_dataset(SCENARIO_ROWS)


@pytest.fixture
def large_dataset():
    """Twenty-five colleges in a single state and district."""
    return build_dataset(make_rows(25))


@pytest.fixture
def test_settings():
    """Settings with rate limiting disabled."""
    return Settings(rate_limit_requests=0)


@pytest.fixture
def app(dataset, test_settings):
    return create_app(test_settings, dataset=dataset)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
