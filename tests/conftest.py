import pytest
from fastapi.testclient import TestClient
from unittest.mock import MagicMock

from event_details.main import app
from event_details.retrieval import EventDetailRetriever
from event_details.routes.events import get_retriever


@pytest.fixture
def mock_retriever():
    """Retriever double; set return_value or side_effect per test"""
    mock = MagicMock(spec=EventDetailRetriever)
    app.dependency_overrides[get_retriever] = lambda: mock
    yield mock
    app.dependency_overrides.clear()


@pytest.fixture
def client(mock_retriever):
    """FastAPI test client wired to the mock retriever"""
    return TestClient(app)


@pytest.fixture
def quake_record():
    """Upstream earthquake information record"""
    return {
        "id": "5f0a1b2c3d4e5f6a7b8c9d0e",
        "code": 551,
        "time": "2024/01/01 16:12:00.000",
        "issue": {
            "source": "気象庁",
            "time": "2024/01/01 16:11:50",
            "type": "DetailScale",
            "correct": "None",
        },
        "earthquake": {
            "time": "2024/01/01 16:10:00",
            "hypocenter": {
                "name": "石川県能登地方",
                "latitude": 37.5,
                "longitude": 137.2,
                "depth": 10,
                "magnitude": 7.6,
            },
            "maxScale": 70,
            "domesticTsunami": "Warning",
            "foreignTsunami": "Unknown",
        },
        "points": [
            {"pref": "新潟県", "addr": "長岡市", "isArea": False, "scale": 45},
            {"pref": "石川県", "addr": "志賀町", "isArea": False, "scale": 70},
            {"pref": "富山県", "addr": "富山市", "isArea": False, "scale": 45},
        ],
    }
