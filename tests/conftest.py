"""Shared pytest fixtures for SocialSave tests."""

import sys
from pathlib import Path

import httpx
import pytest

# Add backend directory to path for imports
backend_path = Path(__file__).parent.parent / "backend"
if str(backend_path) not in sys.path:
    sys.path.insert(0, str(backend_path))

from app import create_app  # noqa: E402
from utils.settings import Settings  # noqa: E402


@pytest.fixture
def api_key() -> str:
    """An API key long enough to select real mode."""
    return "rapidapi-test-key-0123456789"


@pytest.fixture
def settings() -> Settings:
    """Settings with no API key and no demo delay."""
    return Settings(rapidapi_key=None, history_limit=3, demo_delay=0.0)


@pytest.fixture
def app(settings):
    app = create_app(settings)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, status_code: int = 200, json=None, content: bytes = None):
        self.requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=json if json is not None else {})

        super().__init__(handler)


@pytest.fixture
def make_transport():
    """Factory for RecordingTransport instances."""
    return RecordingTransport


@pytest.fixture
def sample_api_response() -> dict:
    """Typical response of the remote resolution API."""
    return {
        "title": "Sunset timelapse",
        "picture": "https://cdn.example.com/thumb.jpg",
        "links": [
            {"quality": "sd", "link": "https://cdn.example.com/sd.mp4"},
            {"quality": "hd", "link": "https://cdn.example.com/hd.mp4"},
        ],
    }
