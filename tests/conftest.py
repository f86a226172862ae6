import pytest
from wsdot_client.core.config import config_manager

BASE_URL = "https://example.test"
API_KEY = "test-key"


@pytest.fixture(autouse=True)
def wsdot_config(monkeypatch):
    # Keep a developer's .env out of the tests
    monkeypatch.setattr("wsdot_client.core.config.load_dotenv", lambda *a, **k: None)
    config_manager.reset()
    config_manager.set_api_key(API_KEY)
    config_manager.set_base_url(BASE_URL)
    yield config_manager
    config_manager.reset()


class RecordingStrategy:
    """Stand-in transport that records calls and returns a canned payload."""

    name = "recording"

    def __init__(self, payload=None, error=None):
        self.payload = payload if payload is not None else {"ok": True}
        self.error = error
        self.calls = []

    async def __call__(self, url, log_mode=None):
        self.calls.append((url, log_mode))
        if self.error is not None:
            raise self.error
        return self.payload


@pytest.fixture
def recording_strategy():
    return RecordingStrategy()
