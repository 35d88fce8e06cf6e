import httpx
import pytest

from api_mcp.core.config import Settings
from api_mcp.core.dispatcher import Dispatcher


class RecordingUpstream:
    """Answers every request with a canned response and keeps what was sent."""

    def __init__(self, response=None, exc=None):
        self.response = response if response is not None else httpx.Response(200, json={})
        self.exc = exc
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return self.response

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    @property
    def last_url(self) -> str:
        return str(self.requests[-1].url)


@pytest.fixture
def upstream():
    """Factory for RecordingUpstream instances."""
    return RecordingUpstream


@pytest.fixture
def settings():
    return Settings(NEWSAPI_KEY="test-key", _env_file=None)


@pytest.fixture
def make_dispatcher(settings):
    def _make(upstream: RecordingUpstream, **overrides) -> Dispatcher:
        active = settings.model_copy(update=overrides) if overrides else settings
        return Dispatcher(active, transport=upstream.transport)

    return _make
