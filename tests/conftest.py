import pytest

from blogger.components.events import EventDispatcher
from blogger.config.models import BloggerConfig
from tests.fakes import EventRecorder, FakeRouter, InMemoryPostRepo, MockClock

# --- Fixtures ---


@pytest.fixture
def post_repo() -> InMemoryPostRepo:
    return InMemoryPostRepo()


@pytest.fixture
def clock() -> MockClock:
    return MockClock()


@pytest.fixture
def fake_router() -> FakeRouter:
    return FakeRouter()


@pytest.fixture
def recorder() -> EventRecorder:
    return EventRecorder()


@pytest.fixture
def dispatcher(recorder: EventRecorder) -> EventDispatcher:
    d = EventDispatcher()
    d.add_global_listener(recorder)
    return d


@pytest.fixture
def config() -> BloggerConfig:
    return BloggerConfig()
