import io

import pytest

from kanna.config.settings import Settings
from kanna.models import create_engine, create_session_factory, init_db
from kanna.services.core.repositories import WordRepository
from kanna.services.formatter import WordFormatter
from kanna.services.lookup import LookupOrchestrator
from kanna.services.tasks import BackgroundTaskGroup
from tests.helpers import FakeProvider


@pytest.fixture
def settings(tmp_path):
    """Settings rooted in a temporary project directory, ignoring any .env file."""
    return Settings(
        _env_file=None,
        PROJECT_DIR=tmp_path,
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'kanna-test.db'}",
        YOUDAO_KEY="test-key",
        AUDIO_ENABLED=False,
        AUDIO_PLAYER=None,
    )


@pytest.fixture
async def engine(settings):
    """File-backed SQLite engine with fresh tables for each test."""
    engine = create_engine(settings)
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def repository(session_factory):
    return WordRepository(session_factory)


@pytest.fixture
async def tasks():
    group = BackgroundTaskGroup()
    yield group
    await group.shutdown(wait=False)


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def orchestrator(repository, provider, tasks):
    return LookupOrchestrator(repository, provider, tasks)


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def formatter(output):
    return WordFormatter(output)
