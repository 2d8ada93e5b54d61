import sys
from pathlib import Path

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Now import after path is set
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from config.settings import Settings
from database import Store
from main import create_app
from repositories.exercise_repository import ExerciseRepository
from repositories.user_repository import UserRepository


@pytest.fixture
def database_url(tmp_path):
    """A fresh SQLite file per test"""
    return f"sqlite+aiosqlite:///{tmp_path / 'exercise-test.db'}"


@pytest_asyncio.fixture
async def store(database_url):
    store = Store(database_url, pooled=False)
    await store.create_all()
    yield store
    await store.dispose()


@pytest_asyncio.fixture
async def db_session(store):
    session = store.session()
    yield session
    await session.close()


@pytest.fixture
def user_repo(db_session):
    return UserRepository(db_session)


@pytest.fixture
def exercise_repo(db_session):
    return ExerciseRepository(db_session)


@pytest.fixture
def make_client(database_url):
    """Build a TestClient for an app with the given setting overrides"""
    clients = []

    def _make(raise_server_exceptions: bool = True, **overrides) -> TestClient:
        app_settings = Settings(database_url=database_url, **overrides)
        app = create_app(app_settings, store=Store(database_url, pooled=False))
        client = TestClient(app, raise_server_exceptions=raise_server_exceptions)
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client):
    return make_client()
