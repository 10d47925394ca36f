import os

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///./test_books.db")
os.environ.setdefault("LOG_LEVEL", "INFO")

from bookapi.config import Settings, get_settings  # noqa: E402
from bookapi.database import create_connection_provider  # noqa: E402
from bookapi.main import create_app  # noqa: E402
from bookapi.models.base import Base  # noqa: E402


@pytest.fixture(autouse=True)
def reset_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def settings(tmp_path):
    return Settings(DATABASE_URL=f"sqlite+pysqlite:///{tmp_path / 'books.db'}")


@pytest.fixture()
def provider(settings):
    provider = create_connection_provider(settings)
    Base.metadata.create_all(bind=provider.engine)
    yield provider
    provider.dispose()


@pytest.fixture()
def client(settings, provider):
    app = create_app(settings=settings, provider=provider)
    with TestClient(app) as test_client:
        yield test_client
