import pytest
from fastapi.testclient import TestClient

from inventory_api.config import Settings
from inventory_api.main import create_app


# SQLite in-memory database for testing; each app gets its own
SQLALCHEMY_DATABASE_URL = "sqlite://"


def make_settings(**overrides) -> Settings:
    """Build test settings pointing at a fresh in-memory database."""
    values = {"DATABASE_URL": SQLALCHEMY_DATABASE_URL}
    values.update(overrides)
    return Settings(**values)


@pytest.fixture(scope="function")
def client():
    """Test client backed by a fresh database holding the sample products."""
    app = create_app(make_settings())

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def empty_client():
    """Test client backed by a fresh database with no sample products."""
    app = create_app(make_settings(SEED_SAMPLE_DATA=False))

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def db_engine():
    """Engine and session factory for direct database access in tests."""
    from inventory_api.database import create_db_engine, create_session_factory

    engine = create_db_engine(make_settings())
    session_factory = create_session_factory(engine)

    yield engine, session_factory

    engine.dispose()
