from typing import Generator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from inventory_api.config import Settings

# Base class for models
Base = declarative_base()


def create_db_engine(settings: Settings) -> Engine:
    """
    Create the SQLAlchemy engine with connection pooling.

    PostgreSQL gets a bounded QueuePool sized from settings. SQLite is
    accepted for local runs and tests; an in-memory SQLite database has to
    live on a single shared connection or every session would see its own
    empty database.
    """
    url = make_url(settings.database_url)

    if url.get_backend_name() == "sqlite":
        if url.database in (None, "", ":memory:"):
            return create_engine(
                url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        return create_engine(url, connect_args={"check_same_thread": False})

    return create_engine(
        url,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_pre_ping=True,
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_engine(request: Request) -> Engine:
    return request.app.state.engine


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Dependency to get database session.

    Sessions come from the factory the application created at startup.
    The transaction is rolled back if the handler raised, and the
    connection goes back to the pool either way.
    """
    db = request.app.state.session_factory()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
