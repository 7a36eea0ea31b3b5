from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

from city_catalog.core.config import settings

# Import models so that they are registered on SQLModel.metadata
from city_catalog.models import City  # noqa: F401


def build_engine(database_url: str) -> Engine:
    """
    Create the engine for the city store.

    In-memory SQLite gets a single shared connection so that every session
    sees the same database.
    """
    if database_url in ("sqlite://", "sqlite:///:memory:"):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
        )
    return create_engine(database_url, pool_pre_ping=True)


engine = build_engine(settings.DATABASE_URL)


def init_db(engine: Engine) -> None:
    SQLModel.metadata.create_all(engine)
