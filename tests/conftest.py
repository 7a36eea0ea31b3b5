import os
from collections.abc import Generator

os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlmodel import Session

from city_catalog.api.deps import get_db
from city_catalog.core.db import build_engine, init_db
from city_catalog.main import app

from .fixtures.factories import *
from .utils.cities import delete_all_cities


@pytest.fixture(scope="session")
def test_engine(tmp_path_factory: pytest.TempPathFactory) -> Generator[Engine, None, None]:
    db_file = tmp_path_factory.mktemp("store") / "cities.db"
    engine = build_engine(f"sqlite:///{db_file}")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function", autouse=True)
def db_session(test_engine: Engine) -> Generator[Session, None, None]:
    session = Session(test_engine)

    def override_get_db() -> Generator[Session, None, None]:
        with Session(test_engine) as request_session:
            yield request_session

    app.dependency_overrides[get_db] = override_get_db

    yield session

    session.close()
    with Session(test_engine) as cleanup_session:
        delete_all_cities(cleanup_session)
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def read_session(test_engine: Engine) -> Generator[Session, None, None]:
    """A fresh session for checking what a request wrote."""
    with Session(test_engine) as session:
        yield session


@pytest.fixture(scope="function")
def client() -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c
