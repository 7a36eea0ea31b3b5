import pytest
from factory import (
    Factory,  # type: ignore
    Faker,  # type: ignore
    LazyFunction,  # type: ignore
)
from factory.alchemy import SQLAlchemyModelFactory
from sqlmodel import Session

from city_catalog.inputs.city import CityForm
from city_catalog.models.city import City, CityCreate, new_city_id

__all__ = [
    "city_create_factory",
    "city_factory",
    "city_form_factory",
]


class SQLModelFactory(SQLAlchemyModelFactory):
    class Meta:
        abstract = True
        # Requests run in their own sessions, so test data must be committed
        sqlalchemy_session_persistence = "commit"


# --------------------------------------
# FACTORIES
# --------------------------------------


class CityCreateFactory(Factory):
    class Meta:
        model = CityCreate

    name = Faker("city")
    state = Faker("state_abbr")
    country = Faker("country")
    population = Faker("random_int", min=0, max=10_000_000)
    capital = Faker("boolean", chance_of_getting_true=25)


@pytest.fixture
def city_create_factory():
    return CityCreateFactory


class CityFactory(SQLModelFactory):
    class Meta:
        model = City

    id = LazyFunction(new_city_id)
    name = Faker("city")
    state = Faker("state_abbr")
    country = Faker("country")
    population = Faker("random_int", min=0, max=10_000_000)
    capital = False


@pytest.fixture
def city_factory(db_session: Session):
    CityFactory._meta.sqlalchemy_session = db_session
    return CityFactory


class CityFormFactory(Factory):
    class Meta:
        model = CityForm

    name = Faker("city")
    state = Faker("state_abbr")
    country = Faker("country")
    population = Faker("random_int", min=0, max=10_000_000)
    capital = Faker("boolean", chance_of_getting_true=25)


@pytest.fixture
def city_form_factory():
    return CityFormFactory
