from dataclasses import dataclass, field
from typing import Any

from sqlmodel import Session, select

from city_catalog.models.city import City, CityCreate, CityUpdate

__all__ = [
    "CityDocument",
    "get_city_documents",
    "get_city_document",
    "add_city",
    "set_city",
    "update_city",
]


@dataclass(frozen=True)
class CityDocument:
    """A stored city as an identifier plus its present fields."""

    id: str
    data: dict[str, Any] = field(default_factory=dict)


def to_document(city: City) -> CityDocument:
    # NULL columns are absent keys, like unset fields in a document
    data = city.model_dump(exclude={"id"}, exclude_none=True)
    return CityDocument(id=city.id, data=data)


def get_city_documents(
    *,
    session: Session,
    capital: bool | None = None,
    name: str | None = None,
) -> list[CityDocument]:
    """
    List city documents, optionally filtered by equality on `capital` and/or
    `name`. The order is whatever the store returns.

    Parameters:
        session (Session): The SQLAlchemy session to use for the operation.
        capital (bool | None): Only return cities whose capital flag equals this.
        name (str | None): Only return cities with exactly this name.
    Returns:
        list[CityDocument]: The matching documents.
    """
    stmt = select(City)
    if capital is not None:
        stmt = stmt.where(City.capital == capital)
    if name is not None:
        stmt = stmt.where(City.name == name)
    return [to_document(city) for city in session.exec(stmt).all()]


def get_city_document(
    *,
    session: Session,
    city_id: str,
) -> CityDocument | None:
    city = session.get(City, city_id)
    if city is None:
        return None
    return to_document(city)


def add_city(
    *,
    session: Session,
    city: CityCreate,
) -> City:
    """
    Add a city as a new document with a store-assigned identifier.
    Cities are never deduplicated by name.

    Parameters:
        session (Session): The SQLAlchemy session to use for the operation.
        city (CityCreate): The city data.
    Returns:
        City: The newly created City object.
    """
    db_city = City(**city.model_dump())
    session.add(db_city)
    session.flush()
    return db_city


def set_city(
    *,
    session: Session,
    city_id: str,
    city: CityCreate,
) -> City:
    """
    Write a city under an explicit identifier, replacing every field of an
    existing document or creating it if it does not exist yet.
    """
    existing_city = session.get(City, city_id)
    if existing_city is not None:
        for key, value in city.model_dump().items():
            setattr(existing_city, key, value)
        session.flush()
        return existing_city

    db_city = City(id=city_id, **city.model_dump())
    session.add(db_city)
    session.flush()
    return db_city


def update_city(
    *,
    session: Session,
    city_id: str,
    city: CityUpdate,
) -> City | None:
    """
    Overwrite the fields carried by `city` on an existing document.

    Parameters:
        session (Session): The SQLAlchemy session to use for the operation.
        city_id (str): Identifier of the document to update.
        city (CityUpdate): The new field values.
    Returns:
        City | None: The updated City, or None if no document has this id.
    """
    existing_city = session.get(City, city_id)
    if existing_city is None:
        return None

    for key, value in city.model_dump().items():
        setattr(existing_city, key, value)
    session.flush()
    return existing_city
