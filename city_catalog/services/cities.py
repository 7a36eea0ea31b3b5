from logging import getLogger

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from city_catalog.converters import city as city_converters
from city_catalog.crud import city as cities_crud
from city_catalog.exceptions.city_exceptions import CityNotFound, CityStoreError
from city_catalog.inputs.city import CityForm
from city_catalog.models.city import CityCreate, CityUpdate
from city_catalog.schemas.city import CityPublic, CityWithRef

logger = getLogger(__name__)


def get_cities_with_refs(*, session: Session) -> list[CityWithRef]:
    """
    Get every stored city together with its document identifier.

    Parameters:
        session (Session): Database session.
    Returns:
        list[CityWithRef]: All cities, in store order.
    Raises:
        CityStoreError: If the store query fails.
        CityDecodeError: If a stored document cannot be decoded.
    """
    try:
        documents = cities_crud.get_city_documents(session=session)
    except SQLAlchemyError as e:
        logger.exception("Listing cities failed")
        raise CityStoreError("list cities") from e
    return [city_converters.to_with_ref(document) for document in documents]


def get_capital_cities(*, session: Session) -> list[CityPublic]:
    """
    Get the cities flagged as capitals. Identifiers are not included.

    Raises:
        CityStoreError: If the store query fails.
        CityDecodeError: If a stored document cannot be decoded.
    """
    try:
        documents = cities_crud.get_city_documents(session=session, capital=True)
    except SQLAlchemyError as e:
        logger.exception("Listing capital cities failed")
        raise CityStoreError("list capital cities") from e
    return [city_converters.to_public(document) for document in documents]


def get_city_with_ref(*, session: Session, city_id: str) -> CityWithRef:
    """
    Get a single city by its document identifier.

    Raises:
        CityNotFound: If no document has this identifier.
        CityStoreError: If the store query fails.
        CityDecodeError: If the stored document cannot be decoded.
    """
    try:
        document = cities_crud.get_city_document(session=session, city_id=city_id)
    except SQLAlchemyError as e:
        logger.exception("Fetching city %s failed", city_id)
        raise CityStoreError("fetch the city") from e
    if document is None:
        raise CityNotFound(city_id)
    return city_converters.to_with_ref(document)


def create_city(*, session: Session, form: CityForm) -> str:
    """
    Store a new city from a submitted form.

    Parameters:
        session (Session): Database session.
        form (CityForm): The validated create form.
    Returns:
        str: The identifier assigned to the new document.
    Raises:
        CityStoreError: If the write fails.
    """
    city_create = CityCreate(
        name=form.name,
        state=form.state or None,
        country=form.country,
        population=form.population,
        capital=form.capital,
    )
    logger.debug("Creating city: %s", city_create.model_dump())
    try:
        city = cities_crud.add_city(session=session, city=city_create)
        city_id = city.id
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        logger.exception("Creating city %s failed", form.name)
        raise CityStoreError("save the city") from e
    return city_id


def update_city(*, session: Session, city_id: str, form: CityForm) -> None:
    """
    Overwrite the five form fields of an existing city.

    Raises:
        CityNotFound: If no document has this identifier.
        CityStoreError: If the write fails.
    """
    city_update = CityUpdate(
        name=form.name,
        state=form.state or None,
        country=form.country,
        population=form.population,
        capital=form.capital,
    )
    logger.debug("Updating city %s: %s", city_id, city_update.model_dump())
    try:
        city = cities_crud.update_city(
            session=session,
            city_id=city_id,
            city=city_update,
        )
        if city is None:
            raise CityNotFound(city_id)
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        logger.exception("Updating city %s failed", city_id)
        raise CityStoreError("update the city") from e
