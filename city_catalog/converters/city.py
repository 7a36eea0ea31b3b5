from collections.abc import Mapping
from typing import Any

from city_catalog.crud.city import CityDocument
from city_catalog.exceptions.city_exceptions import CityDecodeError
from city_catalog.schemas.city import CityPublic, CityWithRef


def _require_str(data: Mapping[str, Any], field: str) -> str:
    if field not in data or data[field] is None:
        raise CityDecodeError(field, "missing")
    value = data[field]
    if not isinstance(value, str):
        raise CityDecodeError(field, f"expected a string, got {type(value).__name__}")
    return value


def _require_int(data: Mapping[str, Any], field: str) -> int:
    if field not in data or data[field] is None:
        raise CityDecodeError(field, "missing")
    value = data[field]
    # bool is a subclass of int but never a valid count
    if isinstance(value, bool) or not isinstance(value, int):
        raise CityDecodeError(field, f"expected an integer, got {type(value).__name__}")
    return value


def _optional_bool(data: Mapping[str, Any], field: str) -> bool:
    value = data.get(field)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise CityDecodeError(field, f"expected a boolean, got {type(value).__name__}")
    return value


def _optional_str(data: Mapping[str, Any], field: str) -> str:
    value = data.get(field)
    if isinstance(value, str):
        return value
    return ""


def from_document(data: Mapping[str, Any]) -> CityPublic:
    """
    Build a CityPublic from a loosely-typed stored document.

    Parameters:
        data (Mapping[str, Any]): The stored fields of a city document.
    Returns:
        CityPublic: The decoded city, with `capital` defaulting to False and
            `state` defaulting to an empty string when absent.
    Raises:
        CityDecodeError: If `name`, `country` or `population` is missing or
            has the wrong type, or if `capital` is present but not a boolean.
    """
    return CityPublic(
        name=_require_str(data, "name"),
        state=_optional_str(data, "state"),
        country=_require_str(data, "country"),
        population=_require_int(data, "population"),
        capital=_optional_bool(data, "capital"),
    )


def to_public(document: CityDocument) -> CityPublic:
    return from_document(document.data)


def to_with_ref(document: CityDocument) -> CityWithRef:
    city = from_document(document.data)
    return CityWithRef(**city.model_dump(), city_id=document.id)
