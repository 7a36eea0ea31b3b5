import re

from fastapi import Request
from pydantic import BaseModel
from starlette.datastructures import FormData
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException

from city_catalog.exceptions.city_exceptions import InvalidCityForm, MalformedCityForm

TRUE_VALUES = {"1", "t", "T", "TRUE", "true", "True", "on"}
FALSE_VALUES = {"0", "f", "F", "FALSE", "false", "False", "off"}

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

POPULATION_MIN = -(2**63)
POPULATION_MAX = 2**63 - 1


class CityForm(BaseModel):
    name: str
    state: str = ""
    country: str
    population: int = 0
    capital: bool = False


def parse_population(value: str) -> int:
    value = value.strip()
    if not value:
        return 0
    if not _INTEGER_RE.fullmatch(value):
        raise InvalidCityForm("population", value)
    population = int(value)
    # Stored in a signed 64-bit column
    if not POPULATION_MIN <= population <= POPULATION_MAX:
        raise InvalidCityForm("population", value)
    return population


def parse_capital(value: str) -> bool:
    value = value.strip()
    if not value:
        return False
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise InvalidCityForm("capital", value)


def _required(form: FormData, field: str) -> str:
    value = _get(form, field).strip()
    if not value:
        raise InvalidCityForm(field)
    return value


def _get(form: FormData, field: str) -> str:
    value = form.get(field)
    if not isinstance(value, str):
        return ""
    return value


def city_form_from_data(form: FormData) -> CityForm:
    """
    Validate raw form fields into a CityForm.

    Empty `population` and `capital` fall back to 0 and False, any other
    value must parse. `name` and `country` must be non-empty.
    """
    return CityForm(
        name=_required(form, "name"),
        state=_get(form, "state").strip(),
        country=_required(form, "country"),
        population=parse_population(_get(form, "population")),
        capital=parse_capital(_get(form, "capital")),
    )


async def get_city_form(request: Request) -> CityForm:
    # Starlette reports an unparseable multipart body as a 400 HTTPException
    try:
        form = await request.form()
    except (StarletteHTTPException, MultiPartException, UnicodeDecodeError) as e:
        raise MalformedCityForm() from e
    return city_form_from_data(form)
