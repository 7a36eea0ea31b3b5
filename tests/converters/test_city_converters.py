import pytest

from city_catalog.converters import city as city_converters
from city_catalog.crud.city import CityDocument
from city_catalog.exceptions.city_exceptions import CityDecodeError
from city_catalog.schemas.city import CityPublic, CityWithRef


def _document_data(**overrides):
    data = {
        "name": "San Francisco",
        "state": "CA",
        "country": "USA",
        "population": 860000,
        "capital": False,
    }
    data.update(overrides)
    return data


def test_from_document_reads_all_fields():
    city = city_converters.from_document(_document_data())

    assert city == CityPublic(
        name="San Francisco",
        state="CA",
        country="USA",
        population=860000,
        capital=False,
    )


def test_from_document_missing_capital_defaults_to_false():
    data = _document_data()
    del data["capital"]

    city = city_converters.from_document(data)

    assert city.capital is False


def test_from_document_missing_state_defaults_to_empty_string():
    data = _document_data(name="Tokyo", country="Japan", capital=True)
    del data["state"]

    city = city_converters.from_document(data)

    assert city.state == ""
    assert city.capital is True


def test_from_document_ignores_state_of_wrong_type():
    city = city_converters.from_document(_document_data(state=42))

    assert city.state == ""


def test_from_document_accepts_zero_population():
    city = city_converters.from_document(_document_data(population=0))

    assert city.population == 0


@pytest.mark.parametrize("field", ["name", "country", "population"])
def test_from_document_missing_required_field_raises(field: str):
    data = _document_data()
    del data[field]

    with pytest.raises(CityDecodeError) as exc_info:
        city_converters.from_document(data)

    assert exc_info.value.field == field
    assert exc_info.value.status_code == 500


@pytest.mark.parametrize(
    "field, value",
    [
        ("name", 123),
        ("country", ["USA"]),
        ("population", "860000"),
        ("population", True),
        ("population", 860000.5),
        ("capital", "true"),
        ("capital", 1),
    ],
)
def test_from_document_wrong_type_raises(field: str, value):
    with pytest.raises(CityDecodeError) as exc_info:
        city_converters.from_document(_document_data(**{field: value}))

    assert exc_info.value.field == field


def test_to_with_ref_carries_document_id():
    document = CityDocument(id="SF", data=_document_data())

    city = city_converters.to_with_ref(document)

    assert isinstance(city, CityWithRef)
    assert city.city_id == "SF"
    assert city.name == "San Francisco"


def test_to_public_has_no_identifier():
    document = CityDocument(id="SF", data=_document_data())

    city = city_converters.to_public(document)

    assert type(city) is CityPublic
    assert "city_id" not in city.model_dump()
