from sqlmodel import Field, SQLModel

__all__ = [
    "CityPublic",
    "CityWithRef",
]


class CityPublic(SQLModel):
    name: str
    state: str = ""
    country: str
    population: int
    capital: bool = False


class CityWithRef(CityPublic):
    city_id: str = Field(description="Document identifier used in edit links")
