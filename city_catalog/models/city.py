from uuid import uuid4

from sqlalchemy import BigInteger
from sqlmodel import Field, SQLModel

__all__ = [
    "CityBase",
    "CityCreate",
    "CityUpdate",
    "City",
    "new_city_id",
]


def new_city_id() -> str:
    return uuid4().hex


class CityBase(SQLModel):
    name: str = Field(description="Name of the city")
    state: str | None = Field(
        default=None,
        description="State or province, only used for some countries",
    )
    country: str = Field(description="Country the city belongs to")
    population: int = Field(
        default=0,
        sa_type=BigInteger,
        description="Number of inhabitants",
    )
    capital: bool | None = Field(
        default=None,
        description="Whether the city is a capital, absent means false",
    )


class CityCreate(CityBase):
    pass


class CityUpdate(CityBase):
    """
    The five fields written by the edit form. Every field is overwritten,
    other columns are left alone.
    """

    pass


class City(CityBase, table=True):
    id: str = Field(
        default_factory=new_city_id,
        primary_key=True,
        index=True,
        description="Opaque document identifier assigned by the store",
    )
