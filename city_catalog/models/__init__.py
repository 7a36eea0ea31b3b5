from .city import City, CityBase, CityCreate, CityUpdate

__all__ = [
    "City",
    "CityBase",
    "CityCreate",
    "CityUpdate",
]
