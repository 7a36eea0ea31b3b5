from .city import CityPublic, CityWithRef

__all__ = [
    "CityPublic",
    "CityWithRef",
]
