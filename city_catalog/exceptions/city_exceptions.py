from fastapi import status

from .base import AppError

__all__ = [
    "CityNotFound",
    "CityDecodeError",
    "InvalidCityForm",
    "MalformedCityForm",
    "CityStoreError",
]


class CityNotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, city_id: str):
        self.city_id = city_id
        detail = f"City with id '{city_id}' not found."
        super().__init__(detail)


class CityDecodeError(AppError):
    """Raised when a stored city document is missing a required field or
    holds a value of the wrong type."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        detail = f"Stored city has an invalid '{field}' field: {reason}."
        super().__init__(detail)


class InvalidCityForm(AppError):
    status_code = 422

    def __init__(self, field: str, value: str | None = None):
        self.field = field
        self.value = value
        if value:
            detail = f"Invalid value '{value}' for field '{field}'."
        else:
            detail = f"Field '{field}' is required."
        super().__init__(detail)


class MalformedCityForm(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self):
        detail = "Could not parse the submitted city form."
        super().__init__(detail)


class CityStoreError(AppError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    def __init__(self, operation: str):
        self.operation = operation
        detail = f"The city store failed to {operation}. Please try again later."
        super().__init__(detail)
