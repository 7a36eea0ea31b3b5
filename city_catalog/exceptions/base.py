from fastapi import status

__all__ = [
    "AppError",
]


class AppError(Exception):
    """Base class for errors rendered as an HTML error page."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail: str = "An unexpected error occurred"

    def __init__(self, detail: str | None = None):
        if detail:
            self.detail = detail
        super().__init__(self.detail)

    @property
    def is_server_error(self) -> bool:
        return self.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR
