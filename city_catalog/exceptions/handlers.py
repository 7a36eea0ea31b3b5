from logging import getLogger

from fastapi import FastAPI, Request, status
from fastapi.responses import HTMLResponse

from .base import AppError

logger = getLogger(__name__)


def render_error(request: Request, status_code: int, detail: str) -> HTMLResponse:
    templates = request.app.state.templates
    return templates.TemplateResponse(
        request,
        "error.html",
        {"status_code": status_code, "detail": detail},
        status_code=status_code,
    )


def register_exception_handlers(app: FastAPI):
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.is_server_error:
            logger.error(f"{exc.status_code} Error: {exc.detail}", exc_info=exc)
        else:
            logger.warning(f"{exc.status_code} Error: {exc.detail}")
        return render_error(request, exc.status_code, exc.detail)

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error while serving %s", request.url.path, exc_info=exc)
        return render_error(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An unexpected error occurred.",
        )
