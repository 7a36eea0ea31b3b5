from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from logging import getLogger

import uvicorn
from fastapi import FastAPI
from fastapi.templating import Jinja2Templates

from city_catalog.api.main import api_router
from city_catalog.core.config import settings
from city_catalog.core.db import engine, init_db
from city_catalog.exceptions.handlers import register_exception_handlers
from city_catalog.logging_ import setup_logger

logger = getLogger(__name__)


def create_templates(templates_dir: str) -> Jinja2Templates:
    """Parse the page templates once; handlers receive them via TemplatesDep."""
    return Jinja2Templates(directory=templates_dir)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    init_db(engine)
    logger.info("City store ready")
    yield


def create_app() -> FastAPI:
    app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)
    app.state.templates = create_templates(settings.TEMPLATES_DIR)
    register_exception_handlers(app)
    app.include_router(api_router)
    return app


app = create_app()


def run() -> None:
    setup_logger("city_catalog")
    logger.info("Listening on %s:%s", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
