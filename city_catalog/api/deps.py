from collections.abc import Generator
from contextlib import contextmanager
from typing import Annotated

from fastapi import Depends, Request
from fastapi.templating import Jinja2Templates
from sqlmodel import Session

from city_catalog.core.db import engine
from city_catalog.inputs.city import CityForm, get_city_form


def get_db() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


@contextmanager
def get_db_context() -> Generator[Session, None, None]:
    """Session for code running outside a request, such as scripts."""
    with Session(engine) as session:
        yield session


def get_templates(request: Request) -> Jinja2Templates:
    return request.app.state.templates


SessionDep = Annotated[Session, Depends(get_db)]
TemplatesDep = Annotated[Jinja2Templates, Depends(get_templates)]
CityFormDep = Annotated[CityForm, Depends(get_city_form)]
