from fastapi import APIRouter, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from city_catalog.api.deps import CityFormDep, SessionDep, TemplatesDep
from city_catalog.services import cities as cities_service

router = APIRouter(tags=["cities"])


@router.get("/", response_class=HTMLResponse)
def list_cities(
    request: Request,
    session: SessionDep,
    templates: TemplatesDep,
) -> HTMLResponse:
    cities = cities_service.get_cities_with_refs(session=session)
    return templates.TemplateResponse(request, "index.html", {"cities": cities})


@router.get("/capitals", response_class=HTMLResponse)
def list_capital_cities(
    request: Request,
    session: SessionDep,
    templates: TemplatesDep,
) -> HTMLResponse:
    # Same page as the index, without identifiers so no edit links
    cities = cities_service.get_capital_cities(session=session)
    return templates.TemplateResponse(request, "index.html", {"cities": cities})


@router.post("/create")
def create_city(
    session: SessionDep,
    form: CityFormDep,
) -> RedirectResponse:
    cities_service.create_city(session=session, form=form)
    return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/edit/{city_id}", response_class=HTMLResponse)
def edit_city_form(
    city_id: str,
    request: Request,
    session: SessionDep,
    templates: TemplatesDep,
) -> HTMLResponse:
    city = cities_service.get_city_with_ref(session=session, city_id=city_id)
    return templates.TemplateResponse(request, "edit.html", {"city": city})


@router.post("/edit/{city_id}")
def edit_city(
    city_id: str,
    session: SessionDep,
    form: CityFormDep,
) -> RedirectResponse:
    cities_service.update_city(session=session, city_id=city_id, form=form)
    return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)
