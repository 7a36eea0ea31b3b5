from fastapi import APIRouter

from city_catalog.api.routes import cities, utils

api_router = APIRouter()
api_router.include_router(cities.router)
api_router.include_router(utils.router)
