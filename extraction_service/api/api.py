from fastapi import APIRouter

from extraction_service.api.extract import extract_api
from extraction_service.api.health import health_api, status_api

api = APIRouter()

api.include_router(status_api)
api.include_router(health_api)
api.include_router(extract_api)
