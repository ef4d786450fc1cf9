from fastapi import APIRouter
from fastapi.responses import ORJSONResponse

from extraction_service.dto.extract_response import StatusResponse
from extraction_service.dto.info_response import InfoResponse
from extraction_service.utils.utils import get_app_info, get_service_status

status_api = APIRouter()
health_api = APIRouter(prefix="/api")


@status_api.get("/", response_model=StatusResponse, response_class=ORJSONResponse)
def status() -> ORJSONResponse:
    return ORJSONResponse(content=get_service_status())


@health_api.get("/health", response_class=ORJSONResponse)
def health() -> ORJSONResponse:
    return ORJSONResponse(content={"status": "healthy"})


@health_api.get("/info", response_model=InfoResponse, response_class=ORJSONResponse)
def info() -> ORJSONResponse:
    return ORJSONResponse(content=get_app_info())
