from __future__ import annotations

from fastapi import APIRouter, Request

from can_i_connect import __version__
from can_i_connect.core.logging.logger import get_logger
from .route_helpers import handler_log
from .schemas import HealthResponse

router = APIRouter(tags=["health"])
logger = get_logger(__name__, service="web")


@router.get("/health", response_model=HealthResponse)
async def health_handler(request: Request) -> HealthResponse:
    logger.debug(lambda: handler_log("handler_health", request.url.path))
    return HealthResponse(healthy=True, version=__version__)
