from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from can_i_connect.core.logging.logger import get_logger
from .route_helpers import handler_log

router = APIRouter(tags=["metrics"])
logger = get_logger(__name__, service="web")


@router.get("/metrics", response_class=PlainTextResponse)
async def metrics_handler(request: Request) -> PlainTextResponse:
    logger.debug(lambda: handler_log("handler_metrics", request.url.path))
    return PlainTextResponse(
        request.app.state.metrics.render(),
        media_type="text/plain; version=0.0.4",
    )
