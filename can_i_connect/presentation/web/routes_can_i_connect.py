from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from can_i_connect.application.services.probe import ConnectivityEngine
from can_i_connect.core.logging.context import log_context
from can_i_connect.core.logging.logger import get_logger
from can_i_connect.domain.models import ProbeConfig
from .route_helpers import bad_request, handler_log, parse_payload, validate_hosts
from .schemas import CanIConnectResponse

router = APIRouter(tags=["connectivity"])
logger = get_logger(__name__, service="web")


@router.post("/can-i-connect", response_model=CanIConnectResponse)
async def can_i_connect_handler(request: Request) -> CanIConnectResponse | JSONResponse:
    path = request.url.path
    logger.debug(lambda: handler_log("handler_can_i_connect", path))

    try:
        raw = await request.json()
    except ValueError as e:
        return bad_request(f"Failed to deserialize payload: {e}")
    logger.debug(lambda: f"{raw!r}")

    payload = parse_payload(raw)
    if isinstance(payload, JSONResponse):
        return payload
    invalid = validate_hosts(payload)
    if invalid is not None:
        return invalid
    logger.debug(lambda: f"timeout: {payload.timeout:g}")

    state = request.app.state
    with log_context(path=path, targets=len(payload.http_hosts) + len(payload.tcp_hosts)):
        async with state.client_factory(payload.timeout) as client:
            engine = ConnectivityEngine(
                payload.http_hosts,
                payload.tcp_hosts,
                ProbeConfig(timeout=payload.timeout, http_client=client),
                logger,
                resolver=state.resolver,
                metrics_hook=state.metrics.probe_hook,
            )
            report = await engine.connection_report()

    return CanIConnectResponse.from_report(report)
