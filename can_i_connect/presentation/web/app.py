from __future__ import annotations

import time
from typing import Callable, Optional

import httpx
import uvicorn
from fastapi import FastAPI, Request, Response

from can_i_connect import __version__
from can_i_connect.config import settings
from can_i_connect.core.logging.logger import get_logger
from can_i_connect.domain.interfaces import IDnsResolver
from . import routes_can_i_connect, routes_health, routes_metrics
from .metrics import MetricsRegistry

ClientFactory = Callable[[float], httpx.AsyncClient]
UNMATCHED_PATH = "<unmatched>"

logger = get_logger(__name__, service="web")


def default_client_factory(timeout: float) -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=timeout)


def create_app(
    *,
    client_factory: ClientFactory = default_client_factory,
    resolver: Optional[IDnsResolver] = None,
    metrics: Optional[MetricsRegistry] = None,
) -> FastAPI:
    """Build the FastAPI service.

    ``resolver`` defaults to a fresh system resolver per request; tests pass a
    StaticResolver. ``client_factory`` builds the per-request httpx client
    from the request's timeout.
    """
    app = FastAPI(title="can-i-connect", version=__version__)
    app.state.client_factory = client_factory
    app.state.resolver = resolver
    app.state.metrics = metrics or MetricsRegistry(namespace=settings.METRICS_NAMESPACE)

    @app.middleware("http")
    async def track_metrics(request: Request, call_next: Callable) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        route = request.scope.get("route")
        # label by route template; anything unrouted shares a single label
        path = getattr(route, "path", None) or UNMATCHED_PATH
        app.state.metrics.record_request(request.method, path, response.status_code, time.perf_counter() - start)
        return response

    app.include_router(routes_health.router)
    app.include_router(routes_can_i_connect.router)
    app.include_router(routes_metrics.router)
    return app


def serve(host: str, port: int, *, app: Optional[FastAPI] = None) -> None:
    """Run the service until interrupted, using the already-configured logging."""
    logger.info(lambda: f"Server mode Activated! Listening on: {_display_addr(host, port)}")
    config = uvicorn.Config(app or create_app(), host=host, port=port, log_config=None, access_log=False)
    uvicorn.Server(config).run()


def _display_addr(host: str, port: int) -> str:
    return f"[{host}]:{port}" if ":" in host else f"{host}:{port}"
