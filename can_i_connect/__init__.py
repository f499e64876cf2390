"""
can-i-connect
=============

Checks whether HTTP and TCP endpoints are reachable, either as a one-shot
CLI run or as a small HTTP service.

Features:
- Layered architecture (Domain → Infrastructure → Application → Presentation)
- Async HTTP (httpx) and TCP probes with per-probe timeouts
- Pluggable DNS resolution, IPv4 preferred with IPv6 fallback
- FastAPI service with health and Prometheus-style metrics endpoints
"""

__version__ = "0.3.0"

from .domain import (
    ConnectionReport, ConnectionType, ProbeConfig, ResolvedAddress,
    CanIConnectError, RequestTimedOut, TransportError, DNSResolutionFailed,
)

from .infrastructure import (
    StaticResolver,
    SystemResolver,
)

from .application import ConnectivityEngine

__all__ = [
    # Version info
    '__version__',

    # Domain
    'ConnectionReport',
    'ConnectionType',
    'ProbeConfig',
    'ResolvedAddress',
    'CanIConnectError',
    'RequestTimedOut',
    'TransportError',
    'DNSResolutionFailed',

    # Infrastructure
    'StaticResolver',
    'SystemResolver',

    # Application
    'ConnectivityEngine',
]
