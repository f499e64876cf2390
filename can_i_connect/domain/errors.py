"""Error taxonomy shared by configuration, probing and the web layer.

Configuration errors (log level, timeout, bind address, missing hosts) are
fatal and abort a run before any probing starts. ``RequestTimedOut`` and
``TransportError`` are raised by the HTTP prober and turned into failed-host
entries by the engine. ``DNSResolutionFailed`` is raised by resolvers and
absorbed by the TCP prober.
"""
from __future__ import annotations

from typing import Any


class CanIConnectError(Exception):
    """Base class for every error this package raises."""


class InvalidLogLevel(CanIConnectError):
    def __init__(self, level: str) -> None:
        super().__init__(f"--log-level must be one of [off|error|warn|info|debug|trace] but got {level}")
        self.level = level


class InvalidTimeout(CanIConnectError):
    def __init__(self, value: Any) -> None:
        super().__init__(f"--timeout must be a positive number but got {value}")
        self.value = value


class RequestTimedOut(CanIConnectError):
    def __init__(self, timeout: float) -> None:
        super().__init__(f"request took longer than {timeout:g} seconds")
        self.timeout = timeout


class NoHostsSupplied(CanIConnectError):
    def __init__(self) -> None:
        super().__init__(
            "No hosts supplied. Must supply hosts through --http-hosts or --tcp-hosts args. Both cannot be empty!"
        )


class DNSResolutionFailed(CanIConnectError):
    def __init__(self, host: str) -> None:
        super().__init__(f"failed to resolve {host}")
        self.host = host


class InvalidSocketAddr(CanIConnectError):
    def __init__(self, addr: str) -> None:
        super().__init__(
            f"{addr} is not a valid bind address, use format <interface>:<port> e.g. 127.0.0.1:8000"
        )
        self.addr = addr


class TransportError(CanIConnectError):
    """Wraps an exception raised by the HTTP client."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"transport error: {cause}")
        self.cause = cause
        self.__cause__ = cause
