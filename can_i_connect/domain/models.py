from __future__ import annotations

import math
import socket
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, List, Optional

from .errors import InvalidTimeout

if TYPE_CHECKING:
    import httpx

DEFAULT_TIMEOUT: float = 5.0


class ConnectionType(Enum):
    HTTP = "http"
    TCP = "tcp"


def parse_timeout(value: Any) -> float:
    """Normalize a timeout given as a number or numeric string.

    ``None`` and zero fall back to DEFAULT_TIMEOUT; negatives, non-finite
    values, booleans and anything non-numeric raise InvalidTimeout.
    """
    if value is None:
        return DEFAULT_TIMEOUT
    if isinstance(value, bool):
        raise InvalidTimeout(value)
    if not isinstance(value, (str, int, float)):
        raise InvalidTimeout(value)
    try:
        # ints beyond float range raise OverflowError
        parsed = float(value.strip() if isinstance(value, str) else value)
    except (OverflowError, ValueError):
        raise InvalidTimeout(value) from None
    if not math.isfinite(parsed) or parsed < 0:
        raise InvalidTimeout(value)
    return parsed or DEFAULT_TIMEOUT


@dataclass(frozen=True, slots=True)
class ProbeConfig:
    """Immutable per-run probing settings."""
    timeout: float = DEFAULT_TIMEOUT
    http_client: Optional["httpx.AsyncClient"] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "timeout", parse_timeout(self.timeout))

    @classmethod
    def from_value(cls, raw: Any, http_client: Optional["httpx.AsyncClient"] = None) -> "ProbeConfig":
        return cls(timeout=parse_timeout(raw), http_client=http_client)


@dataclass(frozen=True, slots=True)
class ResolvedAddress:
    """One address produced by DNS resolution."""
    family: int
    ip: str
    port: int

    @property
    def is_ipv4(self) -> bool:
        return self.family == socket.AF_INET

    @property
    def is_ipv6(self) -> bool:
        return self.family == socket.AF_INET6

    def __str__(self) -> str:
        return f"[{self.ip}]:{self.port}" if self.is_ipv6 else f"{self.ip}:{self.port}"


@dataclass(slots=True)
class ConnectionReport:
    """Hosts split by outcome, in the order they were probed."""
    successful_hosts: List[str] = field(default_factory=list)
    failed_hosts: List[str] = field(default_factory=list)

    @property
    def hosts_reachable(self) -> int:
        return len(self.successful_hosts)

    @property
    def hosts_unreachable(self) -> int:
        return len(self.failed_hosts)

    def was_successful(self) -> bool:
        return not self.failed_hosts
