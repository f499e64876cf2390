from __future__ import annotations

import asyncio
import socket
import time
from typing import List, Optional, Tuple

from can_i_connect.core.logging.logger import StructuredLogger, get_logger
from can_i_connect.domain.errors import DNSResolutionFailed
from can_i_connect.domain.interfaces import IDnsResolver
from can_i_connect.domain.models import DEFAULT_TIMEOUT, ResolvedAddress

_FAMILIES = (socket.AF_INET, socket.AF_INET6)


def split_host_port(target: str) -> Tuple[str, int]:
    """Split ``host:port`` or ``[v6]:port`` into its parts.

    Raises DNSResolutionFailed when either half is missing or the port is
    not an integer in 0..65535.
    """
    if target.startswith("["):
        host, sep, rest = target[1:].partition("]")
        if not sep or not rest.startswith(":"):
            raise DNSResolutionFailed(target)
        port_str = rest[1:]
    else:
        host, sep, port_str = target.rpartition(":")
        if not sep or ":" in host:
            raise DNSResolutionFailed(target)
    if not host or not port_str.isdigit():
        raise DNSResolutionFailed(target)
    port = int(port_str)
    if port > 65535:
        raise DNSResolutionFailed(target)
    return host, port


class SystemResolver(IDnsResolver):
    """Resolve through the operating system's getaddrinfo."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, logger: Optional[StructuredLogger] = None) -> None:
        self.timeout = timeout
        self.logger = logger or get_logger(__name__, service="dns")

    async def resolve(self, target: str) -> List[ResolvedAddress]:
        host, port = split_host_port(target)
        start = time.perf_counter()
        self.logger.debug(lambda: f"Attempting to resolve dns for address: {target}")
        try:
            infos = await asyncio.wait_for(
                asyncio.to_thread(socket.getaddrinfo, host, port, type=socket.SOCK_STREAM),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            self.logger.debug(lambda: f"dns lookup for {host} timed out after {self.timeout:g}s")
            raise DNSResolutionFailed(target) from None
        except (OSError, UnicodeError) as e:
            self.logger.debug(lambda: f"dns lookup for {host} failed: {e}")
            raise DNSResolutionFailed(target) from e

        addresses: List[ResolvedAddress] = []
        for family, _, _, _, sockaddr in infos:
            if family not in _FAMILIES:
                continue
            addr = ResolvedAddress(family=family, ip=str(sockaddr[0]), port=int(sockaddr[1]))
            if addr not in addresses:
                addresses.append(addr)
        latency_ms = int((time.perf_counter() - start) * 1000.0)
        self.logger.debug(
            lambda: f"{target} resolved to [{', '.join(str(a) for a in addresses)}]",
            extra={"host": host, "latency_ms": latency_ms},
        )
        return addresses
