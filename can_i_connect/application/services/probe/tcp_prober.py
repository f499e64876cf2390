from __future__ import annotations

import asyncio
import time
from typing import Awaitable, Callable, Optional, Sequence

from can_i_connect.core.logging.logger import StructuredLogger
from can_i_connect.domain.errors import CanIConnectError
from can_i_connect.domain.interfaces import IDnsResolver
from can_i_connect.domain.models import ResolvedAddress

Connector = Callable[[ResolvedAddress, float], Awaitable[None]]


async def open_tcp_connection(addr: ResolvedAddress, timeout: float) -> None:
    """Open and immediately close a TCP connection, raising on failure."""
    _, writer = await asyncio.wait_for(asyncio.open_connection(addr.ip, addr.port), timeout=timeout)
    writer.close()
    try:
        await writer.wait_closed()
    except OSError:
        # peer reset while closing; the handshake already succeeded
        pass


def select_address(addresses: Sequence[ResolvedAddress]) -> Optional[ResolvedAddress]:
    """Pick the first IPv4 address, else the first IPv6 one, in one pass."""
    first_v6: Optional[ResolvedAddress] = None
    for addr in addresses:
        if addr.is_ipv4:
            return addr
        if addr.is_ipv6 and first_v6 is None:
            first_v6 = addr
    return first_v6


class TCPProber:
    """Resolve a ``host:port`` target and attempt a timed TCP connect.

    Every failure (resolution, no usable address, refusal, timeout) comes back
    as ``False`` so a single bad host cannot abort a batch.
    """

    def __init__(
        self,
        resolver: IDnsResolver,
        logger: StructuredLogger,
        connector: Connector = open_tcp_connection,
    ) -> None:
        self.resolver = resolver
        self.logger = logger
        self.connector = connector

    async def probe(self, target: str, timeout: float) -> bool:
        try:
            addresses = await self.resolver.resolve(target)
        except CanIConnectError as e:
            self.logger.error(lambda: f"Error resolving address for host: {target} : {e}", extra={"host": target})
            return False
        except Exception as e:
            self.logger.error(
                lambda: f"Unexpected resolver error for host: {target} : {e!r}",
                extra={"host": target, "error": str(e)},
            )
            return False

        addr = select_address(addresses)
        if addr is None:
            self.logger.warning(lambda: f"No IPv4 or IPv6 addresses found for host: {target}", extra={"host": target})
            return False
        self.logger.debug(lambda: f"{target} selected {addr}")

        start = time.perf_counter()
        try:
            await self.connector(addr, timeout)
        except asyncio.TimeoutError:
            self.logger.debug(lambda: f"tcp connect to {addr} timed out after {timeout:g}s", extra={"host": target})
            return False
        except OSError as e:
            self.logger.debug(lambda: f"tcp connect to {addr} failed: {e}", extra={"host": target})
            return False
        latency_ms = int((time.perf_counter() - start) * 1000.0)
        self.logger.debug(lambda: f"tcp connect to {addr} ok", extra={"host": target, "latency_ms": latency_ms})
        return True
