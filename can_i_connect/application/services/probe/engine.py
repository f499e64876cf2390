from __future__ import annotations

import time
from typing import Any, Callable, Dict, Iterable, Optional

from can_i_connect.core.logging.logger import StructuredLogger, traceable
from can_i_connect.domain.interfaces import IDnsResolver
from can_i_connect.domain.models import ConnectionReport, ConnectionType, ProbeConfig
from can_i_connect.infrastructure.dns import SystemResolver
from .http_prober import HTTPProber
from .tcp_prober import TCPProber


MetricsHook = Callable[[str, Dict[str, Any]], None]


class ConnectivityEngine:
    """Probes HTTP then TCP targets one at a time and aggregates a report.

    Individual failures never escape :meth:`connection_report`; they are
    logged and recorded as failed hosts. The engine holds no per-run state,
    so the same instance can produce any number of reports.
    """

    def __init__(
        self,
        http_hosts: Iterable[str],
        tcp_hosts: Iterable[str],
        config: ProbeConfig,
        logger: StructuredLogger,
        *,
        resolver: Optional[IDnsResolver] = None,
        http_prober: Optional[HTTPProber] = None,
        tcp_prober: Optional[TCPProber] = None,
        metrics_hook: Optional[MetricsHook] = None,
    ) -> None:
        self.http = tuple(http_hosts)
        self.tcp = tuple(tcp_hosts)
        self.config = config
        self.logger = logger
        self.metrics_hook = metrics_hook
        self.http_prober = http_prober or HTTPProber(logger)
        self.tcp_prober = tcp_prober or TCPProber(
            resolver or SystemResolver(timeout=config.timeout, logger=logger),
            logger,
        )

    async def can_connect(self, connection_type: ConnectionType, host: str) -> bool:
        """Probe a single target. HTTP transport errors are raised."""
        if connection_type is ConnectionType.HTTP:
            return await self.http_prober.probe(host, self.config.http_client, self.config.timeout)
        return await self.tcp_prober.probe(host, self.config.timeout)

    @traceable
    async def connection_report(self) -> ConnectionReport:
        report = ConnectionReport()
        for url in self.http:
            await self._check(ConnectionType.HTTP, url, report)
        for host in self.tcp:
            await self._check(ConnectionType.TCP, host, report)
        return report

    def hosts_total(self) -> int:
        return len(self.http) + len(self.tcp)

    async def _check(self, connection_type: ConnectionType, host: str, report: ConnectionReport) -> None:
        start = time.perf_counter()
        try:
            connected = await self.can_connect(connection_type, host)
        except Exception as e:
            connected = False
            self.logger.error(lambda: f"failed to connect to {host}: {e}", extra={"host": host, "error": str(e)})
        else:
            # the HTTP prober either returns or raises, so any return is a success
            if connection_type is ConnectionType.HTTP:
                connected = True
            if connected:
                self.logger.success(lambda: f"successfully connected to {host}", extra={"host": host})
            else:
                self.logger.error(lambda: f"failed to connect to {host}", extra={"host": host})

        if connected:
            report.successful_hosts.append(host)
        else:
            report.failed_hosts.append(host)
        latency_ms = int((time.perf_counter() - start) * 1000.0)
        self._metric(
            "probe_checked",
            {
                "type": connection_type.value,
                "host": host,
                "outcome": "success" if connected else "failure",
                "latency_ms": latency_ms,
            },
        )

    def _metric(self, name: str, payload: Dict[str, Any]) -> None:
        if not self.metrics_hook:
            return
        try:
            self.metrics_hook(name, payload)
        except Exception as e:
            self.logger.warning(lambda: f"metrics hook failed for {name}: {e}")
