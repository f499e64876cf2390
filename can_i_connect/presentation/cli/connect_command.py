from __future__ import annotations

from typing import Optional

import httpx

from can_i_connect.application.services.probe import ConnectivityEngine
from can_i_connect.core.logging.logger import StructuredLogger, get_logger
from can_i_connect.domain.interfaces import IDnsResolver
from can_i_connect.domain.models import ConnectionReport, ProbeConfig
from .options import Options


class ConnectCommand:
    """One-shot CLI run: probe every configured host and log a summary."""

    def __init__(self, options: Options, *, resolver: Optional[IDnsResolver] = None) -> None:
        self.options = options
        self.resolver = resolver
        self.logger: StructuredLogger = get_logger(__name__, service="cli")

    async def run(self) -> int:
        """Returns the process exit code: 0 when every host was reachable, else 1."""
        async with httpx.AsyncClient(timeout=self.options.timeout) as client:
            engine = ConnectivityEngine(
                self.options.http_hosts,
                self.options.tcp_hosts,
                ProbeConfig(timeout=self.options.timeout, http_client=client),
                self.logger,
                resolver=self.resolver,
            )
            report = await engine.connection_report()
        self._summarize(report, engine.hosts_total())
        return 0 if report.was_successful() else 1

    def _summarize(self, report: ConnectionReport, total: int) -> None:
        self.logger.info(
            lambda: f"Successfully connected to [{report.hosts_reachable}] hosts out of [{total}] total hosts"
        )
        if report.failed_hosts:
            self.logger.error(
                lambda: f"Failed to connect to the following [{report.hosts_unreachable}] host(s): \n["
                + "\n".join(report.failed_hosts)
                + "]"
            )
