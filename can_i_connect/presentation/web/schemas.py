from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, Field, field_validator

from can_i_connect.domain.errors import InvalidTimeout
from can_i_connect.domain.models import DEFAULT_TIMEOUT, ConnectionReport, parse_timeout


class CanIConnectPayload(BaseModel):
    """Body of ``POST /can-i-connect``. Every field is optional."""
    http_hosts: List[str] = Field(default_factory=list)
    tcp_hosts: List[str] = Field(default_factory=list)
    timeout: float = DEFAULT_TIMEOUT

    @field_validator("http_hosts", "tcp_hosts", mode="before")
    @classmethod
    def _null_hosts(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("timeout", mode="before")
    @classmethod
    def _timeout(cls, value: Any) -> float:
        try:
            return parse_timeout(value)
        except InvalidTimeout as e:
            raise ValueError(f"timeout must be a valid number but got {value!r}") from e


class FailuresSection(BaseModel):
    hosts_unreachable: int
    failed_hosts_list: List[str]


class SuccessfulSection(BaseModel):
    hosts_reachable: int
    successful_hosts_list: List[str]


class ConnectionReportBody(BaseModel):
    failures: FailuresSection
    successful: SuccessfulSection


class CanIConnectResponse(BaseModel):
    success: bool
    connection_report: ConnectionReportBody

    @classmethod
    def from_report(cls, report: ConnectionReport) -> "CanIConnectResponse":
        return cls(
            success=report.was_successful(),
            connection_report=ConnectionReportBody(
                failures=FailuresSection(
                    hosts_unreachable=report.hosts_unreachable,
                    failed_hosts_list=list(report.failed_hosts),
                ),
                successful=SuccessfulSection(
                    hosts_reachable=report.hosts_reachable,
                    successful_hosts_list=list(report.successful_hosts),
                ),
            ),
        )


class HealthResponse(BaseModel):
    healthy: bool = True
    version: str
