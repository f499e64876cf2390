from __future__ import annotations

import pytest

from can_i_connect.domain.errors import InvalidTimeout, RequestTimedOut, TransportError
from can_i_connect.domain.models import DEFAULT_TIMEOUT, ConnectionReport, ProbeConfig, parse_timeout


@pytest.mark.parametrize(
    "raw, expected",
    [(None, DEFAULT_TIMEOUT), (0, DEFAULT_TIMEOUT), (3, 3.0), (1.5, 1.5), ("7", 7.0), (" 2.5 ", 2.5), ("0", DEFAULT_TIMEOUT)],
)
def test_parse_timeout_accepts_numbers_and_numeric_strings(raw, expected) -> None:
    assert parse_timeout(raw) == expected


@pytest.mark.parametrize("raw", [-1, "-3", "abc", "", True, float("nan"), float("inf"), [5], 10**400, "1e400"])
def test_parse_timeout_rejects_invalid_values(raw) -> None:
    with pytest.raises(InvalidTimeout):
        parse_timeout(raw)


def test_probe_config_defaults_zero_timeout() -> None:
    assert ProbeConfig(timeout=0).timeout == DEFAULT_TIMEOUT
    assert ProbeConfig().timeout == DEFAULT_TIMEOUT
    assert ProbeConfig.from_value("9").timeout == 9.0


def test_probe_config_is_immutable() -> None:
    config = ProbeConfig(timeout=2)
    with pytest.raises(AttributeError):
        config.timeout = 3  # type: ignore[misc]


def test_connection_report_counts_and_success() -> None:
    report = ConnectionReport(successful_hosts=["a", "b"], failed_hosts=[])
    assert report.hosts_reachable == 2
    assert report.hosts_unreachable == 0
    assert report.was_successful() is True

    report.failed_hosts.append("c")
    assert report.was_successful() is False


def test_error_messages_carry_their_arguments() -> None:
    err = RequestTimedOut(5.0)
    assert err.timeout == 5.0
    assert str(err) == "request took longer than 5 seconds"

    cause = ConnectionError("boom")
    wrapped = TransportError(cause)
    assert wrapped.cause is cause
    assert wrapped.__cause__ is cause
    assert "boom" in str(wrapped)
