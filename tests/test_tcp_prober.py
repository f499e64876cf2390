from __future__ import annotations

import asyncio
import logging
from typing import List

import pytest

from can_i_connect.application.services.probe import TCPProber, select_address
from can_i_connect.domain.interfaces import IDnsResolver
from can_i_connect.domain.models import ResolvedAddress
from can_i_connect.infrastructure.dns import StaticResolver, SystemResolver, address

V4 = address("192.0.2.10", 443)
V4_SECOND = address("192.0.2.11", 443)
V6 = address("2001:db8::10", 443)
V6_SECOND = address("2001:db8::11", 443)


class RecordingConnector:
    def __init__(self, error: BaseException | None = None) -> None:
        self.error = error
        self.calls: List[ResolvedAddress] = []

    async def __call__(self, addr: ResolvedAddress, timeout: float) -> None:
        self.calls.append(addr)
        if self.error is not None:
            raise self.error


@pytest.mark.parametrize(
    "addresses, expected",
    [
        ([V4, V6], V4),
        ([V6, V4], V4),
        ([V6, V6_SECOND], V6),
        ([V6, V4, V4_SECOND], V4),
        ([], None),
    ],
)
def test_select_address_prefers_first_ipv4(addresses, expected) -> None:
    assert select_address(addresses) == expected


@pytest.mark.asyncio
async def test_dual_stack_target_connects_over_ipv4(logger) -> None:
    connector = RecordingConnector()
    prober = TCPProber(StaticResolver([V6, V4]), logger, connector=connector)

    assert await prober.probe("dual.example:443", timeout=1) is True
    assert connector.calls == [V4]


@pytest.mark.asyncio
async def test_ipv6_only_target_falls_back_to_ipv6(logger) -> None:
    connector = RecordingConnector()
    prober = TCPProber(StaticResolver([V6, V6_SECOND]), logger, connector=connector)

    assert await prober.probe("v6.example:443", timeout=1) is True
    assert connector.calls == [V6]


@pytest.mark.asyncio
async def test_no_addresses_is_a_soft_failure(logger) -> None:
    connector = RecordingConnector()
    prober = TCPProber(StaticResolver([]), logger, connector=connector)

    assert await prober.probe("empty.example:443", timeout=1) is False
    assert connector.calls == []


@pytest.mark.asyncio
async def test_resolution_failure_is_a_soft_failure(logger) -> None:
    prober = TCPProber(StaticResolver(fail=True), logger, connector=RecordingConnector())
    assert await prober.probe("nowhere.invalid:443", timeout=1) is False


@pytest.mark.asyncio
@pytest.mark.parametrize("error", [ConnectionRefusedError("refused"), asyncio.TimeoutError(), OSError("unreachable")])
async def test_connect_errors_are_reported_as_unreachable(logger, error) -> None:
    prober = TCPProber(StaticResolver([V4]), logger, connector=RecordingConnector(error))
    assert await prober.probe("down.example:443", timeout=1) is False


@pytest.mark.asyncio
async def test_real_connect_to_listening_socket(logger, tcp_listener) -> None:
    prober = TCPProber(SystemResolver(timeout=2), logger)
    assert await prober.probe(tcp_listener, timeout=2) is True


@pytest.mark.asyncio
async def test_real_connect_to_closed_port(logger, closed_port) -> None:
    prober = TCPProber(SystemResolver(timeout=2), logger)
    assert await prober.probe(f"127.0.0.1:{closed_port}", timeout=2) is False


@pytest.mark.asyncio
async def test_malformed_target_is_unreachable(logger) -> None:
    prober = TCPProber(SystemResolver(timeout=2), logger)
    assert await prober.probe("no-port-here", timeout=2) is False


class BrokenResolver(IDnsResolver):
    async def resolve(self, target: str) -> List[ResolvedAddress]:
        raise RuntimeError("resolver backend exploded")


@pytest.mark.asyncio
async def test_unexpected_resolver_error_is_a_soft_failure(logger, caplog) -> None:
    connector = RecordingConnector()
    prober = TCPProber(BrokenResolver(), logger, connector=connector)

    with caplog.at_level(logging.ERROR, logger="tests"):
        assert await prober.probe("db.internal:5432", timeout=1) is False

    assert connector.calls == []
    assert any("resolver backend exploded" in r.getMessage() for r in caplog.records)
