from __future__ import annotations

import socket

import pytest

from can_i_connect.domain.errors import DNSResolutionFailed
from can_i_connect.infrastructure.dns import StaticResolver, SystemResolver, address, split_host_port


@pytest.mark.parametrize(
    "target, expected",
    [
        ("example.com:80", ("example.com", 80)),
        ("127.0.0.1:8000", ("127.0.0.1", 8000)),
        ("[::1]:443", ("::1", 443)),
        ("localhost:0", ("localhost", 0)),
    ],
)
def test_split_host_port(target, expected) -> None:
    assert split_host_port(target) == expected


@pytest.mark.parametrize("target", ["example.com", "example.com:", ":80", "example.com:http", "::1:80", "[::1]80", "host:70000"])
def test_split_host_port_rejects_malformed_targets(target) -> None:
    with pytest.raises(DNSResolutionFailed) as exc:
        split_host_port(target)
    assert exc.value.host == target


@pytest.mark.asyncio
async def test_system_resolver_resolves_ip_literal() -> None:
    addresses = await SystemResolver(timeout=2).resolve("127.0.0.1:8080")
    assert addresses == [address("127.0.0.1", 8080)]
    assert addresses[0].family == socket.AF_INET


@pytest.mark.asyncio
async def test_system_resolver_rejects_target_without_port() -> None:
    with pytest.raises(DNSResolutionFailed):
        await SystemResolver(timeout=2).resolve("127.0.0.1")


@pytest.mark.asyncio
async def test_system_resolver_wraps_lookup_failures(monkeypatch: pytest.MonkeyPatch) -> None:
    def fail(*args, **kwargs):  # type: ignore[no-untyped-def]
        raise socket.gaierror(socket.EAI_NONAME, "Name or service not known")

    monkeypatch.setattr("can_i_connect.infrastructure.dns.resolver.socket.getaddrinfo", fail)
    with pytest.raises(DNSResolutionFailed) as exc:
        await SystemResolver(timeout=2).resolve("does-not-exist.invalid:80")
    assert exc.value.host == "does-not-exist.invalid:80"


@pytest.mark.asyncio
async def test_system_resolver_drops_duplicates_and_keeps_order(monkeypatch: pytest.MonkeyPatch) -> None:
    infos = [
        (socket.AF_INET6, socket.SOCK_STREAM, 6, "", ("2001:db8::1", 80, 0, 0)),
        (socket.AF_INET, socket.SOCK_STREAM, 6, "", ("192.0.2.1", 80)),
        (socket.AF_INET, socket.SOCK_STREAM, 6, "", ("192.0.2.1", 80)),
    ]
    monkeypatch.setattr(
        "can_i_connect.infrastructure.dns.resolver.socket.getaddrinfo", lambda *a, **kw: infos
    )
    addresses = await SystemResolver(timeout=2).resolve("dual.example:80")
    assert addresses == [address("2001:db8::1", 80), address("192.0.2.1", 80)]


@pytest.mark.asyncio
async def test_static_resolver_fixed_list_and_mapping() -> None:
    fixed = StaticResolver([address("10.0.0.1", 22)])
    assert await fixed.resolve("anything:22") == [address("10.0.0.1", 22)]
    assert fixed.calls == ["anything:22"]

    mapped = StaticResolver({"db:5432": [address("10.0.0.2", 5432)]})
    assert await mapped.resolve("db:5432") == [address("10.0.0.2", 5432)]
    with pytest.raises(DNSResolutionFailed):
        await mapped.resolve("cache:6379")


@pytest.mark.asyncio
async def test_static_resolver_can_be_told_to_fail() -> None:
    with pytest.raises(DNSResolutionFailed):
        await StaticResolver(fail=True).resolve("db:5432")
