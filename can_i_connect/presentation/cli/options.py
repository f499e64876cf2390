from __future__ import annotations

import argparse
import ipaddress
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from can_i_connect.config import settings
from can_i_connect.core.logging.levels import parse_log_level
from can_i_connect.domain.errors import InvalidSocketAddr, NoHostsSupplied
from can_i_connect.domain.models import parse_timeout


def split_hosts(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return [v.strip() for v in value.split(",") if v.strip()]


def validate_bind_addr(addr: str) -> Tuple[str, int]:
    """Parse ``ip:port`` / ``[ipv6]:port`` into a literal address and port."""
    if addr.startswith("["):
        host, sep, rest = addr[1:].partition("]")
        if not sep or not rest.startswith(":"):
            raise InvalidSocketAddr(addr)
        port_str = rest[1:]
        expected_version = 6
    else:
        host, sep, port_str = addr.rpartition(":")
        if not sep:
            raise InvalidSocketAddr(addr)
        expected_version = 4
    try:
        ip = ipaddress.ip_address(host)
    except ValueError:
        raise InvalidSocketAddr(addr) from None
    if ip.version != expected_version or not port_str.isdigit() or int(port_str) > 65535:
        raise InvalidSocketAddr(addr)
    return str(ip), int(port_str)


@dataclass
class Options:
    http_hosts: List[str] = field(default_factory=list)
    tcp_hosts: List[str] = field(default_factory=list)
    timeout: float = 5.0
    log_level: int = 20
    no_color: bool = False
    listen: Optional[Tuple[str, int]] = None

    @property
    def server_mode(self) -> bool:
        return self.listen is not None

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "Options":
        """Validate parsed arguments; raises a CanIConnectError on bad input."""
        http_hosts = split_hosts(args.http_hosts)
        tcp_hosts = split_hosts(args.tcp_hosts)
        timeout = parse_timeout(args.timeout if args.timeout is not None else settings.DEFAULT_TIMEOUT)
        log_level = parse_log_level(args.log_level or settings.LOG_LEVEL)
        listen = validate_bind_addr(args.listen) if args.listen else None

        # hosts are only optional when running as a server
        if not http_hosts and not tcp_hosts and listen is None:
            raise NoHostsSupplied()

        return cls(
            http_hosts=http_hosts,
            tcp_hosts=tcp_hosts,
            timeout=timeout,
            log_level=log_level,
            no_color=bool(args.no_color),
            listen=listen,
        )
