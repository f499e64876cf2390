from __future__ import annotations

import ipaddress
import socket
from typing import List, Mapping, Optional, Sequence, Union

from can_i_connect.domain.errors import DNSResolutionFailed
from can_i_connect.domain.interfaces import IDnsResolver
from can_i_connect.domain.models import ResolvedAddress


def address(ip: str, port: int) -> ResolvedAddress:
    """Build a ResolvedAddress, inferring the family from the literal."""
    family = socket.AF_INET6 if ipaddress.ip_address(ip).version == 6 else socket.AF_INET
    return ResolvedAddress(family=family, ip=ip, port=port)


class StaticResolver(IDnsResolver):
    """Deterministic resolver that never touches the network.

    Either one list answers every target, or a mapping answers per target
    (a target missing from the mapping fails to resolve).
    """

    def __init__(
        self,
        addresses: Union[Sequence[ResolvedAddress], Mapping[str, Sequence[ResolvedAddress]]] = (),
        *,
        fail: bool = False,
    ) -> None:
        self._addresses = addresses
        self._fail = fail
        self.calls: List[str] = []

    async def resolve(self, target: str) -> List[ResolvedAddress]:
        self.calls.append(target)
        if self._fail:
            raise DNSResolutionFailed(target)
        if isinstance(self._addresses, Mapping):
            found: Optional[Sequence[ResolvedAddress]] = self._addresses.get(target)
            if found is None:
                raise DNSResolutionFailed(target)
            return list(found)
        return list(self._addresses)
