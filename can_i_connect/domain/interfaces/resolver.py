"""DNS resolver interface."""
from abc import ABC, abstractmethod
from typing import List

from ..models import ResolvedAddress


class IDnsResolver(ABC):
    """Turns a ``host:port`` target into candidate socket addresses."""

    @abstractmethod
    async def resolve(self, target: str) -> List[ResolvedAddress]:
        """Resolve ``target`` or raise DNSResolutionFailed."""
        pass
