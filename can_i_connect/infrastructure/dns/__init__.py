from .resolver import SystemResolver, split_host_port
from .static_resolver import StaticResolver, address

__all__ = [
    "SystemResolver",
    "StaticResolver",
    "address",
    "split_host_port",
]
