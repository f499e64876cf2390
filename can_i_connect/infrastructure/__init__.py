"""Infrastructure layer - Network-facing adapters."""
from .dns import StaticResolver, SystemResolver

__all__ = [
    'StaticResolver',
    'SystemResolver',
]
