"""Domain interfaces."""
from .resolver import IDnsResolver

__all__ = [
    'IDnsResolver',
]
