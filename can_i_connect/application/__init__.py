"""Application layer - Probing services."""
from .services import ConnectivityEngine

__all__ = [
    'ConnectivityEngine',
]
