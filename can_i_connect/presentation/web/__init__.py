"""HTTP service exports."""
from .app import create_app, serve
from .metrics import MetricsRegistry

__all__ = [
    "create_app",
    "serve",
    "MetricsRegistry",
]
