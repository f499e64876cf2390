"""Application services root exports."""
from .probe import ConnectivityEngine, HTTPProber, TCPProber

__all__ = [
    "ConnectivityEngine",
    "HTTPProber",
    "TCPProber",
]
