from .engine import ConnectivityEngine, MetricsHook
from .http_prober import HTTPProber
from .tcp_prober import TCPProber, open_tcp_connection, select_address

__all__ = [
    "ConnectivityEngine",
    "MetricsHook",
    "HTTPProber",
    "TCPProber",
    "open_tcp_connection",
    "select_address",
]
