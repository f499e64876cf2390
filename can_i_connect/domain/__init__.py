"""Domain layer - Probe models, errors, and interfaces."""
from .errors import (
    CanIConnectError,
    DNSResolutionFailed,
    InvalidLogLevel,
    InvalidSocketAddr,
    InvalidTimeout,
    NoHostsSupplied,
    RequestTimedOut,
    TransportError,
)
from .interfaces import IDnsResolver
from .models import (
    DEFAULT_TIMEOUT,
    ConnectionReport,
    ConnectionType,
    ProbeConfig,
    ResolvedAddress,
    parse_timeout,
)

__all__ = [
    # Errors
    'CanIConnectError',
    'DNSResolutionFailed',
    'InvalidLogLevel',
    'InvalidSocketAddr',
    'InvalidTimeout',
    'NoHostsSupplied',
    'RequestTimedOut',
    'TransportError',
    # Models
    'DEFAULT_TIMEOUT',
    'ConnectionReport',
    'ConnectionType',
    'ProbeConfig',
    'ResolvedAddress',
    'parse_timeout',
    # Interfaces
    'IDnsResolver',
]
