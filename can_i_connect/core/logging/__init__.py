from .config import LoggingOptions, bootstrap_logging, shutdown_logging
from .context import bind, get_context, log_context
from .levels import LogLevel, parse_log_level
from .logger import StructuredLogger, get_logger, traceable

__all__ = [
    "LoggingOptions",
    "bootstrap_logging",
    "shutdown_logging",
    "bind",
    "get_context",
    "log_context",
    "LogLevel",
    "parse_log_level",
    "StructuredLogger",
    "get_logger",
    "traceable",
]
