from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from queue import Queue
from typing import Optional

from .formatter import ConsoleFormatter, JSONFormatter
from .levels import LogLevel, register_levels

_listener: QueueListener | None = None


@dataclass(frozen=True)
class LoggingOptions:
    """Everything bootstrap_logging needs, resolved once at startup."""
    level: int = int(LogLevel.INFO)
    color: bool = True
    service: str = "can-i-connect"
    log_dir: Optional[Path] = None
    log_file_name: str = "can-i-connect.jsonl"
    max_bytes: int = 5_000_000
    backup_count: int = 5


class _ServiceFilter(logging.Filter):
    def __init__(self, service: str) -> None:
        super().__init__()
        self.service = service

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "service", None) is None:
            record.service = self.service
        return True


def bootstrap_logging(options: LoggingOptions) -> None:
    global _listener
    register_levels()
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(options.level)
    service_filter = _ServiceFilter(options.service)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(options.level)
    console.setFormatter(ConsoleFormatter(color=options.color))
    console.addFilter(service_filter)
    root.addHandler(console)

    if options.log_dir:
        options.log_dir.mkdir(parents=True, exist_ok=True)
        json_handler = RotatingFileHandler(
            str(options.log_dir / options.log_file_name),
            maxBytes=options.max_bytes,
            backupCount=options.backup_count,
        )
        json_handler.setLevel(options.level)
        json_handler.setFormatter(JSONFormatter())
        q: Queue[logging.LogRecord] = Queue(-1)
        qh = QueueHandler(q)
        qh.addFilter(service_filter)
        root.addHandler(qh)
        _listener = QueueListener(q, json_handler, respect_handler_level=True)
        _listener.start()

    # uvicorn installs its own handlers unless told otherwise; route it through ours
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uv = logging.getLogger(name)
        uv.handlers.clear()
        uv.propagate = True


def shutdown_logging() -> None:
    global _listener
    if _listener:
        _listener.stop()
        _listener = None
