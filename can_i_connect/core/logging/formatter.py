from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .context import get_context

_LEVEL_COLORS = {
    "TRACE": "\033[35m",
    "DEBUG": "\033[34m",
    "INFO": "\033[32m",
    "SUCCESS": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[31m",
}
_RESET = "\033[0m"

# extras set by the probers and the engine, grouped under "connection" in JSON output
_CONNECTION_FIELDS = ("host", "status", "latency_ms", "error")


class ConsoleFormatter(logging.Formatter):
    """Render ``LEVEL [file:line] - message``, colouring the level name."""

    def __init__(self, *, color: bool = True) -> None:
        super().__init__()
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        try:
            lvl = record.levelname
            if self.color and lvl in _LEVEL_COLORS:
                lvl = f"{_LEVEL_COLORS[lvl]}{lvl}{_RESET}"
            line = f"{lvl} [{record.filename}:{record.lineno}] - {record.getMessage()}"
            ctx = get_context()
            if ctx:
                line = f"{line} {ctx}"
            if record.exc_info:
                line = f"{line}\n{self.formatException(record.exc_info)}"
            return line
        except Exception:
            try:
                return record.getMessage()
            except Exception:
                return "<log format error>"


class JSONFormatter(logging.Formatter):
    """One JSON object per line for the rotating log file.

    Prober extras land in a nested ``connection`` object, request context in
    ``context`` and exceptions as ``{type, message, traceback}``.
    """

    def format(self, record: logging.LogRecord) -> str:
        try:
            return json.dumps(self._payload(record), default=str, separators=(",", ":"))
        except Exception:
            return json.dumps({"level": "ERROR", "message": "log format error"}, separators=(",", ":"))

    def _payload(self, record: logging.LogRecord) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "service": getattr(record, "service", None),
            "source": f"{record.filename}:{record.lineno}",
            "message": record.getMessage(),
        }
        connection = {key: getattr(record, key) for key in _CONNECTION_FIELDS if getattr(record, key, None) is not None}
        if connection:
            payload["connection"] = connection
        exec_ms = getattr(record, "execution_time_ms", None)
        if exec_ms is not None:
            payload["execution_time_ms"] = exec_ms
        ctx = get_context()
        if ctx:
            payload["context"] = ctx
        exc = self._exception(record)
        if exc is not None:
            payload["exception"] = exc
        return payload

    def _exception(self, record: logging.LogRecord) -> Optional[Dict[str, str]]:
        if not record.exc_info or record.exc_info[0] is None:
            return None
        exc_type, exc_value, _ = record.exc_info
        return {
            "type": exc_type.__name__,
            "message": str(exc_value),
            "traceback": self.formatException(record.exc_info),
        }
