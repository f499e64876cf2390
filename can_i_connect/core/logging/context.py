"""Per-task log context carried in a contextvar.

Each web request runs in its own task, so values bound inside a handler (the
request path, the number of targets) never leak into another request's log
lines.
"""
from __future__ import annotations

import contextvars
from contextlib import contextmanager
from typing import Any, Dict, Iterator

_context: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar("can_i_connect_log_context", default={})


def get_context() -> Dict[str, Any]:
    return dict(_context.get())


def bind(**values: Any) -> contextvars.Token:
    merged = {**_context.get(), **{k: v for k, v in values.items() if v is not None}}
    return _context.set(merged)


@contextmanager
def log_context(**values: Any) -> Iterator[Dict[str, Any]]:
    token = bind(**values)
    try:
        yield get_context()
    finally:
        _context.reset(token)
