"""In-process request and probe metrics in Prometheus text format."""
from __future__ import annotations

import threading
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

EXPONENTIAL_SECONDS: Tuple[float, ...] = (0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0)

LabelKey = Tuple[Tuple[str, str], ...]


def _escape(value: str) -> str:
    return value.replace("\\", "\\\\").replace("\n", "\\n").replace('"', '\\"')


def _labels(key: LabelKey, **extra: str) -> str:
    pairs = list(key) + list(extra.items())
    return "{" + ",".join(f'{k}="{_escape(v)}"' for k, v in pairs) + "}"


@dataclass
class _Histogram:
    buckets: List[int] = field(default_factory=lambda: [0] * len(EXPONENTIAL_SECONDS))
    total: float = 0.0
    count: int = 0

    def observe(self, value: float) -> None:
        for i, bound in enumerate(EXPONENTIAL_SECONDS):
            if value <= bound:
                self.buckets[i] += 1
        self.total += value
        self.count += 1


class MetricsRegistry:
    def __init__(self, namespace: str = "can_i_connect") -> None:
        self.namespace = namespace
        self._lock = threading.Lock()
        self._requests: Dict[LabelKey, int] = defaultdict(int)
        self._durations: Dict[LabelKey, _Histogram] = defaultdict(_Histogram)
        self._probes: Dict[LabelKey, int] = defaultdict(int)

    def record_request(self, method: str, path: str, status: int, latency_s: float) -> None:
        key: LabelKey = (("method", method), ("path", path), ("status", str(status)))
        with self._lock:
            self._requests[key] += 1
            self._durations[key].observe(latency_s)

    def probe_hook(self, name: str, payload: Dict[str, Any]) -> None:
        """Engine metrics hook; counts probes by type and outcome."""
        if name != "probe_checked":
            return
        key: LabelKey = (("type", str(payload.get("type"))), ("outcome", str(payload.get("outcome"))))
        with self._lock:
            self._probes[key] += 1

    def render(self) -> str:
        ns = self.namespace
        lines: List[str] = []
        with self._lock:
            lines.append(f"# HELP {ns}_http_requests_total Total HTTP requests handled.")
            lines.append(f"# TYPE {ns}_http_requests_total counter")
            for key, value in sorted(self._requests.items()):
                lines.append(f"{ns}_http_requests_total{_labels(key)} {value}")

            lines.append(f"# HELP {ns}_http_requests_duration_seconds HTTP request latency.")
            lines.append(f"# TYPE {ns}_http_requests_duration_seconds histogram")
            for key, hist in sorted(self._durations.items()):
                name = f"{ns}_http_requests_duration_seconds"
                for bound, count in zip(EXPONENTIAL_SECONDS, hist.buckets):
                    lines.append(f"{name}_bucket{_labels(key, le=f'{bound:g}')} {count}")
                lines.append(f"{name}_bucket{_labels(key, le='+Inf')} {hist.count}")
                lines.append(f"{name}_sum{_labels(key)} {hist.total:.6f}")
                lines.append(f"{name}_count{_labels(key)} {hist.count}")

            lines.append(f"# HELP {ns}_probes_total Connectivity probes by type and outcome.")
            lines.append(f"# TYPE {ns}_probes_total counter")
            for key, value in sorted(self._probes.items()):
                lines.append(f"{ns}_probes_total{_labels(key)} {value}")
        return "\n".join(lines) + "\n"
