"""
Process-lifetime request counters reported by the health endpoint.
"""

import threading
from typing import Any


class ServiceStats:
    """Monotonic counters, incremented once per successful response."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._stats = {
            "successful_analyses": 0,
            "hooked_requests": 0,
        }

    def record_analysis(self) -> None:
        with self._lock:
            self._stats["successful_analyses"] += 1

    def record_hooked_request(self) -> None:
        with self._lock:
            self._stats["hooked_requests"] += 1

    def get_stats(self) -> dict[str, Any]:
        with self._lock:
            return dict(self._stats)
