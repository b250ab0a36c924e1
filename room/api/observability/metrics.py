from __future__ import annotations

import re
from collections import Counter
from typing import Dict, Optional

from prometheus_client import Counter as PromCounter, Histogram

# Requests counters (HTTP-level)
_REQUESTS = Counter()


def normalize_path(path: str) -> str:
    """Reduce high-cardinality paths for metrics labels."""
    p = path or "/"

    # ints
    p = re.sub(r"/\d+", "/:id", p)
    # Scenario names
    p = re.sub(r"^(/api/v1/scenarios)/[^/]+/run$", r"\1/:name/run", p)

    return p


HTTP_REQUESTS_TOTAL = PromCounter(
    "room_http_requests_total",
    "Total HTTP requests",
    ["method", "path", "status"],
)

HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "room_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "path"],
)


def reset_requests() -> None:
    _REQUESTS.clear()


def inc_http(method: str, path: str, status: Optional[int] = None) -> None:
    """
    Canonical HTTP metric increment used by middleware.
    """
    m = (method or "UNKNOWN").upper()
    p = normalize_path(path)
    s = status if status is not None else "unknown"

    _REQUESTS["requests_total"] += 1
    _REQUESTS[f"requests_{m}"] += 1
    _REQUESTS[f"path_{p}|{s}"] += 1
    HTTP_REQUESTS_TOTAL.labels(method=m, path=p, status=str(s)).inc()


def snapshot_requests() -> Dict[str, int]:
    return dict(_REQUESTS)
