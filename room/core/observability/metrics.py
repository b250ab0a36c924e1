from __future__ import annotations

from collections import Counter
from typing import Dict

from prometheus_client import Counter as PromCounter

# Named counters (custom)
_NAMED = Counter()

_PROM_ACTIONS = PromCounter(
    "room_actions_total",
    "Speech-acts evaluated against a room",
    ["verb", "outcome"],
)


def reset_metrics() -> None:
    """
    Test helper: clears named counters to avoid cross-test leakage.
    Prometheus counters are process-global and are not reset.
    """
    _NAMED.clear()


def inc_named(name: str, value: int = 1) -> None:
    if not name:
        return
    _NAMED[name] += int(value)


def inc_action(verb: str, outcome: str) -> None:
    """
    Canonical action metric increment used by the room.
    outcome is "accepted" or the rejection code.
    """
    _NAMED["actions_total"] += 1
    _NAMED[f"actions_{outcome}"] += 1
    _PROM_ACTIONS.labels(verb=verb, outcome=outcome).inc()


def snapshot_named() -> Dict[str, int]:
    return dict(_NAMED)
