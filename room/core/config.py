from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[2]


@dataclass(frozen=True)
class RoomConfig:
    env: str = "dev"
    log_level: str = "INFO"
    scenario_dir: Path = PROJECT_ROOT / "scenarios"

    # Request guardrails
    max_objects: int = 256
    max_steps: int = 1024


def _env_str(key: str, default: str) -> str:
    return (os.getenv(key) or default).strip()


def _env_int(key: str, default: int) -> int:
    try:
        return int(os.getenv(key, str(default)))
    except (TypeError, ValueError):
        return default


def load_config() -> RoomConfig:
    """Reads settings from the environment. Called per use so tests can monkeypatch env."""
    scenario_dir = _env_str("ROOM_SCENARIO_DIR", "")
    return RoomConfig(
        env=_env_str("ROOM_ENV", "dev").lower(),
        log_level=_env_str("ROOM_LOG_LEVEL", "INFO").upper(),
        scenario_dir=Path(scenario_dir) if scenario_dir else PROJECT_ROOT / "scenarios",
        max_objects=max(1, _env_int("ROOM_MAX_OBJECTS", 256)),
        max_steps=max(1, _env_int("ROOM_MAX_STEPS", 1024)),
    )
