from pathlib import Path

from room.core.config import PROJECT_ROOT, load_config


def test_defaults(monkeypatch):
    for key in ("ROOM_ENV", "ROOM_LOG_LEVEL", "ROOM_SCENARIO_DIR", "ROOM_MAX_OBJECTS", "ROOM_MAX_STEPS"):
        monkeypatch.delenv(key, raising=False)
    cfg = load_config()
    assert cfg.env == "dev"
    assert cfg.log_level == "INFO"
    assert cfg.scenario_dir == PROJECT_ROOT / "scenarios"
    assert cfg.max_objects == 256
    assert cfg.max_steps == 1024


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("ROOM_ENV", "PROD")
    monkeypatch.setenv("ROOM_LOG_LEVEL", "debug")
    monkeypatch.setenv("ROOM_SCENARIO_DIR", str(tmp_path))
    monkeypatch.setenv("ROOM_MAX_OBJECTS", "8")
    cfg = load_config()
    assert cfg.env == "prod"
    assert cfg.log_level == "DEBUG"
    assert cfg.scenario_dir == Path(tmp_path)
    assert cfg.max_objects == 8


def test_invalid_numbers_fall_back(monkeypatch):
    monkeypatch.setenv("ROOM_MAX_OBJECTS", "many")
    monkeypatch.setenv("ROOM_MAX_STEPS", "0")
    cfg = load_config()
    assert cfg.max_objects == 256
    assert cfg.max_steps == 1
