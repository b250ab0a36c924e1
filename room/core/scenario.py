"""
Scenario files.

A scenario is a room, a plan and the expectations that must hold at the end:

    name: door
    description: A locked door needs its key.
    objects: [{of_type: door}, i, {key_to: {of_type: door}}]
    steps:
      - {act: closes, subject: i, args: [{of_type: door}]}
      - {act: locks, subject: i, args: [{of_type: door}]}
      - {act: opens, subject: i, args: [{of_type: door}], expect: rejected}
    expect:
      - {subject: {of_type: door}, is: {adj: locked}}
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .codec import expectation_from_data, room_from_data, step_from_data
from .errors import ScenarioError, TermDecodeError
from .goals import Expectation, PlanReport, PlanStep, simulate
from .room import Room

log = logging.getLogger("room.scenario")

SCENARIO_SUFFIXES = (".yaml", ".yml")

_BOOL_TAG = "tag:yaml.org,2002:bool"


class ScenarioLoader(yaml.SafeLoader):
    """SafeLoader with YAML 1.2 booleans, so `on`, `off`, `yes` and `no` stay strings."""


ScenarioLoader.yaml_implicit_resolvers = {
    first: [(tag, rx) for tag, rx in resolvers if tag != _BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
ScenarioLoader.add_implicit_resolver(
    _BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = None
    description: Optional[str] = None
    objects: List[Any] = Field(default_factory=list)
    steps: List[Any] = Field(default_factory=list)
    expect: List[Any] = Field(default_factory=list)


@dataclass
class Scenario:
    name: str
    room: Room
    steps: List[PlanStep] = field(default_factory=list)
    expectations: List[Expectation] = field(default_factory=list)
    description: Optional[str] = None
    path: Optional[Path] = None


def scenario_from_data(data: Any, *, default_name: str = "scenario", path: Optional[Path] = None) -> Scenario:
    if not isinstance(data, dict):
        raise ScenarioError(f"{path or default_name}: scenario must be a mapping")
    try:
        model = ScenarioModel(**data)
    except ValidationError as e:
        raise ScenarioError(f"{path or default_name}: {e}") from e

    name = model.name or default_name
    try:
        return Scenario(
            name=name,
            description=model.description,
            room=room_from_data(model.objects),
            steps=[step_from_data(s) for s in model.steps],
            expectations=[expectation_from_data(x) for x in model.expect],
            path=path,
        )
    except TermDecodeError as e:
        raise ScenarioError(f"{name}: {e}") from e


def load_scenario(path: Path) -> Scenario:
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ScenarioError(f"cannot read scenario {path}: {e}") from e
    try:
        data = yaml.load(raw, Loader=ScenarioLoader)
    except yaml.YAMLError as e:
        raise ScenarioError(f"{path}: invalid YAML: {e}") from e
    return scenario_from_data(data, default_name=path.stem, path=path)


def load_scenarios(directory: Path) -> List[Scenario]:
    directory = Path(directory)
    if not directory.is_dir():
        log.warning("Scenario directory %s does not exist", directory)
        return []
    files = sorted(p for p in directory.iterdir() if p.suffix in SCENARIO_SUFFIXES)
    scenarios = [load_scenario(p) for p in files]
    log.info("Loaded %d scenarios from %s", len(scenarios), directory)
    return scenarios


def run_scenario(scenario: Scenario) -> PlanReport:
    report = simulate(scenario.room, scenario.steps, scenario.expectations)
    if not report.ok:
        log.warning("scenario %s failed (first failing step: %s)", scenario.name, report.first_failure)
    return report
