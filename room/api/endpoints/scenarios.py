from __future__ import annotations

from fastapi import APIRouter, HTTPException

from room.api.schemas.rooms import ScenarioListResponse, ScenarioSummaryModel
from room.core.codec import report_to_data
from room.core.config import load_config
from room.core.errors import ScenarioError
from room.core.observability.metrics import inc_named
from room.core.scenario import load_scenarios, run_scenario

router = APIRouter(prefix="/api/v1/scenarios", tags=["scenarios"])


def _load():
    cfg = load_config()
    try:
        return cfg, load_scenarios(cfg.scenario_dir)
    except ScenarioError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.get("", response_model=ScenarioListResponse)
def list_scenarios():
    cfg, scenarios = _load()
    return ScenarioListResponse(
        directory=str(cfg.scenario_dir),
        scenarios=[
            ScenarioSummaryModel(
                name=s.name,
                description=(s.description or "").strip() or None,
                objects=len(s.room),
                steps=len(s.steps),
                expectations=len(s.expectations),
            )
            for s in scenarios
        ],
        meta={"count": len(scenarios)},
    )


@router.post("/{name}/run")
def run(name: str):
    _, scenarios = _load()
    for s in scenarios:
        if s.name == name:
            report = run_scenario(s)
            inc_named("scenarios_passed" if report.ok else "scenarios_failed")
            return {"name": s.name, **report_to_data(report)}
    raise HTTPException(status_code=404, detail="Scenario not found")
