from __future__ import annotations

from fastapi import APIRouter
from starlette.responses import JSONResponse

from room.core.config import load_config
from room.core.observability.metrics import inc_named

router = APIRouter()


@router.get("/api/v1/health/live")
def liveness():
    inc_named("health_live")
    return {"status": "alive"}


@router.get("/api/v1/health/ready")
def readiness():
    """
    Readiness reflects ability to serve traffic.
    Outside prod a missing scenario directory is reported but not fatal.
    """
    inc_named("health_ready")

    cfg = load_config()
    problems: list[str] = []
    warnings: list[str] = []

    if not cfg.scenario_dir.is_dir():
        msg = f"missing_scenario_dir:{cfg.scenario_dir}"
        if cfg.env == "prod":
            problems.append(msg)
        else:
            warnings.append(msg)

    if problems:
        return JSONResponse(
            status_code=503,
            content={"status": "not_ready", "problems": problems},
        )

    return {"status": "ready", "warnings": warnings}
