from __future__ import annotations

from typing import Any, Callable, TypeVar

from fastapi import APIRouter, HTTPException

from room.api.schemas.rooms import ActRequest, CheckRequest, FindRequest, SimulateRequest
from room.core.codec import (
    action_from_data,
    expectation_from_data,
    report_to_data,
    room_from_data,
    room_to_data,
    step_from_data,
    term_from_data,
    term_to_data,
    verdict_to_data,
)
from room.core.config import load_config
from room.core.errors import AmbiguousReferent, NoReferent, TermDecodeError
from room.core.goals import simulate
from room.core.room import Room

router = APIRouter(prefix="/api/v1/rooms", tags=["rooms"])

T = TypeVar("T")


def _decode(fn: Callable[..., T], *args: Any) -> T:
    try:
        return fn(*args)
    except TermDecodeError as e:
        raise HTTPException(status_code=400, detail=str(e))


def _room(objects: list) -> Room:
    cfg = load_config()
    if len(objects) > cfg.max_objects:
        raise HTTPException(
            status_code=400,
            detail=f"room has {len(objects)} objects; at most {cfg.max_objects} are allowed",
        )
    return _decode(room_from_data, objects)


def _check_steps(n: int) -> None:
    cfg = load_config()
    if n > cfg.max_steps:
        raise HTTPException(status_code=400, detail=f"{n} steps given; at most {cfg.max_steps} are allowed")


@router.post("/find")
def find(req: FindRequest):
    room = _room(req.objects)
    selector = _decode(term_from_data, req.selector)
    try:
        i = room.find(selector)
    except NoReferent as e:
        raise HTTPException(status_code=404, detail=str(e))
    except AmbiguousReferent as e:
        raise HTTPException(status_code=409, detail={"message": str(e), "candidates": e.candidates})
    return {"index": i, "object": term_to_data(room[i])}


@router.post("/check")
def check(req: CheckRequest):
    room = _room(req.objects)
    action = _decode(action_from_data, req.action)
    return verdict_to_data(room.check(action))


@router.post("/act")
def act(req: ActRequest):
    """Applies actions in order. Rejected actions are reported and skipped."""
    _check_steps(len(req.actions))
    room = _room(req.objects)
    actions = [_decode(action_from_data, a) for a in req.actions]

    verdicts = [room.try_act(a) for a in actions]
    return {
        "accepted": sum(1 for v in verdicts if v.ok),
        "rejected": sum(1 for v in verdicts if not v.ok),
        "verdicts": [verdict_to_data(v) for v in verdicts],
        "room": room_to_data(room),
    }


@router.post("/simulate")
def simulate_plan(req: SimulateRequest):
    _check_steps(len(req.steps))
    room = _room(req.objects)
    steps = [_decode(step_from_data, s) for s in req.steps]
    expectations = [_decode(expectation_from_data, x) for x in req.expect]
    return report_to_data(simulate(room, steps, expectations))
