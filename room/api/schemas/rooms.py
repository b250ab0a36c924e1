from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class FindRequest(BaseModel):
    objects: List[Any] = Field(description="Terms describing the objects of the room.")
    selector: Any


class CheckRequest(BaseModel):
    objects: List[Any]
    action: Dict[str, Any] = Field(description="{act, subject, args}")


class ActRequest(BaseModel):
    objects: List[Any]
    actions: List[Dict[str, Any]] = Field(default_factory=list)


class SimulateRequest(BaseModel):
    objects: List[Any]
    steps: List[Dict[str, Any]] = Field(default_factory=list, description="{act, subject, args, expect?}")
    expect: List[Dict[str, Any]] = Field(default_factory=list, description="{subject, is, holds?}")


class SpeechActModel(BaseModel):
    name: str
    params: List[str]
    placements: List[str] = Field(default_factory=list)


class SpeechActsResponse(BaseModel):
    speech_acts: List[SpeechActModel]


class ScenarioSummaryModel(BaseModel):
    name: str
    description: str | None = None
    objects: int
    steps: int
    expectations: int


class ScenarioListResponse(BaseModel):
    scenarios: List[ScenarioSummaryModel]
    directory: str
    meta: Dict[str, Any] = Field(default_factory=dict)
