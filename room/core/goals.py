"""
Goal-failure detection.

A plan is a sequence of speech-acts, each with an expected outcome. Running a
plan on a copy of a room tells which goals fail (an act that was expected to
work is rejected, or an act that should be impossible goes through) and
whether the final room satisfies a set of expectations.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Union

from .actions import Action
from .errors import UnresolvedReference
from .room import Room, Verdict
from .terms import Term

log = logging.getLogger("room.engine")


@dataclass(frozen=True)
class PlanStep:
    action: Action
    expect_ok: bool = True


@dataclass(frozen=True)
class StepResult:
    index: int
    action: Action
    verdict: Verdict
    expect_ok: bool

    @property
    def satisfied(self) -> bool:
        return self.verdict.ok == self.expect_ok


@dataclass(frozen=True)
class Expectation:
    selector: Term
    prop: Term
    holds: bool = True

    def evaluate(self, room: Room) -> "ExpectationResult":
        try:
            i = room.find(self.selector)
        except UnresolvedReference as e:
            return ExpectationResult(self, False, str(e))
        actual = room[i].matches(self.prop)
        if actual == self.holds:
            return ExpectationResult(self, True, "")
        verb = "is not" if self.holds else "is"
        return ExpectationResult(self, False, f"{self.selector} {verb} {self.prop}")


@dataclass(frozen=True)
class ExpectationResult:
    expectation: Expectation
    satisfied: bool
    message: str


@dataclass
class PlanReport:
    steps: List[StepResult] = field(default_factory=list)
    expectations: List[ExpectationResult] = field(default_factory=list)
    room: Optional[Room] = None

    @property
    def first_failure(self) -> Optional[int]:
        for s in self.steps:
            if not s.satisfied:
                return s.index
        return None

    @property
    def ok(self) -> bool:
        return all(s.satisfied for s in self.steps) and all(e.satisfied for e in self.expectations)


def simulate(
    room: Room,
    steps: Sequence[Union[PlanStep, Action]],
    expectations: Iterable[Expectation] = (),
) -> PlanReport:
    """
    Runs steps against a copy of the room.

    Rejected acts leave the room as it was and the simulation continues, so a
    single report shows every goal that fails.
    """
    work = room.copy()
    report = PlanReport(room=work)

    for i, step in enumerate(steps):
        if isinstance(step, Action):
            step = PlanStep(step)
        verdict = work.try_act(step.action)
        result = StepResult(index=i, action=step.action, verdict=verdict, expect_ok=step.expect_ok)
        if not result.satisfied:
            log.info("goal failure at step %d: %s (%s)", i, step.action, verdict.code.value)
        report.steps.append(result)

    report.expectations = [e.evaluate(work) for e in expectations]
    return report
