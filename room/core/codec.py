"""
Plain-data encoding of terms, actions and results (YAML / JSON / HTTP).

Terms:
    "he"                                   pronoun
    {"called": "Peter"}                    proper name
    {"of_type": "door"}                    sub-type
    {"adj": "open"}                        adjective
    {"and": [t, ...]}                      conjunction (may be empty)
    {"on" | "lean_toward" | "in" | "out_of": t}
    {"opponent_of": t}
    {"has": t}, {"has_not": t}, {"key_to": t}
    {"was_by": {"verb": "kill", "agent": t}}
    {"did_to": {"verb": "kill", "patient": t}}

Actions:
    {"act": "gives_item", "subject": t, "args": [t, ...]}
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List

from .actions import Action, build_action
from .errors import TermDecodeError
from .goals import Expectation, PlanReport, PlanStep
from .room import Room, Verdict
from .terms import (
    PRONOUNS,
    Adj,
    Adjective,
    And,
    Called,
    DidTo,
    Has,
    HasNot,
    KeyTo,
    OfType,
    Placement,
    PlacementKind,
    Pronoun,
    Role,
    RoleKind,
    Term,
    WasBy,
)
from .verbs import Verb

_WRAPPERS: Dict[str, Callable[[Term], Term]] = {
    "has": Has,
    "has_not": HasNot,
    "key_to": KeyTo,
    "on": lambda t: Placement(PlacementKind.ON, t),
    "lean_toward": lambda t: Placement(PlacementKind.LEAN_TOWARD, t),
    "in": lambda t: Placement(PlacementKind.IN, t),
    "out_of": lambda t: Placement(PlacementKind.OUT_OF, t),
    "opponent_of": lambda t: Role(RoleKind.OPPONENT_OF, t),
}

_ACTION_KEYS = {"act", "subject", "args"}
_EXPECTATION_KEYS = {"subject", "is", "holds"}


def _verb(value: Any) -> Verb:
    try:
        return Verb(str(value))
    except ValueError:
        raise TermDecodeError(f"unknown verb {value!r}") from None


def term_from_data(data: Any) -> Term:
    if isinstance(data, Term):
        return data
    if isinstance(data, str):
        p = PRONOUNS.get(data.strip().lower())
        if p is None:
            raise TermDecodeError(f"unknown pronoun {data!r}; use {{called: ...}} or {{of_type: ...}} for names")
        return p
    if not isinstance(data, dict) or len(data) != 1:
        raise TermDecodeError(f"a term is a pronoun string or a single-key mapping, got {data!r}")

    (key, value), = data.items()
    if key in ("called", "of_type"):
        if not isinstance(value, str) or not value:
            raise TermDecodeError(f"'{key}' expects a non-empty string, got {value!r}")
        return Called(value) if key == "called" else OfType(value)
    if key == "adj":
        try:
            return Adj(Adjective(str(value)))
        except ValueError:
            raise TermDecodeError(f"unknown adjective {value!r}") from None
    if key == "and":
        if not isinstance(value, list):
            raise TermDecodeError("'and' expects a list of terms")
        return And(tuple(term_from_data(v) for v in value))
    if key in _WRAPPERS:
        return _WRAPPERS[key](term_from_data(value))
    if key == "was_by":
        if not isinstance(value, dict) or "verb" not in value or "agent" not in value:
            raise TermDecodeError("'was_by' expects {verb, agent}")
        return WasBy(_verb(value["verb"]), term_from_data(value["agent"]))
    if key == "did_to":
        if not isinstance(value, dict) or "verb" not in value or "patient" not in value:
            raise TermDecodeError("'did_to' expects {verb, patient}")
        return DidTo(_verb(value["verb"]), term_from_data(value["patient"]))
    raise TermDecodeError(f"unknown term kind {key!r}")


def term_to_data(term: Term) -> Any:
    if isinstance(term, Pronoun):
        return term.name
    if isinstance(term, Called):
        return {"called": term.name}
    if isinstance(term, OfType):
        return {"of_type": term.name}
    if isinstance(term, Adj):
        return {"adj": term.adjective.value}
    if isinstance(term, And):
        return {"and": [term_to_data(t) for t in term.items]}
    if isinstance(term, Placement):
        return {term.kind.value: term_to_data(term.target)}
    if isinstance(term, Role):
        return {term.kind.value: term_to_data(term.target)}
    if isinstance(term, Has):
        return {"has": term_to_data(term.target)}
    if isinstance(term, HasNot):
        return {"has_not": term_to_data(term.target)}
    if isinstance(term, KeyTo):
        return {"key_to": term_to_data(term.target)}
    if isinstance(term, WasBy):
        return {"was_by": {"verb": term.verb.value, "agent": term_to_data(term.agent)}}
    if isinstance(term, DidTo):
        return {"did_to": {"verb": term.verb.value, "patient": term_to_data(term.patient)}}
    raise TypeError(f"cannot encode {type(term).__name__}")


def room_from_data(objects: Any) -> Room:
    if not isinstance(objects, list):
        raise TermDecodeError("room objects must be a list of terms")
    return Room(term_from_data(o) for o in objects)


def room_to_data(room: Room) -> List[Any]:
    return [term_to_data(o) for o in room]


def action_from_data(data: Any) -> Action:
    if not isinstance(data, dict):
        raise TermDecodeError(f"an action is a mapping {{act, subject, args}}, got {data!r}")
    unknown = sorted(set(data) - _ACTION_KEYS, key=str)
    if unknown:
        raise TermDecodeError(f"unknown action keys {unknown}; an action has act, subject and args")
    name = data.get("act")
    if not isinstance(name, str):
        raise TermDecodeError("action is missing 'act'")
    if "subject" not in data:
        raise TermDecodeError(f"action '{name}' is missing 'subject'")
    args = data.get("args") or []
    if not isinstance(args, list):
        raise TermDecodeError(f"action '{name}': 'args' must be a list")
    return build_action(name, term_from_data(data["subject"]), *(term_from_data(a) for a in args))


def action_to_data(action: Action) -> Dict[str, Any]:
    return {
        "subject": term_to_data(action.subject),
        "verb": action.verb.value,
        "object": term_to_data(action.obj),
    }


def step_from_data(data: Any) -> PlanStep:
    expect = "ok"
    if isinstance(data, dict):
        expect = str(data.get("expect", "ok")).strip().lower()
    if expect not in ("ok", "rejected"):
        raise TermDecodeError(f"step 'expect' must be 'ok' or 'rejected', got {expect!r}")
    payload = {k: v for k, v in data.items() if k != "expect"} if isinstance(data, dict) else data
    return PlanStep(action=action_from_data(payload), expect_ok=(expect == "ok"))


def expectation_from_data(data: Any) -> Expectation:
    if not isinstance(data, dict) or "subject" not in data or "is" not in data:
        raise TermDecodeError(f"an expectation is a mapping {{subject, is, holds?}}, got {data!r}")
    unknown = sorted(set(data) - _EXPECTATION_KEYS, key=str)
    if unknown:
        raise TermDecodeError(f"unknown expectation keys {unknown}")
    holds = data.get("holds", True)
    if not isinstance(holds, bool):
        raise TermDecodeError("expectation 'holds' must be a boolean")
    return Expectation(term_from_data(data["subject"]), term_from_data(data["is"]), holds)


def verdict_to_data(verdict: Verdict) -> Dict[str, Any]:
    return {
        "ok": verdict.ok,
        "code": verdict.code.value,
        "message": verdict.message,
        "subject_index": verdict.subject_index,
        "object_index": verdict.object_index,
        "details": dict(verdict.details),
    }


def report_to_data(report: PlanReport) -> Dict[str, Any]:
    return {
        "ok": report.ok,
        "first_failure": report.first_failure,
        "steps": [
            {
                "index": s.index,
                "action": action_to_data(s.action),
                "expect_ok": s.expect_ok,
                "satisfied": s.satisfied,
                "verdict": verdict_to_data(s.verdict),
            }
            for s in report.steps
        ],
        "expectations": [
            {
                "subject": term_to_data(e.expectation.selector),
                "is": term_to_data(e.expectation.prop),
                "holds": e.expectation.holds,
                "satisfied": e.satisfied,
                "message": e.message,
            }
            for e in report.expectations
        ],
        "room": room_to_data(report.room) if report.room is not None else None,
    }
