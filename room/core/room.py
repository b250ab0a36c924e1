from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, List, Optional

from .actions import Action
from .errors import ActionRejected, AmbiguousReferent, NoReferent, UnresolvedReference
from .observability.metrics import inc_action
from .terms import DidTo, Term, WasBy

log = logging.getLogger("room.engine")


class VerdictCode(str, Enum):
    ACCEPTED = "accepted"
    SUBJECT_UNRESOLVED = "subject_unresolved"
    OBJECT_UNRESOLVED = "object_unresolved"
    NOT_DISTINCT = "not_distinct"
    REQUIREMENT_UNMET = "requirement_unmet"
    PREVENTED = "prevented"


@dataclass(frozen=True)
class Verdict:
    code: VerdictCode
    message: str
    subject_index: Optional[int] = None
    object_index: Optional[int] = None
    details: Dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.code == VerdictCode.ACCEPTED


def _reject(code: VerdictCode, message: str, **details: Any) -> Verdict:
    return Verdict(code=code, message=message, details=details)


class Room:
    """
    A finite, ordered set of objects.

    Objects are addressed by selectors, never by index: a selector must match
    exactly one object for an action to refer to it.
    """

    def __init__(self, objects: Iterable[Term] = ()):
        self.objects: List[Term] = list(objects)

    def __len__(self) -> int:
        return len(self.objects)

    def __getitem__(self, index: int) -> Term:
        return self.objects[index]

    def __iter__(self) -> Iterator[Term]:
        return iter(self.objects)

    def __repr__(self) -> str:
        return f"Room([{', '.join(str(o) for o in self.objects)}])"

    def copy(self) -> "Room":
        # Terms are immutable, a shallow copy is enough.
        return Room(self.objects)

    def find(self, selector: Term) -> int:
        """
        Finds the object matching the selector.

        Raises NoReferent if nothing matches and AmbiguousReferent if more
        than one object matches.
        """
        hits = [i for i, o in enumerate(self.objects) if o.matches(selector)]
        if len(hits) == 1:
            return hits[0]
        if not hits:
            raise NoReferent(selector, hits)
        raise AmbiguousReferent(selector, hits)

    def _resolve(self, selector: Term) -> Optional[int]:
        try:
            return self.find(selector)
        except UnresolvedReference:
            return None

    def check(self, action: Action) -> Verdict:
        """Evaluates the preconditions of an action without changing the room."""
        try:
            a = self.find(action.subject)
        except UnresolvedReference as e:
            return _reject(VerdictCode.SUBJECT_UNRESOLVED, str(e), candidates=e.candidates)
        try:
            b = self.find(action.obj)
        except UnresolvedReference as e:
            return _reject(VerdictCode.OBJECT_UNRESOLVED, str(e), candidates=e.candidates)

        # Participants that can be identified must be different objects.
        ids: List[int] = []
        for selector in action.distinct:
            i = self._resolve(selector)
            if i is None:
                continue
            if i in ids:
                return _reject(
                    VerdictCode.NOT_DISTINCT,
                    f"{selector} refers to the same object as another participant",
                    index=i,
                )
            ids.append(i)

        for selector, prop in action.require:
            i = self._resolve(selector)
            if i is None or not self.objects[i].matches(prop):
                return _reject(
                    VerdictCode.REQUIREMENT_UNMET,
                    f"requires {selector} to be {prop}",
                    selector=str(selector),
                    property=str(prop),
                )

        for selector, prop in action.prevent:
            i = self._resolve(selector)
            if i is not None and self.objects[i].matches(prop):
                return _reject(
                    VerdictCode.PREVENTED,
                    f"prevented because {selector} is {prop}",
                    selector=str(selector),
                    property=str(prop),
                )

        return Verdict(
            code=VerdictCode.ACCEPTED,
            message=str(action),
            subject_index=a,
            object_index=b,
        )

    def act(self, action: Action) -> Verdict:
        """
        Executes an action in the room.

        Raises ActionRejected when a precondition fails; the room is left
        untouched in that case.
        """
        verdict = self.check(action)
        if not verdict.ok:
            inc_action(action.verb.value, verdict.code.value)
            log.info("rejected %s: %s", action, verdict.message)
            raise ActionRejected(verdict)

        for selector, prop in action.remove:
            i = self._resolve(selector)
            if i is not None:
                self.objects[i] = self.objects[i].without(prop)
        for selector in action.remove_placement:
            i = self._resolve(selector)
            if i is not None:
                self.objects[i] = self.objects[i].without_placement()
        for selector, prop in action.decorate:
            i = self._resolve(selector)
            if i is not None:
                self.objects[i] = self.objects[i].with_property(prop)

        a, b = verdict.subject_index, verdict.object_index
        self.objects[a] = self.objects[a].with_property(DidTo(action.verb, action.obj))
        self.objects[b] = self.objects[b].with_property(WasBy(action.verb, action.subject))

        inc_action(action.verb.value, verdict.code.value)
        log.debug("accepted %s", action)
        return verdict

    def try_act(self, action: Action) -> Verdict:
        try:
            return self.act(action)
        except ActionRejected as e:
            return e.verdict
