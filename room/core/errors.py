from __future__ import annotations

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from .room import Verdict
    from .terms import Term


class RoomError(Exception):
    pass


class UnresolvedReference(RoomError):
    """A selector did not pick out exactly one object of the room."""

    def __init__(self, selector: "Term", candidates: List[int]):
        self.selector = selector
        self.candidates = list(candidates)
        super().__init__(self._describe())

    def _describe(self) -> str:
        return f"cannot resolve {self.selector}"


class NoReferent(UnresolvedReference):
    def _describe(self) -> str:
        return f"no object in the room matches {self.selector}"


class AmbiguousReferent(UnresolvedReference):
    def _describe(self) -> str:
        return f"{self.selector} matches several objects: {self.candidates}"


class ActionRejected(RoomError):
    def __init__(self, verdict: "Verdict"):
        self.verdict = verdict
        super().__init__(f"{verdict.code.value}: {verdict.message}")


class TermDecodeError(RoomError, ValueError):
    pass


class ScenarioError(RoomError):
    pass
