"""
Term language for objects in a room.

A room holds one term per object. Pronouns, names and sub-types pick out an
object; everything an object has become (dead, open, on the roof, opponent of
someone) is conjoined onto it with `And`. The same terms double as selectors:
`find` resolves a selector to the single object whose term matches it.

Matching is asymmetric:
    x.matches(And(a, b))   -> x matches a and x matches b
    And(a, b).matches(y)   -> a matches y or b matches y
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from .verbs import Verb


class Adjective(str, Enum):
    DEAD = "dead"
    MURDERER = "murderer"
    OPEN = "open"
    CLOSED = "closed"
    LOCKED = "locked"
    UNLOCKED = "unlocked"


class PlacementKind(str, Enum):
    ON = "on"
    LEAN_TOWARD = "lean_toward"
    IN = "in"
    OUT_OF = "out_of"


class RoleKind(str, Enum):
    OPPONENT_OF = "opponent_of"


class Term:
    """Base class of every term. Subclasses are frozen dataclasses."""

    def matches(self, other: "Term") -> bool:
        if isinstance(other, And):
            # Several criteria: all of them must hold.
            return all(self.matches(o) for o in other.items)
        if isinstance(self, And):
            return any(o.matches(other) for o in self.items)
        if type(self) is not type(other):
            return False
        return self._match_same(other)

    def _match_same(self, other: "Term") -> bool:
        raise NotImplementedError

    # ------------------------------------------------------------
    # Property updates (terms are immutable, a new term is returned)
    # ------------------------------------------------------------
    def with_property(self, prop: "Term") -> "Term":
        if self.matches(prop):
            return self
        return And((self, prop))

    def without(self, prop: "Term") -> "Term":
        return self

    def without_placement(self) -> "Term":
        return self

    # ------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------
    def is_(self, prop: Union["Term", Adjective]) -> bool:
        if isinstance(prop, Adjective):
            prop = Adj(prop)
        return self.matches(prop)

    def has(self, obj: "Term") -> bool:
        return self.matches(has(obj))

    def has_not(self, obj: "Term") -> bool:
        return self.matches(has_not(obj))

    def is_on(self, obj: "Term") -> bool:
        return self.matches(on(obj))

    def is_leaning_toward(self, obj: "Term") -> bool:
        return self.matches(lean_toward(obj))

    def is_in(self, obj: "Term") -> bool:
        return self.matches(in_(obj))

    def is_out_of(self, obj: "Term") -> bool:
        return self.matches(out_of(obj))

    def was_killed_by(self, obj: "Term") -> bool:
        return self.matches(killed_by(obj))

    def killed(self, obj: "Term") -> bool:
        return self.matches(killed(obj))

    def talked_to(self, obj: "Term") -> bool:
        return self.matches(DidTo(Verb.TALK, obj))

    def was_talked_to_by(self, obj: "Term") -> bool:
        return self.matches(WasBy(Verb.TALK, obj))

    def was_moved_by(self, obj: "Term") -> bool:
        return self.matches(WasBy(Verb.MOVE, obj))

    def moved(self, obj: "Term") -> bool:
        return self.matches(DidTo(Verb.MOVE, obj))

    def is_opponent_of(self, obj: "Term") -> bool:
        return self.matches(opponent_of(obj))

    def locked(self, obj: "Term") -> bool:
        return self.matches(DidTo(Verb.LOCK, obj))

    def closed(self, obj: "Term") -> bool:
        return self.matches(DidTo(Verb.CLOSE, obj))


@dataclass(frozen=True)
class Pronoun(Term):
    name: str

    def _match_same(self, other: "Pronoun") -> bool:
        return self.name == other.name

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class And(Term):
    items: Tuple[Term, ...]

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))

    def with_property(self, prop: Term) -> Term:
        if any(o.matches(prop) for o in self.items):
            return self
        return And(self.items + (prop,))

    def without(self, prop: Term) -> Term:
        return And(tuple(o for o in self.items if not prop.matches(o)))

    def without_placement(self) -> Term:
        return And(tuple(o for o in self.items if not isinstance(o, Placement)))

    def __str__(self) -> str:
        return "(" + " & ".join(str(o) for o in self.items) + ")"


@dataclass(frozen=True)
class Placement(Term):
    kind: PlacementKind
    target: Term

    def _match_same(self, other: "Placement") -> bool:
        return self.kind == other.kind and self.target.matches(other.target)

    def __str__(self) -> str:
        return f"{self.kind.value}({self.target})"


@dataclass(frozen=True)
class Role(Term):
    kind: RoleKind
    target: Term

    def _match_same(self, other: "Role") -> bool:
        return self.kind == other.kind and self.target.matches(other.target)

    def __str__(self) -> str:
        return f"{self.kind.value}({self.target})"


@dataclass(frozen=True)
class Has(Term):
    target: Term

    def _match_same(self, other: "Has") -> bool:
        return self.target.matches(other.target)

    def __str__(self) -> str:
        return f"has({self.target})"


@dataclass(frozen=True)
class HasNot(Term):
    target: Term

    def _match_same(self, other: "HasNot") -> bool:
        return self.target.matches(other.target)

    def __str__(self) -> str:
        return f"has_not({self.target})"


@dataclass(frozen=True)
class KeyTo(Term):
    target: Term

    def _match_same(self, other: "KeyTo") -> bool:
        return self.target.matches(other.target)

    def __str__(self) -> str:
        return f"key_to({self.target})"


@dataclass(frozen=True)
class Called(Term):
    name: str

    def _match_same(self, other: "Called") -> bool:
        return self.name == other.name

    def __str__(self) -> str:
        return f'called("{self.name}")'


@dataclass(frozen=True)
class OfType(Term):
    name: str

    def _match_same(self, other: "OfType") -> bool:
        return self.name == other.name

    def __str__(self) -> str:
        return f'of_type("{self.name}")'


@dataclass(frozen=True)
class Adj(Term):
    adjective: Adjective

    def _match_same(self, other: "Adj") -> bool:
        return self.adjective == other.adjective

    def __str__(self) -> str:
        return self.adjective.value


@dataclass(frozen=True)
class WasBy(Term):
    verb: Verb
    agent: Term

    def _match_same(self, other: "WasBy") -> bool:
        return self.verb == other.verb and self.agent.matches(other.agent)

    def __str__(self) -> str:
        return f"was_{self.verb.value}_by({self.agent})"


@dataclass(frozen=True)
class DidTo(Term):
    verb: Verb
    patient: Term

    def _match_same(self, other: "DidTo") -> bool:
        return self.verb == other.verb and self.patient.matches(other.patient)

    def __str__(self) -> str:
        return f"did_{self.verb.value}_to({self.patient})"


I = Pronoun("i")
YOU = Pronoun("you")
HE = Pronoun("he")
SHE = Pronoun("she")
IT = Pronoun("it")
THAT = Pronoun("that")

PRONOUNS = {p.name: p for p in (I, YOU, HE, SHE, IT, THAT)}

# Adjectives as terms.
DEAD = Adj(Adjective.DEAD)
MURDERER = Adj(Adjective.MURDERER)
OPEN = Adj(Adjective.OPEN)
CLOSED = Adj(Adjective.CLOSED)
LOCKED = Adj(Adjective.LOCKED)
UNLOCKED = Adj(Adjective.UNLOCKED)


def on(obj: Term) -> Placement:
    return Placement(PlacementKind.ON, obj)


def lean_toward(obj: Term) -> Placement:
    return Placement(PlacementKind.LEAN_TOWARD, obj)


def in_(obj: Term) -> Placement:
    return Placement(PlacementKind.IN, obj)


def out_of(obj: Term) -> Placement:
    return Placement(PlacementKind.OUT_OF, obj)


def opponent_of(obj: Term) -> Role:
    return Role(RoleKind.OPPONENT_OF, obj)


def has(obj: Term) -> Has:
    return Has(obj)


def has_not(obj: Term) -> HasNot:
    return HasNot(obj)


def called(name: str) -> Called:
    return Called(name)


def of_type(name: str) -> OfType:
    return OfType(name)


def key_to(obj: Term) -> KeyTo:
    return KeyTo(obj)


def killed_by(obj: Term) -> WasBy:
    return WasBy(Verb.KILL, obj)


def killed(obj: Term) -> DidTo:
    return DidTo(Verb.KILL, obj)


def all_of(*terms: Term) -> And:
    return And(terms)
