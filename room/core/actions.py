"""
Speech-acts: verbs with preconditions and effects on a room.

Every builder returns an `Action` describing
  - decorate:          (selector, property) pairs added after the act
  - remove:            (selector, property) pairs dropped before decorating
  - remove_placement:  selectors whose placement is dropped
  - require:           (selector, property) pairs that must hold
  - prevent:           (selector, property) pairs that block the act
  - distinct:          selectors that must pick out different objects
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, FrozenSet, Tuple

from .errors import TermDecodeError
from .terms import (
    CLOSED,
    DEAD,
    LOCKED,
    MURDERER,
    OPEN,
    UNLOCKED,
    Placement,
    PlacementKind,
    Term,
    has,
    has_not,
    in_,
    key_to,
    lean_toward,
    on,
    opponent_of,
    out_of,
)
from .verbs import Verb

Pair = Tuple[Term, Term]


@dataclass(frozen=True)
class Action:
    subject: Term
    verb: Verb
    obj: Term
    decorate: Tuple[Pair, ...] = ()
    remove: Tuple[Pair, ...] = ()
    remove_placement: Tuple[Term, ...] = ()
    require: Tuple[Pair, ...] = ()
    prevent: Tuple[Pair, ...] = ()
    distinct: Tuple[Term, ...] = ()

    def __str__(self) -> str:
        return f"{self.subject} {self.verb.value} {self.obj}"


def moves(subject: Term, obj: Term, place: Placement) -> Action:
    """Moves object to some place."""
    remove: Tuple[Pair, ...] = ()
    if place.kind == PlacementKind.ON:
        # Whatever the object is put on can no longer be on the object.
        remove = ((place.target, on(obj)),)
    return Action(
        subject=subject, verb=Verb.MOVE, obj=obj,
        decorate=((obj, place),),
        remove=remove,
        remove_placement=(obj,),
        distinct=(subject, obj),
    )


def gives_item(subject: Term, to: Term, item: Term) -> Action:
    """
    Give an item to someone.

    The item is unique: the giver no longer has it afterwards.
    """
    return Action(
        subject=subject, verb=Verb.GIVE, obj=to,
        decorate=((subject, has_not(item)), (to, has(item))),
        remove=((subject, has(item)), (to, has_not(item))),
        remove_placement=(item,),
        prevent=((subject, has_not(item)),),
        distinct=(subject, to, item),
    )


def gives_to(subject: Term, item: Term, to: Term) -> Action:
    return gives_item(subject, to, item)


def kills(subject: Term, obj: Term) -> Action:
    return Action(
        subject=subject, verb=Verb.KILL, obj=obj,
        decorate=((subject, MURDERER), (obj, DEAD)),
    )


def talk_to(subject: Term, obj: Term) -> Action:
    return Action(subject=subject, verb=Verb.TALK, obj=obj)


def opens(subject: Term, obj: Term) -> Action:
    return Action(
        subject=subject, verb=Verb.OPEN, obj=obj,
        decorate=((obj, OPEN),),
        remove=((obj, CLOSED),),
        prevent=((obj, LOCKED),),
        distinct=(subject, obj),
    )


def closes(subject: Term, obj: Term) -> Action:
    return Action(
        subject=subject, verb=Verb.CLOSE, obj=obj,
        decorate=((obj, CLOSED),),
        remove=((obj, OPEN),),
        distinct=(subject, obj),
    )


def walks_through(subject: Term, obj: Term) -> Action:
    return Action(
        subject=subject, verb=Verb.WALK_THROUGH, obj=obj,
        prevent=((obj, CLOSED),),
        distinct=(subject, obj),
    )


def locks(subject: Term, obj: Term) -> Action:
    return Action(
        subject=subject, verb=Verb.LOCK, obj=obj,
        decorate=((obj, LOCKED), (obj, CLOSED)),
        remove=((obj, UNLOCKED),),
        distinct=(subject, obj),
    )


def unlocks(subject: Term, obj: Term) -> Action:
    """Unlocking requires the subject to have the key to the object."""
    return Action(
        subject=subject, verb=Verb.UNLOCK, obj=obj,
        decorate=((obj, UNLOCKED),),
        remove=((obj, LOCKED),),
        require=((subject, has(key_to(obj))),),
        distinct=(subject, obj),
    )


def picks_up(subject: Term, obj: Term) -> Action:
    return Action(
        subject=subject, verb=Verb.PICK_UP, obj=obj,
        decorate=((subject, has(obj)),),
        remove=((subject, has_not(obj)),),
        remove_placement=(obj,),
        distinct=(subject, obj),
    )


def climbs_to(subject: Term, obj: Term, place: Placement) -> Action:
    return Action(
        subject=subject, verb=Verb.CLIMB, obj=obj,
        decorate=((subject, place),),
        remove_placement=(subject,),
        distinct=(subject, obj, place),
    )


def climbs_out_of(subject: Term, obj: Term) -> Action:
    return climbs_to(subject, obj, out_of(obj))


def climbs_into(subject: Term, obj: Term) -> Action:
    return climbs_to(subject, obj, in_(obj))


def carries(subject: Term, obj: Term) -> Action:
    return Action(
        subject=subject, verb=Verb.CARRY, obj=obj,
        decorate=((subject, has(obj)),),
        remove=((subject, has_not(obj)),),
        remove_placement=(obj,),
        distinct=(subject, obj),
    )


def puts_down(subject: Term, obj: Term) -> Action:
    return Action(
        subject=subject, verb=Verb.PUT_DOWN, obj=obj,
        decorate=((subject, has_not(obj)),),
        remove=((subject, has(obj)),),
        distinct=(subject, obj),
    )


def stands_on(subject: Term, obj: Term) -> Action:
    return Action(
        subject=subject, verb=Verb.STAND_ON, obj=obj,
        decorate=((subject, on(obj)),),
        distinct=(subject, obj),
    )


def leans_toward(subject: Term, obj: Term) -> Action:
    return Action(
        subject=subject, verb=Verb.LEAN_TOWARD, obj=obj,
        decorate=((subject, lean_toward(obj)),),
        distinct=(subject, obj),
    )


def sleeps_in(subject: Term, obj: Term) -> Action:
    return Action(
        subject=subject, verb=Verb.SLEEP_IN, obj=obj,
        decorate=((subject, in_(obj)),),
        distinct=(subject, obj),
    )


def wakes_up_in(subject: Term, obj: Term) -> Action:
    return Action(
        subject=subject, verb=Verb.WAKE_UP_IN, obj=obj,
        decorate=((subject, in_(obj)),),
        distinct=(subject, obj),
    )


def plays_against(subject: Term, game: Term, opponent: Term) -> Action:
    return Action(
        subject=subject, verb=Verb.PLAY, obj=game,
        decorate=((subject, opponent_of(opponent)), (opponent, opponent_of(subject))),
        distinct=(subject, game, opponent),
    )


# ------------------------------------------------------------
# Registry used to build actions from plain data
# ------------------------------------------------------------
@dataclass(frozen=True)
class SpeechAct:
    name: str
    builder: Callable[..., Action]
    params: Tuple[str, ...]
    placements: FrozenSet[str] = field(default_factory=frozenset)

    def build(self, subject: Term, *args: Term) -> Action:
        if len(args) != len(self.params):
            raise TermDecodeError(
                f"{self.name} takes {len(self.params)} argument(s) {list(self.params)}, got {len(args)}"
            )
        for pname, arg in zip(self.params, args):
            if pname in self.placements and not isinstance(arg, Placement):
                raise TermDecodeError(f"{self.name}: argument '{pname}' must be a placement, got {arg}")
        return self.builder(subject, *args)


def _act(name: str, fn: Callable[..., Action], *params: str, placements: Tuple[str, ...] = ()) -> SpeechAct:
    return SpeechAct(name=name, builder=fn, params=tuple(params), placements=frozenset(placements))


BUILDERS: Dict[str, SpeechAct] = {
    sa.name: sa
    for sa in (
        _act("moves", moves, "object", "place", placements=("place",)),
        _act("gives_item", gives_item, "to", "item"),
        _act("gives_to", gives_to, "item", "to"),
        _act("kills", kills, "object"),
        _act("talk_to", talk_to, "object"),
        _act("opens", opens, "object"),
        _act("closes", closes, "object"),
        _act("walks_through", walks_through, "object"),
        _act("locks", locks, "object"),
        _act("unlocks", unlocks, "object"),
        _act("picks_up", picks_up, "object"),
        _act("climbs_to", climbs_to, "object", "place", placements=("place",)),
        _act("climbs_out_of", climbs_out_of, "object"),
        _act("climbs_into", climbs_into, "object"),
        _act("carries", carries, "object"),
        _act("puts_down", puts_down, "object"),
        _act("stands_on", stands_on, "object"),
        _act("leans_toward", leans_toward, "object"),
        _act("sleeps_in", sleeps_in, "object"),
        _act("wakes_up_in", wakes_up_in, "object"),
        _act("plays_against", plays_against, "game", "opponent"),
    )
}


def build_action(name: str, subject: Term, *args: Term) -> Action:
    sa = BUILDERS.get(name)
    if sa is None:
        raise TermDecodeError(f"unknown speech-act '{name}'")
    return sa.build(subject, *args)
