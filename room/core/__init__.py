from .verbs import Verb
from .terms import (
    CLOSED,
    DEAD,
    HE,
    I,
    IT,
    LOCKED,
    MURDERER,
    OPEN,
    SHE,
    THAT,
    UNLOCKED,
    YOU,
    Adjective,
    And,
    Term,
    all_of,
    called,
    has,
    has_not,
    in_,
    key_to,
    killed,
    killed_by,
    lean_toward,
    of_type,
    on,
    opponent_of,
    out_of,
)
from .actions import BUILDERS, Action, build_action
from .errors import (
    ActionRejected,
    AmbiguousReferent,
    NoReferent,
    RoomError,
    ScenarioError,
    TermDecodeError,
    UnresolvedReference,
)
from .room import Room, Verdict, VerdictCode
from .goals import Expectation, PlanReport, PlanStep, simulate
