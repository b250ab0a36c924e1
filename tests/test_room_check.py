import logging

import pytest

from room.core.actions import Action, kills, opens, unlocks
from room.core.errors import ActionRejected
from room.core.observability.metrics import snapshot_named
from room.core.room import Room, VerdictCode
from room.core.terms import HE, I, IT, SHE, of_type
from room.core.verbs import Verb


def test_check_does_not_mutate():
    room = Room([of_type("door"), I])
    v = room.check(opens(I, of_type("door")))
    assert v.ok
    assert v.subject_index == 1
    assert v.object_index == 0
    assert room.objects == [of_type("door"), I]


def test_unresolved_subject_and_object():
    room = Room([HE, of_type("door")])
    assert room.check(opens(I, of_type("door"))).code == VerdictCode.SUBJECT_UNRESOLVED
    assert room.check(opens(HE, of_type("window"))).code == VerdictCode.OBJECT_UNRESOLVED


def test_ambiguous_subject_reports_candidates():
    room = Room([HE, HE, IT])
    v = room.check(kills(HE, IT))
    assert v.code == VerdictCode.SUBJECT_UNRESOLVED
    assert v.details["candidates"] == [0, 1]


def test_requirement_unmet_without_key():
    room = Room([of_type("door"), I])
    v = room.check(unlocks(I, of_type("door")))
    assert v.code == VerdictCode.REQUIREMENT_UNMET


def test_unresolvable_distinct_participants_are_skipped():
    room = Room([HE, SHE])
    action = Action(subject=HE, verb=Verb.TALK, obj=SHE, distinct=(HE, SHE, IT))
    assert room.check(action).ok


def test_act_records_deeds_on_both_sides():
    room = Room([HE, SHE])
    room.act(Action(subject=HE, verb=Verb.TALK, obj=SHE))
    assert room[0].talked_to(SHE)
    assert room[1].was_talked_to_by(HE)


def test_act_counts_and_logs_outcomes(caplog):
    room = Room([of_type("door"), I])
    room.act(opens(I, of_type("door")))
    with caplog.at_level(logging.INFO, logger="room.engine"):
        with pytest.raises(ActionRejected):
            room.act(opens(HE, of_type("door")))

    snap = snapshot_named()
    assert snap["actions_total"] == 2
    assert snap["actions_accepted"] == 1
    assert snap["actions_subject_unresolved"] == 1
    assert any("rejected" in r.message for r in caplog.records)
