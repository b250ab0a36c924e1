import pytest

from room.core.actions import closes, gives_item, locks, opens, picks_up, unlocks, walks_through
from room.core.errors import ActionRejected
from room.core.room import Room, VerdictCode
from room.core.terms import CLOSED, HE, I, LOCKED, OPEN, SHE, UNLOCKED, And, has_not, key_to, of_type

DOOR = of_type("door")
KEY = key_to(DOOR)


def test_open_close_walk_through():
    door = 0
    room = Room([DOOR, I])
    assert not room[door].matches(OPEN)
    assert not room[door].matches(CLOSED)

    room.act(opens(I, DOOR))
    assert room[door].matches(OPEN)
    assert not room[door].matches(CLOSED)

    room.act(closes(I, DOOR))
    assert room[door].matches(CLOSED)
    assert not room[door].matches(OPEN)

    # Can not walk through door because it is closed.
    with pytest.raises(ActionRejected) as exc:
        room.act(walks_through(I, DOOR))
    assert exc.value.verdict.code == VerdictCode.PREVENTED
    assert str(exc.value).startswith("prevented: ")

    room.act(opens(I, DOOR))
    room.act(walks_through(I, DOOR))


def test_locked_door_needs_key():
    door = 0
    room = Room([DOOR, I, KEY])
    room.act(closes(I, DOOR))
    room.act(locks(I, DOOR))
    assert room[door].matches(LOCKED)

    # Can not open door because it is locked.
    assert room.try_act(opens(I, DOOR)).code == VerdictCode.PREVENTED
    # Can not unlock door because I do not have the key.
    assert room.try_act(unlocks(I, DOOR)).code == VerdictCode.REQUIREMENT_UNMET

    room.act(picks_up(I, KEY))
    room.act(unlocks(I, DOOR))
    assert room[door].matches(UNLOCKED)
    assert not room[door].matches(LOCKED)
    room.act(opens(I, DOOR))


def test_cannot_give_what_one_does_not_have():
    room = Room([And((HE, has_not(KEY))), SHE, KEY])
    assert room.try_act(gives_item(HE, SHE, KEY)).code == VerdictCode.PREVENTED

    room.act(picks_up(HE, KEY))
    room.act(gives_item(HE, SHE, KEY))
    assert room[1].has(KEY)


def test_rejected_action_leaves_room_untouched():
    room = Room([DOOR, I])
    room.act(closes(I, DOOR))
    before = list(room.objects)
    assert not room.try_act(walks_through(I, DOOR)).ok
    assert room.objects == before
