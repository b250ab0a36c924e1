import pytest

from room.core.actions import gives_item, gives_to, moves
from room.core.errors import ActionRejected
from room.core.room import Room, VerdictCode
from room.core.terms import HE, IT, SHE, THAT, And, called, on


def test_move():
    it, that = 1, 2
    room = Room([HE, IT, THAT])
    room.act(moves(HE, IT, on(THAT)))
    assert room[it].is_on(THAT)
    assert not room[that].is_on(IT)

    room.act(moves(HE, THAT, on(IT)))
    assert room[that].is_on(IT)
    assert not room[it].is_on(THAT)


def test_cannot_move_itself():
    he, that = 0, 1
    room = Room([HE, THAT])
    with pytest.raises(ActionRejected) as exc:
        room.act(moves(HE, HE, on(THAT)))
    assert exc.value.verdict.code == VerdictCode.NOT_DISTINCT

    # Can move something on itself.
    room.act(moves(HE, THAT, on(HE)))
    assert room[that].is_on(HE)
    assert room[that].was_moved_by(HE)
    assert room[he].moved(THAT)


def test_give_back_and_forth():
    he, she = 0, 1
    room = Room([HE, SHE, IT])
    room.act(gives_item(HE, SHE, IT))
    assert room[she].has(IT)
    assert not room[he].has(IT)
    assert room[he].has_not(IT)

    room.act(gives_item(SHE, HE, IT))
    assert room[he].has(IT)
    assert not room[she].has(IT)


def test_give_between_named_people():
    she, peter = 0, 1
    room = Room([SHE, called("Peter"), IT])
    room.act(gives_item(SHE, called("Peter"), IT))
    assert room[peter].has(IT)
    assert not room[she].has(IT)

    room.act(gives_to(called("Peter"), IT, SHE))
    assert room[she].has(IT)
    assert not room[peter].has(IT)


def test_giver_receiver_and_item_are_distinct():
    room = Room([HE, IT])
    # Can not give something to the same object.
    assert not room.try_act(gives_item(HE, HE, IT)).ok
    # The same object that gives can not be given.
    assert not room.try_act(gives_item(HE, IT, HE)).ok
    assert room.objects == [HE, IT]


def test_names():
    room = Room([HE])
    room.objects[0] = room[0].with_property(called("Peter"))
    assert room[0].matches(And((HE, called("Peter"))))
