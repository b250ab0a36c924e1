from room.core.actions import (
    carries,
    climbs_into,
    climbs_out_of,
    climbs_to,
    leans_toward,
    picks_up,
    plays_against,
    puts_down,
    sleeps_in,
    stands_on,
    wakes_up_in,
)
from room.core.room import Room
from room.core.terms import I, YOU, And, called, has_not, of_type, on


def test_ladder():
    ladder, i = 0, 4
    room = Room([
        of_type("ladder"),
        of_type("roof"),
        of_type("ground"),
        of_type("wall"),
        And((I, has_not(of_type("ladder")))),
    ])
    room.act(carries(I, of_type("ladder")))
    assert not room[i].has_not(of_type("ladder"))
    assert room[i].has(of_type("ladder"))

    room.act(puts_down(I, of_type("ladder")))
    assert not room[i].has(of_type("ladder"))
    assert room[i].has_not(of_type("ladder"))

    room.act(stands_on(of_type("ladder"), of_type("ground")))
    assert room[ladder].is_on(of_type("ground"))
    room.act(leans_toward(of_type("ladder"), of_type("wall")))
    assert room[ladder].is_leaning_toward(of_type("wall"))

    room.act(climbs_to(I, of_type("ladder"), on(of_type("roof"))))
    assert room[i].is_on(of_type("roof"))

    room.act(picks_up(I, of_type("ladder")))
    assert not room[ladder].is_on(of_type("ground"))
    assert not room[ladder].is_leaning_toward(of_type("wall"))


def test_sleep():
    i = 1
    room = Room([of_type("bed"), I])
    room.act(sleeps_in(I, of_type("bed")))
    assert room[i].is_in(of_type("bed"))

    room.act(wakes_up_in(I, of_type("bed")))
    room.act(climbs_out_of(I, of_type("bed")))
    assert not room[i].is_in(of_type("bed"))
    assert room[i].is_out_of(of_type("bed"))

    room.act(climbs_into(I, of_type("bed")))
    assert not room[i].is_out_of(of_type("bed"))
    assert room[i].is_in(of_type("bed"))


def test_chess():
    i, you = 1, 2
    room = Room([And((called("chess"), of_type("game"))), I, YOU])
    room.act(plays_against(I, called("chess"), YOU))
    assert room[i].is_opponent_of(YOU)
    assert room[you].is_opponent_of(I)
