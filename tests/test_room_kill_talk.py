from room.core.actions import kills, talk_to
from room.core.room import Room
from room.core.terms import DEAD, HE, I, MURDERER, SHE, YOU, called, killed


def test_kill():
    he, she = 0, 1
    room = Room([HE, SHE])
    assert not room[she].matches(DEAD)
    assert not room[he].matches(MURDERER)

    room.act(kills(HE, SHE))
    assert room[she].matches(DEAD)
    assert room[he].matches(MURDERER)
    assert room[she].was_killed_by(HE)
    assert room[he].killed(SHE)


def test_refer_to_killer_by_deed():
    peter, john, sheila = 0, 1, 2
    room = Room([called("Peter"), called("John"), called("Sheila")])
    assert not room[peter].matches(DEAD)
    assert not room[peter].killed(called("John"))
    assert not room[john].was_killed_by(called("Peter"))
    assert not room[sheila].killed(killed(called("John")))

    room.act(kills(called("Peter"), called("John")))
    # "Sheila kills the one who killed John."
    room.act(kills(called("Sheila"), killed(called("John"))))

    assert room[peter].matches(DEAD)
    assert room[peter].killed(called("John"))
    assert room[peter].was_killed_by(called("Sheila"))
    assert room[john].matches(DEAD)
    assert room[john].was_killed_by(called("Peter"))
    assert not room[sheila].matches(DEAD)
    assert room[sheila].killed(killed(called("John")))


def test_talk():
    i, you = 0, 1
    room = Room([I, YOU])
    assert not room[i].talked_to(YOU)
    assert not room[you].was_talked_to_by(I)

    room.act(talk_to(I, YOU))
    assert room[i].talked_to(YOU)
    assert room[you].was_talked_to_by(I)
