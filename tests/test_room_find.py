import pytest

from room.core.errors import AmbiguousReferent, NoReferent, UnresolvedReference
from room.core.room import Room
from room.core.terms import HE, IT, SHE, all_of, called, of_type


def test_find_unique_object():
    room = Room([HE, SHE, IT])
    assert room.find(SHE) == 1


def test_find_no_referent():
    room = Room([HE, IT])
    with pytest.raises(NoReferent) as exc:
        room.find(SHE)
    assert exc.value.candidates == []


def test_find_ambiguous_referent():
    room = Room([of_type("chair"), of_type("chair"), HE])
    with pytest.raises(AmbiguousReferent) as exc:
        room.find(of_type("chair"))
    assert exc.value.candidates == [0, 1]
    assert isinstance(exc.value, UnresolvedReference)


def test_extra_criteria_disambiguate():
    room = Room([all_of(HE, called("Peter")), all_of(HE, called("John"))])
    with pytest.raises(AmbiguousReferent):
        room.find(HE)
    assert room.find(all_of(HE, called("John"))) == 1


def test_copy_is_independent():
    room = Room([HE])
    other = room.copy()
    other.objects[0] = other.objects[0].with_property(called("Peter"))
    assert room[0] == HE
    assert len(other) == 1
