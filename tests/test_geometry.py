import pytest

from abrigos.geometry import Person, Shelter


def test_contains_boundary_point():
    shelter = Shelter(5, 0, 0)
    assert shelter.contains(3, 4) is True
    assert shelter.contains(3, 5) is False


def test_contains_uses_centre():
    shelter = Shelter(2, 10, -10)
    assert shelter.contains(10, -10)
    assert shelter.contains(12, -10)
    assert not shelter.contains(0, 0)


def test_default_shelter_is_single_point():
    shelter = Shelter()
    assert (shelter.radius, shelter.x, shelter.y) == (0, 0, 0)
    assert shelter.contains(0, 0)
    assert not shelter.contains(1, 0)


def test_tangent_shelters_overlap():
    a = Shelter(1, 0, 0)
    b = Shelter(1, 2, 0)
    assert a.overlaps(b)


def test_distant_shelters_do_not_overlap():
    a = Shelter(1, 0, 0)
    b = Shelter(1, 3, 0)
    assert not a.overlaps(b)


@pytest.mark.parametrize(
    "a, b",
    [
        (Shelter(1, 0, 0), Shelter(2, 3, 0)),
        (Shelter(1, 0, 0), Shelter(1, 5, 5)),
        (Shelter(10, -3, 7), Shelter(0, 4, 4)),
    ],
)
def test_overlaps_is_symmetric(a, b):
    assert a.overlaps(b) == b.overlaps(a)


def test_person_is_inside_matches_contains():
    shelter = Shelter(3, 1, 1)
    for px, py in [(1, 1), (4, 1), (5, 1), (-2, 1), (3, 3)]:
        assert Person(px, py).is_inside(shelter) == shelter.contains(px, py)


def test_large_coordinates_do_not_overflow():
    big = 2_000_000_000
    shelter = Shelter(big, 0, 0)
    assert shelter.contains(big, 0)
    assert not shelter.contains(big, 1)