import pytest

from pathgraph import Coordinate, Landmark
from pathgraph.utils.checks import invariant_checks


def test_coordinate_value_semantics():
    assert Coordinate(1, 2) == Coordinate(1.0, 2.0)
    assert hash(Coordinate(1, 2)) == hash(Coordinate(1.0, 2.0))
    assert str(Coordinate(1.5, 2)) == "(1.5,2.0)"


def test_negative_coordinate_fails_invariant_check():
    with pytest.raises(AssertionError):
        Coordinate(-1, 0)
    with invariant_checks(False):
        assert Coordinate(-1, 0).x == -1.0


def test_landmarks_identified_by_coordinate():
    cse = Landmark("CSE", "Allen Center", 10, 20)
    corner = Landmark.at(10, 20)

    assert cse == corner
    assert hash(cse) == hash(corner)
    assert len({cse, corner}) == 1
    assert Landmark("CSE", "Allen Center", 10, 21) != cse


def test_is_building():
    assert Landmark("CSE", "Allen Center", 1, 1).is_building
    assert not Landmark("CSE", None, 1, 1).is_building
    assert not Landmark.at(1, 1).is_building


def test_buildings_order_by_names():
    a = Landmark("AAA", "Zed Hall", 50, 50)
    b = Landmark("BBB", "Alpha Hall", 1, 1)
    b2 = Landmark("BBB", "Beta Hall", 0, 0)

    assert sorted([b2, b, a]) == [a, b, b2]
    assert a < b < b2
    assert b2 > b


def test_unnamed_landmarks_order_by_position():
    p1 = Landmark.at(1, 5)
    p2 = Landmark.at(1, 7)
    p3 = Landmark.at(2, 0)
    named = Landmark("AAA", "Zed Hall", 3, 0)

    assert sorted([p3, p2, p1]) == [p1, p2, p3]
    # mixed comparisons fall back to position
    assert p3 < named
    assert named >= p3


def test_str_is_coordinate():
    assert str(Landmark("CSE", "Allen Center", 1, 2)) == "(1.0,2.0)"
