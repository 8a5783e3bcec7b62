import pytest

from rational import Rational as R
from interval import Interval

half = R(1, 2)
third = R(1, 3)
two_thirds = R(2, 3)


def test_range_membership():
    assert half in third.range_to(two_thirds)
    assert R(3, 4) not in third.range_to(two_thirds)
    assert R(2, 6) in third.range_to(two_thirds)
    assert R(-4, -6) in third.range_to(two_thirds)


def test_open_ends():
    assert third not in Interval.open(third, two_thirds)
    assert two_thirds not in Interval.open(third, two_thirds)
    assert half in Interval.open(third, two_thirds)
    assert third not in Interval.left_open(third, two_thirds)
    assert two_thirds in Interval.left_open(third, two_thirds)
    assert third in Interval.right_open(third, two_thirds)
    assert two_thirds not in Interval.right_open(third, two_thirds)


def test_mixed_sign_end_points():
    assert R(1, -2) in Interval.closed(R(-1), R(0, -1))
    assert R(-1, -2) not in Interval.closed(R(-1), R(0))


def test_empty():
    assert Interval.empty().is_empty()
    assert R(0) not in Interval.empty()
    assert Interval.closed(two_thirds, third).is_empty()
    assert not Interval.point(half).is_empty()
    assert R(2, 4) in Interval.point(half)
    assert Interval.closed(two_thirds, third) == Interval.empty()


def test_equality():
    assert Interval.closed(R(2, 6), half) == Interval.closed(third, R(-1, -2))
    assert Interval.closed(third, half) != Interval.open(third, half)
    assert hash(Interval.closed(R(2, 6), half)) == hash(Interval.closed(third, half))


def test_integer_members():
    assert 0 in Interval.closed(R(-1), R(1))
    assert 1 in Interval.closed(R(-1), R(2, 2))
    assert 1 not in Interval.right_open(R(-1), R(1))
    assert -2 not in Interval.closed(R(-1), R(1))


def test_non_rational_members():
    assert 0.5 not in Interval.closed(R(-1), R(1))
    assert "0" not in Interval.closed(R(-1), R(1))
    assert None not in Interval.closed(R(-1), R(1))
    with pytest.raises(TypeError):
        Interval(0, 1)


def test_str():
    assert str(third.range_to(two_thirds)) == "[1/3, 2/3]"
    assert str(Interval.right_open(R(-2, 4), R(3))) == "[-1/2, 3)"
    assert third.range_to(two_thirds).left() == third
    assert third.range_to(two_thirds).right() == two_thirds
