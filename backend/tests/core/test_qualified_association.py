"""
Tests for core.associations.qualified - keyed association
"""
import pytest

from core.associations import QualifiedAssociation
from core.exceptions import InvalidOperationError


class Seat:
    def __init__(self, seat_id):
        self.seat_id = seat_id


@pytest.fixture
def seats():
    return QualifiedAssociation("Booking", "Seat", key_of=lambda s: s.seat_id)


class TestQualifiedAssociation:
    def test_assign_and_get(self, seats):
        seat = Seat(3)
        assert seats.assign(seat) == 3
        assert seats.get(3) is seat
        assert 3 in seats
        assert len(seats) == 1

    def test_get_missing_returns_none(self, seats):
        assert seats.get(99) is None

    def test_duplicate_key_distinct_instances_rejected(self, seats):
        seats.assign(Seat(1))
        with pytest.raises(InvalidOperationError, match="already assigned"):
            seats.assign(Seat(1))

    def test_duplicate_key_same_instance_rejected(self, seats):
        seat = Seat(1)
        seats.assign(seat)
        with pytest.raises(InvalidOperationError):
            seats.assign(seat)

    def test_assign_none_rejected(self, seats):
        with pytest.raises(ValueError):
            seats.assign(None)

    def test_unassign(self, seats):
        seat = Seat(5)
        seats.assign(seat)
        assert seats.unassign(5) is seat
        assert seats.get(5) is None

    def test_unassign_missing_rejected(self, seats):
        with pytest.raises(InvalidOperationError, match="No Seat"):
            seats.unassign(42)

    def test_as_dict_is_a_copy(self, seats):
        seats.assign(Seat(1))
        view = seats.as_dict()
        view.clear()
        assert len(seats) == 1

    def test_iterates_keys(self, seats):
        seats.assign(Seat(2))
        seats.assign(Seat(1))
        assert list(seats) == [2, 1]
