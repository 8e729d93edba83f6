"""
Tests for the Staff manager/subordinate hierarchy
"""
import pytest

from core.exceptions import InvalidOperationError
from restaurant.domain.staff import Staff
from restaurant.domain.table import Table


@pytest.fixture
def manager():
    return Staff("Maria Manager", "Manager")


@pytest.fixture
def other_manager():
    return Staff("Olaf Other", "Manager")


@pytest.fixture
def waiter():
    return Staff("Wiktor Waiter", "Waiter")


class TestSetManager:
    def test_both_sides_updated(self, manager, waiter):
        waiter.set_manager(manager)
        assert waiter.manager is manager
        assert waiter in manager.subordinates

    def test_idempotent(self, manager, waiter):
        waiter.set_manager(manager)
        waiter.set_manager(manager)
        assert manager.subordinates == (waiter,)

    def test_self_rejected(self, waiter):
        with pytest.raises(InvalidOperationError, match="own manager"):
            waiter.set_manager(waiter)
        assert waiter.manager is None

    def test_other_entity_as_manager_keeps_edge(self, manager, waiter):
        waiter.set_manager(manager)
        with pytest.raises(ValueError, match="Manager must be a Staff member, got Table"):
            waiter.set_manager(Table(1, 4))
        assert waiter.manager is manager
        assert manager.subordinates == (waiter,)

    def test_move_between_managers(self, manager, other_manager, waiter):
        waiter.set_manager(manager)
        waiter.set_manager(other_manager)
        assert waiter not in manager.subordinates
        assert waiter in other_manager.subordinates
        assert waiter.manager is other_manager

    def test_set_none_detaches(self, manager, waiter):
        waiter.set_manager(manager)
        waiter.set_manager(None)
        assert waiter.manager is None
        assert manager.subordinates == ()

    def test_remove_manager(self, manager, waiter):
        waiter.set_manager(manager)
        waiter.remove_manager()
        assert waiter.has_manager is False
        assert manager.subordinates == ()

    def test_remove_manager_when_none(self, waiter):
        waiter.remove_manager()
        assert waiter.manager is None


class TestSubordinates:
    def test_add_subordinate(self, manager, waiter):
        manager.add_subordinate(waiter)
        assert waiter.manager is manager

    def test_add_subordinate_twice(self, manager, waiter):
        manager.add_subordinate(waiter)
        manager.add_subordinate(waiter)
        assert manager.subordinates == (waiter,)

    def test_add_subordinate_steals_from_other_manager(self, manager, other_manager, waiter):
        manager.add_subordinate(waiter)
        other_manager.add_subordinate(waiter)
        assert manager.subordinates == ()
        assert other_manager.subordinates == (waiter,)

    def test_add_self_rejected(self, manager):
        with pytest.raises(InvalidOperationError, match="self"):
            manager.add_subordinate(manager)

    def test_remove_subordinate(self, manager, waiter):
        manager.add_subordinate(waiter)
        manager.remove_subordinate(waiter)
        assert waiter.manager is None
        assert manager.subordinates == ()

    def test_remove_non_subordinate_rejected(self, manager, other_manager, waiter):
        other_manager.add_subordinate(waiter)
        with pytest.raises(InvalidOperationError, match="not a subordinate"):
            manager.remove_subordinate(waiter)
        assert waiter.manager is other_manager

    def test_subordinates_view_is_read_only(self, manager, waiter):
        view = manager.subordinates
        manager.add_subordinate(waiter)
        assert view == ()

    def test_hierarchy_does_not_touch_extent(self, manager, waiter):
        manager.add_subordinate(waiter)
        manager.remove_subordinate(waiter)
        assert len(Staff.get_extent()) == 2
