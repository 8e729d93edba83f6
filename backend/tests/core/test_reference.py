"""
Tests for core.associations.reference - 0..1 link slot
"""
import pytest

from core.associations import Reference
from core.exceptions import InvalidOperationError


class Target:
    pass


@pytest.fixture
def slot():
    return Reference("OrderItem", "Order")


class TestReference:
    def test_starts_empty(self, slot):
        assert slot.is_set is False
        assert slot.get_or_none() is None

    def test_get_when_empty_raises(self, slot):
        with pytest.raises(InvalidOperationError, match="not associated with any Order"):
            slot.get()

    def test_set_and_get(self, slot):
        target = Target()
        slot.set(target)
        assert slot.is_set is True
        assert slot.get() is target
        assert slot.points_to(target)

    def test_set_same_target_is_noop(self, slot):
        target = Target()
        slot.set(target)
        slot.set(target)
        assert slot.get() is target

    def test_set_different_target_raises(self, slot):
        slot.set(Target())
        with pytest.raises(InvalidOperationError):
            slot.set(Target())

    def test_set_none_raises(self, slot):
        with pytest.raises(ValueError):
            slot.set(None)

    def test_clear_with_expected_target(self, slot):
        target = Target()
        slot.set(target)
        slot.clear(target)
        assert slot.is_set is False

    def test_clear_mismatch_raises_and_keeps_target(self, slot):
        target = Target()
        slot.set(target)
        with pytest.raises(InvalidOperationError, match="mismatch"):
            slot.clear(Target())
        assert slot.get() is target

    def test_clear_empty_is_noop(self, slot):
        slot.clear(Target())
        assert slot.is_set is False

    def test_points_to_uses_identity(self, slot):
        slot.set(Target())
        assert slot.points_to(Target()) is False

    def test_reset(self, slot):
        slot.set(Target())
        slot.reset()
        assert slot.is_set is False
