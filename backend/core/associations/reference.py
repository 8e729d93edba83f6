"""
core/associations/reference.py

Single-valued (0..1) association end
"""
from typing import Generic, Optional, TypeVar

from core.exceptions import InvalidOperationError

T = TypeVar("T")


class Reference(Generic[T]):
    """
    A 0..1 link from one entity to another.

    The slot is never read as a bare None by callers: ``get()`` on an empty
    slot raises, so a missing link cannot be dereferenced by accident. Use
    ``is_set`` (or the owning entity's ``has_xxx`` property) to check first.

    Attributes:
        _owner_name: Name of the owning entity type, used in messages
        _target_name: Name of the referenced role, used in messages
        _target: The referenced object or None
    """

    __slots__ = ("_owner_name", "_target_name", "_target")

    def __init__(self, owner_name: str, target_name: str):
        self._owner_name = owner_name
        self._target_name = target_name
        self._target: Optional[T] = None

    @property
    def is_set(self) -> bool:
        return self._target is not None

    def get(self) -> T:
        """
        Get the referenced object

        Raises:
            InvalidOperationError: If nothing is referenced
        """
        if self._target is None:
            raise InvalidOperationError(
                f"{self._owner_name} is not associated with any {self._target_name}."
            )
        return self._target

    def get_or_none(self) -> Optional[T]:
        return self._target

    def points_to(self, target: object) -> bool:
        """True if this slot references exactly ``target``"""
        return self._target is not None and self._target is target

    def set(self, target: T) -> None:
        """
        Point the slot at ``target``

        Re-setting the same target is a no-op.

        Raises:
            ValueError: If target is None
            InvalidOperationError: If already pointing at a different object
        """
        if target is None:
            raise ValueError(f"{self._target_name} cannot be None.")
        if self._target is not None and self._target is not target:
            raise InvalidOperationError(
                f"{self._owner_name} cannot be associated with multiple {self._target_name}s."
            )
        self._target = target

    def clear(self, expected: T) -> None:
        """
        Clear the slot, checking it currently points at ``expected``

        Clearing an empty slot is a no-op.

        Raises:
            ValueError: If expected is None
            InvalidOperationError: If the slot points at a different object
        """
        if expected is None:
            raise ValueError(f"{self._target_name} cannot be None.")
        if self._target is None:
            return
        if self._target is not expected:
            raise InvalidOperationError(
                f"Inconsistent association: {self._target_name} mismatch on {self._owner_name}."
            )
        self._target = None

    def reset(self) -> None:
        """Drop the reference unconditionally"""
        self._target = None

    def __repr__(self) -> str:
        return f"Reference({self._owner_name}->{self._target_name}: {self._target!r})"


__all__ = ["Reference"]
