"""
core/associations/collection.py

Multi-valued association end with identity semantics and a multiplicity floor
"""
from typing import Dict, Generic, Iterator, List, Tuple, TypeVar
import logging

from core.exceptions import InvalidOperationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AssociationSet(Generic[T]):
    """
    Identity-keyed collection of associated objects.

    Members are keyed by ``id()`` so two objects with equal attributes are
    still distinct members. Insertion order is kept for stable enumeration.

    The floor is the lower multiplicity bound (1 for "1..*"). It is checked
    on ``remove`` only: an owner may be built up from empty, but once
    populated it cannot be shrunk below the floor through normal removal.
    ``discard`` and ``clear`` bypass the floor and exist for cascade paths.

    Attributes:
        _owner_name: Name of the owning entity type, used in messages
        _member_name: Name of the member role, used in messages
        _floor: Minimum number of members kept by ``remove``
        _members: id(member) -> member
    """

    __slots__ = ("_owner_name", "_member_name", "_floor", "_members")

    def __init__(self, owner_name: str, member_name: str, floor: int = 0):
        if floor < 0:
            raise ValueError("floor cannot be negative")
        self._owner_name = owner_name
        self._member_name = member_name
        self._floor = floor
        self._members: Dict[int, T] = {}

    @property
    def floor(self) -> int:
        return self._floor

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._members.values()))

    def __contains__(self, member: object) -> bool:
        return self._members.get(id(member)) is member

    def snapshot(self) -> Tuple[T, ...]:
        """Read-only copy of the current members"""
        return tuple(self._members.values())

    def to_list(self) -> List[T]:
        return list(self._members.values())

    def add(self, member: T) -> None:
        """
        Add a member

        Raises:
            ValueError: If member is None
            InvalidOperationError: If member is already present
        """
        if member is None:
            raise ValueError(f"{self._member_name} cannot be None.")
        if member in self:
            raise InvalidOperationError(
                f"Duplicate {self._member_name} reference is not allowed."
            )
        self._members[id(member)] = member

    def remove(self, member: T) -> None:
        """
        Remove a member, keeping the multiplicity floor

        Raises:
            ValueError: If member is None
            InvalidOperationError: If member is absent, or removal would
                drop below the floor
        """
        self.check_removable(member)
        del self._members[id(member)]

    def check_removable(self, member: T) -> None:
        """
        Validate a ``remove`` without performing it

        Owners call this before touching the other side of the link so that
        a rejected removal leaves both sides untouched.
        """
        if member is None:
            raise ValueError(f"{self._member_name} cannot be None.")
        if member not in self:
            raise InvalidOperationError(
                f"Cannot remove {self._member_name} that is not associated with this {self._owner_name}."
            )
        if len(self._members) <= self._floor:
            raise InvalidOperationError(
                f"Cannot remove the last {self._member_name} "
                f"(minimum multiplicity {self._floor}..*)."
            )

    def discard(self, member: T) -> bool:
        """Remove a member if present, ignoring the floor"""
        return self._members.pop(id(member), None) is not None

    def clear(self) -> List[T]:
        """
        Remove every member, ignoring the floor

        Returns:
            The removed members in insertion order
        """
        removed = list(self._members.values())
        self._members.clear()
        if removed:
            logger.debug(
                f"Cleared {len(removed)} {self._member_name}(s) from {self._owner_name}"
            )
        return removed

    def __repr__(self) -> str:
        return f"AssociationSet({self._owner_name}->{self._member_name}, size={len(self)})"


__all__ = ["AssociationSet"]
