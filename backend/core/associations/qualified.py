"""
core/associations/qualified.py

Qualified association - targets navigated by key rather than by membership
"""
from typing import Callable, Dict, Generic, Hashable, Iterator, Optional, TypeVar
import logging

from core.exceptions import InvalidOperationError

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")


class QualifiedAssociation(Generic[K, T]):
    """
    Mapping from qualifier to associated object, owned by one side.

    The key is derived from the target by ``key_of`` (e.g. a table's id), so
    the mapping can never hold a target under a key that disagrees with the
    target's own identifier. A key may appear at most once per owner,
    regardless of whether a second target with the same key is the same
    instance.

    Example:
        >>> tables = QualifiedAssociation("Reservation", "Table", key_of=lambda t: t.table_id)
        >>> tables.assign(table)
        >>> tables.get(table.table_id) is table
        True
    """

    __slots__ = ("_owner_name", "_target_name", "_key_of", "_entries")

    def __init__(self, owner_name: str, target_name: str, key_of: Callable[[T], K]):
        self._owner_name = owner_name
        self._target_name = target_name
        self._key_of = key_of
        self._entries: Dict[K, T] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[K]:
        return iter(list(self._entries))

    def assign(self, target: T) -> K:
        """
        Associate ``target`` under its key

        Returns:
            The key used

        Raises:
            ValueError: If target is None
            InvalidOperationError: If the key is already present
        """
        if target is None:
            raise ValueError(f"{self._target_name} cannot be None.")
        key = self._key_of(target)
        if key in self._entries:
            raise InvalidOperationError(
                f"{self._target_name} with key {key!r} is already assigned to this {self._owner_name}."
            )
        self._entries[key] = target
        logger.debug(f"{self._owner_name}: assigned {self._target_name} {key!r}")
        return key

    def unassign(self, key: K) -> T:
        """
        Remove the association for ``key``

        Returns:
            The target that was associated

        Raises:
            InvalidOperationError: If no entry exists for key
        """
        if key not in self._entries:
            raise InvalidOperationError(
                f"No {self._target_name} with key {key!r} is assigned to this {self._owner_name}."
            )
        target = self._entries.pop(key)
        logger.debug(f"{self._owner_name}: unassigned {self._target_name} {key!r}")
        return target

    def get(self, key: K) -> Optional[T]:
        """Return the target for ``key`` or None; never raises"""
        return self._entries.get(key)

    def as_dict(self) -> Dict[K, T]:
        """Read-only copy of the mapping"""
        return dict(self._entries)

    def clear(self) -> None:
        self._entries.clear()


__all__ = ["QualifiedAssociation"]
