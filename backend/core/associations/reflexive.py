"""
core/associations/reflexive.py

Reflexive hierarchy - manager (0..1) / subordinates (0..*) between instances
of the same entity type
"""
from typing import Optional, Tuple
import logging

from core.associations.collection import AssociationSet
from core.exceptions import InvalidOperationError

logger = logging.getLogger(__name__)


class HierarchyMixin:
    """
    Manager/subordinate edge kept consistent from both ends.

    ``set_manager`` is the single place that rewrites an edge; every other
    operation is expressed through it. The invariant is that ``x.manager is m``
    holds exactly when ``x in m.subordinates``.

    Only self-management is rejected. Longer cycles (A manages B manages A)
    are not detected.

    Subclasses must call ``_init_hierarchy()`` from ``__init__``.
    """

    _manager: Optional["HierarchyMixin"]
    _subordinates: AssociationSet

    def _init_hierarchy(self) -> None:
        name = type(self).__name__
        self._manager = None
        self._subordinates = AssociationSet(name, "subordinate")

    # ============== Accessors ==============

    @property
    def manager(self) -> Optional["HierarchyMixin"]:
        return self._manager

    @property
    def has_manager(self) -> bool:
        return self._manager is not None

    @property
    def subordinates(self) -> Tuple["HierarchyMixin", ...]:
        return self._subordinates.snapshot()

    # ============== Edge updates ==============

    def set_manager(self, new_manager: Optional["HierarchyMixin"]) -> None:
        """
        Replace this member's manager

        Args:
            new_manager: The new manager, or None to detach

        Raises:
            ValueError: If new_manager is not a member of a hierarchy
            InvalidOperationError: If new_manager is this instance
        """
        if new_manager is not None and not isinstance(new_manager, HierarchyMixin):
            raise ValueError(
                f"Manager must be a {type(self).__name__} member, got {type(new_manager).__name__}."
            )
        if new_manager is self:
            raise InvalidOperationError(
                f"A {type(self).__name__} member cannot be their own manager."
            )

        if self._manager is new_manager:
            return

        old_manager = self._manager
        if old_manager is not None:
            old_manager._subordinates.discard(self)

        self._manager = new_manager

        if new_manager is not None:
            new_manager._subordinates.add(self)

        logger.debug(f"{self!r}: manager {old_manager!r} -> {new_manager!r}")

    def remove_manager(self) -> None:
        self.set_manager(None)

    def add_subordinate(self, subordinate: "HierarchyMixin") -> None:
        """
        Make ``subordinate`` report to this instance

        Raises:
            ValueError: If subordinate is None
            InvalidOperationError: If subordinate is this instance
        """
        if subordinate is None:
            raise ValueError("Subordinate cannot be None.")
        if not isinstance(subordinate, HierarchyMixin):
            raise ValueError(
                f"Subordinate must be a {type(self).__name__} member, got {type(subordinate).__name__}."
            )
        if subordinate is self:
            raise InvalidOperationError("Cannot add self as subordinate.")
        if subordinate._manager is self:
            return
        subordinate.set_manager(self)

    def remove_subordinate(self, subordinate: "HierarchyMixin") -> None:
        """
        Detach ``subordinate`` from this instance

        Raises:
            ValueError: If subordinate is None
            InvalidOperationError: If subordinate does not report here
        """
        if subordinate is None:
            raise ValueError("Subordinate cannot be None.")
        if subordinate not in self._subordinates:
            raise InvalidOperationError(
                f"This {type(self).__name__} member is not a subordinate."
            )
        subordinate.set_manager(None)


__all__ = ["HierarchyMixin"]
