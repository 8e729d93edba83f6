"""
restaurant/domain/staff.py

Staff - reflexive manager/subordinate hierarchy and a shared minimum wage
"""
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional
import logging

from core.associations import HierarchyMixin
from core.engine.extent import ExtentMember, ExtentRegistry, extent_registry
from core.ontology.base import BaseEntity
from restaurant.config import settings
from restaurant.domain.validators import Number, optional_text, require_text, to_money
from restaurant.models.schemas import StaffRecord

logger = logging.getLogger(__name__)

MINIMUM_WAGE_KEY = "staff.minimum_wage"


def _wage_registry(registry: Optional[ExtentRegistry]) -> ExtentRegistry:
    registry = registry if registry is not None else extent_registry
    if not registry.has_value(MINIMUM_WAGE_KEY):
        registry.register_default(MINIMUM_WAGE_KEY, settings.DEFAULT_MINIMUM_WAGE)
    return registry


class Staff(HierarchyMixin, ExtentMember, BaseEntity):
    """
    A member of staff.

    Each member has at most one manager and any number of subordinates; the
    two are views of the same edge (see HierarchyMixin).

    Attributes:
        full_name: Trimmed, non-empty
        role: Trimmed, non-empty
        email: Optional, must contain "@" when present
        spoken_languages: List of language names
    """

    __id_attribute__ = "full_name"
    __record_schema__ = StaffRecord

    def __init__(
        self,
        full_name: str,
        role: str,
        email: Optional[str] = None,
        spoken_languages: Optional[Iterable[str]] = None,
        registry: Optional[ExtentRegistry] = None,
    ):
        self.full_name = full_name
        self.role = role
        self.email = email
        self.spoken_languages = spoken_languages

        self._init_hierarchy()
        self._register(registry)

    # ============== Attributes ==============

    @property
    def full_name(self) -> str:
        return self._full_name

    @full_name.setter
    def full_name(self, value: str) -> None:
        self._full_name = require_text(value, "Name and surname cannot be empty.")

    @property
    def role(self) -> str:
        return self._role

    @role.setter
    def role(self, value: str) -> None:
        self._role = require_text(value, "Role cannot be empty.")

    @property
    def email(self) -> Optional[str]:
        return self._email

    @email.setter
    def email(self, value: Optional[str]) -> None:
        email = optional_text(value, 254, "Email is too long.")
        if email is not None and "@" not in email:
            raise ValueError("Enter an appropriate email.")
        self._email = email

    @property
    def spoken_languages(self) -> List[str]:
        return self._spoken_languages

    @spoken_languages.setter
    def spoken_languages(self, value: Optional[Iterable[str]]) -> None:
        self._spoken_languages = list(value) if value is not None else []

    # ============== Shared minimum wage ==============

    @classmethod
    def get_minimum_wage(cls, registry: Optional[ExtentRegistry] = None) -> Decimal:
        return _wage_registry(registry).get_value(MINIMUM_WAGE_KEY)

    @classmethod
    def set_minimum_wage(cls, value: Number, registry: Optional[ExtentRegistry] = None) -> None:
        """
        Raises:
            ValueError: If value is negative
        """
        wage = to_money(value, "Wage")
        if wage < 0:
            raise ValueError("Wage cannot be negative.")
        _wage_registry(registry).set_value(MINIMUM_WAGE_KEY, wage)
        logger.info(f"Staff minimum wage set to {wage}")

    @property
    def minimum_wage(self) -> Decimal:
        """The shared value, as seen from this member's registry"""
        return self.get_minimum_wage(self._registry)

    # ============== Persistence ==============

    def to_record(self) -> StaffRecord:
        return StaffRecord(
            full_name=self._full_name,
            role=self._role,
            email=self._email,
            spoken_languages=list(self._spoken_languages),
        )

    @classmethod
    def from_record(cls, record: StaffRecord, registry: Optional[ExtentRegistry] = None) -> "Staff":
        member = cls.__new__(cls)
        member.full_name = record.full_name
        member.role = record.role
        member.email = record.email
        member.spoken_languages = record.spoken_languages
        member._init_hierarchy()
        member._bind(registry)
        return member

    def to_dict(self) -> Dict[str, Any]:
        return {
            "full_name": self._full_name,
            "role": self._role,
            "email": self._email,
            "spoken_languages": list(self._spoken_languages),
            "manager": self._manager.full_name if self._manager is not None else None,
            "subordinates": [s.full_name for s in self._subordinates],
        }


__all__ = ["Staff", "MINIMUM_WAGE_KEY"]
