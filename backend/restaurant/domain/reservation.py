"""
restaurant/domain/reservation.py

Reservation - booking with a qualified association to Table (keyed by table id)
"""
from datetime import datetime
from typing import Any, Dict, Optional
from uuid import UUID, uuid4
import logging

from core.associations import QualifiedAssociation
from core.engine.extent import ExtentMember, ExtentRegistry
from core.ontology.base import BaseEntity
from restaurant.domain.table import Table
from restaurant.domain.validators import (
    int_in_range,
    optional_text,
    require_text,
    validate_phone_number,
)
from restaurant.models.schemas import ReservationRecord

logger = logging.getLogger(__name__)

MAX_CUSTOMER_NAME_LENGTH = 100
MAX_SPECIAL_REQUESTS_LENGTH = 500
MAX_PEOPLE = 20
LARGE_GROUP_THRESHOLD = 6


def _table_key(table: Table) -> int:
    return table.table_id


def one_year_after(moment: datetime) -> datetime:
    """Same wall-clock time one calendar year later (Feb 29 maps to Feb 28)"""
    try:
        return moment.replace(year=moment.year + 1)
    except ValueError:
        return moment.replace(year=moment.year + 1, day=28)


def validate_reservation_time(value: datetime) -> datetime:
    """
    Accept a time strictly after now and no more than one year ahead

    Naive values are compared with local time, aware values with the current
    time in their own zone.
    """
    if not isinstance(value, datetime):
        raise ValueError("Reservation time must be a datetime.")
    now = datetime.now(value.tzinfo)
    if value <= now:
        raise ValueError("Reservation time must be in the future.")
    if value > one_year_after(now):
        raise ValueError("Reservation time cannot be more than 1 year ahead.")
    return value


class Reservation(ExtentMember, BaseEntity):
    """
    A table booking.

    Attributes:
        id: Generated UUID
        customer_name: Trimmed, 1-100 characters
        people_count: 1-20
        phone_number: Nine-digit positive number
        reservation_time: Strictly in the future, at most one year ahead
        special_requests: Optional, up to 500 characters; blank becomes None
        is_large_group: Derived, people_count >= 6
        _tables: table id -> Table
    """

    __record_schema__ = ReservationRecord

    def __init__(
        self,
        customer_name: str,
        people_count: int,
        phone_number: int,
        reservation_time: datetime,
        special_requests: Optional[str] = None,
        registry: Optional[ExtentRegistry] = None,
    ):
        self._id = uuid4()
        self.customer_name = customer_name
        self.people_count = people_count
        self.phone_number = phone_number
        self.reservation_time = reservation_time
        self.special_requests = special_requests

        self._tables: QualifiedAssociation[int, Table] = QualifiedAssociation(
            "Reservation", "Table", key_of=_table_key
        )
        self._register(registry)

    # ============== Attributes ==============

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def customer_name(self) -> str:
        return self._customer_name

    @customer_name.setter
    def customer_name(self, value: str) -> None:
        self._customer_name = require_text(
            value,
            "Customer name cannot be empty.",
            max_length=MAX_CUSTOMER_NAME_LENGTH,
            too_long_message="Customer name is too long.",
        )

    @property
    def people_count(self) -> int:
        return self._people_count

    @people_count.setter
    def people_count(self, value: int) -> None:
        self._people_count = int_in_range(
            value, 1, MAX_PEOPLE,
            "People count must be at least 1.",
            "People count is too large for a single table.",
        )

    @property
    def phone_number(self) -> int:
        return self._phone_number

    @phone_number.setter
    def phone_number(self, value: int) -> None:
        self._phone_number = validate_phone_number(value)

    @property
    def reservation_time(self) -> datetime:
        return self._reservation_time

    @reservation_time.setter
    def reservation_time(self, value: datetime) -> None:
        self._reservation_time = validate_reservation_time(value)

    @property
    def special_requests(self) -> Optional[str]:
        return self._special_requests

    @special_requests.setter
    def special_requests(self, value: Optional[str]) -> None:
        self._special_requests = optional_text(
            value, MAX_SPECIAL_REQUESTS_LENGTH, "Special requests text is too long."
        )

    @property
    def is_large_group(self) -> bool:
        return self._people_count >= LARGE_GROUP_THRESHOLD

    # ============== Qualified association ==============

    @property
    def tables(self) -> Dict[int, Table]:
        return self._tables.as_dict()

    def assign_table(self, table: Table) -> None:
        """
        Raises:
            ValueError: If table is None
            InvalidOperationError: If a table with the same id is assigned
        """
        self._tables.assign(table)
        logger.debug(f"Reservation {self._id}: table {table.table_id} assigned")

    def unassign_table(self, table_id: int) -> Table:
        """
        Returns:
            The table that was assigned under table_id

        Raises:
            InvalidOperationError: If nothing is assigned under table_id
        """
        table = self._tables.unassign(table_id)
        logger.debug(f"Reservation {self._id}: table {table_id} unassigned")
        return table

    def get_table_by_id(self, table_id: int) -> Optional[Table]:
        return self._tables.get(table_id)

    # ============== Persistence ==============

    def to_record(self) -> ReservationRecord:
        return ReservationRecord(
            id=self._id,
            customer_name=self._customer_name,
            people_count=self._people_count,
            phone_number=self._phone_number,
            reservation_time=self._reservation_time,
            special_requests=self._special_requests,
        )

    @classmethod
    def from_record(cls, record: ReservationRecord, registry: Optional[ExtentRegistry] = None) -> "Reservation":
        """Restore scalar state; the time window is not re-checked"""
        reservation = cls.__new__(cls)
        reservation._id = record.id
        reservation.customer_name = record.customer_name
        reservation.people_count = record.people_count
        reservation.phone_number = record.phone_number
        reservation._reservation_time = record.reservation_time
        reservation.special_requests = record.special_requests
        reservation._tables = QualifiedAssociation(
            "Reservation", "Table", key_of=_table_key
        )
        reservation._bind(registry)
        return reservation

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": str(self._id),
            "customer_name": self._customer_name,
            "people_count": self._people_count,
            "phone_number": self._phone_number,
            "reservation_time": self._reservation_time.isoformat(),
            "special_requests": self._special_requests,
            "is_large_group": self.is_large_group,
            "table_ids": sorted(self._tables),
        }


__all__ = [
    "Reservation",
    "one_year_after",
    "validate_reservation_time",
    "LARGE_GROUP_THRESHOLD",
]
