"""
restaurant/domain/table.py

Table - seating unit; table ids are unique within the extent
"""
from typing import Any, Dict, Optional
import logging

from core.engine.extent import ExtentMember, ExtentRegistry
from core.exceptions import InvalidOperationError
from core.ontology.base import BaseEntity
from restaurant.domain.validators import int_in_range, positive_int
from restaurant.models.schemas import TableRecord

logger = logging.getLogger(__name__)

MIN_CAPACITY = 1
MAX_CAPACITY = 20


class Table(ExtentMember, BaseEntity):
    """
    A restaurant table.

    Tables carry no back-reference to the reservations they are assigned to.

    Attributes:
        table_id: Positive identifier, unique within the extent
        capacity: Seats, 1-20
        is_occupied: Occupancy flag
    """

    __id_attribute__ = "table_id"
    __extent_unique__ = "table_id"
    __record_schema__ = TableRecord

    def __init__(self, table_id: int, capacity: int, registry: Optional[ExtentRegistry] = None):
        """
        Raises:
            ValueError: On a non-positive id or capacity outside 1-20
            InvalidOperationError: If the id is already used in the extent
        """
        self.table_id = positive_int(table_id, "Table ID must be a positive number.")
        self.capacity = capacity
        self._is_occupied = False

        self._register(registry)

    @property
    def capacity(self) -> int:
        return self._capacity

    @capacity.setter
    def capacity(self, value: int) -> None:
        self._capacity = int_in_range(
            value, MIN_CAPACITY, MAX_CAPACITY,
            "Capacity must be at least 1.",
            "Capacity cannot exceed 20.",
        )

    @property
    def is_occupied(self) -> bool:
        return self._is_occupied

    def mark_occupied(self) -> None:
        if self._is_occupied:
            raise InvalidOperationError("Table is already occupied.")
        self._is_occupied = True
        logger.debug(f"Table {self.table_id} occupied")

    def mark_free(self) -> None:
        if not self._is_occupied:
            raise InvalidOperationError("Table is already free.")
        self._is_occupied = False
        logger.debug(f"Table {self.table_id} freed")

    # ============== Persistence ==============

    def to_record(self) -> TableRecord:
        return TableRecord(
            table_id=self.table_id,
            capacity=self._capacity,
            is_occupied=self._is_occupied,
        )

    @classmethod
    def from_record(cls, record: TableRecord, registry: Optional[ExtentRegistry] = None) -> "Table":
        table = cls.__new__(cls)
        table.table_id = positive_int(record.table_id, "Table ID must be a positive number.")
        table.capacity = record.capacity
        table._is_occupied = record.is_occupied
        table._bind(registry)
        return table

    def to_dict(self) -> Dict[str, Any]:
        return {
            "table_id": self.table_id,
            "capacity": self._capacity,
            "is_occupied": self._is_occupied,
        }


__all__ = ["Table", "MIN_CAPACITY", "MAX_CAPACITY"]
