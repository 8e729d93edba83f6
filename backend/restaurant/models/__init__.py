"""Restaurant persistence record schemas."""
from restaurant.models.enums import PaymentStatus
from restaurant.models.schemas import (
    OrderItemRecord,
    StaffRecord,
    TableRecord,
    ReservationRecord,
    PaymentRecord,
)

__all__ = [
    "PaymentStatus",
    "OrderItemRecord",
    "StaffRecord",
    "TableRecord",
    "ReservationRecord",
    "PaymentRecord",
]
