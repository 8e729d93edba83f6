"""
Restaurant Pydantic schemas for extent persistence.

Each record holds only the scalar attributes of one entity. Association
ends (menu, order, menu item, manager, subordinates, assigned tables,
payment gateway) have no field here and are never persisted.
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional, List
from uuid import UUID
from pydantic import BaseModel, Field

from restaurant.models.enums import PaymentStatus


# ============== Order item ==============

class OrderItemRecord(BaseModel):
    quantity: int = Field(..., gt=0)
    unit_price: Decimal = Field(..., ge=0)


# ============== Staff ==============

class StaffRecord(BaseModel):
    full_name: str = Field(..., min_length=1)
    role: str = Field(..., min_length=1)
    email: Optional[str] = None
    spoken_languages: List[str] = Field(default_factory=list)


# ============== Table ==============

class TableRecord(BaseModel):
    table_id: int = Field(..., gt=0)
    capacity: int = Field(..., ge=1, le=20)
    is_occupied: bool = False


# ============== Reservation ==============

class ReservationRecord(BaseModel):
    id: UUID
    customer_name: str = Field(..., min_length=1, max_length=100)
    people_count: int = Field(..., ge=1, le=20)
    phone_number: int = Field(..., ge=100_000_000, le=999_999_999)
    reservation_time: datetime
    special_requests: Optional[str] = Field(None, max_length=500)


# ============== Payment ==============

class PaymentRecord(BaseModel):
    payment_id: str = Field(..., min_length=1)
    amount: Decimal = Field(..., gt=0)
    status: PaymentStatus = PaymentStatus.PENDING
    method: str = Field(..., min_length=1)
    payment_time: datetime
    refund_time: Optional[datetime] = None
