"""
restaurant/models/enums.py

Restaurant enumerations
"""
from enum import Enum


class PaymentStatus(str, Enum):
    """Payment state, linear: Pending -> Authorized -> Captured -> Refunded"""
    PENDING = "Pending"
    AUTHORIZED = "Authorized"
    CAPTURED = "Captured"
    REFUNDED = "Refunded"


__all__ = ["PaymentStatus"]
