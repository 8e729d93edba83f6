"""
restaurant/domain/__init__.py

Restaurant domain entry point

The restaurant links are registered before any entity module loads, since
Menu and Order read their multiplicity floors from the relationship registry.
"""
from core.domain.relationships import relationship_registry
from restaurant.domain.relationships import register_restaurant_relationships

register_restaurant_relationships(relationship_registry)

from restaurant.domain.menu import MenuItem, Menu  # noqa: E402
from restaurant.domain.order import OrderItem, Order  # noqa: E402
from restaurant.domain.payment import Payment, PaymentStatus  # noqa: E402
from restaurant.domain.staff import Staff  # noqa: E402
from restaurant.domain.table import Table  # noqa: E402
from restaurant.domain.reservation import Reservation  # noqa: E402

__all__ = [
    "MenuItem",
    "Menu",
    "OrderItem",
    "Order",
    "Payment",
    "PaymentStatus",
    "Staff",
    "Table",
    "Reservation",
    "register_restaurant_relationships",
]
