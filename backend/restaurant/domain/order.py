"""
restaurant/domain/order.py

Order and OrderItem - composition plus a simple association

An Order exclusively owns its OrderItems. Each OrderItem is created inside
``Order.add_item`` and can never move to another order. Independently of the
composition, each OrderItem references the MenuItem it was ordered from.
"""
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional, Tuple, TYPE_CHECKING
import logging

from core.associations import AssociationSet, Reference
from core.domain.relationships import RelationshipRegistry
from core.engine.extent import ExtentMember, ExtentRegistry
from core.ontology.base import BaseEntity
from restaurant.domain.validators import Number, non_negative_money, positive_int, require_text
from restaurant.models.schemas import OrderItemRecord

if TYPE_CHECKING:
    from restaurant.domain.menu import MenuItem

logger = logging.getLogger(__name__)


# ============== OrderItem ==============

class OrderItem(ExtentMember, BaseEntity):
    """
    One line of an order.

    Constructible on its own so that stored extents can be reloaded; such an
    item has neither an order nor a menu item until attached by an Order.

    Attributes:
        quantity: Positive number of units
        unit_price: Non-negative price per unit
        line_total: Derived, quantity * unit_price
    """

    __record_schema__ = OrderItemRecord

    def __init__(self, quantity: int, unit_price: Number, registry: Optional[ExtentRegistry] = None):
        self.quantity = quantity
        self.unit_price = unit_price

        self._order: Reference["Order"] = Reference("OrderItem", "Order")
        self._menu_item: Reference["MenuItem"] = Reference("OrderItem", "MenuItem")

        self._register(registry)

    # ============== Attributes ==============

    @property
    def quantity(self) -> int:
        return self._quantity

    @quantity.setter
    def quantity(self, value: int) -> None:
        self._quantity = positive_int(value, "Quantity must be greater than zero.")

    @property
    def unit_price(self) -> Decimal:
        return self._unit_price

    @unit_price.setter
    def unit_price(self, value: Number) -> None:
        self._unit_price = non_negative_money(value, "Price cannot be negative.")

    @property
    def line_total(self) -> Decimal:
        return self._quantity * self._unit_price

    # ============== Associations ==============

    @property
    def has_order(self) -> bool:
        return self._order.is_set

    @property
    def order(self) -> "Order":
        """
        Raises:
            InvalidOperationError: If the item belongs to no order
        """
        return self._order.get()

    @property
    def has_menu_item(self) -> bool:
        return self._menu_item.is_set

    @property
    def menu_item(self) -> "MenuItem":
        """
        Raises:
            InvalidOperationError: If the item references no menu item
        """
        return self._menu_item.get()

    def _attach(self, order: "Order", menu_item: "MenuItem") -> None:
        self._order.set(order)
        self._menu_item.set(menu_item)

    def _detach(self, order: "Order") -> None:
        self._menu_item.reset()
        self._order.clear(order)

    # ============== Persistence ==============

    def to_record(self) -> OrderItemRecord:
        return OrderItemRecord(quantity=self._quantity, unit_price=self._unit_price)

    @classmethod
    def from_record(cls, record: OrderItemRecord, registry: Optional[ExtentRegistry] = None) -> "OrderItem":
        item = cls.__new__(cls)
        item.quantity = record.quantity
        item.unit_price = record.unit_price
        item._order = Reference("OrderItem", "Order")
        item._menu_item = Reference("OrderItem", "MenuItem")
        item._bind(registry)
        return item

    def to_dict(self) -> Dict[str, Any]:
        return {
            "quantity": self._quantity,
            "unit_price": self._unit_price,
            "line_total": self.line_total,
            "order_id": self._order.get_or_none().order_id if self.has_order else None,
            "menu_item_id": self._menu_item.get_or_none().item_id if self.has_menu_item else None,
        }

    def __repr__(self) -> str:
        return f"OrderItem(quantity={self._quantity}, unit_price={self._unit_price})"


# ============== Order ==============

class Order(BaseEntity):
    """
    A customer order composed of OrderItems.

    Attributes:
        order_id: Identifier
        created_at: Creation timestamp
        status: Free-form status label
        total_amount: Derived, recomputed from the current items on each read
    """

    __id_attribute__ = "order_id"

    def __init__(
        self,
        order_id: str,
        created_at: Optional[datetime] = None,
        status: str = "Created",
        registry: Optional[ExtentRegistry] = None,
    ):
        self.order_id = require_text(order_id, "Order ID cannot be empty.")
        self.created_at = created_at if created_at is not None else datetime.now()
        self.status = require_text(status, "Order status cannot be empty.")

        self._registry = registry
        self._items: AssociationSet[OrderItem] = AssociationSet(
            "Order", "OrderItem", floor=RelationshipRegistry.multiplicity_floor("Order", "OrderItem")
        )

    # ============== Accessors ==============

    @property
    def items(self) -> Tuple[OrderItem, ...]:
        return self._items.snapshot()

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    @property
    def total_amount(self) -> Decimal:
        return sum((item.line_total for item in self._items), Decimal("0"))

    def change_status(self, status: str) -> None:
        self.status = require_text(status, "Order status cannot be empty.")

    # ============== Composition operations ==============

    def add_item(self, menu_item: "MenuItem", quantity: int, unit_price: Number) -> OrderItem:
        """
        Create a new line owned by this order

        Args:
            menu_item: What was ordered
            quantity: Positive number of units
            unit_price: Non-negative price per unit

        Returns:
            The new OrderItem

        Raises:
            ValueError: If menu_item is None, quantity <= 0 or unit_price < 0
        """
        if menu_item is None:
            raise ValueError("MenuItem cannot be None.")
        positive_int(quantity, "Quantity must be greater than zero.")
        non_negative_money(unit_price, "Price cannot be negative.")

        item = OrderItem(quantity, unit_price, registry=self._registry)
        self._items.add(item)
        item._attach(self, menu_item)

        logger.debug(
            f"Order {self.order_id}: added {quantity} x {menu_item.item_id} @ {item.unit_price}"
        )
        return item

    def remove_item(self, item: OrderItem) -> None:
        """
        Remove a line and clear both of its references

        Raises:
            ValueError: If item is None
            InvalidOperationError: If item is not in this order, or it is
                the last remaining line
        """
        self._items.check_removable(item)
        item._detach(self)
        self._items.remove(item)
        logger.debug(f"Order {self.order_id}: removed {item!r}")

    def delete(self) -> None:
        """
        Cancel the order: detach every line, ignoring the multiplicity floor

        Detached items stay in the OrderItem extent.
        """
        removed = self._items.clear()
        for item in removed:
            item._detach(self)
        logger.info(f"Order {self.order_id} deleted, {len(removed)} item(s) detached")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "order_id": self.order_id,
            "created_at": self.created_at.isoformat(),
            "status": self.status,
            "item_count": len(self._items),
            "total_amount": self.total_amount,
        }


__all__ = ["OrderItem", "Order"]
