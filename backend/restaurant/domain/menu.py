"""
restaurant/domain/menu.py

Menu and MenuItem - bidirectional optional link

A Menu owns one or more MenuItems (1..*); a MenuItem belongs to at most one
Menu (0..1). Both ends are always updated in the same call, so
``item.menu is menu`` holds exactly when ``item in menu.items``.
"""
from decimal import Decimal
from typing import Any, Dict, Iterable, Optional, Tuple
import logging

from core.associations import AssociationSet, Reference
from core.domain.relationships import RelationshipRegistry
from core.exceptions import InvalidOperationError
from core.ontology.base import BaseEntity
from restaurant.domain.validators import Number, non_negative_money, require_text

logger = logging.getLogger(__name__)


# ============== MenuItem ==============

class MenuItem(BaseEntity):
    """
    A dish or drink that can be listed on a menu and ordered.

    Attributes:
        item_id: Identifier
        name: Display name
        description: Free text
        base_price: Non-negative list price
        category: Category label (e.g. "Food", "Drinks")
        is_available: Availability flag
    """

    __id_attribute__ = "item_id"

    def __init__(
        self,
        item_id: str,
        name: str,
        description: str = "",
        base_price: Number = Decimal("0"),
        category: str = "General",
        is_available: bool = True,
    ):
        self.item_id = require_text(item_id, "Item ID cannot be empty.")
        self.name = require_text(name, "Item name cannot be empty.")
        if description is None:
            raise ValueError("Description cannot be None.")
        self.description = description
        self.base_price = non_negative_money(base_price, "Base price cannot be negative.")
        self.category = require_text(category, "Category cannot be empty.")
        self.is_available = bool(is_available)

        self._menu: Reference["Menu"] = Reference("MenuItem", "Menu")

    # ============== Menu back-reference ==============

    @property
    def has_menu(self) -> bool:
        return self._menu.is_set

    @property
    def menu(self) -> "Menu":
        """
        Owning menu

        Raises:
            InvalidOperationError: If the item is not on any menu
        """
        return self._menu.get()

    # ============== Business methods ==============

    def change_price(self, new_price: Number) -> None:
        self.base_price = non_negative_money(new_price, "Base price cannot be negative.")

    def mark_unavailable(self) -> None:
        self.is_available = False

    def mark_available(self) -> None:
        self.is_available = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "item_id": self.item_id,
            "name": self.name,
            "description": self.description,
            "base_price": self.base_price,
            "category": self.category,
            "is_available": self.is_available,
            "menu_id": self._menu.get_or_none().menu_id if self.has_menu else None,
        }


# ============== Menu ==============

class Menu(BaseEntity):
    """
    A named collection of at least one MenuItem.

    Attributes:
        menu_id: Identifier
        name: Display name
        is_active: Whether the menu is in service
        _items: Member set; its floor comes from the Menu -> MenuItem link
    """

    __id_attribute__ = "menu_id"

    def __init__(
        self,
        menu_id: str,
        name: str,
        is_active: bool,
        initial_items: Iterable[MenuItem],
    ):
        """
        Create a menu with its initial items

        Raises:
            ValueError: On invalid attributes or a None item
            InvalidOperationError: If initial_items is empty, repeats an item,
                or contains an item owned by another menu
        """
        self.menu_id = require_text(menu_id, "Menu ID cannot be empty.")
        self.name = require_text(name, "Menu name cannot be empty.")
        self.is_active = bool(is_active)

        if initial_items is None:
            raise ValueError("Initial items cannot be None.")
        items = list(initial_items)
        floor = RelationshipRegistry.multiplicity_floor("Menu", "MenuItem")
        if len(items) < floor:
            raise InvalidOperationError(
                f"Menu must contain at least {floor} MenuItem (multiplicity {floor}..*)."
            )

        self._items: AssociationSet[MenuItem] = AssociationSet("Menu", "MenuItem", floor=floor)

        # Validate the whole batch before linking anything
        seen = AssociationSet("Menu", "MenuItem")
        for item in items:
            self._check_addable(item)
            seen.add(item)

        for item in items:
            self._link(item)

    # ============== Accessors ==============

    @property
    def items(self) -> Tuple[MenuItem, ...]:
        return self._items.snapshot()

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    # ============== Association operations ==============

    def _check_addable(self, item: MenuItem) -> None:
        if item is None:
            raise ValueError("MenuItem cannot be None.")
        if item in self._items:
            raise InvalidOperationError("Duplicate MenuItem reference is not allowed.")
        if item.has_menu and not item._menu.points_to(self):
            raise InvalidOperationError("MenuItem is already assigned to a different Menu.")

    def _link(self, item: MenuItem) -> None:
        self._items.add(item)
        item._menu.set(self)
        logger.debug(f"Menu {self.menu_id}: added item {item.item_id}")

    def add_item(self, item: MenuItem) -> None:
        """
        Add an item and point it back at this menu

        Raises:
            ValueError: If item is None
            InvalidOperationError: If item is already here, or belongs to
                another menu
        """
        self._check_addable(item)
        self._link(item)

    def remove_item(self, item: MenuItem) -> None:
        """
        Remove an item and clear its back-reference

        Raises:
            ValueError: If item is None
            InvalidOperationError: If item is not on this menu, or it is the
                last remaining item
        """
        self._items.check_removable(item)
        self._items.remove(item)
        item._menu.clear(self)
        logger.debug(f"Menu {self.menu_id}: removed item {item.item_id}")

    def find_item_by_name(self, name: str) -> Optional[MenuItem]:
        """
        Case-insensitive exact name match

        Returns:
            The first matching item, or None
        """
        if name is None:
            raise ValueError("Name cannot be None.")
        wanted = name.casefold()
        for item in self._items:
            if item.name.casefold() == wanted:
                return item
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "menu_id": self.menu_id,
            "name": self.name,
            "is_active": self.is_active,
            "item_ids": [item.item_id for item in self._items],
        }


__all__ = ["MenuItem", "Menu"]
