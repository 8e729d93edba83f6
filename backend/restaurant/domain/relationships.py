"""
restaurant/domain/relationships.py

Restaurant relationship constants
"""
from core.domain.relationships import (
    LinkType,
    Cardinality,
    EntityLink,
    RelationshipRegistry,
)


# Menu <-> MenuItem
MENU_RELATIONSHIPS = [
    EntityLink(
        source_entity="Menu",
        target_entity="MenuItem",
        link_type=LinkType.AGGREGATION,
        source_cardinality=Cardinality.OPTIONAL,
        target_cardinality=Cardinality.AT_LEAST_ONE,
        description="A menu lists one or more items",
        bidirectional=True,
    ),
]

MENU_ITEM_RELATIONSHIPS = [
    EntityLink(
        source_entity="MenuItem",
        target_entity="Menu",
        link_type=LinkType.MANY_TO_ONE,
        source_cardinality=Cardinality.AT_LEAST_ONE,
        target_cardinality=Cardinality.OPTIONAL,
        description="An item appears on at most one menu",
        bidirectional=True,
    ),
]

# Order => OrderItem
ORDER_RELATIONSHIPS = [
    EntityLink(
        source_entity="Order",
        target_entity="OrderItem",
        link_type=LinkType.COMPOSITION,
        source_cardinality=Cardinality.ONE,
        target_cardinality=Cardinality.AT_LEAST_ONE,
        description="An order exclusively owns its lines",
        bidirectional=True,
    ),
]

# OrderItem -> MenuItem
ORDER_ITEM_RELATIONSHIPS = [
    EntityLink(
        source_entity="OrderItem",
        target_entity="Order",
        link_type=LinkType.MANY_TO_ONE,
        source_cardinality=Cardinality.AT_LEAST_ONE,
        target_cardinality=Cardinality.ONE,
        description="A line belongs to exactly one order",
        bidirectional=True,
    ),
    EntityLink(
        source_entity="OrderItem",
        target_entity="MenuItem",
        link_type=LinkType.ASSOCIATION,
        source_cardinality=Cardinality.OPTIONAL_MANY,
        target_cardinality=Cardinality.ONE,
        description="A line refers to the menu item ordered",
    ),
]

# Staff <-> Staff
STAFF_RELATIONSHIPS = [
    EntityLink(
        source_entity="Staff",
        target_entity="Staff",
        link_type=LinkType.REFLEXIVE,
        source_cardinality=Cardinality.OPTIONAL_MANY,
        target_cardinality=Cardinality.OPTIONAL,
        description="A staff member reports to at most one manager",
        bidirectional=True,
    ),
]

# Reservation -[table_id]-> Table
RESERVATION_RELATIONSHIPS = [
    EntityLink(
        source_entity="Reservation",
        target_entity="Table",
        link_type=LinkType.QUALIFIED,
        source_cardinality=Cardinality.OPTIONAL_MANY,
        target_cardinality=Cardinality.OPTIONAL,
        description="A reservation holds at most one table per table id",
        qualifier="table_id",
    ),
]

# Payment -> PaymentGateway
PAYMENT_RELATIONSHIPS = [
    EntityLink(
        source_entity="Payment",
        target_entity="PaymentGateway",
        link_type=LinkType.ASSOCIATION,
        source_cardinality=Cardinality.OPTIONAL_MANY,
        target_cardinality=Cardinality.ONE,
        description="A payment is processed through one gateway",
    ),
]


def register_restaurant_relationships(registry: RelationshipRegistry) -> None:
    """Register all restaurant relationships into the given registry."""
    registry.register_relationships("Menu", MENU_RELATIONSHIPS)
    registry.register_relationships("MenuItem", MENU_ITEM_RELATIONSHIPS)
    registry.register_relationships("Order", ORDER_RELATIONSHIPS)
    registry.register_relationships("OrderItem", ORDER_ITEM_RELATIONSHIPS)
    registry.register_relationships("Staff", STAFF_RELATIONSHIPS)
    registry.register_relationships("Reservation", RESERVATION_RELATIONSHIPS)
    registry.register_relationships("Payment", PAYMENT_RELATIONSHIPS)


__all__ = [
    "MENU_RELATIONSHIPS",
    "MENU_ITEM_RELATIONSHIPS",
    "ORDER_RELATIONSHIPS",
    "ORDER_ITEM_RELATIONSHIPS",
    "STAFF_RELATIONSHIPS",
    "RESERVATION_RELATIONSHIPS",
    "PAYMENT_RELATIONSHIPS",
    "register_restaurant_relationships",
]
