"""
core/domain/__init__.py

Domain layer entry point - generic relationship metadata
"""
from core.domain.relationships import (
    LinkType,
    Cardinality,
    EntityLink,
    RelationshipRegistry,
    relationship_registry,
)

__all__ = [
    "LinkType",
    "Cardinality",
    "EntityLink",
    "RelationshipRegistry",
    "relationship_registry",
]
