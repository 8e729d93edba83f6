"""
core/domain/relationships.py

Association metadata - link kinds, multiplicities and the registry that
association owners read their multiplicity floors from
Restaurant-specific link constants live in restaurant.domain.relationships
"""
from typing import Dict, List, Optional
from dataclasses import dataclass
from enum import Enum

from core.exceptions import InvalidOperationError


class LinkType(str, Enum):
    """Association kind"""
    AGGREGATION = "aggregation"         # owner lists members that may move
    COMPOSITION = "composition"         # owner creates and exclusively holds members
    MANY_TO_ONE = "many_to_one"         # back-reference to the owner
    ASSOCIATION = "association"         # one-directional reference
    REFLEXIVE = "reflexive"             # same entity type on both ends
    QUALIFIED = "qualified"             # navigated by key


class Cardinality(str, Enum):
    """Multiplicity of one association end"""
    ONE = "1"
    OPTIONAL = "0..1"
    OPTIONAL_MANY = "0..*"
    AT_LEAST_ONE = "1..*"

    @property
    def lower_bound(self) -> int:
        return 1 if self in (Cardinality.ONE, Cardinality.AT_LEAST_ONE) else 0

    @property
    def is_many(self) -> bool:
        return self.value.endswith("*")


@dataclass(frozen=True)
class EntityLink:
    """
    One association, seen from its source entity

    Attributes:
        source_entity: Owning entity name
        target_entity: Referenced entity name
        link_type: Association kind
        source_cardinality: How many sources one target may have
        target_cardinality: How many targets one source holds
        description: Human-readable meaning
        bidirectional: Whether the target navigates back to the source
        qualifier: Key attribute for qualified links
    """

    source_entity: str
    target_entity: str
    link_type: LinkType
    source_cardinality: Cardinality
    target_cardinality: Cardinality
    description: str
    bidirectional: bool = False
    qualifier: Optional[str] = None

    @property
    def floor(self) -> int:
        """Fewest targets a source may be left with by a removal"""
        return self.target_cardinality.lower_bound


class RelationshipRegistry:
    """
    Relationship registry - source entity name -> declared links

    Registration is idempotent, so a domain may register its links on import
    and again after a ``clear()``.
    """

    _relationships: Dict[str, List[EntityLink]] = {}

    @classmethod
    def get_relationships(cls, entity_name: str) -> List[EntityLink]:
        return list(cls._relationships.get(entity_name, []))

    @classmethod
    def find_link(cls, source_entity: str, target_entity: str) -> Optional[EntityLink]:
        """First link from source_entity to target_entity, or None"""
        for link in cls._relationships.get(source_entity, []):
            if link.target_entity == target_entity:
                return link
        return None

    @classmethod
    def multiplicity_floor(cls, source_entity: str, target_entity: str) -> int:
        """
        Lower bound of the target end of a registered link

        Raises:
            InvalidOperationError: If no such link is registered
        """
        link = cls.find_link(source_entity, target_entity)
        if link is None:
            raise InvalidOperationError(
                f"No relationship registered from {source_entity} to {target_entity}."
            )
        return link.floor

    @classmethod
    def register_relationship(cls, entity_name: str, link: EntityLink) -> None:
        links = cls._relationships.setdefault(entity_name, [])
        if link not in links:
            links.append(link)

    @classmethod
    def register_relationships(cls, entity_name: str, links: List[EntityLink]) -> None:
        """Batch register relationships for an entity"""
        for link in links:
            cls.register_relationship(entity_name, link)

    @classmethod
    def clear(cls) -> None:
        """Clear all registered relationships (for testing)"""
        cls._relationships = {}


# Global relationship registry instance
relationship_registry = RelationshipRegistry()


__all__ = [
    "LinkType",
    "Cardinality",
    "EntityLink",
    "RelationshipRegistry",
    "relationship_registry",
]
