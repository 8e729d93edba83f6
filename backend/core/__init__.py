"""
core - association runtime framework

Domain-agnostic building blocks used by the restaurant domain:
- ontology: entity base class (BaseEntity)
- associations: 0..1 references, member sets, qualified and reflexive links
- domain: relationship metadata (LinkType, Cardinality, EntityLink)
- engine: state machine and extent registry
- persistence: whole-extent JSON store

Usage:
    >>> from core.associations import Reference, AssociationSet
    >>> from core.engine import extent_registry
    >>> from core.exceptions import InvalidOperationError
"""
from core.exceptions import InvalidOperationError
from core.ontology.base import BaseEntity

__version__ = "0.1.0"

__all__ = [
    "InvalidOperationError",
    "BaseEntity",
]
