"""
core/associations - generic association machinery

- reference: 0..1 link slot (Reference)
- collection: identity-keyed member set with a multiplicity floor (AssociationSet)
- qualified: key -> target mapping (QualifiedAssociation)
- reflexive: manager/subordinate edges between same-type instances (HierarchyMixin)

Usage:
    >>> from core.associations import Reference, AssociationSet
"""
from core.associations.reference import Reference
from core.associations.collection import AssociationSet
from core.associations.qualified import QualifiedAssociation
from core.associations.reflexive import HierarchyMixin

__all__ = [
    "Reference",
    "AssociationSet",
    "QualifiedAssociation",
    "HierarchyMixin",
]
