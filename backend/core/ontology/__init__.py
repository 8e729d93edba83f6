"""
core/ontology - entity abstraction layer
"""
from core.ontology.base import BaseEntity

__all__ = ["BaseEntity"]
