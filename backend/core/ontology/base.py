"""
core/ontology/base.py

Entity base class - shared behavior for every domain entity
"""
from abc import ABC
from typing import Dict, Any


class BaseEntity(ABC):
    """
    Entity base class

    Provides:
    - entity name lookup (used as the extent key)
    - dictionary serialization of public scalar state
    - a readable repr

    Entities compare and hash by identity. Association collections rely on
    this: two MenuItems with equal attributes are still two members.
    """

    # Name of the attribute holding the entity identifier, used by __repr__
    __id_attribute__: str = "id"

    @classmethod
    def get_entity_name(cls) -> str:
        """
        Get the entity name

        Returns:
            Entity name (e.g. "Staff", "Table")

        Example:
            >>> Table.get_entity_name()
            'Table'
        """
        return cls.__name__

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to a dictionary

        Returns:
            Dictionary of public attributes

        Note:
            The default implementation uses vars() and drops attributes
            starting with "_". Association state is always held in private
            attributes, so it never leaks into this form.
        """
        return {
            k: v for k, v in vars(self).items()
            if not k.startswith("_")
        }

    def __repr__(self) -> str:
        """
        Readable representation

        Returns:
            Formatted like "Table(table_id=3)"
        """
        cls_name = self.get_entity_name()
        attr = self.__id_attribute__
        entity_id = getattr(self, attr, "?")
        return f"{cls_name}({attr}={entity_id!r})"


__all__ = ["BaseEntity"]
