"""
core/engine/extent.py

Extent registry - the explicit, resettable context that holds every live
instance of each extent-bearing entity type, plus shared process-wide values

Entities register themselves as the last step of construction, after all
validation has passed, so an object exists if and only if it is registered.
Extents are append-only: tearing down a relationship never removes an
instance from its extent. Only ``clear`` and ``replace`` (bulk load) shrink
an extent.
"""
from typing import Any, Dict, List, Optional, Tuple, Type, TypeVar, Union
import logging

from core.exceptions import InvalidOperationError

logger = logging.getLogger(__name__)

E = TypeVar("E")

EntityType = Union[str, type]


def _extent_name(entity_type: EntityType) -> str:
    if isinstance(entity_type, str):
        return entity_type
    getter = getattr(entity_type, "get_entity_name", None)
    return getter() if getter is not None else entity_type.__name__


class ExtentRegistry:
    """
    Extent registry

    Holds one ordered list per entity type name and a set of named shared
    values (e.g. the staff minimum wage) with resettable defaults.

    Example:
        >>> registry = ExtentRegistry()
        >>> table = registry.create(Table, 1, 4)
        >>> registry.extent(Table)
        (Table(table_id=1),)
        >>> registry.reset()
    """

    def __init__(self):
        self._extents: Dict[str, List[Any]] = {}
        self._defaults: Dict[str, Any] = {}
        self._values: Dict[str, Any] = {}

    # ============== Extents ==============

    def register(self, entity: Any, unique_by: Optional[str] = None) -> None:
        """
        Append ``entity`` to its type's extent

        Args:
            entity: The freshly constructed entity
            unique_by: Attribute name whose value must be unique in the extent

        Raises:
            ValueError: If entity is None
            InvalidOperationError: If unique_by is given and clashes
        """
        if entity is None:
            raise ValueError("Cannot register None in an extent.")
        name = _extent_name(type(entity))
        members = self._extents.setdefault(name, [])

        if unique_by is not None:
            key = getattr(entity, unique_by)
            for existing in members:
                if getattr(existing, unique_by) == key:
                    raise InvalidOperationError(
                        f"{name} with {unique_by} {key!r} already exists."
                    )

        members.append(entity)
        logger.debug(f"Registered {entity!r} in {name} extent (size={len(members)})")

    def extent(self, entity_type: EntityType) -> Tuple[Any, ...]:
        """Read-only view of one extent, in registration order"""
        return tuple(self._extents.get(_extent_name(entity_type), ()))

    def size(self, entity_type: EntityType) -> int:
        return len(self._extents.get(_extent_name(entity_type), ()))

    def replace(self, entity_type: EntityType, entities: List[Any]) -> None:
        """Replace a whole extent (used by bulk load)"""
        name = _extent_name(entity_type)
        self._extents[name] = list(entities)
        logger.debug(f"Replaced {name} extent (size={len(entities)})")

    def clear(self, entity_type: Optional[EntityType] = None) -> None:
        """
        Empty one extent, or every extent when entity_type is None
        """
        if entity_type is None:
            self._extents.clear()
            return
        self._extents.pop(_extent_name(entity_type), None)

    def create(self, entity_cls: Type[E], *args: Any, **kwargs: Any) -> E:
        """
        Construct an entity bound to this registry

        The entity's constructor validates and registers in one step. Only
        ``ExtentMember`` types keep an extent; construct any other entity
        (Menu, Order) directly.

        Raises:
            ValueError: If entity_cls is not an ExtentMember type
        """
        if not (isinstance(entity_cls, type) and issubclass(entity_cls, ExtentMember)):
            name = getattr(entity_cls, "__name__", repr(entity_cls))
            raise ValueError(f"{name} does not keep an extent; construct it directly.")
        kwargs["registry"] = self
        return entity_cls(*args, **kwargs)

    # ============== Shared values ==============

    def register_default(self, name: str, value: Any) -> None:
        """Declare a shared value and its reset default; keeps a current value"""
        self._defaults[name] = value
        self._values.setdefault(name, value)

    def has_value(self, name: str) -> bool:
        return name in self._defaults

    def get_value(self, name: str) -> Any:
        if name not in self._values:
            raise KeyError(f"Shared value {name!r} is not registered")
        return self._values[name]

    def set_value(self, name: str, value: Any) -> None:
        if name not in self._defaults:
            raise KeyError(f"Shared value {name!r} is not registered")
        self._values[name] = value

    # ============== Reset ==============

    def reset(self) -> None:
        """Clear every extent and restore shared values to their defaults"""
        self._extents.clear()
        self._values = dict(self._defaults)


class ExtentMember:
    """
    Mixin for entities that keep an extent.

    Subclasses call ``_register(registry)`` at the very end of ``__init__``.
    Set ``__extent_unique__`` to an attribute name to reject duplicates of
    that attribute within the extent.
    """

    __extent_unique__: Optional[str] = None

    _registry: "ExtentRegistry"

    def _register(self, registry: Optional[ExtentRegistry]) -> None:
        self._registry = registry if registry is not None else extent_registry
        self._registry.register(self, unique_by=self.__extent_unique__)

    def _bind(self, registry: Optional[ExtentRegistry]) -> None:
        """Attach to a registry without registering (bulk load path)"""
        self._registry = registry if registry is not None else extent_registry

    @classmethod
    def get_extent(cls, registry: Optional[ExtentRegistry] = None) -> Tuple[Any, ...]:
        return (registry or extent_registry).extent(cls)

    @classmethod
    def clear_extent(cls, registry: Optional[ExtentRegistry] = None) -> None:
        (registry or extent_registry).clear(cls)


# Global extent registry instance
extent_registry = ExtentRegistry()


__all__ = [
    "ExtentRegistry",
    "ExtentMember",
    "extent_registry",
]
