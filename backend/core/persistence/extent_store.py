"""
core/persistence/extent_store.py

Whole-extent persistence - dumps one extent to a JSON file and loads it back

Only scalar attributes travel through the file. Each persistable entity
class declares a pydantic record schema (``__record_schema__``) and converts
to and from it with ``to_record()`` / ``from_record()``. Associations are
never written and never rebuilt on load.
"""
from pathlib import Path
from typing import List, Optional, Union
import logging

from pydantic import BaseModel, TypeAdapter, ValidationError

from core.engine.extent import ExtentRegistry, extent_registry
from core.exceptions import InvalidOperationError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class ExtentStore:
    """
    Flat dump/load of entity extents

    A corrupt or unreadable file never propagates: the in-memory extent is
    cleared instead, so the caller always continues from a valid state. A
    missing file leaves the extent untouched.

    Example:
        >>> store = ExtentStore()
        >>> store.save(Table, "data/tables.json")
        >>> Table.clear_extent()
        >>> store.load(Table, "data/tables.json")
        3
    """

    def __init__(self, registry: Optional[ExtentRegistry] = None):
        self._registry = registry if registry is not None else extent_registry

    @property
    def registry(self) -> ExtentRegistry:
        return self._registry

    @staticmethod
    def _adapter(entity_cls: type) -> TypeAdapter:
        schema = getattr(entity_cls, "__record_schema__", None)
        if schema is None or not issubclass(schema, BaseModel):
            raise TypeError(f"{entity_cls.__name__} does not declare a record schema")
        return TypeAdapter(List[schema])

    def save(self, entity_cls: type, path: PathLike) -> int:
        """
        Write the extent of ``entity_cls`` to ``path``

        Returns:
            Number of records written
        """
        adapter = self._adapter(entity_cls)
        records = [entity.to_record() for entity in self._registry.extent(entity_cls)]

        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(adapter.dump_json(records, indent=2))

        logger.info(f"Saved {len(records)} {entity_cls.__name__} record(s) to {target}")
        return len(records)

    def load(self, entity_cls: type, path: PathLike) -> int:
        """
        Replace the extent of ``entity_cls`` with the contents of ``path``

        Returns:
            Size of the extent after loading
        """
        adapter = self._adapter(entity_cls)
        source = Path(path)
        if not source.exists():
            logger.info(f"No {entity_cls.__name__} store at {source}; extent left unchanged")
            return self._registry.size(entity_cls)

        try:
            records = adapter.validate_json(source.read_bytes())
            entities = [entity_cls.from_record(r, registry=self._registry) for r in records]
            self._check_unique(entity_cls, entities)
        except (OSError, ValidationError, ValueError, InvalidOperationError) as e:
            logger.warning(
                f"Could not load {entity_cls.__name__} store at {source}, "
                f"clearing extent: {e}"
            )
            self._registry.clear(entity_cls)
            return 0

        self._registry.replace(entity_cls, entities)
        logger.info(f"Loaded {len(entities)} {entity_cls.__name__} record(s) from {source}")
        return len(entities)

    @staticmethod
    def _check_unique(entity_cls: type, entities: list) -> None:
        attr = getattr(entity_cls, "__extent_unique__", None)
        if attr is None:
            return
        seen = set()
        for entity in entities:
            key = getattr(entity, attr)
            if key in seen:
                raise InvalidOperationError(
                    f"Duplicate {entity_cls.__name__} {attr} {key!r} in store"
                )
            seen.add(key)


__all__ = ["ExtentStore"]
