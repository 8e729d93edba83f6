"""
Extent persistence service - saves and loads every extent-bearing entity
type to its own JSON file under a data directory
"""
import logging
from pathlib import Path
from typing import Dict, Optional, Union

from core.engine.extent import ExtentRegistry
from core.persistence import ExtentStore
from restaurant.config import settings
from restaurant.domain.order import OrderItem
from restaurant.domain.payment import Payment
from restaurant.domain.reservation import Reservation
from restaurant.domain.staff import Staff
from restaurant.domain.table import Table

logger = logging.getLogger(__name__)


def default_file_names() -> Dict[type, str]:
    """Entity class -> file name, from settings"""
    return {
        OrderItem: settings.ORDER_ITEMS_FILE,
        Staff: settings.STAFF_FILE,
        Table: settings.TABLES_FILE,
        Reservation: settings.RESERVATIONS_FILE,
        Payment: settings.PAYMENTS_FILE,
    }


class PersistenceService:
    """
    Whole-collection save/load for the restaurant extents

    Relationships are not stored; callers rebuild them after loading.
    """

    def __init__(
        self,
        data_dir: Optional[Union[str, Path]] = None,
        registry: Optional[ExtentRegistry] = None,
    ):
        self.data_dir = Path(data_dir if data_dir is not None else settings.DATA_DIR)
        self.store = ExtentStore(registry)
        self.file_names = default_file_names()

    def path_for(self, entity_cls: type) -> Path:
        if entity_cls not in self.file_names:
            raise ValueError(f"{entity_cls.__name__} has no persisted extent")
        return self.data_dir / self.file_names[entity_cls]

    def save_extent(self, entity_cls: type) -> int:
        return self.store.save(entity_cls, self.path_for(entity_cls))

    def load_extent(self, entity_cls: type) -> int:
        return self.store.load(entity_cls, self.path_for(entity_cls))

    def save_all(self) -> Dict[str, int]:
        """Save every extent; returns entity name -> records written"""
        counts = {cls.__name__: self.save_extent(cls) for cls in self.file_names}
        logger.info(f"Saved all extents to {self.data_dir}: {counts}")
        return counts

    def load_all(self) -> Dict[str, int]:
        """Load every extent; returns entity name -> extent size after load"""
        counts = {cls.__name__: self.load_extent(cls) for cls in self.file_names}
        logger.info(f"Loaded all extents from {self.data_dir}: {counts}")
        return counts


__all__ = ["PersistenceService", "default_file_names"]
