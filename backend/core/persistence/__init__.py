"""
core/persistence - flat extent persistence
"""
from core.persistence.extent_store import ExtentStore

__all__ = ["ExtentStore"]
