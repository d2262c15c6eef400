"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

from typing import Generic, TypeVar, Optional, List
from abc import ABC, abstractmethod

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository for stores keyed by a natural name.
    All repositories should inherit from this class.
    """

    @abstractmethod
    def get_by_name(self, name: str) -> Optional[ModelType]:
        """
        Get entity by name.

        Args:
            name: Exact, case-sensitive entity name

        Returns:
            Entity or None if not found
        """

    @abstractmethod
    def get_all(self) -> List[ModelType]:
        """Get all entities in insertion order"""

    @abstractmethod
    def add(self, entity: ModelType) -> ModelType:
        """Store a new entity"""

    def exists(self, name: str) -> bool:
        """Check if entity exists"""
        return self.get_by_name(name) is not None
