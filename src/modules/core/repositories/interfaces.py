"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that the product
store contract extends.  Service-layer code depends on this abstraction,
never on Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the entity managed by the
    repository (e.g. ``Product``).  Look-ups return ``None`` on a miss;
    absence is a valid outcome, not an error.
    """

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[T]:
        """Retrieve an entity by its primary key."""

    @abstractmethod
    def list(self) -> List[T]:
        """Return a snapshot of every stored entity."""

    @abstractmethod
    def insert(self, entity: T) -> T:
        """Persist a new entity and return it with its id assigned."""

    @abstractmethod
    def update(self, entity: T) -> T:
        """Overwrite the stored entity identified by ``entity.id``."""

    @abstractmethod
    def delete(self, id: str) -> bool:
        """Remove an entity by ID; ``True`` if something was removed."""
