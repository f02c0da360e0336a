"""Generic repository base interface.

Repository[T, IdT] is the root abstraction for all data-access interfaces in
this domain layer.  Concrete implementations live in
src/infrastructure/persistence/ and are wired at the application boundary via
dependency injection.

Design notes:
  - All methods are async to accommodate async database drivers (asyncpg / SQLAlchemy async).
  - T is the domain entity type (never an ORM row or DTO); IdT is its typed
    identifier, so a UserId cannot be passed where another kind's id is expected.
  - list() accepts only limit/offset; domain-specific filters are declared
    on each specialised interface (Interface Segregation Principle).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from src.domain.models.entities import AbstractEntity, AbstractEntityId

T = TypeVar("T", bound=AbstractEntity)
IdT = TypeVar("IdT", bound=AbstractEntityId)


class Repository(ABC, Generic[T, IdT]):
    """Abstract CRUD interface for a domain entity."""

    @abstractmethod
    async def get(self, id: IdT) -> T | None:
        """Return the entity with the given identifier, or None if not found."""

    @abstractmethod
    async def list(self, limit: int = 50, offset: int = 0) -> list[T]:
        """Return a page of entities ordered by creation time (newest first)."""

    @abstractmethod
    async def create(self, entity: T) -> T:
        """Persist a new entity and return it (with its identifier assigned)."""

    @abstractmethod
    async def update(self, entity: T) -> T:
        """Persist changes to an existing entity and return the updated version."""

    @abstractmethod
    async def delete(self, id: IdT) -> None:
        """Remove the entity with the given identifier."""
