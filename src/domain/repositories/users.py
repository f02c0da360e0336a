"""User repository interface and its id-minting extension."""

from __future__ import annotations

from abc import ABC, abstractmethod
from uuid import UUID

from src.domain.models.users import User, UserId
from src.domain.services.identifiers import UniqueIdGenerator

from .base import Repository


class UserRepositoryCustom(ABC):
    """Extension point: mint the identifier of a not-yet-persisted User."""

    @abstractmethod
    def next_id(self) -> UserId:
        """Return a fresh UserId."""


class UserRepositoryImpl(UserRepositoryCustom):
    """next_id() backed by the process-wide UniqueIdGenerator.

    One generator call per id; collisions are not re-checked.
    """

    def __init__(self, generator: UniqueIdGenerator[UUID]) -> None:
        self._generator = generator

    def next_id(self) -> UserId:
        return UserId(self._generator.get_next_unique_id())


class UserRepository(Repository[User, UserId], UserRepositoryCustom):
    """Read/write interface for User entities.

    get_by_id and get_by_email both return None when no match exists.
    create() assigns next_id() to a detached user before the first write.
    """

    async def get(self, id: UserId) -> User | None:
        """Delegate to get_by_id for a consistent base-interface contract."""
        return await self.get_by_id(id)

    @abstractmethod
    async def get_by_id(self, user_id: UserId) -> User | None:
        """Return the user with the given ID, or None."""

    @abstractmethod
    async def get_by_email(self, email: str) -> User | None:
        """Return the user with the given email (case-insensitive), or None."""

    @abstractmethod
    async def create(self, entity: User) -> User:
        """Persist a new user, minting its id if detached; return the attached user."""

    @abstractmethod
    async def update(self, entity: User) -> User:
        """Persist changes to an existing user.  Raises ValueError if it is unknown."""
