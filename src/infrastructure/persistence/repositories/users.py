"""SQLAlchemy implementation of UserRepository."""

from __future__ import annotations

import logging
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.models.users import User as DomainUser
from src.domain.models.users import UserId
from src.domain.repositories.users import UserRepository, UserRepositoryImpl
from src.domain.services.identifiers import UniqueIdGenerator
from src.infrastructure.persistence.models.users import User as OrmUser

logger = logging.getLogger(__name__)


class SqlUserRepository(UserRepository):
    def __init__(self, session: AsyncSession, generator: UniqueIdGenerator[UUID]) -> None:
        self._session = session
        self._ids = UserRepositoryImpl(generator)

    @staticmethod
    def _to_domain(row: OrmUser) -> DomainUser:
        return DomainUser(
            id=UserId(row.user_id),
            email=row.email,
            created_at=row.created_at,
        )

    def next_id(self) -> UserId:
        return self._ids.next_id()

    async def _get_row(self, user_id: UserId) -> OrmUser | None:
        stmt = select(OrmUser).where(OrmUser.user_id == user_id.id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_id(self, user_id: UserId) -> DomainUser | None:
        row = await self._get_row(user_id)
        return self._to_domain(row) if row else None

    async def get_by_email(self, email: str) -> DomainUser | None:
        stmt = select(OrmUser).where(func.lower(OrmUser.email) == email.lower())
        result = await self._session.execute(stmt)
        row = result.scalar_one_or_none()
        return self._to_domain(row) if row else None

    async def list(self, limit: int = 50, offset: int = 0) -> list[DomainUser]:
        stmt = select(OrmUser).order_by(OrmUser.created_at.desc()).limit(limit).offset(offset)
        result = await self._session.execute(stmt)
        return [self._to_domain(row) for row in result.scalars()]

    async def create(self, entity: DomainUser) -> DomainUser:
        if not entity.is_attached:
            entity = entity.attach(self.next_id())
            logger.debug("Assigned new user id %s", entity.id.as_string())
        row = OrmUser(
            user_id=entity.id.id,
            email=entity.email,
            created_at=entity.created_at,
        )
        self._session.add(row)
        return entity

    async def update(self, entity: DomainUser) -> DomainUser:
        if not entity.is_attached:
            raise ValueError("Cannot update a user that has not been created")
        row = await self._get_row(entity.id)
        if row is None:
            raise ValueError(f"User {entity.id.as_string()} not found")
        row.email = entity.email
        return entity

    async def delete(self, id: UserId) -> None:
        row = await self._get_row(id)
        if row is not None:
            await self._session.delete(row)
