"""Concrete SQLAlchemy repository implementations.

Exports all SqlRepository classes and the get_repositories() factory function
for wiring at the application boundary (dependency injection).
"""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.services.identifiers import UniqueIdGenerator

from .users import SqlUserRepository


@dataclass
class Repositories:
    """All repository instances bound to a single AsyncSession."""

    users: SqlUserRepository


def get_repositories(
    session: AsyncSession,
    generator: UniqueIdGenerator[UUID],
) -> Repositories:
    """Construct all repositories bound to the given session.

    generator is the process-wide instance built at startup:

        async def handler(
            session: AsyncSession = Depends(get_session),
            generator: UniqueIdGenerator[UUID] = Depends(get_id_generator),
        ) -> ...:
            repos = get_repositories(session, generator)
            user = await repos.users.get_by_email(email)
    """
    return Repositories(
        users=SqlUserRepository(session, generator),
    )


__all__ = [
    "SqlUserRepository",
    "Repositories",
    "get_repositories",
]
