"""User domain model and its identifier.

These are pure domain objects — no ORM or persistence concerns.
"""

from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID

from pydantic import Field

from .entities import AbstractEntity, AbstractEntityId


class UserId(AbstractEntityId[UUID]):
    """Identifier of a User; wraps a random 128-bit UUID."""


class User(AbstractEntity[UserId]):
    """An application user.

    email is matched case-insensitively on lookup. Uniqueness is enforced
    by the storage layer, not here.
    """

    email: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(cls, user_id: UserId, email: str) -> User:
        """Named constructor for a user whose identifier is already minted."""
        return cls(id=user_id, email=email)

    @classmethod
    def prepare(cls, email: str) -> User:
        """A detached user; the repository assigns its id on create()."""
        return cls(email=email)

    def with_email(self, email: str) -> User:
        return self.model_copy(update={"email": email})
