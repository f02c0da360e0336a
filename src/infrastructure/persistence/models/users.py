"""Users ORM model."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import DateTime, Index, Text, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.database import Base


class User(Base):
    """Application user.

    user_id is minted by the application's UniqueIdGenerator before insert,
    so the column carries no default.  Emails are unique case-insensitively
    (uq_users_email_lower); the application layer does not re-check this.
    """

    __tablename__ = "users"

    user_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


Index("uq_users_email_lower", func.lower(User.__table__.c.email), unique=True)
