"""End-to-end: register a user, then find it by email in another case.

The session is mocked; the rows it "stores" are the ORM objects handed to
session.add(), and reads serve them back.
"""

from unittest.mock import AsyncMock, MagicMock
from uuid import UUID

from src.domain.models.users import User, UserId
from src.domain.services.identifiers import UniqueIdGenerator
from src.infrastructure.persistence.repositories import get_repositories

RAW = UUID("0b8e6b0e-7c1a-4a55-9f6e-2d8c1d7f4e21")


class _RecordingGenerator(UniqueIdGenerator[UUID]):
    def __init__(self) -> None:
        self.calls = 0

    def get_next_unique_id(self) -> UUID:
        self.calls += 1
        return RAW


def _storing_session():
    rows = []
    session = AsyncMock()
    session.add = MagicMock(side_effect=rows.append)
    session.execute.side_effect = lambda stmt: MagicMock(
        scalar_one_or_none=MagicMock(return_value=rows[0] if rows else None)
    )
    return session, rows


async def test_register_then_find_by_email_ignoring_case():
    session, rows = _storing_session()
    generator = _RecordingGenerator()
    users = get_repositories(session, generator).users

    created = await users.create(User.prepare("a@example.com"))

    assert generator.calls == 1
    assert created.id == UserId(RAW)
    assert rows[0].user_id == RAW
    assert created.id.as_string() == "0b8e6b0e-7c1a-4a55-9f6e-2d8c1d7f4e21"

    found = await users.get_by_email("A@EXAMPLE.COM")

    assert found == created
    assert found.id == UserId(RAW)
    assert found.email == "a@example.com"
    assert "a@example.com" in session.execute.await_args.args[0].compile().params.values()


async def test_find_by_email_before_registration_is_absent():
    session, _ = _storing_session()
    users = get_repositories(session, _RecordingGenerator()).users
    assert await users.get_by_email("a@example.com") is None
