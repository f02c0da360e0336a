"""Tests for the get_repositories() DI factory."""

from unittest.mock import AsyncMock

from src.domain.services.identifiers import InMemoryUniqueIdGenerator
from src.infrastructure.persistence.repositories import (
    Repositories,
    SqlUserRepository,
    get_repositories,
)


def _repos():
    return get_repositories(AsyncMock(), InMemoryUniqueIdGenerator())


def test_get_repositories_returns_repositories_instance():
    assert isinstance(_repos(), Repositories)


def test_repositories_users_is_correct_type():
    assert isinstance(_repos().users, SqlUserRepository)


def test_repositories_dataclass_has_one_field():
    assert len(Repositories.__dataclass_fields__) == 1
