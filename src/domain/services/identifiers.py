"""Unique identifier generation.

UniqueIdGenerator is the capability every id-minting component depends on;
the process runs with exactly one implementation, chosen at bootstrap
(see src/infrastructure/identifiers.py) and passed to consumers explicitly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar
from uuid import UUID, uuid4

T = TypeVar("T")


class UniqueIdGenerator(ABC, Generic[T]):
    """Mints fresh raw identifiers on demand."""

    @abstractmethod
    def get_next_unique_id(self) -> T:
        """Return a value not previously returned and not already in use."""


class InMemoryUniqueIdGenerator(UniqueIdGenerator[UUID]):
    """Random version-4 UUIDs.

    The class is stateless: uniqueness rests on the 122 random bits of each
    value, so instances in different threads or processes need no
    coordination and no collision check is made.
    """

    def get_next_unique_id(self) -> UUID:
        return uuid4()
