"""Domain services package."""

from .identifiers import InMemoryUniqueIdGenerator, UniqueIdGenerator

__all__ = ["UniqueIdGenerator", "InMemoryUniqueIdGenerator"]
