"""Domain model package.

All domain objects are pure Python / Pydantic models with no ORM or
infrastructure dependencies.  Import from this package to avoid coupling
application code to individual module paths.
"""

from .entities import (
    UNASSIGNED,
    AbstractEntity,
    AbstractEntityId,
    Entity,
    EntityId,
    Unassigned,
)
from .enums import IdGeneratorKind
from .users import User, UserId

__all__ = [
    # enums
    "IdGeneratorKind",
    # identity
    "EntityId",
    "Entity",
    "AbstractEntityId",
    "AbstractEntity",
    "Unassigned",
    "UNASSIGNED",
    # users
    "User",
    "UserId",
]
