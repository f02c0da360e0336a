"""Identity primitives shared by every persisted domain object.

EntityId and Entity are the capability contracts; AbstractEntityId and
AbstractEntity are the Pydantic base implementations that each concrete
identifier / entity kind (UserId, User, ...) builds on.

Equality is identity-based:
  - an identifier equals another identifier of the same kind wrapping an
    equal raw value (a UserId never equals some other kind's id);
  - an entity equals another entity whose identifier is equal, whatever
    its other attributes;
  - a detached entity (identifier not yet assigned) equals only itself.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Generic, Protocol, Self, TypeVar, runtime_checkable

from pydantic import BaseModel, ConfigDict

RawT = TypeVar("RawT")
_RawT_co = TypeVar("_RawT_co", covariant=True)


@runtime_checkable
class EntityId(Protocol[_RawT_co]):
    """Typed wrapper around a raw identifier value."""

    @property
    def id(self) -> _RawT_co: ...

    def as_string(self) -> str: ...


class Unassigned(str, Enum):
    """Identifier state of an entity that has not been persisted yet."""

    UNASSIGNED = "unassigned"


UNASSIGNED = Unassigned.UNASSIGNED


class AbstractEntityId(BaseModel, Generic[RawT]):
    """Base identifier: immutable, never empty, compared by raw value.

    Subclass once per entity kind, fixing the raw type:

        class UserId(AbstractEntityId[UUID]): ...
    """

    model_config = ConfigDict(frozen=True)

    id: RawT

    def __init__(self, id: RawT, **data: Any) -> None:
        super().__init__(id=id, **data)

    @classmethod
    def parse(cls, value: str) -> Self:
        """Rebuild an identifier from its as_string() form."""
        return cls.model_validate({"id": value})

    def as_string(self) -> str:
        return str(self.id)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, AbstractEntityId):
            return NotImplemented
        return type(self) is type(other) and self.id == other.id

    def __hash__(self) -> int:
        return hash((type(self), self.id))


IdT = TypeVar("IdT", bound=AbstractEntityId)
_IdT_co = TypeVar("_IdT_co", covariant=True)


@runtime_checkable
class Entity(Protocol[_IdT_co]):
    """A persisted object identified by exactly one EntityId."""

    @property
    def id(self) -> _IdT_co | Unassigned: ...

    @property
    def is_attached(self) -> bool: ...


class AbstractEntity(BaseModel, Generic[IdT]):
    """Base entity with identifier-only equality.

    Constructed without an id the entity is detached (id is UNASSIGNED);
    attach() returns the attached copy. An explicit id=None is rejected.
    """

    model_config = ConfigDict(frozen=True)

    id: IdT | Unassigned = UNASSIGNED

    @property
    def is_attached(self) -> bool:
        return self.id is not UNASSIGNED

    def attach(self, entity_id: IdT) -> Self:
        """Return a copy of this detached entity carrying entity_id."""
        if self.is_attached:
            raise ValueError(
                f"{type(self).__name__} is already attached to {self.id!r}"
            )
        return type(self).model_validate({**dict(self), "id": entity_id})

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, AbstractEntity):
            return NotImplemented
        if not (self.is_attached and other.is_attached):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        if not self.is_attached:
            return object.__hash__(self)
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r})"
