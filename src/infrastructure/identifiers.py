"""Process-wide UniqueIdGenerator, selected by Settings.id_generator.

The instance is built once at import and lives for the whole process.
Consumers receive it as a parameter (get_repositories(session, generator));
get_id_generator() is the dependency-style accessor for the boundary.
"""

from __future__ import annotations

import logging
from uuid import UUID

from src.domain.models.enums import IdGeneratorKind
from src.domain.services.identifiers import InMemoryUniqueIdGenerator, UniqueIdGenerator
from src.infrastructure.database import settings

logger = logging.getLogger(__name__)


def build_unique_id_generator(kind: IdGeneratorKind) -> UniqueIdGenerator[UUID]:
    """Construct the generator implementation named by kind."""
    if kind == IdGeneratorKind.IN_MEMORY:
        generator = InMemoryUniqueIdGenerator()
    else:
        raise ValueError(f"Unsupported id generator: {kind!r}")
    logger.info("Using %s for unique ids", type(generator).__name__)
    return generator


unique_id_generator = build_unique_id_generator(settings.id_generator)


def get_id_generator() -> UniqueIdGenerator[UUID]:
    return unique_id_generator
