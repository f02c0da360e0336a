"""Domain enumerations.

All string-valued enums use str mixin so they serialize cleanly to JSON
and remain comparable to plain strings (Pydantic / pydantic-settings default behaviour).
"""

from enum import Enum


class IdGeneratorKind(str, Enum):
    """Which UniqueIdGenerator implementation the process runs with."""

    IN_MEMORY = "in_memory"
