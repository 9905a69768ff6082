"""
Foreign-key reference validation.

``resolve_reference`` never raises for a missing row.  It returns a
tagged result that the calling service inspects before it mutates
anything, so a bad reference can never leave a half-built entity in the
session.
"""

from dataclasses import dataclass
from typing import Generic

from empresa.repositories.base import ModelT, Repository


@dataclass(frozen=True)
class Found(Generic[ModelT]):
    """The referenced row exists."""

    entity: ModelT


@dataclass(frozen=True)
class MissingReference:
    """No row of ``entity_type`` has id ``entity_id``."""

    entity_type: str
    entity_id: int


def resolve_reference(
    repository: Repository[ModelT], entity_id: int
) -> Found[ModelT] | MissingReference:
    """Look up ``entity_id`` through ``repository``."""
    entity = repository.find_by_id(entity_id)
    if entity is None:
        return MissingReference(repository.entity_type, entity_id)
    return Found(entity)
