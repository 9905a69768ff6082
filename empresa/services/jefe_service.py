"""
Jefe service: CRUD and salary/age lookups for bosses.

Bosses have no foreign keys, so create and update only copy fields from
the transfer object.  Updates are full replacements: a field missing
from the request overwrites the stored value with None.
"""

import logging
from datetime import datetime, timezone

from empresa.exceptions import EntityNotFoundError
from empresa.extensions import db
from empresa.mappers import jefe_mapper
from empresa.mappers.transfer_objects import JefeTO
from empresa.models.organization import Jefe
from empresa.repositories import jefe_repository
from empresa.services import audit_service

logger = logging.getLogger(__name__)


# =========================================================================
# Lookups
# =========================================================================


def get_all() -> list[Jefe]:
    return jefe_repository.find_all()


def find_by_id(jefe_id: int) -> Jefe | None:
    return jefe_repository.find_by_id(jefe_id)


def find_by_nombre(nombre: str) -> list[Jefe]:
    return jefe_repository.find_by_nombre(nombre)


def find_by_edad(edad: int) -> list[Jefe]:
    return jefe_repository.find_by_edad(edad)


def find_by_superior_a_salario(salario: int) -> list[Jefe]:
    """Bosses earning strictly more than ``salario``."""
    return jefe_repository.find_by_salario_greater_than(salario)


def find_by_inferior_a_salario(salario: int) -> list[Jefe]:
    """Bosses earning strictly less than ``salario``."""
    return jefe_repository.find_by_salario_less_than(salario)


def find_by_entre_salarios(salario_min: int, salario_max: int) -> list[Jefe]:
    """Bosses whose salary lies in ``[salario_min, salario_max]``."""
    return jefe_repository.find_by_salario_between(salario_min, salario_max)


# =========================================================================
# Mutations
# =========================================================================


def create_jefe(jefe_to: JefeTO) -> Jefe:
    """Persist a new boss built from ``jefe_to`` and return it."""
    jefe = Jefe()
    _apply_fields(jefe, jefe_to)
    jefe_repository.save(jefe)

    audit_service.log_change(
        action_type="CREATE",
        entity_type=jefe_repository.entity_type,
        entity_id=jefe.id,
        new_value=jefe_mapper.to_transfer(jefe).to_dict(),
    )
    db.session.commit()

    logger.info("Created jefe ID %d: %s", jefe.id, jefe.nombre)
    return jefe


def update_jefe(jefe_id: int, jefe_to: JefeTO) -> Jefe:
    """
    Overwrite every mutable field of an existing boss.

    Raises:
        EntityNotFoundError: If no boss has ``jefe_id``.
    """
    jefe = jefe_repository.find_by_id(jefe_id)
    if jefe is None:
        raise EntityNotFoundError(jefe_repository.entity_type, jefe_id)

    previous = jefe_mapper.to_transfer(jefe).to_dict()
    _apply_fields(jefe, jefe_to)
    jefe.updated_at = datetime.now(timezone.utc)
    jefe_repository.save(jefe)

    audit_service.log_change(
        action_type="UPDATE",
        entity_type=jefe_repository.entity_type,
        entity_id=jefe.id,
        previous_value=previous,
        new_value=jefe_mapper.to_transfer(jefe).to_dict(),
    )
    db.session.commit()

    logger.info("Updated jefe ID %d", jefe_id)
    return jefe


def delete_jefe_by_id(jefe_id: int) -> None:
    """Delete a boss.  Deleting an id that does not exist is a no-op."""
    if jefe_repository.delete_by_id(jefe_id):
        audit_service.log_change(
            action_type="DELETE",
            entity_type=jefe_repository.entity_type,
            entity_id=jefe_id,
        )
        logger.info("Deleted jefe ID %d", jefe_id)
    db.session.commit()


def _apply_fields(jefe: Jefe, jefe_to: JefeTO) -> None:
    jefe.nombre = jefe_to.nombre
    jefe.edad = jefe_to.edad
    jefe.salario = jefe_to.salario
