"""
Departamento service: CRUD for departments.

A department that still has employees cannot be deleted; the database
foreign key rejects it and the resulting ``IntegrityError`` propagates
to the caller.
"""

import logging
from datetime import datetime, timezone

from empresa.exceptions import EntityNotFoundError
from empresa.extensions import db
from empresa.mappers import departamento_mapper
from empresa.mappers.transfer_objects import DepartamentoTO
from empresa.models.organization import Departamento
from empresa.repositories import departamento_repository
from empresa.services import audit_service

logger = logging.getLogger(__name__)


def get_all() -> list[Departamento]:
    return departamento_repository.find_all()


def find_by_id(departamento_id: int) -> Departamento | None:
    return departamento_repository.find_by_id(departamento_id)


def find_by_nombre(nombre: str) -> list[Departamento]:
    return departamento_repository.find_by_nombre(nombre)


def create_departamento(departamento_to: DepartamentoTO) -> Departamento:
    """Persist a new department and return it."""
    departamento = Departamento(
        nombre=departamento_to.nombre,
        ubicacion=departamento_to.ubicacion,
    )
    departamento_repository.save(departamento)

    audit_service.log_change(
        action_type="CREATE",
        entity_type=departamento_repository.entity_type,
        entity_id=departamento.id,
        new_value=departamento_mapper.to_transfer(departamento).to_dict(),
    )
    db.session.commit()

    logger.info("Created departamento ID %d: %s", departamento.id, departamento.nombre)
    return departamento


def update_departamento(
    departamento_id: int, departamento_to: DepartamentoTO
) -> Departamento:
    """
    Overwrite every mutable field of an existing department.

    Raises:
        EntityNotFoundError: If no department has ``departamento_id``.
    """
    departamento = departamento_repository.find_by_id(departamento_id)
    if departamento is None:
        raise EntityNotFoundError(departamento_repository.entity_type, departamento_id)

    previous = departamento_mapper.to_transfer(departamento).to_dict()
    departamento.nombre = departamento_to.nombre
    departamento.ubicacion = departamento_to.ubicacion
    departamento.updated_at = datetime.now(timezone.utc)
    departamento_repository.save(departamento)

    audit_service.log_change(
        action_type="UPDATE",
        entity_type=departamento_repository.entity_type,
        entity_id=departamento.id,
        previous_value=previous,
        new_value=departamento_mapper.to_transfer(departamento).to_dict(),
    )
    db.session.commit()

    logger.info("Updated departamento ID %d", departamento_id)
    return departamento


def delete_departamento_by_id(departamento_id: int) -> None:
    """
    Delete a department.  Deleting an id that does not exist is a no-op.

    Raises:
        sqlalchemy.exc.IntegrityError: If employees still reference it.
    """
    if departamento_repository.delete_by_id(departamento_id):
        audit_service.log_change(
            action_type="DELETE",
            entity_type=departamento_repository.entity_type,
            entity_id=departamento_id,
        )
        logger.info("Deleted departamento ID %d", departamento_id)
    db.session.commit()
