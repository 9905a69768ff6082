"""
Empleado service: CRUD and lookups for employees.

Every employee must belong to an existing department.  Create and update
resolve the department reference first and refuse to touch the session
when it is missing, so a failed request never persists anything.
"""

import logging
from datetime import datetime, timezone

from empresa.exceptions import EntityNotFoundError, ReferenceNotFoundError
from empresa.extensions import db
from empresa.mappers import empleado_mapper
from empresa.mappers.transfer_objects import EmpleadoTO
from empresa.models.organization import Departamento, Empleado
from empresa.repositories import departamento_repository, empleado_repository
from empresa.services import audit_service
from empresa.services.references import MissingReference, resolve_reference

logger = logging.getLogger(__name__)


# =========================================================================
# Lookups
# =========================================================================


def get_all() -> list[Empleado]:
    return empleado_repository.find_all()


def find_by_id(empleado_id: int) -> Empleado | None:
    return empleado_repository.find_by_id(empleado_id)


def find_by_nombre(nombre: str) -> list[Empleado]:
    return empleado_repository.find_by_nombre(nombre)


def find_by_edad(edad: int) -> list[Empleado]:
    return empleado_repository.find_by_edad(edad)


def find_by_superior_a_salario(salario: int) -> list[Empleado]:
    return empleado_repository.find_by_salario_greater_than(salario)


def find_by_inferior_a_salario(salario: int) -> list[Empleado]:
    return empleado_repository.find_by_salario_less_than(salario)


def find_by_entre_salarios(salario_min: int, salario_max: int) -> list[Empleado]:
    return empleado_repository.find_by_salario_between(salario_min, salario_max)


# =========================================================================
# Mutations
# =========================================================================


def create_empleado(empleado_to: EmpleadoTO) -> Empleado:
    """
    Persist a new employee in the department named by ``empleado_to``.

    Raises:
        ReferenceNotFoundError: If the department does not exist.
    """
    departamento = _resolve_departamento(empleado_to)

    empleado = Empleado()
    _apply_fields(empleado, empleado_to, departamento)
    empleado_repository.save(empleado)

    audit_service.log_change(
        action_type="CREATE",
        entity_type=empleado_repository.entity_type,
        entity_id=empleado.id,
        new_value=empleado_mapper.to_transfer(empleado).to_dict(),
    )
    db.session.commit()

    logger.info("Created empleado ID %d: %s", empleado.id, empleado.nombre)
    return empleado


def update_empleado(empleado_id: int, empleado_to: EmpleadoTO) -> Empleado:
    """
    Overwrite every mutable field of an existing employee.

    Raises:
        EntityNotFoundError:    If no employee has ``empleado_id``.
        ReferenceNotFoundError: If the new department does not exist.
    """
    empleado = empleado_repository.find_by_id(empleado_id)
    if empleado is None:
        raise EntityNotFoundError(empleado_repository.entity_type, empleado_id)

    departamento = _resolve_departamento(empleado_to)

    previous = empleado_mapper.to_transfer(empleado).to_dict()
    _apply_fields(empleado, empleado_to, departamento)
    empleado.updated_at = datetime.now(timezone.utc)
    empleado_repository.save(empleado)

    audit_service.log_change(
        action_type="UPDATE",
        entity_type=empleado_repository.entity_type,
        entity_id=empleado.id,
        previous_value=previous,
        new_value=empleado_mapper.to_transfer(empleado).to_dict(),
    )
    db.session.commit()

    logger.info("Updated empleado ID %d", empleado_id)
    return empleado


def delete_empleado_by_id(empleado_id: int) -> None:
    """Delete an employee.  Deleting an id that does not exist is a no-op."""
    if empleado_repository.delete_by_id(empleado_id):
        audit_service.log_change(
            action_type="DELETE",
            entity_type=empleado_repository.entity_type,
            entity_id=empleado_id,
        )
        logger.info("Deleted empleado ID %d", empleado_id)
    db.session.commit()


# -- Helpers ---------------------------------------------------------------


def _resolve_departamento(empleado_to: EmpleadoTO) -> Departamento:
    result = resolve_reference(departamento_repository, empleado_to.departamento.id)
    if isinstance(result, MissingReference):
        logger.warning(
            "Rejected empleado write: %s %s does not exist",
            result.entity_type,
            result.entity_id,
        )
        raise ReferenceNotFoundError(result.entity_type, result.entity_id)
    return result.entity


def _apply_fields(
    empleado: Empleado, empleado_to: EmpleadoTO, departamento: Departamento
) -> None:
    empleado.nombre = empleado_to.nombre
    empleado.edad = empleado_to.edad
    empleado.fecha_alta = empleado_to.fecha_alta
    empleado.fecha_baja = empleado_to.fecha_baja
    empleado.salario = empleado_to.salario
    empleado.departamento = departamento
