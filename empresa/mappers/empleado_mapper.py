"""
Empleado entity <-> EmpleadoTO conversions.

The employee's department is flattened to a ``DepartamentoResumenTO``
on the way out and read back as a bare ``{"id": ...}`` reference on the
way in.  Resolving that reference is the service layer's job.
"""

from typing import Any

from empresa.mappers import map_list
from empresa.mappers.departamento_mapper import to_summary
from empresa.mappers.payload import (
    ensure_object,
    optional_date,
    optional_int,
    require_reference_id,
    require_str,
)
from empresa.mappers.transfer_objects import DepartamentoResumenTO, EmpleadoTO
from empresa.models.organization import Empleado


def to_transfer(empleado: Empleado) -> EmpleadoTO:
    return EmpleadoTO(
        id=empleado.id,
        nombre=empleado.nombre,
        edad=empleado.edad,
        fecha_alta=empleado.fecha_alta,
        fecha_baja=empleado.fecha_baja,
        salario=empleado.salario,
        departamento=to_summary(empleado.departamento),
    )


def to_transfer_list(empleados: list[Empleado]) -> list[EmpleadoTO]:
    return map_list(to_transfer, empleados)


def from_payload(payload: Any) -> EmpleadoTO:
    data = ensure_object(payload)
    return EmpleadoTO(
        id=None,
        nombre=require_str(data, "nombre"),
        edad=optional_int(data, "edad"),
        fecha_alta=optional_date(data, "fechaAlta"),
        fecha_baja=optional_date(data, "fechaBaja"),
        salario=optional_int(data, "salario"),
        departamento=DepartamentoResumenTO(
            id=require_reference_id(data, "departamento")
        ),
    )
